import threading

from tblib import pickling_support


class EvaluationError(Exception):
    """Raised when a user-supplied function fails."""


# tracebacks of wrapped errors must survive pickling (ex: multiprocessing)
pickling_support.install()


EVALUATION_MODES = ('passthrough', 'wrap')

FAILURE_MESSAGE = "Failed to evaluate item {item} in {where}"


# Settings --------------------------------------------------------------------

class ErrorConfig(threading.local):
    """Per-thread error handling settings, threads start in passthrough."""
    def __init__(self):
        super().__init__()
        self.evaluation = 'passthrough'


error_config = ErrorConfig()


def seterr(evaluation=None):
    """Set how errors from user-supplied functions are handled.

    The setting only applies to the calling thread.

    Args:
        evaluation (Optional[str]): one of

            - `'passthrough'`: let the error propagate unchanged (default).
            - `'wrap'`: raise :class:`EvaluationError` with original error as
              its cause, the message names the operation and the item.
            - `None` leave unchanged and return current setting
    Returns:
        The setting value.
    """
    if evaluation is not None:
        if evaluation not in EVALUATION_MODES:
            raise ValueError("evaluation must be one of {}, got {!r}".format(
                ", ".join(map(repr, EVALUATION_MODES)), evaluation))
        error_config.evaluation = evaluation

    return error_config.evaluation


# Helpers ---------------------------------------------------------------------

def evaluate(func, args, item, where):
    """Call `func(*args)` and handle failures according to :func:`seterr`.

    Args:
        func (Callable): user-supplied function.
        args (tuple): positional arguments for `func`.
        item (int): index of the item being computed, for error reports.
        where (str): name of the calling operation, for error reports.
    """
    try:
        return func(*args)

    except Exception as cause:
        if error_config.evaluation == 'passthrough' \
                or isinstance(cause, EvaluationError):
            raise
        else:
            msg = FAILURE_MESSAGE.format(item=item, where=where)
            raise EvaluationError(msg) from cause
