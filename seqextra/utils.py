"""Miscellaneous tools for internal use."""

import logging
from logging import NullHandler


def clip(x, a, b):
    """Clip value within specified range."""
    return max(a, min(x, b))


def get_logger(name):
    logger = logging.getLogger(name)
    logger.addHandler(NullHandler())
    return logger


def normalize_bound(bound, size):
    """Resolve a signed offset into a position within `[0, size]`.

    Negative values count backward from the end (`size + bound`), the
    result is then clipped to the valid range.
    """
    if bound < 0:
        bound = size + bound

    return clip(bound, 0, size)


def normalize_range(start, stop, size):
    """Normalize the bounds of a sub-range.

    Args:
        start (int): signed start offset
        stop (int): signed (exclusive) stop offset
        size (int): size of the sliced sequence

    Return:
        (int, int): A pair of positions in `[0, size]` with
        `start <= stop`.
    """
    start = normalize_bound(start, size)
    stop = normalize_bound(stop, size)

    if stop < start:
        stop = start

    return start, stop
