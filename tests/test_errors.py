import pickle
import threading
import pytest
import seqextra
from seqextra import EvaluationError, seterr
from seqextra.errors import FAILURE_MESSAGE


class CustomException(Exception):
    pass


@pytest.fixture
def restore_seterr():
    evaluation = seterr()
    yield
    seterr(evaluation)


def fail(*args):
    del args
    raise CustomException


def calls():
    return [
        lambda: seqextra.update(0, fail, (1, 2)),
        lambda: seqextra.resizel_indexed(4, fail, (1, 2)),
        lambda: seqextra.resizer_indexed(4, fail, (1, 2)),
        lambda: seqextra.map2(fail, (1, 2), (3, 4)),
        lambda: seqextra.map5(fail, *[(1, 2)] * 5),
        lambda: seqextra.apply((fail, fail), (1, 2)),
        lambda: seqextra.filter_map(fail, (1, 2)),
        lambda: seqextra.remove_when(fail, (1, 2)),
        lambda: seqextra.map_to_list(fail, (1, 2)),
        lambda: seqextra.indexed_map_to_list(fail, (1, 2)),
    ]


def test_passthrough_by_default():
    assert seterr() == 'passthrough'

    for call in calls():
        with pytest.raises(CustomException):
            call()


@pytest.mark.parametrize('evaluation', ['wrap', 'passthrough'])
def test_seterr(evaluation, restore_seterr):
    assert seterr(evaluation) == evaluation
    assert seterr() == evaluation
    error_t = EvaluationError if evaluation == "wrap" else CustomException

    for call in calls():
        with pytest.raises(error_t):
            call()

    with pytest.raises(ValueError):
        seterr('ignore')


def test_wrapped_error(restore_seterr):
    seterr('wrap')

    with pytest.raises(EvaluationError) as excinfo:
        seqextra.map2(lambda x, y: 1 / (x - y), (1, 2, 3), (0, 2, 1))

    assert str(excinfo.value) == FAILURE_MESSAGE.format(item=1, where="map2")
    assert isinstance(excinfo.value.__cause__, ZeroDivisionError)

    # errors from nested calls are not wrapped twice
    def nested(x):
        return seqextra.map_to_list(fail, (x,))

    with pytest.raises(EvaluationError) as excinfo:
        seqextra.update(0, nested, (1, 2))

    assert "map_to_list" in str(excinfo.value)
    assert isinstance(excinfo.value.__cause__, CustomException)


def test_boundaries_never_raise(restore_seterr):
    seterr('wrap')

    assert seqextra.update(10, fail, (1, 2)) == (1, 2)
    assert seqextra.resizel_indexed(1, fail, (1, 2)) == (1,)
    assert seqextra.resizer_indexed(-1, fail, (1, 2)) == ()
    assert seqextra.map2(fail, (), (1, 2)) == ()
    assert seqextra.filter_map(fail, ()) == ()


def test_pickling(restore_seterr):
    seterr('wrap')

    with pytest.raises(EvaluationError) as excinfo:
        seqextra.map_to_list(lambda x: 1 / x, (1, 0))

    error = pickle.loads(pickle.dumps(excinfo.value))
    assert str(error) == str(excinfo.value)
    assert isinstance(error.__cause__, ZeroDivisionError)
    assert error.__traceback__ is not None


def test_thread_local(restore_seterr):
    seterr('wrap')
    other = []

    thread = threading.Thread(target=lambda: other.append(seterr()))
    thread.start()
    thread.join()

    assert other == ['passthrough']
    assert seterr() == 'wrap'
