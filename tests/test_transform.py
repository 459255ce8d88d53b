from concurrent.futures import ThreadPoolExecutor
from random import random, randint
import pytest
import seqextra
from seqextra import filter_map, remove_when, reverse, member, map_to_list, \
    indexed_map_to_list, reverse_to_list


def test_filter_map():
    def to_int(s):
        return int(s) if s.isdigit() else None

    assert filter_map(to_int, ('3', 'x', '4', '', '5')) == (3, 4, 5)
    assert filter_map(to_int, ()) == ()

    arr = [randint(-10, 10) for _ in range(100)]
    result = filter_map(lambda x: x * 2 if x > 0 else None, arr)
    assert result == [x * 2 for x in arr if x > 0]
    assert filter_map(lambda x: 0, arr) == [0] * len(arr)


def test_remove_when():
    assert remove_when(lambda x: x % 2 == 0, (1, 2, 3, 4, 5)) == (1, 3, 5)
    assert remove_when(lambda x: True, (1, 2, 3)) == ()

    arr = [random() for _ in range(100)]
    assert remove_when(lambda x: x > .5, arr) == [x for x in arr if x <= .5]


def test_reverse():
    assert reverse((1, 2, 3)) == (3, 2, 1)
    assert reverse(()) == ()
    assert reverse('abc') == ('c', 'b', 'a')

    arr = [random() for _ in range(100)]
    assert reverse(arr) == arr[::-1]
    assert reverse(reverse(arr)) == arr
    assert reverse_to_list((1, 2, 3)) == [3, 2, 1]


def test_member():
    assert member(2, (1, 2, 3))
    assert not member(4, (1, 2, 3))
    assert not member(None, ())


def test_to_list():
    result = map_to_list(lambda x: x + 1, (1, 2, 3))
    assert isinstance(result, list)
    assert result == [2, 3, 4]

    result = indexed_map_to_list(
        lambda i, x: "{}. {}".format(i + 1, x), ('eggs', 'spam'))
    assert result == ['1. eggs', '2. spam']

    arr = [random() for _ in range(100)]
    assert indexed_map_to_list(lambda i, x: (i, x), arr) \
        == list(enumerate(arr))


@pytest.mark.timeout(10)
def test_concurrent_calls():
    arr = [randint(0, 1000) for _ in range(200)]
    original = list(arr)

    def work(k):
        result = seqextra.update(k, lambda x: -x, arr)
        result = seqextra.insert_at(k, k, result)
        result = seqextra.remove_when(lambda x: x % 7 == 0, result)
        result = seqextra.reverse(seqextra.resizer_repeat(150, 0, result))
        return seqextra.map2(lambda x, y: x + y, result, arr)

    with ThreadPoolExecutor(8) as pool:
        results = list(pool.map(work, range(200)))

    assert results == [work(k) for k in range(200)]
    assert arr == original
