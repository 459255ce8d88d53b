"""Whole-sequence transformations and conversions to lists."""

from . import primitives
from .errors import evaluate


def filter_map(try_map, sequence):
    """Map a function and keep the results which are not None.

    Example:

        >>> seqextra.filter_map(lambda s: int(s) if s.isdigit() else None,
        ...                     ('3', 'x', '4', '', '5'))
        (3, 4, 5)
    """
    def items():
        for i, item in enumerate(sequence):
            value = evaluate(try_map, (item,), i, "filter_map")
            if value is not None:
                yield value

    return primitives.build(sequence, items())


def remove_when(predicate, sequence):
    """Drop the items for which `predicate` is true.

    Example:

        >>> seqextra.remove_when(lambda x: x % 2 == 0, (1, 2, 3, 4, 5))
        (1, 3, 5)
    """
    return primitives.build(sequence, (
        item for i, item in enumerate(sequence)
        if not evaluate(predicate, (item,), i, "remove_when")))


def reverse(sequence):
    """Return the items in reverse order."""
    return primitives.build(
        sequence, (sequence[i] for i in range(len(sequence) - 1, -1, -1)))


def member(value, sequence):
    """Return wether an item of the sequence is equal to `value`."""
    return any(item == value for item in sequence)


def map_to_list(f, sequence):
    """Return :code:`[f(x) for x in sequence]` as a plain list.

    Useful when the result is only iterated over, for instance to render
    rows of a table.
    """
    return [evaluate(f, (item,), i, "map_to_list")
            for i, item in enumerate(sequence)]


def indexed_map_to_list(f, sequence):
    """Return :code:`[f(i, x) for i, x in enumerate(sequence)]` as a list.

    Example:

        >>> seqextra.indexed_map_to_list(
        ...     lambda i, x: "{}. {}".format(i + 1, x), ('eggs', 'spam'))
        ['1. eggs', '2. spam']
    """
    return [evaluate(f, (i, item), i, "indexed_map_to_list")
            for i, item in enumerate(sequence)]


def reverse_to_list(sequence):
    """Return the items in reverse order as a plain list."""
    return primitives.to_list(reverse(sequence))
