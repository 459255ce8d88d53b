"""Index based access, slicing and structural edits."""

from . import primitives
from .errors import evaluate
from .utils import get_logger


logger = get_logger(__name__)


def update(index, f, sequence):
    """Return a copy of the sequence with one item transformed by `f`.

    If `index` is out of range, the sequence is returned unchanged and
    `f` is not called.

    Args:
        index (int): index of the item to update, negative values are
            out of range.
        f (Callable[[Any], Any]): function applied to the current value.
        sequence (Sequence): input sequence.

    Example:

        >>> seqextra.update(1, lambda x: x + 10, (1, 2, 3))
        (1, 12, 3)
        >>> seqextra.update(4, lambda x: x + 10, (1, 2, 3))
        (1, 2, 3)
    """
    if not 0 <= index < len(sequence):
        logger.debug("update index %d out of range, nothing to do", index)
        return sequence

    value = evaluate(f, (primitives.get(sequence, index),), index, "update")
    return primitives.replace(sequence, index, value)


def slice_from(n, sequence):
    """Drop the first `n` items.

    A negative `n` counts from the end so that only the last `-n` items
    are kept.

    Example:

        >>> seqextra.slice_from(3, (0, 1, 2, 3, 4, 5, 6))
        (3, 4, 5, 6)
        >>> seqextra.slice_from(-3, (0, 1, 2, 3, 4, 5, 6))
        (4, 5, 6)
    """
    return primitives.take_range(sequence, n, len(sequence))


def slice_until(n, sequence):
    """Keep the items before position `n`.

    A negative `n` counts from the end, :code:`slice_until(-1, s)` drops
    the last item.

    Example:

        >>> seqextra.slice_until(3, (0, 1, 2, 3, 4, 5, 6))
        (0, 1, 2)
        >>> seqextra.slice_until(-3, (0, 1, 2, 3, 4, 5, 6))
        (0, 1, 2, 3)
    """
    return primitives.take_range(sequence, 0, n)


def pop(sequence):
    """Remove the last item, an empty sequence is returned unchanged."""
    return slice_until(-1, sequence)


def split_at(index, sequence):
    """Split a sequence in two at `index`.

    Unlike :func:`slice_from` and :func:`slice_until`, negative values
    are not relative to the end: any `index <= 0` puts all the items in
    the right part.

    Return:
        (Sequence, Sequence): The items before `index` and the items
        from `index` onward.

    Example:

        >>> seqextra.split_at(2, (1, 2, 3, 4))
        ((1, 2), (3, 4))
        >>> seqextra.split_at(100, (1, 2, 3, 4))
        ((1, 2, 3, 4), ())
        >>> seqextra.split_at(-1, (1, 2, 3, 4))
        ((), (1, 2, 3, 4))
    """
    if index > 0:
        return slice_until(index, sequence), slice_from(index, sequence)
    else:
        return primitives.empty(sequence), sequence


def remove_at(index, sequence):
    """Return a copy of the sequence without the item at `index`.

    Out of range indices (including negative ones) leave the sequence
    unchanged.

    Example:

        >>> seqextra.remove_at(2, (1, 2, 3, 4))
        (1, 2, 4)
        >>> seqextra.remove_at(100, (1, 2, 3, 4))
        (1, 2, 3, 4)
    """
    if not 0 <= index < len(sequence):
        logger.debug("remove_at index %d out of range, nothing to do", index)
        return sequence

    before, after = split_at(index, sequence)
    return primitives.concat(before, slice_from(1, after))


def insert_at(index, value, sequence):
    """Return a copy of the sequence with `value` inserted at `index`.

    Valid indices range from 0 to :code:`len(sequence)` included, the
    latter appends `value`. Other indices leave the sequence unchanged.

    Example:

        >>> seqextra.insert_at(1, 'b', ('a', 'c'))
        ('a', 'b', 'c')
        >>> seqextra.insert_at(100, 'b', ('a', 'c'))
        ('a', 'c')
    """
    if not 0 <= index <= len(sequence):
        logger.debug("insert_at index %d out of range, nothing to do", index)
        return sequence

    before, after = split_at(index, sequence)
    return primitives.concat(primitives.push(before, value), after)
