"""Operations that change the length of a sequence."""

from . import primitives
from .indexing import slice_from, slice_until
from .utils import get_logger


logger = get_logger(__name__)


def resizel_repeat(length, pad, sequence):
    """Resize a sequence, keeping its first items.

    Args:
        length (int):
            Target length, non-positive values give an empty sequence.
        pad (Any):
            Value appended as many times as needed to reach `length`.
        sequence (Sequence):
            Input sequence, truncated to its first `length` items if it is
            longer.

    Example:

        >>> seqextra.resizel_repeat(4, 0, (1, 2))
        (1, 2, 0, 0)
        >>> seqextra.resizel_repeat(2, 0, (1, 2, 3))
        (1, 2)
    """
    if length <= 0:
        return primitives.empty(sequence)

    size = len(sequence)
    if size > length:
        return slice_until(length, sequence)
    elif size < length:
        return primitives.concat(
            sequence, primitives.repeat(sequence, length - size, pad))
    else:
        return sequence


def resizer_repeat(length, pad, sequence):
    """Resize a sequence, keeping its last items.

    Mirror of :func:`resizel_repeat`: truncation keeps the last `length`
    items and padding is prepended.

    Example:

        >>> seqextra.resizer_repeat(4, 0, (1, 2))
        (0, 0, 1, 2)
        >>> seqextra.resizer_repeat(2, 0, (1, 2, 3))
        (2, 3)
    """
    if length <= 0:
        logger.debug("resizer_repeat to length %d gives an empty sequence",
                     length)
        return primitives.empty(sequence)

    size = len(sequence)
    if size > length:
        return slice_from(size - length, sequence)
    elif size < length:
        return primitives.concat(
            primitives.repeat(sequence, length - size, pad), sequence)
    else:
        return sequence


def resizel_indexed(length, index_to_value, sequence):
    """Resize a sequence, keeping its first items.

    Works like :func:`resizel_repeat` except that new items are computed
    from their index in the resulting sequence.

    Example:

        >>> seqextra.resizel_indexed(5, lambda i: i * 10, (1, 2))
        (1, 2, 20, 30, 40)
    """
    if length <= 0:
        return primitives.empty(sequence)

    size = len(sequence)
    if size > length:
        return slice_until(length, sequence)
    elif size < length:
        padding = primitives.initialize(
            sequence, length - size, index_to_value, offset=size)
        return primitives.concat(sequence, padding)
    else:
        return sequence


def resizer_indexed(length, index_to_value, sequence):
    """Resize a sequence, keeping its last items.

    Works like :func:`resizer_repeat` except that prepended items are
    computed from their index in the resulting sequence.

    Example:

        >>> seqextra.resizer_indexed(5, lambda i: i * 10, (1, 2))
        (0, 10, 20, 1, 2)
    """
    if length <= 0:
        logger.debug("resizer_indexed to length %d gives an empty sequence",
                     length)
        return primitives.empty(sequence)

    size = len(sequence)
    if size > length:
        return slice_from(size - length, sequence)
    elif size < length:
        padding = primitives.initialize(
            sequence, length - size, index_to_value)
        return primitives.concat(padding, sequence)
    else:
        return sequence


def intersperse(separator, sequence):
    """Place `separator` between all adjacent items.

    Example:

        >>> seqextra.intersperse(0, (1, 2, 3))
        (1, 0, 2, 0, 3)
    """
    def items():
        for i, item in enumerate(sequence):
            if i > 0:
                yield separator
            yield item

    return primitives.build(sequence, items())


def interweave(to_interweave, sequence):
    """Alternate the items of `sequence` with those of `to_interweave`.

    The extra items of the longest one are appended at the end.

    Example:

        >>> seqextra.interweave(('on', 'on'), ('turtles',) * 3)
        ('turtles', 'on', 'turtles', 'on', 'turtles')
        >>> seqextra.interweave((4, 5, 6, 7), (1, 2))
        (1, 4, 2, 5, 6, 7)
    """
    def items():
        common = min(len(sequence), len(to_interweave))
        for i in range(common):
            yield sequence[i]
            yield to_interweave[i]
        for i in range(common, len(sequence)):
            yield sequence[i]
        for i in range(common, len(to_interweave)):
            yield to_interweave[i]

    return primitives.build(sequence, items())
