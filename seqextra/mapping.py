"""Element-wise combination of several sequences.

All functions follow the same policy for sequences of different lengths:
the result is as long as the shortest input and the extra items of longer
inputs are ignored. The result has the kind of the first sequence.
"""

from functools import partial

from . import primitives
from .errors import evaluate


def _map2(f, a, b, where):
    size = min(len(a), len(b))
    return primitives.build(a, (
        evaluate(f, (a[i], b[i]), i, where) for i in range(size)))


def _apply(fns, sequence, where):
    return _map2(lambda fn, x: fn(x), fns, sequence, where)


def map2(f, a, b):
    """Combine two sequences item by item.

    Equivalent to :code:`[f(x, y) for x, y in zip(a, b)]`.

    Example:

        >>> seqextra.map2(lambda x, y: x + y, (1, 2, 3), (10, 20))
        (11, 22)
    """
    return _map2(f, a, b, "map2")


def apply(fns, sequence):
    """Apply a sequence of functions to a sequence of values.

    The k'th function is called on the k'th value.

    Example:

        >>> fns = (lambda x: x + 1, lambda x: x * 2, str)
        >>> seqextra.apply(fns, (5, 5, 5))
        (6, 10, '5')
    """
    return _apply(fns, sequence, "apply")


def map3(f, a, b, c):
    """Combine three sequences item by item."""
    fns = _map2(lambda x, y: partial(f, x, y), a, b, "map3")
    return _apply(fns, c, "map3")


def map4(f, a, b, c, d):
    """Combine four sequences item by item."""
    fns = map3(lambda x, y, z: partial(f, x, y, z), a, b, c)
    return _apply(fns, d, "map4")


def map5(f, a, b, c, d, e):
    """Combine five sequences item by item."""
    fns = map4(lambda x, y, z, w: partial(f, x, y, z, w), a, b, c, d)
    return _apply(fns, e, "map5")


def zip(a, b):  # pylint: disable=redefined-builtin
    """Pair the items of two sequences.

    Example:

        >>> seqextra.zip((1, 2, 3), ('a', 'b'))
        ((1, 'a'), (2, 'b'))
    """
    return _map2(lambda x, y: (x, y), a, b, "zip")


def zip3(a, b, c):
    """Group the items of three sequences in triplets."""
    return map3(lambda x, y, z: (x, y, z), a, b, c)


def unzip(pairs):
    """Split a sequence of pairs in two sequences.

    Reverses the effect of :func:`zip`.

    Return:
        (Sequence, Sequence): The first and second items of the pairs.

    Example:

        >>> seqextra.unzip(((1, 'a'), (2, 'b')))
        ((1, 2), ('a', 'b'))
    """
    return (primitives.build(pairs, (p[0] for p in pairs)),
            primitives.build(pairs, (p[1] for p in pairs)))


def unzip3(triplets):
    """Split a sequence of triplets in three sequences.

    Reverses the effect of :func:`zip3`.
    """
    return (primitives.build(triplets, (t[0] for t in triplets)),
            primitives.build(triplets, (t[1] for t in triplets)),
            primitives.build(triplets, (t[2] for t in triplets)))
