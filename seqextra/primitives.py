"""Primitive operations on the host sequence types.

Every operation of SeqExtra is expressed with the few generic functions
defined here. They dispatch on the type of the (prototype) sequence so
that results keep the kind of their input:

- :class:`python:tuple` and unregistered types (range, str, custom
  sequences...) produce tuples,
- :class:`python:list` produces fresh lists, inputs are never modified,
- :class:`pyrsistent.PVector` produces persistent vectors with structural
  sharing (if pyrsistent is installed),
- :class:`numpy.ndarray` produces arrays which do not share memory with
  the input (if numpy is installed).

Additional types can be supported by registering them, for instance
:code:`primitives.build.register(MyType)`.
"""

import itertools
from functools import singledispatch

from .errors import evaluate
from .utils import normalize_range


# construction

@singledispatch
def build(prototype, items):
    """Make a sequence of the same kind as `prototype` from `items`."""
    return tuple(items)


@build.register(list)
def _(prototype, items):
    return list(items)


def empty(prototype):
    return build(prototype, ())


def repeat(prototype, n, value):
    """Return `n` copies of `value`, or an empty sequence if `n <= 0`."""
    return build(prototype, itertools.repeat(value, max(n, 0)))


def initialize(prototype, n, index_to_value, offset=0):
    """Return `[index_to_value(offset + k) for k in range(n)]`.

    The result is empty if `n <= 0`.
    """
    return build(prototype, (
        evaluate(index_to_value, (offset + k,), offset + k, "initialize")
        for k in range(max(n, 0))))


def to_list(seq):
    return list(seq)


# element access

def get(seq, index):
    """Return the element at `index` or None if `index` is out of range.

    Negative indices are out of range.
    """
    if 0 <= index < len(seq):
        return seq[index]
    else:
        return None


@singledispatch
def replace(seq, index, value):
    """Return a copy of `seq` with the element at `index` set to `value`.

    Out of range indices leave `seq` unchanged.
    """
    if not 0 <= index < len(seq):
        return seq

    return build(seq, itertools.chain(
        (seq[i] for i in range(index)),
        (value,),
        (seq[i] for i in range(index + 1, len(seq)))))


@replace.register(tuple)
def _(seq, index, value):
    if not 0 <= index < len(seq):
        return seq

    return seq[:index] + (value,) + seq[index + 1:]


@replace.register(list)
def _(seq, index, value):
    if not 0 <= index < len(seq):
        return seq

    out = list(seq)
    out[index] = value
    return out


# sub-ranges

@singledispatch
def take_range(seq, start, stop):
    """Return the sub-range `[start, stop)` of `seq`.

    Negative bounds count from the end, bounds are then clipped to the
    size of the sequence.
    """
    start, stop = normalize_range(start, stop, len(seq))
    return build(seq, (seq[i] for i in range(start, stop)))


@take_range.register(tuple)
@take_range.register(list)
def _(seq, start, stop):
    start, stop = normalize_range(start, stop, len(seq))
    return seq[start:stop]


# concatenation

@singledispatch
def concat(a, b):
    """Return the concatenation of `a` and `b` with the kind of `a`."""
    return build(a, itertools.chain(a, b))


@concat.register(tuple)
def _(a, b):
    return tuple(a) + tuple(b)


@concat.register(list)
def _(a, b):
    return list(a) + list(b)


@singledispatch
def push(seq, value):
    """Append a single element."""
    return concat(seq, (value,))


# optional hosts

try:
    from pyrsistent import PVector, pvector
except ImportError:
    pass
else:
    @build.register(PVector)
    def _(prototype, items):
        return pvector(items)

    @replace.register(PVector)
    def _(seq, index, value):
        if not 0 <= index < len(seq):
            return seq

        return seq.set(index, value)

    @take_range.register(PVector)
    def _(seq, start, stop):
        start, stop = normalize_range(start, stop, len(seq))
        return seq[start:stop]

    @concat.register(PVector)
    def _(a, b):
        return a.extend(b)

    @push.register(PVector)
    def _(seq, value):
        return seq.append(value)


try:
    import numpy as np
except ImportError:
    pass
else:
    def _common_dtype(dtype, other):
        # smallest dtype holding both, objects when numpy cannot promote
        if np.can_cast(other, dtype):
            return dtype
        elif np.can_cast(dtype, other):
            return other
        elif dtype.kind in 'biufc' and other.kind in 'biufc':
            return np.promote_types(dtype, other)
        else:
            return np.dtype(object)

    @build.register(np.ndarray)
    def _(prototype, items):
        values = list(items)
        if len(values) == 0:
            return np.empty((0,), dtype=prototype.dtype)

        # keep tuples (zip, unzip...) as items instead of rows
        if any(isinstance(v, tuple) for v in values):
            out = np.empty((len(values),), dtype=object)
            for i, v in enumerate(values):
                out[i] = v
            return out

        return np.asarray(values)

    @replace.register(np.ndarray)
    def _(seq, index, value):
        if not 0 <= index < len(seq):
            return seq

        if np.ndim(value) == 0:
            value_dtype = np.asarray(value).dtype
        else:
            value_dtype = np.dtype(object)

        out = seq.astype(_common_dtype(seq.dtype, value_dtype))
        out[index] = value
        return out

    @take_range.register(np.ndarray)
    def _(seq, start, stop):
        start, stop = normalize_range(start, stop, len(seq))
        return seq[start:stop].copy()

    @concat.register(np.ndarray)
    def _(a, b):
        if len(b) == 0:
            return a.copy()
        if len(a) == 0:
            return build(a, b)

        if not isinstance(b, np.ndarray):
            b = build(a, b)
        dtype = _common_dtype(a.dtype, b.dtype)
        return np.concatenate((a.astype(dtype), b.astype(dtype)))
