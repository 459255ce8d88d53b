"""
Extra functions for immutable indexed sequences.

The seqextra package complements the operations natively supported by
sequences (tuples, lists, persistent vectors, arrays...) with index-safe
updates, slicing relative to either end, element-wise combination of
several sequences, resizing with padding and structural edits.

All functions are pure: they never modify their arguments and return new
sequences of the same kind as their input. They are also total, out of
range indices and degenerate lengths are resolved by returning the input
unchanged, an empty sequence, or by truncating to the shortest input,
never by raising an error. Only the errors raised by user-supplied
functions are propagated, see :func:`seterr`.
"""

from . import primitives
from .errors import EvaluationError, seterr
from .indexing import (
    insert_at,
    pop,
    remove_at,
    slice_from,
    slice_until,
    split_at,
    update,
)
from .mapping import (
    apply,
    map2,
    map3,
    map4,
    map5,
    unzip,
    unzip3,
    zip,
    zip3,
)
from .shape import (
    interweave,
    intersperse,
    resizel_indexed,
    resizel_repeat,
    resizer_indexed,
    resizer_repeat,
)
from .transform import (
    filter_map,
    indexed_map_to_list,
    map_to_list,
    member,
    remove_when,
    reverse,
    reverse_to_list,
)

__all__ = [
    "EvaluationError",
    "seterr",
    "update",
    "slice_from",
    "slice_until",
    "pop",
    "split_at",
    "remove_at",
    "insert_at",
    "resizel_repeat",
    "resizer_repeat",
    "resizel_indexed",
    "resizer_indexed",
    "intersperse",
    "interweave",
    "map2",
    "map3",
    "map4",
    "map5",
    "apply",
    "zip",
    "zip3",
    "unzip",
    "unzip3",
    "filter_map",
    "remove_when",
    "reverse",
    "member",
    "map_to_list",
    "indexed_map_to_list",
    "reverse_to_list",
]
