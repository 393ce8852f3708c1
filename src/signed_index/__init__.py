# Copyright (c) signed-index Contributors
# SPDX-License-Identifier: Apache-2.0
"""Signed indexing for Python sequences.

:func:`normalize_index` resolves an index against a length, allowing ``0``
for the first element as usual or ``-1`` for the last (``-2`` for the second
to last, and so on). Unlike native indexing, an index that falls outside the
sequence is never wrapped twice or clamped: it resolves to the sentinel
:data:`INVALID_INDEX`. Everything else in this package is built on it.

Example::

    from signed_index import at, at_or, last, lookup, pop_last, subsequence

    vs = ["A", "B", "C", "D", "E"]

    at(vs, -2)            # 'D'
    lookup(vs, 40)        # (None, False)
    at_or(vs, 40, "!")    # '!'
    last(vs)              # 'E'
    subsequence(vs, 1, -1)  # ['B', 'C', 'D']

    # pop_last clears the vacated slot of writable sequences
    v, rest = pop_last(vs)  # 'E', ['A', 'B', 'C', 'D']

Registering a zero value for a custom sequence type::

    from signed_index import registry

    @registry.register(MyBuffer)
    def zero_my_buffer(seq):
        return seq.fill_value
"""

from __future__ import annotations

__all__ = [
    # Normalization
    "INVALID_INDEX",
    "normalize",
    "normalize_index",
    # Lookup
    "at",
    "at_or",
    "last",
    "lookup",
    # Ranges
    "InvertedRangePolicy",
    "subsequence",
    # Pop
    "pop_last",
    # Zero values
    "ZeroValueRegistry",
    "registry",
    "zero_value",
    # Errors
    "IndexOutOfRangeError",
]

from signed_index._errors import IndexOutOfRangeError
from signed_index._lookup import at, at_or, last, lookup
from signed_index._normalize import INVALID_INDEX, normalize, normalize_index
from signed_index._pop import pop_last
from signed_index._range import InvertedRangePolicy, subsequence
from signed_index._registry import ZeroValueRegistry, registry
from signed_index._zero import zero_value


def __set_module() -> None:
    """Set the module of all functions in this module to this public module."""
    global_dict = globals()
    for name in __all__:
        obj = global_dict[name]
        if hasattr(obj, "__module__"):
            obj.__module__ = __name__


__set_module()

__version__ = "0.1.0"
