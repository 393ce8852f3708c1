# Copyright (c) signed-index Contributors
# SPDX-License-Identifier: Apache-2.0
"""Zero values of the built-in sequence types."""

from __future__ import annotations

__all__ = [
    "zero_value",
]

import array
from typing import Any

import numpy as np

from signed_index import _registry

_reg = _registry.registry.register

_FLOAT_FORMATS = frozenset("fde")
_FLOAT_TYPECODES = frozenset("fd")
_CHAR_TYPECODES = frozenset("uw")


def zero_value(seq: Any) -> Any:
    """Return the zero value of the elements of *seq*.

    This is what :func:`signed_index.lookup` returns for a missing element and
    what :func:`signed_index.pop_last` writes into a vacated slot.

    Returns:
        The registered zero for the type of *seq*, or None if no factory
        is registered for it.
    """
    func = _registry.registry.get(type(seq))
    if func is None:
        return None
    return func(seq)


@_reg(str)
def _zero_str(seq: str) -> str:
    return ""


@_reg(bytes, bytearray)
def _zero_bytes(seq: bytes | bytearray) -> int:
    return 0


@_reg(array.array)
def _zero_array(seq: array.array) -> Any:
    if seq.typecode in _FLOAT_TYPECODES:
        return 0.0
    if seq.typecode in _CHAR_TYPECODES:
        return "\x00"
    return 0


@_reg(memoryview)
def _zero_memoryview(seq: memoryview) -> Any:
    """Zero matching the struct format of the view's items."""
    # Strip the byte order / alignment prefix, e.g. "<d" or "@B"
    code = seq.format[-1:]
    if code in _FLOAT_FORMATS:
        return 0.0
    if code == "?":
        return False
    if code == "c":
        return b"\x00"
    return 0


@_reg(np.ndarray)
def _zero_ndarray(seq: np.ndarray) -> Any:
    """Zero with the array's dtype; None for object arrays.

    Indexing the first axis of an N-d array yields an (N-1)-d array, so the
    zero has the shape of the trailing axes.
    """
    if seq.dtype.hasobject:
        return None
    return np.zeros(seq.shape[1:], dtype=seq.dtype)[()]
