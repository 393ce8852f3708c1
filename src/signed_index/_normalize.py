# Copyright (c) signed-index Contributors
# SPDX-License-Identifier: Apache-2.0
"""Normalization of signed indices."""

from __future__ import annotations

__all__ = [
    "INVALID_INDEX",
    "normalize",
    "normalize_index",
]

import operator
from collections.abc import Sized

INVALID_INDEX = -1
"""Sentinel returned for an index that does not denote any element."""


def normalize_index(length: int, index: int) -> int:
    """Resolve a signed index against a sequence length.

    ``0`` is the first element as usual, ``-1`` the last, ``-2`` the second to
    last and so on. Out-of-range indices are not clamped.

    Args:
        length: Number of elements. A negative length has no valid indices.
        index: The signed index.

    Returns:
        An integer in ``[0, length)``, or :data:`INVALID_INDEX`.

    Raises:
        TypeError: If either argument is not an integer.

    Example::

        >>> normalize_index(8, -3)
        5
        >>> normalize_index(8, -100)
        -1
    """
    length = operator.index(length)
    index = operator.index(index)
    if length < 0:
        return INVALID_INDEX
    # flip a negative index
    if index < 0:
        index += length
    if not 0 <= index < length:
        return INVALID_INDEX
    return index


def normalize(seq: Sized, index: int) -> int:
    """Return :func:`normalize_index` called with ``len(seq)``."""
    return normalize_index(len(seq), index)
