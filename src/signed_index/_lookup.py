# Copyright (c) signed-index Contributors
# SPDX-License-Identifier: Apache-2.0
"""Element lookup with signed indices."""

from __future__ import annotations

__all__ = [
    "at",
    "at_or",
    "last",
    "lookup",
]

from collections.abc import Sequence
from typing import TypeVar

from signed_index import _errors, _normalize, _zero

T = TypeVar("T")
D = TypeVar("D")


def at(seq: Sequence[T], index: int) -> T:
    """Return ``seq[normalize(seq, index)]``.

    Args:
        seq: The sequence to index.
        index: A signed index, ``-1`` being the last element.

    Returns:
        The element at the normalized index.

    Raises:
        IndexOutOfRangeError: If *index* does not denote an element.

    Example::

        >>> at(["A", "B", "C", "D", "E"], -2)
        'D'
    """
    i = _normalize.normalize(seq, index)
    if i < 0:
        raise _errors.IndexOutOfRangeError(index=index, length=len(seq))
    return seq[i]


def lookup(seq: Sequence[T], index: int) -> tuple[T | None, bool]:
    """Like :func:`at` but report a missing element instead of raising.

    Returns:
        ``(element, True)`` if *index* is valid, otherwise the zero value of
        the sequence's elements (see :func:`zero_value`) and ``False``.

    Example::

        >>> lookup(["A", "B", "C", "D", "E"], 40)
        (None, False)
    """
    i = _normalize.normalize(seq, index)
    if i < 0:
        return _zero.zero_value(seq), False
    return seq[i], True


def at_or(seq: Sequence[T], index: int, default: D) -> T | D:
    """Like :func:`at` but return *default* if *index* is invalid."""
    i = _normalize.normalize(seq, index)
    if i < 0:
        return default
    return seq[i]


def last(seq: Sequence[T]) -> T:
    """Return ``at(seq, -1)``.

    Raises:
        IndexOutOfRangeError: If *seq* is empty.
    """
    return at(seq, -1)
