# Copyright (c) signed-index Contributors
# SPDX-License-Identifier: Apache-2.0
"""Removing the last element of a sequence."""

from __future__ import annotations

__all__ = [
    "pop_last",
]

import array
import logging
from collections.abc import MutableSequence, Sequence
from typing import Any, TypeVar

import numpy as np

from signed_index import _errors, _normalize, _zero

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _is_writable(seq: Any) -> bool:
    """Check if the slots of *seq* can be assigned to."""
    if isinstance(seq, np.ndarray):
        return bool(seq.flags.writeable)
    if isinstance(seq, memoryview):
        return not seq.readonly
    return isinstance(seq, (MutableSequence, array.array))


def pop_last(seq: Sequence[T]) -> tuple[T, Sequence[T]]:
    """Return the last element of *seq* and the sequence without it.

    The vacated slot is reset to the zero value of the elements (see
    :func:`zero_value`) when *seq* is writable, so the removed element is not
    kept alive through the original sequence. For numpy arrays and
    memoryviews the returned rest is a view over the same buffer and the
    cleared slot remains in that buffer just past its end. For lists the rest
    is a copy and the caller's list is left with the cleared slot. Immutable
    sequences are not modified.

    Args:
        seq: A non-empty sequence that supports slicing.

    Returns:
        A ``(last, rest)`` tuple where ``rest`` is ``seq[:-1]``.

    Raises:
        IndexOutOfRangeError: If *seq* is empty.
        TypeError: If *seq* cannot be sliced, e.g. a deque. *seq* is left
            unmodified.

    Example::

        >>> vs = ["A", "B", "C", "D"]
        >>> while vs:
        ...     v, vs = pop_last(vs)
        ...     print(v, end="")
        DCBA
    """
    i = _normalize.normalize(seq, -1)
    if i < 0:
        raise _errors.IndexOutOfRangeError(index=-1, length=len(seq))
    value = seq[i]
    if isinstance(value, np.ndarray):
        # A row of an N-d array is a view of the slot about to be cleared
        value = value.copy()
    # seq must stay untouched if it cannot be sliced
    rest = seq[:i]
    if _is_writable(seq):
        seq[i] = _zero.zero_value(seq)  # type: ignore[index]
        logger.debug("Cleared vacated slot %d of %s", i, type(seq).__name__)
    return value, rest
