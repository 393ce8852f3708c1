# Copyright (c) signed-index Contributors
# SPDX-License-Identifier: Apache-2.0
"""Sub-sequences delimited by signed indices."""

from __future__ import annotations

__all__ = [
    "InvertedRangePolicy",
    "subsequence",
]

from collections.abc import Sequence
from typing import Literal, TypeVar

from signed_index import _errors, _normalize

S = TypeVar("S", bound=Sequence)

InvertedRangePolicy = Literal["empty", "strict"]
"""Policy for a range whose start resolves after its end.

* ``"empty"``: Slice anyway, which gives an empty sequence as native
    slicing does.
* ``"strict"``: Raise :class:`IndexOutOfRangeError`.
"""


def subsequence(
    seq: S,
    start: int,
    end: int,
    *,
    inverted: InvertedRangePolicy = "empty",
) -> S:
    """Slice *seq* with both endpoints resolved by :func:`normalize`.

    The range is half-open. Both endpoints must denote elements, so the last
    element can never be included and out-of-range endpoints are not clamped.
    The result is whatever ``seq[a:b]`` returns for the sequence type: a copy
    for lists and tuples, a view for numpy arrays and memoryviews.

    Args:
        seq: The sequence to slice. It must support slicing.
        start: Signed index of the first element of the result.
        end: Signed index of the first element after the result.
        inverted: What to do when *start* resolves after *end*.

    Returns:
        The sub-sequence ``seq[a:b]``.

    Raises:
        IndexOutOfRangeError: If an endpoint does not denote an element, or
            the range is inverted and *inverted* is ``"strict"``.
        ValueError: If *inverted* is not a known policy.

    Example::

        >>> subsequence(["A", "B", "C", "D"], 1, -1)
        ['B', 'C']
    """
    if inverted not in ("empty", "strict"):
        raise ValueError(f"Unknown inverted range policy: {inverted!r}")

    length = len(seq)
    a = _normalize.normalize_index(length, start)
    if a < 0:
        raise _errors.IndexOutOfRangeError(
            index=start, length=length, message="invalid range start"
        )
    b = _normalize.normalize_index(length, end)
    if b < 0:
        raise _errors.IndexOutOfRangeError(
            index=end, length=length, message="invalid range end"
        )
    if a > b and inverted == "strict":
        raise _errors.IndexOutOfRangeError(
            index=start,
            length=length,
            message=f"range start {a} is after end {b}",
        )
    return seq[a:b]
