# Copyright (c) signed-index Contributors
# SPDX-License-Identifier: Apache-2.0
"""Errors raised by the signed index helpers."""

from __future__ import annotations

__all__ = [
    "IndexOutOfRangeError",
]


class IndexOutOfRangeError(IndexError):
    """Raised when a signed index does not denote an element of a sequence.

    It is an :class:`IndexError` subclass, so code that already guards native
    indexing with ``except IndexError`` keeps working.

    Attributes:
        index: The signed index as given by the caller.
        length: The length of the sequence it was resolved against.
        message: Optional extra detail appended to the rendered error.
    """

    def __init__(
        self,
        *,
        index: int,
        length: int,
        message: str | None = None,
    ) -> None:
        self.index = index
        self.length = length
        self.message = message
        super().__init__(str(self))

    def __str__(self) -> str:
        text = f"index {self.index} out of range for length {self.length}"
        if self.message:
            text = f"{text}: {self.message}"
        return text
