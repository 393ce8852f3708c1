# Copyright (c) signed-index Contributors
# SPDX-License-Identifier: Apache-2.0
"""Registry of zero values per sequence type."""

from __future__ import annotations

__all__ = [
    "ZeroValueRegistry",
    "registry",
]

import logging
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)

# Type alias for zero value factories. They receive the sequence itself so the
# zero can depend on per-instance details like a dtype or a buffer format.
ZeroValueFunc = Callable[[Any], Any]


class ZeroValueRegistry:
    """Registry of zero value factories keyed by sequence type.

    Lookup follows the method resolution order of the sequence type, so a
    factory registered for a base class also serves its subclasses unless a
    more specific registration exists.

    Example::

        from signed_index import registry

        @registry.register(MyBuffer)
        def zero_my_buffer(seq):
            return seq.fill_value

        func = registry.get(MyBuffer)
    """

    def __init__(self) -> None:
        self._registrations: dict[type, ZeroValueFunc] = {}

    def register(self, *types: type) -> Callable[[ZeroValueFunc], ZeroValueFunc]:
        """Register a zero value factory for one or more sequence types.

        Can be used as a decorator or called directly. A later registration
        for the same type replaces the earlier one.

        Args:
            *types: The sequence types the factory applies to.

        Returns:
            A decorator that registers the function.
        """
        if not types:
            raise TypeError("register() requires at least one sequence type")

        def decorator(func: ZeroValueFunc) -> ZeroValueFunc:
            for type_ in types:
                self._registrations[type_] = func
                logger.debug(
                    "Registered zero value for %s.%s",
                    type_.__module__,
                    type_.__qualname__,
                )
            return func

        return decorator

    def get(self, seq_type: type) -> ZeroValueFunc | None:
        """Get the zero value factory for a sequence type.

        Args:
            seq_type: The sequence type to look up.

        Returns:
            The factory of the closest registered type in the MRO, or None.
        """
        for base in seq_type.__mro__:
            if base in self._registrations:
                return self._registrations[base]
        return None

    def clear(self) -> None:
        """Clear all registered factories (mainly for testing)."""
        self._registrations.clear()


# Global registry instance
registry = ZeroValueRegistry()
