################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Cached fixed-shape specializations of generic value types.

A generic type such as ``Vec`` is specialized on an element dtype and a shape
tuple, producing a subclass with the dtype and dimensions fixed as class
attributes. Capability classes are registered with a predicate over
``(dtype, shape)`` and become bases of every specialization they apply to, so
methods like ``cross`` or ``det`` only exist where they are defined.
"""

from __future__ import annotations

import logging
import operator
from typing import Any
from typing import Callable

import numpy as np

from oasis_linalg.element_types import resolve_dtype
from oasis_linalg.errors import ShapeError


_LOG: logging.Logger = logging.getLogger(__name__)


CapabilityPredicate = Callable[[np.dtype, tuple[int, ...]], bool]
NamespaceFactory = Callable[[np.dtype, tuple[int, ...]], dict[str, Any]]


class Specializer:
    """Create and cache fixed-shape subclasses of a generic base type."""

    def __init__(
        self,
        base: type,
        shape_names: tuple[str, ...],
        namespace_factory: NamespaceFactory | None = None,
    ) -> None:
        """Initialize the specializer.

        Args:
            base: Generic type that every specialization derives from
            shape_names: Class attribute names receiving each shape dimension
            namespace_factory: Optional hook returning extra class attributes
                for a given dtype and shape
        """
        self._base: type = base
        self._shape_names: tuple[str, ...] = shape_names
        self._namespace_factory: NamespaceFactory | None = namespace_factory
        self._capabilities: list[tuple[CapabilityPredicate, type]] = []
        self._cache: dict[tuple[np.dtype, tuple[int, ...]], type] = {}

    def register(self, predicate: CapabilityPredicate) -> Callable[[type], type]:
        """Return a class decorator registering a capability class."""

        def decorator(capability: type) -> type:
            if not issubclass(capability, self._base):
                raise TypeError(
                    f"{capability.__name__} must derive from {self._base.__name__}"
                )
            self._capabilities.append((predicate, capability))
            return capability

        return decorator

    def specialize(self, dtype: Any, shape: tuple[Any, ...]) -> type:
        """Return the cached specialization for a dtype and shape."""
        resolved: np.dtype = resolve_dtype(dtype)
        dims: tuple[int, ...] = self._check_shape(shape)

        key: tuple[np.dtype, tuple[int, ...]] = (resolved, dims)
        specialized: type | None = self._cache.get(key)
        if specialized is None:
            specialized = self._create(resolved, dims)
            self._cache[key] = specialized

        return specialized

    def _check_shape(self, shape: tuple[Any, ...]) -> tuple[int, ...]:
        if len(shape) != len(self._shape_names):
            raise ShapeError(
                f"{self._base.__name__} takes {len(self._shape_names)} "
                f"dimension(s), got {len(shape)}"
            )

        dims: list[int] = []
        for name, dim in zip(self._shape_names, shape):
            try:
                value: int = operator.index(dim)
            except TypeError as exc:
                raise ShapeError(f"{name} must be an integer") from exc
            if value < 1:
                raise ShapeError(f"{name} must be at least 1, got {value}")
            dims.append(value)

        return tuple(dims)

    def _create(self, dtype: np.dtype, shape: tuple[int, ...]) -> type:
        matched: list[type] = [
            capability
            for predicate, capability in self._capabilities
            if predicate(dtype, shape)
        ]

        # Keep only the most derived capabilities to get a consistent MRO
        bases: tuple[type, ...] = tuple(
            capability
            for capability in matched
            if not any(
                other is not capability and issubclass(other, capability)
                for other in matched
            )
        )
        if not bases:
            bases = (self._base,)

        name: str = (
            f"{self._base.__name__}[{dtype.name}, {', '.join(map(str, shape))}]"
        )
        namespace: dict[str, Any] = {
            "__module__": self._base.__module__,
            "__qualname__": name,
            "DTYPE": dtype,
            "_SPECIALIZED": True,
        }
        namespace.update(zip(self._shape_names, shape))
        if self._namespace_factory is not None:
            namespace.update(self._namespace_factory(dtype, shape))

        specialized: type = type(name, bases, namespace)
        _LOG.debug(
            "Created specialization %s with bases %s",
            name,
            [base.__name__ for base in bases],
        )

        return specialized
