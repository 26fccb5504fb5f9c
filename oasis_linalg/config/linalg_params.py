################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Structured configuration schema for fixed-size linear algebra."""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import fields
from dataclasses import replace
from typing import Any

from oasis_linalg.element_types import resolve_dtype
from oasis_linalg.errors import ElementTypeError
from oasis_linalg.errors import LinalgError


# Element dtype used when a specialization is requested without one
ELEMENTS_DEFAULT_DTYPE: str = "float64"

# Absolute tolerance for approximate comparisons
COMPARE_ATOL: float = 1e-9
# Relative tolerance for approximate comparisons
COMPARE_RTOL: float = 0.0

# Matrix dimension above which determinant cost is logged as a warning
DETERMINANT_WARN_DIM: int = 6


class LinalgParamsError(LinalgError):
    """Raised when linear algebra parameter validation fails."""


def _require_non_negative(value: float, name: str) -> None:
    """Require a non-negative value."""
    if value < 0.0:
        raise LinalgParamsError(f"{name} must be non-negative")


def _require_positive_int(value: int, name: str) -> None:
    """Require a positive integer value."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise LinalgParamsError(f"{name} must be an int")
    if value <= 0:
        raise LinalgParamsError(f"{name} must be positive")


@dataclass(frozen=True)
class ElementsParams:
    """Element type defaults."""

    # Element dtype used when none is given
    default_dtype: str = ELEMENTS_DEFAULT_DTYPE


@dataclass(frozen=True)
class CompareParams:
    """Tolerances for approximate equality."""

    # Absolute tolerance
    atol: float = COMPARE_ATOL
    # Relative tolerance
    rtol: float = COMPARE_RTOL


@dataclass(frozen=True)
class DeterminantParams:
    """Determinant evaluation parameters."""

    # Dimension above which a cost warning is logged
    warn_dim: int = DETERMINANT_WARN_DIM


@dataclass(frozen=True)
class LinalgParams:
    """Complete configuration tree for vectors and matrices."""

    elements: ElementsParams
    compare: CompareParams
    determinant: DeterminantParams

    @classmethod
    def defaults(cls) -> LinalgParams:
        """Return the default parameter tree."""
        return cls(
            elements=ElementsParams(),
            compare=CompareParams(),
            determinant=DeterminantParams(),
        )

    def validate(self) -> None:
        """Validate parameter invariants and constraints."""
        try:
            resolve_dtype(self.elements.default_dtype)
        except ElementTypeError as exc:
            raise LinalgParamsError(f"elements.default_dtype: {exc}") from exc

        _require_non_negative(self.compare.atol, "compare.atol")
        _require_non_negative(self.compare.rtol, "compare.rtol")

        _require_positive_int(self.determinant.warn_dim, "determinant.warn_dim")

    def replace(self, **namespace_overrides: Any) -> LinalgParams:
        """Return a modified copy of the parameters."""
        return replace(self, **namespace_overrides)

    def as_nested_dict(self) -> dict[str, Any]:
        """Return a nested dict representation for debugging."""
        return _dataclass_to_dict(self)


def _dataclass_to_dict(value: Any) -> Any:
    """Convert dataclasses into plain Python values."""
    if hasattr(value, "__dataclass_fields__"):
        return {
            field.name: _dataclass_to_dict(getattr(value, field.name))
            for field in fields(value)
        }
    return value
