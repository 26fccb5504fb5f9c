################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""High-level configuration wrapper and the process-wide active config."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from oasis_linalg.config.linalg_params import LinalgParams
from oasis_linalg.config.linalg_params import LinalgParamsError
from oasis_linalg.element_types import resolve_dtype
from oasis_linalg.errors import LinalgError


_LOG: logging.Logger = logging.getLogger(__name__)


class LinalgConfigError(LinalgError):
    """Raised when linear algebra configuration validation fails."""


@dataclass(frozen=True)
class LinalgConfig:
    """Convenience wrapper around linear algebra parameters."""

    params: LinalgParams

    def __init__(self, params: LinalgParams) -> None:
        """Initialize the configuration wrapper and validate."""
        object.__setattr__(self, "params", params)
        self.validate()

    @classmethod
    def defaults(cls) -> LinalgConfig:
        """Return a configuration built from default parameters."""
        return cls(LinalgParams.defaults())

    def validate(self) -> None:
        """Validate parameter invariants."""
        try:
            self.params.validate()
        except LinalgParamsError as exc:
            raise LinalgConfigError(str(exc)) from exc

    def default_dtype(self) -> np.dtype:
        """Return the default element dtype."""
        return resolve_dtype(self.params.elements.default_dtype)

    def atol(self) -> float:
        """Return the default absolute comparison tolerance."""
        return self.params.compare.atol

    def rtol(self) -> float:
        """Return the default relative comparison tolerance."""
        return self.params.compare.rtol

    def det_warn_dim(self) -> int:
        """Return the dimension above which determinants log a warning."""
        return self.params.determinant.warn_dim


_active_config: LinalgConfig | None = None


def get_config() -> LinalgConfig:
    """Return the active configuration, creating the defaults on first use."""
    global _active_config
    if _active_config is None:
        _active_config = LinalgConfig.defaults()
    return _active_config


def set_config(config: LinalgConfig) -> None:
    """Install a validated configuration for the process."""
    global _active_config
    if not isinstance(config, LinalgConfig):
        raise LinalgConfigError("config must be a LinalgConfig")
    _active_config = config
    _LOG.debug("Installed linear algebra config %s", config.params.as_nested_dict())


def reset_config() -> None:
    """Restore the default configuration."""
    set_config(LinalgConfig.defaults())
