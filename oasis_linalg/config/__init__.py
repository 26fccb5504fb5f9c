################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

from oasis_linalg.config.linalg_config import LinalgConfig
from oasis_linalg.config.linalg_config import LinalgConfigError
from oasis_linalg.config.linalg_config import get_config
from oasis_linalg.config.linalg_config import reset_config
from oasis_linalg.config.linalg_config import set_config
from oasis_linalg.config.linalg_params import LinalgParams
from oasis_linalg.config.linalg_params import LinalgParamsError


__all__ = [
    "LinalgConfig",
    "LinalgConfigError",
    "LinalgParams",
    "LinalgParamsError",
    "get_config",
    "reset_config",
    "set_config",
]
