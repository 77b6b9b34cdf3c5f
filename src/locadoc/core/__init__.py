# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
locadoc Core Framework

Foundational building blocks shared across the engine.
"""

from . import primitives
from .primitives import (
    ContractSettings,
    FormattingSettings,
    GlobalSettings,
    Model,
)

__all__ = [
    "primitives",
    "ContractSettings",
    "FormattingSettings",
    "GlobalSettings",
    "Model",
]
