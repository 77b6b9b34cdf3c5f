# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
locadoc Core Primitives

Essential building blocks shared by records, documents and delivery:
the immutable base model, enumerations, constrained types and settings.
"""

from .enums import (
    CondoVariationEnum,
    DocumentKindEnum,
    LeaseStatusEnum,
    OperationTypeEnum,
    PropertyTypeEnum,
    TenantMatchPolicyEnum,
    WarrantyTypeEnum,
)
from .model import Model
from .settings import ContractSettings, FormattingSettings, GlobalSettings
from .types import MAX_MONEY, DayOfMonth, Money, PositiveInt

__all__ = [
    # Core models
    "Model",
    # Settings
    "GlobalSettings",
    "FormattingSettings",
    "ContractSettings",
    # Enums
    "CondoVariationEnum",
    "DocumentKindEnum",
    "LeaseStatusEnum",
    "OperationTypeEnum",
    "PropertyTypeEnum",
    "TenantMatchPolicyEnum",
    "WarrantyTypeEnum",
    # Types
    "DayOfMonth",
    "MAX_MONEY",
    "Money",
    "PositiveInt",
]
