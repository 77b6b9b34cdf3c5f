# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from enum import Enum


class PropertyTypeEnum(str, Enum):
    """Property categories offered by the brokerage."""

    HOUSE = "Casa"
    APARTMENT = "Apartamento"
    LAND = "Terreno"
    COMMERCIAL = "Comercial"


class OperationTypeEnum(str, Enum):
    """Whether a listing is offered for sale or for rent."""

    SALE = "Venda"
    RENT = "Aluguel"


class WarrantyTypeEnum(str, Enum):
    """
    Security mechanism backing a lease.

    DEPOSIT leases carry a cash caution deposit of two monthly rents.
    INSURANCE_BACKED leases rely on a third-party rent guarantee insurance
    and never reference a deposit amount.
    """

    DEPOSIT = "Caução"
    INSURANCE_BACKED = "Seguro Fiança"


class CondoVariationEnum(str, Enum):
    """Whether the condominium fee varies month to month."""

    VARIABLE = "Variável"
    FIXED = "Sem Variação"


class LeaseStatusEnum(str, Enum):
    """Lifecycle status of a lease contract record."""

    UNDER_REVIEW = "Em análise"
    ACTIVE = "Ativo"


class TenantMatchPolicyEnum(str, Enum):
    """
    Tie-break rule when several client records point at the same property.

    Historical tenants of the same unit share the same property interest, so
    the lookup has to pick one.
    """

    MOST_RECENT_BY_ID = "most_recent_by_id"  # Highest client id wins
    FIRST_MATCH = "first_match"  # First record in the supplied order


class DocumentKindEnum(str, Enum):
    """Kinds of documents produced by the engine."""

    LEASE_CONTRACT = "lease_contract"
    INCOME_REPORT = "income_report"
