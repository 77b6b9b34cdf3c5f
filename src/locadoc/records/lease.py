# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import Any, Optional

from pydantic import Field, field_validator

from ..core.primitives import (
    CondoVariationEnum,
    DayOfMonth,
    LeaseStatusEnum,
    Model,
    Money,
    PositiveInt,
    WarrantyTypeEnum,
)


class LeaseRecord(Model):
    """
    A tenancy agreement as captured by the administrative lease form.

    Every optional field has a documented default applied at generation time:
    monthly value falls back to the property price, the due day to the
    configured default, the condo tag to ``Sem Variação`` and every text or
    date field to the placeholder dash. Dates are kept as the raw ISO strings
    stored by the backend.
    """

    # Parties
    tenant_name: str = ""
    tenant_tax_id: Optional[str] = None
    tenant_address: Optional[str] = None
    landlord_name: Optional[str] = None
    landlord_tax_id: Optional[str] = None

    # Property reference, either the property id or its title
    property_reference: str = ""

    # Term
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    duration_months: Optional[PositiveInt] = None

    # Money
    monthly_value: Optional[Money] = None
    payment_due_day: Optional[DayOfMonth] = None

    warranty_type: WarrantyTypeEnum = WarrantyTypeEnum.DEPOSIT
    condo_variation: Optional[CondoVariationEnum] = None
    property_condition: Optional[str] = None
    residents: Optional[str] = Field(
        default=None,
        description="Additional residents, one per line (e.g. 'Name - tax id').",
    )
    status: LeaseStatusEnum = LeaseStatusEnum.UNDER_REVIEW

    @field_validator("property_reference", mode="before")
    @classmethod
    def _coerce_property_reference(cls, value: Any) -> Any:
        # Leases may point at the property by its integer primary key
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value
