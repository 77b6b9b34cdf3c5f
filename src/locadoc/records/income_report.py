# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from decimal import Decimal
from typing import Dict, List, Optional

from pydantic import Field, field_validator

from ..core.primitives import DayOfMonth, Model, Money
from ..utils.formatting import MONTH_NAMES


class MonthlyIncomeEntry(Model):
    """One calendar month of rental income for an annual report."""

    month: str
    due_day: Optional[DayOfMonth] = None
    payment_date: Optional[str] = None
    contracted_value: Money = Decimal("0")
    paid_value: Money = Decimal("0")
    commission: Money = Decimal("0")
    irrf: Money = Decimal("0")  # Withholding income tax retained


def blank_year() -> List[MonthlyIncomeEntry]:
    """Twelve zero-valued entries, one per calendar month."""
    return [MonthlyIncomeEntry(month=name) for name in MONTH_NAMES]


_CANONICAL_MONTHS: Dict[str, str] = {name.casefold(): name for name in MONTH_NAMES}


class IncomeReportRecord(Model):
    """
    Annual statement of a landlord's rental income for one property.

    The monthly sequence always holds exactly twelve entries in calendar
    order. Months missing from the input are filled in as zero-valued
    entries, so downstream totals always sum twelve rows.
    """

    property_id: Optional[str] = None
    property_title: Optional[str] = None
    landlord_name: Optional[str] = None
    tenant_name: Optional[str] = None
    contract_date: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    monthly_entries: List[MonthlyIncomeEntry] = Field(default_factory=blank_year)

    @field_validator("property_id", mode="before")
    @classmethod
    def _coerce_property_id(cls, value):
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("monthly_entries", mode="after")
    @classmethod
    def _normalize_months(
        cls, entries: List[MonthlyIncomeEntry]
    ) -> List[MonthlyIncomeEntry]:
        """Complete the sequence to twelve months in calendar order."""
        by_month: Dict[str, MonthlyIncomeEntry] = {}
        for entry in entries:
            canonical = _CANONICAL_MONTHS.get(entry.month.strip().casefold())
            if canonical is None:
                raise ValueError(f"Unknown month label: {entry.month!r}")
            if canonical in by_month:
                raise ValueError(f"Duplicate entry for month {canonical}")
            if entry.month != canonical:
                entry = entry.model_copy(update={"month": canonical})
            by_month[canonical] = entry

        return [
            by_month.get(name) or MonthlyIncomeEntry(month=name)
            for name in MONTH_NAMES
        ]

    @property
    def property_reference(self) -> str:
        """The id when known, otherwise the title."""
        return (self.property_id or self.property_title or "").strip()
