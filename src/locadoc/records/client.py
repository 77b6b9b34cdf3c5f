# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import Any, Optional

from pydantic import field_validator

from ..core.primitives import Model


class ClientRecord(Model):
    """A registered client (tenant or lead) linked to a property of interest."""

    id: int
    name: str = ""
    tax_id: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    property_interest: Optional[str] = None  # Property id or title
    status: str = "Em análise"

    @field_validator("property_interest", mode="before")
    @classmethod
    def _coerce_property_interest(cls, value: Any) -> Any:
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value


class CompanySettings(Model):
    """Brokerage contact details shown on income report headers."""

    name: Optional[str] = None
    address: Optional[str] = None
    number: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    hours: Optional[str] = None
