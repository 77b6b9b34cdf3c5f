# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import Optional

from ..core.primitives import FormattingSettings
from ..records import CompanySettings, PropertyRecord

GENERIC_PROPERTY_LABEL = "Imóvel"


def _clean(value: Optional[str]) -> str:
    return (value or "").strip()


def property_type_label(property_record: Optional[PropertyRecord]) -> str:
    if property_record is None:
        return GENERIC_PROPERTY_LABEL
    return property_record.type.value


def compose_address(
    street: Optional[str] = None,
    number: Optional[str] = None,
    complement: Optional[str] = None,
    neighborhood: Optional[str] = None,
    city: Optional[str] = None,
    state: Optional[str] = None,
    zip_code: Optional[str] = None,
) -> str:
    """Join the non-empty postal fields into one line; empty string if none."""
    first_line = _clean(street)
    if _clean(number):
        first_line = f"{first_line}, {_clean(number)}" if first_line else _clean(number)
    if _clean(complement):
        first_line = f"{first_line} ({_clean(complement)})" if first_line else _clean(complement)

    locality = "/".join(part for part in (_clean(city), _clean(state)) if part)
    postal = f"CEP {_clean(zip_code)}" if _clean(zip_code) else ""

    parts = [first_line, _clean(neighborhood), locality, postal]
    return " - ".join(part for part in parts if part)


def property_address(
    property_record: Optional[PropertyRecord],
    reference: Optional[str],
    settings: FormattingSettings,
) -> str:
    """
    Full postal address of a resolved property. Unresolved properties show
    the raw reference string; a resolved property without address fields
    falls back to its title.
    """
    if property_record is None:
        return _clean(reference) or settings.placeholder

    address = compose_address(
        street=property_record.street,
        number=property_record.number,
        complement=property_record.complement,
        neighborhood=property_record.neighborhood,
        city=property_record.city,
        state=property_record.state,
        zip_code=property_record.zip_code,
    )
    return address or _clean(property_record.title) or settings.placeholder


def company_address(
    company: Optional[CompanySettings], settings: FormattingSettings
) -> str:
    if company is None:
        return settings.placeholder
    address = compose_address(
        street=company.address,
        number=company.number,
        city=company.city,
        state=company.state,
        zip_code=company.zip_code,
    )
    return address or settings.placeholder
