# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Public listing search.

Client-side filtering of the in-memory property list shown on the public
site. All filters are optional; an empty ``ListingFilters`` keeps every
property. Input order is preserved.
"""

from __future__ import annotations

import re
from decimal import Decimal
from typing import Iterable, List, Optional, Tuple

from pydantic import Field, field_validator

from .core.primitives import Model, OperationTypeEnum, PositiveInt, PropertyTypeEnum
from .records import PropertyRecord
from .utils.formatting import to_money

# Bands offered by the search form: "0-500000", "500000-1000000", "2000000+"
_PRICE_BAND = re.compile(r"^\s*(\d+)\s*(?:-\s*(\d+)|(\+))\s*$")


def parse_price_range(band: str) -> Tuple[Decimal, Optional[Decimal]]:
    """
    Parse a price band into ``(minimum, maximum)``; the maximum is None for
    open-ended bands such as ``2000000+``.
    """
    match = _PRICE_BAND.match(band)
    if match is None:
        raise ValueError(f"Invalid price range {band!r}; expected 'min-max' or 'min+'")
    minimum = Decimal(match.group(1))
    maximum = Decimal(match.group(2)) if match.group(2) is not None else None
    if maximum is not None and maximum < minimum:
        raise ValueError(f"Invalid price range {band!r}; maximum below minimum")
    return minimum, maximum


class ListingFilters(Model):
    """Search form state. ``operation=None`` means all operations."""

    operation: Optional[OperationTypeEnum] = None
    city: Optional[str] = None
    neighborhood: Optional[str] = None
    property_type: Optional[PropertyTypeEnum] = None
    min_bedrooms: Optional[PositiveInt] = None
    price_range: Optional[str] = Field(
        default=None, description="Band such as '0-500000' or '2000000+'."
    )

    @field_validator("price_range")
    @classmethod
    def _check_price_range(cls, value: Optional[str]) -> Optional[str]:
        if value is None or not value.strip():
            return None
        parse_price_range(value)
        return value.strip()


def matches(property_record: PropertyRecord, filters: ListingFilters) -> bool:
    """Whether a single property passes every active filter."""
    if filters.operation is not None and property_record.operation != filters.operation:
        return False
    if filters.city and property_record.city != filters.city:
        return False
    if filters.neighborhood and property_record.neighborhood != filters.neighborhood:
        return False
    if filters.property_type is not None and property_record.type != filters.property_type:
        return False
    if filters.min_bedrooms and property_record.bedrooms < filters.min_bedrooms:
        return False

    if filters.price_range:
        minimum, maximum = parse_price_range(filters.price_range)
        price = to_money(property_record.price)
        if price < minimum:
            return False
        if maximum is not None and price > maximum:
            return False
    return True


def filter_properties(
    properties: Iterable[PropertyRecord], filters: Optional[ListingFilters] = None
) -> List[PropertyRecord]:
    """Properties passing ``filters``, in their original order."""
    if filters is None:
        return list(properties)
    return [candidate for candidate in properties if matches(candidate, filters)]
