# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import Any, List, Optional

from pydantic import Field, field_validator

from ..core.primitives import (
    Model,
    Money,
    OperationTypeEnum,
    PositiveInt,
    PropertyTypeEnum,
)


def split_url_list(raw: Optional[str]) -> List[str]:
    """Split a comma-joined URL field, dropping blank entries."""
    if not raw:
        return []
    return [url.strip() for url in raw.split(",") if url.strip()]


class PropertyRecord(Model):
    """
    A listed property as stored by the persistence layer.

    Read-only at generation time. The monthly price is the rent fallback for
    leases without an explicit value; the four secondary charges always come
    from here since leases carry no copies of their own.
    """

    id: str
    title: str = ""
    type: PropertyTypeEnum = PropertyTypeEnum.HOUSE
    operation: OperationTypeEnum = OperationTypeEnum.SALE

    # Monthly charges
    price: Optional[Money] = None
    condo_fee: Optional[Money] = None
    fire_insurance_fee: Optional[Money] = None
    iptu_fee: Optional[Money] = None
    service_fee: Optional[Money] = None

    # Postal address
    street: Optional[str] = None
    number: Optional[str] = None
    complement: Optional[str] = None
    neighborhood: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None

    # Listing attributes
    description: Optional[str] = None
    bedrooms: PositiveInt = 0
    bathrooms: PositiveInt = 0
    parking_spaces: PositiveInt = 0
    area: float = Field(default=0.0, ge=0)
    pets: Optional[bool] = None
    furnished: Optional[bool] = None

    # Media, stored as comma-joined URL lists
    image_url: Optional[str] = None
    gallery_urls: Optional[str] = None
    inspection_urls: Optional[str] = None

    # Owner
    owner_name: Optional[str] = None
    owner_tax_id: Optional[str] = None
    owner_phone: Optional[str] = None

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> Any:
        # Backends hand out integer primary keys
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @property
    def gallery(self) -> List[str]:
        return split_url_list(self.gallery_urls)

    @property
    def inspection_photos(self) -> List[str]:
        return split_url_list(self.inspection_urls)
