# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Test utilities and fixtures for locadoc testing.

Builders return realistic back-office records with sensible defaults so
individual tests only spell out the fields they care about.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import List

import pytest

from locadoc.core.primitives import OperationTypeEnum, PropertyTypeEnum
from locadoc.records import (
    ClientRecord,
    CompanySettings,
    IncomeReportRecord,
    LeaseRecord,
    MonthlyIncomeEntry,
    PropertyRecord,
)
from locadoc.utils.formatting import MONTH_NAMES

GENERATED_ON = date(2026, 10, 18)


# Property Utilities
def create_apartment(**overrides) -> PropertyRecord:
    """
    Rental apartment with every monthly charge filled in.

    Charges: rent 2.300,50 + condo 850,00 + fire insurance 45,90
    + IPTU 120,35 + service fee 99,00 = 3.415,75 per month.
    """
    fields = dict(
        id="42",
        title="Apartamento Jardins",
        type=PropertyTypeEnum.APARTMENT,
        operation=OperationTypeEnum.RENT,
        price=Decimal("2300.50"),
        condo_fee=Decimal("850.00"),
        fire_insurance_fee=Decimal("45.90"),
        iptu_fee=Decimal("120.35"),
        service_fee=Decimal("99.00"),
        street="Rua Oscar Freire",
        number="1200",
        complement="Apto 81",
        neighborhood="Jardins",
        city="São Paulo",
        state="SP",
        zip_code="01426-001",
        bedrooms=2,
        owner_name="Carlos Lima",
        owner_tax_id="333.333.333-33",
    )
    fields.update(overrides)
    return PropertyRecord(**fields)


def create_lease(**overrides) -> LeaseRecord:
    """Deposit-backed lease pointing at the apartment by (messy) title."""
    fields = dict(
        tenant_name="Maria Souza",
        tenant_tax_id="123.456.789-00",
        landlord_name="Carlos Lima",
        landlord_tax_id="333.333.333-33",
        property_reference="  apartamento JARDINS ",
        start_date="2024-03-01",
        duration_months=30,
    )
    fields.update(overrides)
    return LeaseRecord(**fields)


def create_full_year(
    paid_value: int = 1000, commission: int = 100, irrf: int = 50
) -> List[MonthlyIncomeEntry]:
    """Twelve identical monthly entries."""
    return [
        MonthlyIncomeEntry(
            month=name,
            due_day=10,
            payment_date=f"2024-{index:02d}-10",
            contracted_value=paid_value,
            paid_value=paid_value,
            commission=commission,
            irrf=irrf,
        )
        for index, name in enumerate(MONTH_NAMES, start=1)
    ]


def create_income_report(**overrides) -> IncomeReportRecord:
    fields = dict(
        property_id="42",
        property_title="Apartamento Jardins",
        landlord_name="Carlos Lima",
        tenant_name="Maria Souza",
        contract_date="2024-03-01",
        start_date="2024-01-01",
        end_date="2024-12-31",
        monthly_entries=create_full_year(),
    )
    fields.update(overrides)
    return IncomeReportRecord(**fields)


@pytest.fixture
def apartment() -> PropertyRecord:
    return create_apartment()


@pytest.fixture
def properties(apartment) -> List[PropertyRecord]:
    return [
        create_apartment(id="7", title="Casa Batel", type=PropertyTypeEnum.HOUSE, city="Curitiba"),
        apartment,
    ]


@pytest.fixture
def clients() -> List[ClientRecord]:
    return [
        ClientRecord(id=3, name="Ana Prado", tax_id="444.444.444-44", property_interest="42"),
        ClientRecord(
            id=7,
            name="Maria Souza",
            tax_id="123.456.789-00",
            property_interest="Apartamento Jardins",
        ),
        ClientRecord(id=5, name="Caio Reis", tax_id="555.555.555-55", property_interest="7"),
    ]


@pytest.fixture
def company() -> CompanySettings:
    return CompanySettings(
        name="Nascimento Negócios Imobiliários",
        address="Av. Paulista",
        number="1000",
        city="São Paulo",
        state="SP",
        zip_code="01310-100",
        phone="(11) 4000-1000",
        email="contato@nascimento.com.br",
    )
