# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Unit tests for back-office record validation."""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from locadoc.core.primitives import (
    LeaseStatusEnum,
    WarrantyTypeEnum,
)
from locadoc.records import (
    ClientRecord,
    IncomeReportRecord,
    LeaseRecord,
    MonthlyIncomeEntry,
    PropertyRecord,
    split_url_list,
)
from locadoc.utils.formatting import MONTH_NAMES


class TestPropertyRecord:
    def test_integer_id_is_coerced(self):
        assert PropertyRecord(id=42).id == "42"

    def test_float_price_becomes_decimal(self):
        record = PropertyRecord(id="1", price=2300.5)
        assert record.price == Decimal("2300.5")

    def test_negative_fee_rejected(self):
        with pytest.raises(ValidationError):
            PropertyRecord(id="1", condo_fee=-1)

    def test_gallery_parsing_drops_blanks(self):
        record = PropertyRecord(
            id="1",
            gallery_urls="https://cdn/a.jpg, ,https://cdn/b.jpg,",
            inspection_urls="",
        )
        assert record.gallery == ["https://cdn/a.jpg", "https://cdn/b.jpg"]
        assert record.inspection_photos == []

    def test_split_url_list_none(self):
        assert split_url_list(None) == []


class TestLeaseRecord:
    def test_defaults(self):
        lease = LeaseRecord()
        assert lease.warranty_type == WarrantyTypeEnum.DEPOSIT
        assert lease.status == LeaseStatusEnum.UNDER_REVIEW
        assert lease.monthly_value is None
        assert lease.payment_due_day is None
        assert lease.condo_variation is None

    def test_accepts_stored_enum_labels(self):
        lease = LeaseRecord(warranty_type="Seguro Fiança", status="Ativo")
        assert lease.warranty_type == WarrantyTypeEnum.INSURANCE_BACKED
        assert lease.status == LeaseStatusEnum.ACTIVE

    def test_integer_property_reference_is_coerced(self):
        assert LeaseRecord(property_reference=42).property_reference == "42"

    def test_money_beyond_limit_rejected(self):
        with pytest.raises(ValidationError):
            LeaseRecord(monthly_value=Decimal("1E+30"))

    def test_due_day_out_of_range(self):
        with pytest.raises(ValidationError):
            LeaseRecord(payment_due_day=0)

    def test_is_frozen(self):
        lease = LeaseRecord(tenant_name="Maria")
        with pytest.raises(ValidationError):
            lease.tenant_name = "Outra"


class TestIncomeReportRecord:
    def test_default_is_twelve_zero_months(self):
        report = IncomeReportRecord()
        assert [entry.month for entry in report.monthly_entries] == list(MONTH_NAMES)
        assert all(entry.paid_value == 0 for entry in report.monthly_entries)

    def test_partial_year_is_completed_in_calendar_order(self):
        report = IncomeReportRecord(
            monthly_entries=[
                {"month": "dezembro", "paid_value": 300},
                {"month": "Março", "paid_value": 100},
            ]
        )
        entries = report.monthly_entries
        assert len(entries) == 12
        assert entries[2].month == "Março"
        assert entries[2].paid_value == Decimal("100")
        assert entries[11].month == "Dezembro"
        assert entries[11].paid_value == Decimal("300")
        assert entries[0].paid_value == 0

    def test_unknown_month_rejected(self):
        with pytest.raises(ValidationError, match="Unknown month"):
            IncomeReportRecord(monthly_entries=[MonthlyIncomeEntry(month="Smarch")])

    def test_duplicate_month_rejected(self):
        with pytest.raises(ValidationError, match="Duplicate"):
            IncomeReportRecord(
                monthly_entries=[
                    MonthlyIncomeEntry(month="Janeiro"),
                    MonthlyIncomeEntry(month="janeiro"),
                ]
            )

    def test_property_reference_prefers_id(self):
        report = IncomeReportRecord(property_id=42, property_title="Apartamento Jardins")
        assert report.property_id == "42"
        assert report.property_reference == "42"
        assert IncomeReportRecord(property_title=" Casa ").property_reference == "Casa"


class TestClientRecord:
    def test_integer_property_interest_is_coerced(self):
        assert ClientRecord(id=1, property_interest=42).property_interest == "42"

    def test_boolean_interest_is_not_an_id(self):
        with pytest.raises(ValidationError):
            ClientRecord(id=1, property_interest=True)
