# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Lease financial aggregation.

Derives the monthly charge breakdown and the caution deposit from a lease
and its (optional) resolved property. Missing inputs coalesce to zero before
summation; nothing here raises.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

from ..core.primitives import Model
from ..records import LeaseRecord, PropertyRecord
from ..utils.formatting import to_money

DEPOSIT_MULTIPLIER = 2


class LeaseFinancials(Model):
    """Monetary figures derived for one lease snapshot."""

    monthly_rent: Decimal
    condo_fee: Decimal
    fire_insurance: Decimal
    property_tax: Decimal
    service_fee: Decimal
    total_monthly_charge: Decimal
    deposit_amount: Decimal  # Only rendered for deposit-backed leases


def compute_lease_financials(
    lease: LeaseRecord, property_record: Optional[PropertyRecord] = None
) -> LeaseFinancials:
    """
    Compute rent, secondary charges, their total and the deposit.

    - monthly rent: lease value, else property price, else 0
    - condo, fire insurance, IPTU and service fee: from the property, else 0
    - deposit: twice the monthly rent, regardless of warranty type
    """
    if lease.monthly_value is not None:
        monthly_rent = to_money(lease.monthly_value)
    elif property_record is not None:
        monthly_rent = to_money(property_record.price)
    else:
        monthly_rent = to_money(None)

    if property_record is not None:
        condo_fee = to_money(property_record.condo_fee)
        fire_insurance = to_money(property_record.fire_insurance_fee)
        property_tax = to_money(property_record.iptu_fee)
        service_fee = to_money(property_record.service_fee)
    else:
        condo_fee = fire_insurance = property_tax = service_fee = to_money(None)

    total = monthly_rent + condo_fee + fire_insurance + property_tax + service_fee

    return LeaseFinancials(
        monthly_rent=monthly_rent,
        condo_fee=condo_fee,
        fire_insurance=fire_insurance,
        property_tax=property_tax,
        service_fee=service_fee,
        total_monthly_charge=total,
        deposit_amount=monthly_rent * DEPOSIT_MULTIPLIER,
    )
