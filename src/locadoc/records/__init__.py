# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Back-office Records

Immutable views of the rows the persistence layer stores for properties,
leases, clients, company settings and annual income reports. Records are
validated once at construction and borrowed read-only by the generators.
"""

from .client import ClientRecord, CompanySettings
from .income_report import IncomeReportRecord, MonthlyIncomeEntry, blank_year
from .lease import LeaseRecord
from .property import PropertyRecord, split_url_list

__all__ = [
    "ClientRecord",
    "CompanySettings",
    "IncomeReportRecord",
    "LeaseRecord",
    "MonthlyIncomeEntry",
    "PropertyRecord",
    "blank_year",
    "split_url_list",
]
