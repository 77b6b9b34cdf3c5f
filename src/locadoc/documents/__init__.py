# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Document Generation

Resolution + aggregation + assembly pipelines for the two back-office
documents:

    artifact = generate_lease_contract_document(lease, properties)
    artifact = generate_income_report_document(report, properties, clients)

The structured assemblers (``assemble_contract``, ``assemble_income_report``)
are exposed separately so clause selection and totals can be inspected
without parsing markup.
"""

from .financials import LeaseFinancials, compute_lease_financials
from .model import (
    Clause,
    ContractDocument,
    DocumentArtifact,
    IncomeStatementDocument,
    IncomeStatementRow,
    SignatureLine,
    SummaryTable,
    TableRow,
)
from .contract import (
    assemble_contract,
    generate_lease_contract_document,
    resolve_end_date,
    split_residents,
)
from .income_report import (
    IncomeReportTotals,
    aggregate_income_report,
    assemble_income_report,
    generate_income_report_document,
    income_report_frame,
    reporting_year,
)

__all__ = [
    # Aggregation
    "LeaseFinancials",
    "IncomeReportTotals",
    "compute_lease_financials",
    "aggregate_income_report",
    "income_report_frame",
    "reporting_year",
    # Structured model
    "Clause",
    "ContractDocument",
    "DocumentArtifact",
    "IncomeStatementDocument",
    "IncomeStatementRow",
    "SignatureLine",
    "SummaryTable",
    "TableRow",
    # Assembly
    "assemble_contract",
    "assemble_income_report",
    "resolve_end_date",
    "split_residents",
    # Entry points
    "generate_lease_contract_document",
    "generate_income_report_document",
]
