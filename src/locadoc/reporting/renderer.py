# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Concrete renderers for the lease contract and the annual income statement.
"""

from __future__ import annotations

from typing import Any, Dict

from ..documents.model import ContractDocument, IncomeStatementDocument
from .base import BaseRenderer


class ContractRenderer(BaseRenderer):
    """Serializes a ContractDocument: tables, numbered clauses, signatures."""

    template_name = "contract.html.j2"
    document_type = ContractDocument

    def context(self, document: ContractDocument) -> Dict[str, Any]:
        return {"document": document}


class IncomeReportRenderer(BaseRenderer):
    """Serializes an IncomeStatementDocument: header tables, monthly grid, totals."""

    template_name = "income_report.html.j2"
    document_type = IncomeStatementDocument

    def context(self, document: IncomeStatementDocument) -> Dict[str, Any]:
        # The administering brokerage signs the statement
        return {
            "document": document,
            "signatory": document.company.value_of("Razão Social"),
        }
