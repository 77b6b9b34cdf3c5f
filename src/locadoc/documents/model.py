# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Structured document model.

Assemblers produce these presentation-neutral structures with every value
already formatted; renderers only serialize them. Keeping the two apart lets
clause selection be tested without parsing markup.
"""

from __future__ import annotations

from typing import List

from pydantic import Field

from ..core.primitives import DocumentKindEnum, Model


class TableRow(Model):
    label: str
    value: str
    emphasis: bool = False


class SummaryTable(Model):
    """A titled two-column label/value table."""

    title: str
    rows: List[TableRow] = Field(default_factory=list)

    def value_of(self, label: str) -> str:
        """Value of the first row with the given label."""
        for row in self.rows:
            if row.label == label:
                return row.value
        raise KeyError(label)


class Clause(Model):
    """
    One numbered contract clause.

    ``paragraphs`` is the clause body, ``items`` an optional bullet list
    (e.g. residents) and ``sub_paragraphs`` the numbered paragraphs that
    follow the body.
    """

    number: int
    title: str
    paragraphs: List[str] = Field(default_factory=list)
    items: List[str] = Field(default_factory=list)
    sub_paragraphs: List[str] = Field(default_factory=list)

    @property
    def heading(self) -> str:
        return f"CLÁUSULA {self.number}ª - {self.title}"

    @property
    def text(self) -> str:
        """Plain-text body, handy for searching clause content."""
        return "\n".join([*self.paragraphs, *self.items, *self.sub_paragraphs])


class SignatureLine(Model):
    role: str
    name: str = ""


class ContractDocument(Model):
    """A fully assembled lease contract, ready for rendering."""

    title: str
    parties: SummaryTable
    property_info: SummaryTable
    charges: SummaryTable
    clauses: List[Clause]
    place_and_date: str
    signatures: List[SignatureLine]
    tenant_name: str

    def clause(self, title: str) -> Clause:
        """Look up a clause by its title."""
        for clause in self.clauses:
            if clause.title == title:
                return clause
        raise KeyError(title)

    @property
    def text(self) -> str:
        return "\n".join(clause.text for clause in self.clauses)


class IncomeStatementRow(Model):
    month: str
    due_day: str
    payment_date: str
    contracted_value: str
    paid_value: str
    commission: str
    irrf: str


class IncomeStatementDocument(Model):
    """A fully assembled annual income statement, ready for rendering."""

    title: str
    year: int
    company: SummaryTable
    beneficiary: SummaryTable
    payer: SummaryTable
    property_info: SummaryTable
    rows: List[IncomeStatementRow]
    totals: IncomeStatementRow
    summary: SummaryTable
    place_and_date: str
    landlord_name: str


class DocumentArtifact(Model):
    """
    Serialized, self-contained markup document.

    Handed to the UI layer, which decides between download and print
    delivery. ``file_stem`` seeds the suggested file name.
    """

    kind: DocumentKindEnum
    title: str
    html: str
    file_stem: str

    @property
    def file_prefix(self) -> str:
        if self.kind == DocumentKindEnum.INCOME_REPORT:
            return "Informe"
        return "Contrato"
