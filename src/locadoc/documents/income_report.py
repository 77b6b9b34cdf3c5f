# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Annual Income Report

Aggregates the twelve monthly rows of an income report into annual totals
and assembles the landlord's annual rental income statement (the document
the landlord uses when filing income tax).
"""

from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal
from functools import partial
from typing import Iterable, Optional

import pandas as pd

from ..core.primitives import DocumentKindEnum, GlobalSettings, Model
from ..records import (
    ClientRecord,
    CompanySettings,
    IncomeReportRecord,
    MonthlyIncomeEntry,
    PropertyRecord,
)
from ..resolution import resolve_property, resolve_tenant
from ..utils.formatting import (
    display_text,
    file_stem,
    format_currency,
    format_date,
    format_long_date,
    parse_iso_date,
    to_money,
)
from ._display import company_address, property_address
from .model import (
    DocumentArtifact,
    IncomeStatementDocument,
    IncomeStatementRow,
    SummaryTable,
    TableRow,
)

logger = logging.getLogger(__name__)

MONEY_COLUMNS = ["contracted_value", "paid_value", "commission", "irrf"]
TOTAL_ROW_LABEL = "TOTAL"


class IncomeReportTotals(Model):
    """Field-wise sums over the twelve monthly entries."""

    total_contracted: Decimal
    total_paid: Decimal
    total_commission: Decimal
    total_withholding: Decimal


def income_report_frame(report: IncomeReportRecord) -> pd.DataFrame:
    """
    Monthly entries as a DataFrame indexed by month label.

    Money columns hold ``Decimal`` values (object dtype) so sums stay exact.
    """
    frame = pd.DataFrame(
        [entry.model_dump() for entry in report.monthly_entries],
        columns=["month", "due_day", "payment_date", *MONEY_COLUMNS],
    )
    frame[MONEY_COLUMNS] = frame[MONEY_COLUMNS].astype(object)
    return frame.set_index("month")


def aggregate_income_report(report: IncomeReportRecord) -> IncomeReportTotals:
    """
    Sum paid value, commission, withholding tax and contracted value over
    the twelve months.

    Example:
        >>> totals = aggregate_income_report(report)
        >>> totals.total_paid
        Decimal('12000.00')
    """
    frame = income_report_frame(report)
    sums = {column: to_money(frame[column].sum()) for column in MONEY_COLUMNS}
    return IncomeReportTotals(
        total_contracted=sums["contracted_value"],
        total_paid=sums["paid_value"],
        total_commission=sums["commission"],
        total_withholding=sums["irrf"],
    )


def reporting_year(report: IncomeReportRecord, today: Optional[date] = None) -> int:
    """Calendar year of the contract date, else the current year."""
    contract_date = parse_iso_date(report.contract_date)
    if contract_date is not None:
        return contract_date.year
    return (today or date.today()).year


def _statement_row(entry: MonthlyIncomeEntry, settings: GlobalSettings) -> IncomeStatementRow:
    fmt = settings.formatting
    money = partial(format_currency, settings=fmt)
    return IncomeStatementRow(
        month=entry.month,
        due_day=str(entry.due_day) if entry.due_day else fmt.placeholder,
        payment_date=format_date(entry.payment_date, fmt),
        contracted_value=money(entry.contracted_value),
        paid_value=money(entry.paid_value),
        commission=money(entry.commission),
        irrf=money(entry.irrf),
    )


def assemble_income_report(
    report: IncomeReportRecord,
    property_record: Optional[PropertyRecord] = None,
    tenant: Optional[ClientRecord] = None,
    company: Optional[CompanySettings] = None,
    settings: Optional[GlobalSettings] = None,
    generated_on: Optional[date] = None,
) -> IncomeStatementDocument:
    """
    Assemble the structured annual income statement.

    Args:
        report: Income report snapshot, read-only
        property_record: Resolved property (address source), or None
        tenant: Resolved tenant client (tax id source), or None
        company: Brokerage contact details for the header, or None
        settings: Formatting and contract defaults
        generated_on: Date printed on the statement (defaults to today)
    """
    settings = settings or GlobalSettings()
    generated_on = generated_on or date.today()
    fmt = settings.formatting
    money = partial(format_currency, settings=fmt)

    totals = aggregate_income_report(report)
    year = reporting_year(report, generated_on)

    landlord_name = (report.landlord_name or "").strip()
    if not landlord_name and property_record is not None:
        landlord_name = (property_record.owner_name or "").strip()
    tenant_name = (report.tenant_name or "").strip()
    if not tenant_name and tenant is not None:
        tenant_name = tenant.name.strip()

    company_name = (
        company.name if company is not None and company.name else None
    ) or settings.contract.brokerage_name

    company_table = SummaryTable(
        title="IMOBILIÁRIA ADMINISTRADORA",
        rows=[
            TableRow(label="Razão Social", value=company_name),
            TableRow(label="Endereço", value=company_address(company, fmt)),
            TableRow(label="Telefone", value=display_text(company.phone if company else None, fmt)),
            TableRow(label="E-mail", value=display_text(company.email if company else None, fmt)),
        ],
    )

    beneficiary = SummaryTable(
        title="BENEFICIÁRIO (LOCADOR)",
        rows=[
            TableRow(label="Nome", value=display_text(landlord_name, fmt)),
            TableRow(
                label="CPF",
                value=display_text(
                    property_record.owner_tax_id if property_record else None, fmt
                ),
            ),
        ],
    )

    payer = SummaryTable(
        title="FONTE PAGADORA (LOCATÁRIO)",
        rows=[
            TableRow(label="Nome", value=display_text(tenant_name, fmt)),
            TableRow(label="CPF", value=display_text(tenant.tax_id if tenant else None, fmt)),
        ],
    )

    property_info = SummaryTable(
        title="IMÓVEL",
        rows=[
            TableRow(
                label="Endereço",
                value=property_address(
                    property_record,
                    report.property_title or report.property_id,
                    fmt,
                ),
            ),
            TableRow(label="Data do Contrato", value=format_date(report.contract_date, fmt)),
            TableRow(
                label="Período",
                value=f"{format_date(report.start_date, fmt)} a {format_date(report.end_date, fmt)}",
            ),
        ],
    )

    summary = SummaryTable(
        title="RESUMO DO ANO-CALENDÁRIO",
        rows=[
            TableRow(label="Total de Aluguéis Contratados", value=money(totals.total_contracted)),
            TableRow(label="Total de Rendimentos Pagos", value=money(totals.total_paid), emphasis=True),
            TableRow(label="Total de Comissões", value=money(totals.total_commission)),
            TableRow(label="Total de IRRF Retido", value=money(totals.total_withholding)),
        ],
    )

    return IncomeStatementDocument(
        title=f"INFORME DE RENDIMENTOS DE ALUGUÉIS - ANO-CALENDÁRIO {year}",
        year=year,
        company=company_table,
        beneficiary=beneficiary,
        payer=payer,
        property_info=property_info,
        rows=[_statement_row(entry, settings) for entry in report.monthly_entries],
        totals=IncomeStatementRow(
            month=TOTAL_ROW_LABEL,
            due_day="",
            payment_date="",
            contracted_value=money(totals.total_contracted),
            paid_value=money(totals.total_paid),
            commission=money(totals.total_commission),
            irrf=money(totals.total_withholding),
        ),
        summary=summary,
        place_and_date=(
            f"{settings.contract.signing_city}, {format_long_date(generated_on)}."
        ),
        landlord_name=display_text(landlord_name, fmt),
    )


def generate_income_report_document(
    report: IncomeReportRecord,
    properties: Iterable[PropertyRecord],
    clients: Iterable[ClientRecord] = (),
    company_settings: Optional[CompanySettings] = None,
    settings: Optional[GlobalSettings] = None,
    generated_on: Optional[date] = None,
) -> DocumentArtifact:
    """
    Resolve, aggregate and render the annual income statement.

    The tenant's tax id comes from the client registered against the
    report's property; when several clients match, the configured
    ``tenant_match_policy`` picks one.
    """
    # Import at runtime to avoid circular dependencies
    from ..reporting.renderer import IncomeReportRenderer  # noqa: PLC0415

    settings = settings or GlobalSettings()
    properties = list(properties)

    property_record = resolve_property(report.property_id, properties)
    if property_record is None:
        property_record = resolve_property(report.property_title, properties)
    if property_record is None:
        logger.info(
            f"Property {report.property_reference!r} not found; "
            "income report will show the raw reference"
        )

    tenant = resolve_tenant(
        property_record,
        clients,
        policy=settings.contract.tenant_match_policy,
        references=(report.property_id, report.property_title),
    )

    document = assemble_income_report(
        report,
        property_record=property_record,
        tenant=tenant,
        company=company_settings,
        settings=settings,
        generated_on=generated_on,
    )
    html = IncomeReportRenderer().render(document)
    return DocumentArtifact(
        kind=DocumentKindEnum.INCOME_REPORT,
        title=document.title,
        html=html,
        file_stem=file_stem(document.landlord_name),
    )
