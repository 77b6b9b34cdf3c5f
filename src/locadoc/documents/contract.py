# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Lease Contract Assembly

Builds the ordered, numbered clause set of a residential/commercial lease
contract from a lease record and its resolved property. Clause wording is
jurisdiction boilerplate; the parts that matter are which variant is picked
and what data flows into it:

- residents: one item per non-blank line of the lease's resident list
- warranty: insurance-backed guarantee (no amount) or cash deposit
  (twice the monthly rent, plus two numbered sub-paragraphs)
- condominium line: tagged with the lease's condo variation flag

The assembler is total. A lease with no monetary inputs still yields a
complete document in which every amount is zero.
"""

from __future__ import annotations

import logging
from datetime import date
from functools import partial
from typing import Iterable, List, Optional

from dateutil.relativedelta import relativedelta

from ..core.primitives import (
    CondoVariationEnum,
    DocumentKindEnum,
    GlobalSettings,
    PropertyTypeEnum,
    WarrantyTypeEnum,
)
from ..records import LeaseRecord, PropertyRecord
from ..resolution import resolve_property
from ..utils.formatting import (
    display_text,
    file_stem,
    format_currency,
    format_date,
    format_long_date,
    parse_iso_date,
)
from ._display import property_address, property_type_label
from .financials import LeaseFinancials, compute_lease_financials
from .model import (
    Clause,
    ContractDocument,
    DocumentArtifact,
    SignatureLine,
    SummaryTable,
    TableRow,
)

logger = logging.getLogger(__name__)

CONTRACT_TITLE = "CONTRATO DE LOCAÇÃO DE IMÓVEL"
NO_RESIDENTS_LINE = "Nenhum morador adicional declarado."
ADDRESS_FILL_IN = "____________________________________________"

# Clause titles, in contract order
OBJECT_CLAUSE = "DO OBJETO"
TERM_CLAUSE = "DO PRAZO"
RENT_CLAUSE = "DO ALUGUEL E ENCARGOS"
RESIDENTS_CLAUSE = "DOS MORADORES"
WARRANTY_CLAUSE = "DA GARANTIA"
CONSERVATION_CLAUSE = "DA CONSERVAÇÃO DO IMÓVEL"
TERMINATION_CLAUSE = "DA RESCISÃO"
JURISDICTION_CLAUSE = "DO FORO"

# Table labels
RENT_LABEL = "Aluguel"
CONDO_LABEL = "Condomínio"
FIRE_INSURANCE_LABEL = "Seguro Incêndio"
PROPERTY_TAX_LABEL = "IPTU"
SERVICE_FEE_LABEL = "Taxa de Serviço"
TOTAL_LABEL = "Total Mensal"
START_LABEL = "Início"
END_LABEL = "Término"
ADDRESS_LABEL = "Endereço"
CONDITION_LABEL = "Estado do Imóvel"

INSURANCE_WARRANTY_TEXT = (
    "A presente locação é garantida por seguro fiança locatício, nos termos do "
    "art. 37, inciso III, da Lei nº 8.245/91, obrigando-se o LOCATÁRIO a "
    "contratar e manter vigente a respectiva apólice durante todo o prazo da "
    "locação e de suas eventuais prorrogações."
)


def split_residents(residents: Optional[str]) -> List[str]:
    """One trimmed entry per non-blank line of the free-text resident list."""
    if not residents:
        return []
    return [line.strip() for line in residents.splitlines() if line.strip()]


def condo_variation_tag(lease: LeaseRecord) -> str:
    variation = lease.condo_variation or CondoVariationEnum.FIXED
    return variation.value


def resolve_end_date(lease: LeaseRecord) -> Optional[date]:
    """
    The lease end date; derived as start + duration when only those two are
    recorded. None when the derived date falls outside the calendar range.
    """
    end = parse_iso_date(lease.end_date)
    if end is not None:
        return end
    start = parse_iso_date(lease.start_date)
    if start is None or not lease.duration_months:
        return None
    try:
        return start + relativedelta(months=lease.duration_months)
    except (ValueError, OverflowError):
        logger.debug(
            f"End date of {start} + {lease.duration_months} months is out of range"
        )
        return None


def _warranty_clause(
    number: int, lease: LeaseRecord, financials: LeaseFinancials, settings: GlobalSettings
) -> Clause:
    if lease.warranty_type == WarrantyTypeEnum.INSURANCE_BACKED:
        return Clause(
            number=number,
            title=WARRANTY_CLAUSE,
            paragraphs=[INSURANCE_WARRANTY_TEXT],
        )

    deposit = format_currency(financials.deposit_amount, settings.formatting)
    return Clause(
        number=number,
        title=WARRANTY_CLAUSE,
        paragraphs=[
            "Como garantia das obrigações assumidas, o LOCATÁRIO entrega ao "
            f"LOCADOR, a título de caução, a importância de {deposit}, "
            "correspondente a dois aluguéis, nos termos do art. 38, § 2º, da "
            "Lei nº 8.245/91."
        ],
        sub_paragraphs=[
            "Parágrafo Primeiro: Havendo débitos ao término da locação, o "
            "LOCADOR poderá utilizar a caução para quitá-los independentemente "
            "de notificação judicial ou extrajudicial.",
            "Parágrafo Segundo: A caução não exime o LOCATÁRIO de sua "
            "responsabilidade por aluguéis, encargos e danos ao imóvel, que "
            "subsiste até a efetiva entrega das chaves.",
        ],
    )


def _build_clauses(
    lease: LeaseRecord,
    property_record: Optional[PropertyRecord],
    financials: LeaseFinancials,
    settings: GlobalSettings,
) -> List[Clause]:
    fmt = settings.formatting
    money = partial(format_currency, settings=fmt)

    type_label = property_type_label(property_record)
    address = property_address(property_record, lease.property_reference, fmt)
    usage = (
        "comerciais"
        if property_record is not None
        and property_record.type == PropertyTypeEnum.COMMERCIAL
        else "residenciais"
    )
    duration = (
        f"{lease.duration_months} meses" if lease.duration_months else fmt.placeholder
    )
    start = format_date(lease.start_date, fmt)
    end = format_date(resolve_end_date(lease), fmt)
    due_day = lease.payment_due_day or settings.contract.default_due_day
    condition = display_text(lease.property_condition, fmt)
    residents = split_residents(lease.residents) or [NO_RESIDENTS_LINE]
    forum_city = (
        (property_record.city or "").strip() if property_record is not None else ""
    ) or settings.contract.signing_city

    sections = [
        lambda n: Clause(
            number=n,
            title=OBJECT_CLAUSE,
            paragraphs=[
                f"O LOCADOR dá em locação ao LOCATÁRIO o imóvel do tipo "
                f"{type_label}, situado em {address}, destinado exclusivamente "
                f"a fins {usage}."
            ],
        ),
        lambda n: Clause(
            number=n,
            title=TERM_CLAUSE,
            paragraphs=[
                f"A locação terá prazo de {duration}, com início em {start} e "
                f"término em {end}, data em que o LOCATÁRIO se obriga a "
                "restituir o imóvel livre e desocupado."
            ],
        ),
        lambda n: Clause(
            number=n,
            title=RENT_CLAUSE,
            paragraphs=[
                f"O aluguel mensal é de {money(financials.monthly_rent)}, "
                "acrescido dos encargos discriminados no quadro de valores "
                f"mensais, totalizando {money(financials.total_monthly_charge)} "
                f"por mês, com vencimento todo dia {due_day} de cada mês."
            ],
            sub_paragraphs=[
                "Parágrafo Único: O condomínio está classificado como "
                f"\"{condo_variation_tag(lease)}\", e eventuais variações "
                "serão repassadas ao LOCATÁRIO no mês de sua cobrança."
            ],
        ),
        lambda n: Clause(
            number=n,
            title=RESIDENTS_CLAUSE,
            paragraphs=["Além do LOCATÁRIO, residirão no imóvel:"],
            items=residents,
        ),
        lambda n: _warranty_clause(n, lease, financials, settings),
        lambda n: Clause(
            number=n,
            title=CONSERVATION_CLAUSE,
            paragraphs=[
                "O LOCATÁRIO declara ter vistoriado o imóvel e recebê-lo no "
                f"seguinte estado: {condition}, obrigando-se a restituí-lo nas "
                "mesmas condições, ressalvado o desgaste natural pelo uso normal."
            ],
        ),
        lambda n: Clause(
            number=n,
            title=TERMINATION_CLAUSE,
            paragraphs=[
                "Em caso de devolução antecipada do imóvel, o LOCATÁRIO pagará "
                "multa equivalente a três aluguéis, proporcional ao período "
                "restante do contrato, conforme o art. 4º da Lei nº 8.245/91."
            ],
        ),
        lambda n: Clause(
            number=n,
            title=JURISDICTION_CLAUSE,
            paragraphs=[
                f"Fica eleito o foro da comarca de {forum_city} para dirimir "
                "quaisquer questões oriundas deste contrato."
            ],
        ),
    ]
    return [build(number) for number, build in enumerate(sections, start=1)]


def assemble_contract(
    lease: LeaseRecord,
    property_record: Optional[PropertyRecord] = None,
    settings: Optional[GlobalSettings] = None,
    generated_on: Optional[date] = None,
) -> ContractDocument:
    """
    Assemble the structured contract for a lease.

    Args:
        lease: Lease snapshot, read-only
        property_record: Resolved property, or None when the reference
            matched nothing
        settings: Formatting and contract defaults
        generated_on: Date printed on the place/date line (defaults to today)

    Returns:
        ContractDocument with tables, numbered clauses and signature lines
    """
    settings = settings or GlobalSettings()
    generated_on = generated_on or date.today()
    fmt = settings.formatting
    money = partial(format_currency, settings=fmt)

    financials = compute_lease_financials(lease, property_record)
    tenant_name = display_text(lease.tenant_name, fmt)
    landlord_name = display_text(lease.landlord_name, fmt)
    due_day = lease.payment_due_day or settings.contract.default_due_day

    parties = SummaryTable(
        title="QUALIFICAÇÃO DAS PARTES",
        rows=[
            TableRow(label="Locador", value=landlord_name),
            TableRow(label="CPF/CNPJ do Locador", value=display_text(lease.landlord_tax_id, fmt)),
            TableRow(label="Locatário", value=tenant_name),
            TableRow(label="CPF do Locatário", value=display_text(lease.tenant_tax_id, fmt)),
            TableRow(
                label="Endereço do Locatário",
                value=(lease.tenant_address or "").strip() or ADDRESS_FILL_IN,
            ),
            TableRow(label="Administradora", value=settings.contract.brokerage_name),
        ],
    )

    property_info = SummaryTable(
        title="INFORMAÇÕES DO IMÓVEL",
        rows=[
            TableRow(label="Tipo", value=property_type_label(property_record)),
            TableRow(
                label=ADDRESS_LABEL,
                value=property_address(property_record, lease.property_reference, fmt),
            ),
            TableRow(label=CONDITION_LABEL, value=display_text(lease.property_condition, fmt)),
            TableRow(
                label="Prazo",
                value=f"{lease.duration_months} meses" if lease.duration_months else fmt.placeholder,
            ),
            TableRow(label=START_LABEL, value=format_date(lease.start_date, fmt)),
            TableRow(label=END_LABEL, value=format_date(resolve_end_date(lease), fmt)),
            TableRow(label="Vencimento", value=f"Todo dia {due_day}"),
            TableRow(label="Garantia", value=lease.warranty_type.value),
        ],
    )

    charges = SummaryTable(
        title="VALORES MENSAIS",
        rows=[
            TableRow(label=RENT_LABEL, value=money(financials.monthly_rent)),
            TableRow(
                label=f"{CONDO_LABEL} [{condo_variation_tag(lease)}]",
                value=money(financials.condo_fee),
            ),
            TableRow(label=FIRE_INSURANCE_LABEL, value=money(financials.fire_insurance)),
            TableRow(label=PROPERTY_TAX_LABEL, value=money(financials.property_tax)),
            TableRow(label=SERVICE_FEE_LABEL, value=money(financials.service_fee)),
            TableRow(
                label=TOTAL_LABEL,
                value=money(financials.total_monthly_charge),
                emphasis=True,
            ),
        ],
    )

    return ContractDocument(
        title=CONTRACT_TITLE,
        parties=parties,
        property_info=property_info,
        charges=charges,
        clauses=_build_clauses(lease, property_record, financials, settings),
        place_and_date=(
            f"{settings.contract.signing_city}, {format_long_date(generated_on)}."
        ),
        signatures=[
            SignatureLine(role="LOCADOR", name=(lease.landlord_name or "").strip()),
            SignatureLine(role="LOCATÁRIO", name=(lease.tenant_name or "").strip()),
            SignatureLine(role="TESTEMUNHA 1"),
            SignatureLine(role="TESTEMUNHA 2"),
        ],
        tenant_name=tenant_name,
    )


def generate_lease_contract_document(
    lease: LeaseRecord,
    properties: Iterable[PropertyRecord],
    settings: Optional[GlobalSettings] = None,
    generated_on: Optional[date] = None,
) -> DocumentArtifact:
    """
    Resolve, assemble and render a lease contract.

    Pure with respect to its inputs: identical records and an identical
    ``generated_on`` produce byte-identical markup.

    Example:
        ```python
        artifact = generate_lease_contract_document(lease, properties)
        download_as_word_document(artifact)
        ```
    """
    # Import at runtime to avoid circular dependencies
    from ..reporting.renderer import ContractRenderer  # noqa: PLC0415

    property_record = resolve_property(lease.property_reference, properties)
    if property_record is None:
        logger.info(
            f"Property {lease.property_reference!r} not found; "
            "generating contract with reference fallbacks"
        )

    document = assemble_contract(lease, property_record, settings, generated_on)
    html = ContractRenderer().render(document)
    return DocumentArtifact(
        kind=DocumentKindEnum.LEASE_CONTRACT,
        title=document.title,
        html=html,
        file_stem=file_stem(lease.tenant_name),
    )
