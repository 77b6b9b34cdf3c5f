# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Locale-aware display helpers shared by every document.

All helpers are total: absent or malformed input renders as zero (money) or
as the configured placeholder (text and dates), never as an exception.
"""

from __future__ import annotations

import re
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Optional, Union

from ..core.primitives import FormattingSettings

MONTH_NAMES = (
    "Janeiro",
    "Fevereiro",
    "Março",
    "Abril",
    "Maio",
    "Junho",
    "Julho",
    "Agosto",
    "Setembro",
    "Outubro",
    "Novembro",
    "Dezembro",
)

_CENTS = Decimal("0.01")
_ISO_DATE = re.compile(r"^\s*(\d{4})-(\d{2})-(\d{2})")
_NON_ALNUM_RUN = re.compile(r"[\W_]+")

Number = Union[Decimal, int, float, str, None]


def to_money(value: Number) -> Decimal:
    """Coerce any numeric input to a two-decimal ``Decimal``; absent means zero."""
    if value is None:
        return Decimal("0.00")
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
    except InvalidOperation:
        return Decimal("0.00")
    if not amount.is_finite():
        return Decimal("0.00")
    try:
        return amount.quantize(_CENTS, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        # More digits than the decimal context can hold
        return Decimal("0.00")


def format_currency(
    value: Number, settings: Optional[FormattingSettings] = None
) -> str:
    """
    Render a monetary amount with the local currency symbol.

    Example:
        >>> format_currency(2300.5)
        'R$ 2.300,50'
    """
    settings = settings or FormattingSettings()
    amount = to_money(value)
    sign = "-" if amount < 0 else ""
    integer_part, fraction_part = f"{abs(amount):.2f}".split(".")
    grouped = f"{int(integer_part):,}".replace(",", settings.thousands_separator)
    return (
        f"{sign}{settings.currency_symbol} "
        f"{grouped}{settings.decimal_separator}{fraction_part}"
    )


def parse_iso_date(raw: Union[str, date, None]) -> Optional[date]:
    """
    Parse the date part of a raw ISO string such as ``2024-03-01`` or
    ``2024-03-01T00:00:00``. Returns None for absent or malformed input.
    """
    if raw is None:
        return None
    if isinstance(raw, datetime):
        return raw.date()
    if isinstance(raw, date):
        return raw
    match = _ISO_DATE.match(str(raw))
    if match is None:
        return None
    year, month, day = (int(part) for part in match.groups())
    try:
        return date(year, month, day)
    except ValueError:
        return None


def format_date(
    raw: Union[str, date, None], settings: Optional[FormattingSettings] = None
) -> str:
    """Render ``dd/mm/yyyy`` or the placeholder dash."""
    settings = settings or FormattingSettings()
    parsed = parse_iso_date(raw)
    if parsed is None:
        return settings.placeholder
    return f"{parsed.day:02d}/{parsed.month:02d}/{parsed.year:04d}"


def format_long_date(day: date) -> str:
    """Render ``18 de outubro de 2026``."""
    return f"{day.day} de {MONTH_NAMES[day.month - 1].lower()} de {day.year}"


def display_text(
    value: Optional[str], settings: Optional[FormattingSettings] = None
) -> str:
    """Return the trimmed text, or the placeholder when blank."""
    settings = settings or FormattingSettings()
    if value is None:
        return settings.placeholder
    text = str(value).strip()
    return text or settings.placeholder


def file_stem(seed: Optional[str], default: str = "documento") -> str:
    """Collapse runs of non-alphanumeric characters into single underscores."""
    stem = _NON_ALNUM_RUN.sub("_", seed or "").strip("_")
    return stem or default
