# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from .formatting import (
    MONTH_NAMES,
    display_text,
    file_stem,
    format_currency,
    format_date,
    format_long_date,
    parse_iso_date,
    to_money,
)

__all__ = [
    "MONTH_NAMES",
    "display_text",
    "file_stem",
    "format_currency",
    "format_date",
    "format_long_date",
    "parse_iso_date",
    "to_money",
]
