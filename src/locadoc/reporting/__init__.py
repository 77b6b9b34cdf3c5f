# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
locadoc Reporting Module

Markup serialization of assembled documents. Renderers are normally driven
through ``locadoc.documents.generate_*``; they are exported here for custom
styling:

    html = ContractRenderer(style=DocumentStyle(font_size_pt=12)).render(document)
"""

from .base import BaseRenderer, DocumentStyle, template_environment
from .renderer import ContractRenderer, IncomeReportRenderer

__all__ = [
    # Base classes for custom renderers
    "BaseRenderer",
    "DocumentStyle",
    "template_environment",
    # Document renderers
    "ContractRenderer",
    "IncomeReportRenderer",
]
