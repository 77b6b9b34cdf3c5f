# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Base rendering classes for document serialization.

Renderers turn assembled, already-formatted document structures into one
self-contained markup file. They only serialize; they never calculate.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from functools import lru_cache
from typing import Any, ClassVar, Dict, Optional, Type

from jinja2 import Environment, PackageLoader, StrictUndefined, select_autoescape
from pydantic import Field

from ..core.primitives import Model


class DocumentStyle(Model):
    """
    Inline styling applied to generated documents.

    Styles are embedded in the document head so the artifact opens the same
    way in a browser, a print dialog or a word processor.
    """

    font_family: str = "Arial, sans-serif"
    font_size_pt: int = Field(default=11, gt=0)
    heading_size_pt: int = Field(default=14, gt=0)
    line_height: float = Field(default=1.5, gt=0)
    accent_color: str = "#4A5D23"
    margin_px: int = Field(default=20, ge=0)


@lru_cache(maxsize=1)
def template_environment() -> Environment:
    """Shared Jinja2 environment loading the packaged templates."""
    return Environment(
        loader=PackageLoader("locadoc", "reporting/templates"),
        autoescape=select_autoescape(enabled_extensions=("html", "j2")),
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )


class BaseRenderer(ABC):
    """
    Abstract base class for document renderers.

    Subclasses name their template and the document type they accept, and
    supply the template variables through ``context``.
    Rendering is deterministic: identical documents yield identical markup.
    """

    template_name: ClassVar[str]
    document_type: ClassVar[Type[Model]]

    def __init__(
        self,
        style: Optional[DocumentStyle] = None,
        environment: Optional[Environment] = None,
    ):
        self.style = style or DocumentStyle()
        self._environment = environment or template_environment()

    def render(self, document: Any) -> str:
        """Serialize the document into a complete HTML string."""
        if not isinstance(document, self.document_type):
            raise TypeError(
                f"{type(self).__name__} requires a {self.document_type.__name__} object"
            )
        template = self._environment.get_template(self.template_name)
        return template.render(**self.context(document), style=self.style)

    @abstractmethod
    def context(self, document: Any) -> Dict[str, Any]:
        """Template variables for an already type-checked document."""
