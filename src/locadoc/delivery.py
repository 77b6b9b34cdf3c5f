# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Document delivery.

The two terminal side effects offered on a generated artifact:

- download mode writes a word-processor compatible ``.doc`` file (HTML with
  a UTF-8 byte order mark, which word processors open as a document);
- print mode opens the document in the browser with a script that raises
  the print dialog and closes the window afterwards.

Failures here are delivery errors, distinct from generation: the generators
themselves never raise.
"""

from __future__ import annotations

import logging
import tempfile
import webbrowser
from pathlib import Path
from typing import Callable, Optional, Union

from .documents.model import DocumentArtifact
from .utils.formatting import file_stem

logger = logging.getLogger(__name__)

WORD_MIME_TYPE = "application/msword"
BYTE_ORDER_MARK = "\ufeff"
PRINT_SCRIPT = (
    "<script>window.onload = function () { window.print(); "
    "window.onafterprint = function () { window.close(); }; };</script>"
)


class DeliveryError(RuntimeError):
    """Raised when a generated document cannot be saved or printed."""


def word_document_name(artifact: DocumentArtifact, seed: Optional[str] = None) -> str:
    """Suggested file name, e.g. ``Contrato_Maria_Souza.doc``."""
    stem = file_stem(seed) if seed is not None else artifact.file_stem
    return f"{artifact.file_prefix}_{stem}.doc"


def word_document_bytes(artifact: DocumentArtifact) -> bytes:
    return (BYTE_ORDER_MARK + artifact.html).encode("utf-8")


def download_as_word_document(
    artifact: DocumentArtifact,
    seed: Optional[str] = None,
    directory: Union[str, Path, None] = None,
) -> Path:
    """
    Save the artifact as a ``.doc`` file.

    Args:
        artifact: Generated document
        seed: Name to derive the file name from (defaults to the artifact's
            tenant/beneficiary stem)
        directory: Target directory (defaults to the working directory)

    Returns:
        Path of the written file

    Raises:
        DeliveryError: If the file cannot be written
    """
    target_dir = Path(directory) if directory is not None else Path.cwd()
    target = target_dir / word_document_name(artifact, seed)
    try:
        target_dir.mkdir(parents=True, exist_ok=True)
        target.write_bytes(word_document_bytes(artifact))
    except OSError as exc:
        raise DeliveryError(f"Could not save {target}: {exc}") from exc

    logger.info(f"Saved {artifact.kind.value} document to {target}")
    return target


def printable_html(artifact: DocumentArtifact) -> str:
    """The artifact markup with the print-on-load script injected."""
    html = artifact.html
    marker = "</body>"
    index = html.rfind(marker)
    if index == -1:
        return html + PRINT_SCRIPT
    return html[:index] + PRINT_SCRIPT + "\n" + html[index:]


def print_document(
    artifact: DocumentArtifact,
    opener: Callable[[str], bool] = webbrowser.open,
    directory: Union[str, Path, None] = None,
) -> Path:
    """
    Open the artifact in a new browser context and invoke the print dialog.

    The printable copy is written to a temporary HTML file that the browser
    loads; dismissing the dialog is a normal outcome and is not reported.
    The file stays behind for the browser to read; it is removed only when
    no browser could be opened.

    Raises:
        DeliveryError: If the file cannot be written or no browser opens it
    """
    try:
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            suffix=".html",
            prefix=f"{artifact.file_prefix}_{artifact.file_stem}_",
            dir=directory,
            delete=False,
        ) as handle:
            handle.write(printable_html(artifact))
            path = Path(handle.name)
    except OSError as exc:
        raise DeliveryError(f"Could not prepare document for printing: {exc}") from exc

    if not opener(path.as_uri()):
        path.unlink(missing_ok=True)
        raise DeliveryError(f"No browser available to print {path}")

    logger.info(f"Opened {path} for printing")
    return path
