# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Unit tests for download and print delivery of generated documents."""

import pytest

from locadoc.core.primitives import DocumentKindEnum
from locadoc.delivery import (
    PRINT_SCRIPT,
    DeliveryError,
    download_as_word_document,
    print_document,
    printable_html,
    word_document_name,
)
from locadoc.documents import DocumentArtifact, generate_lease_contract_document
from tests.conftest import GENERATED_ON, create_lease


@pytest.fixture
def artifact(properties):
    return generate_lease_contract_document(create_lease(), properties, generated_on=GENERATED_ON)


class TestWordDocumentName:
    def test_contract_name(self, artifact):
        assert word_document_name(artifact) == "Contrato_Maria_Souza.doc"

    def test_seed_override(self, artifact):
        assert word_document_name(artifact, seed="José da Silva") == "Contrato_José_da_Silva.doc"

    def test_income_report_prefix(self):
        report = DocumentArtifact(
            kind=DocumentKindEnum.INCOME_REPORT,
            title="Informe",
            html="<html></html>",
            file_stem="Carlos_Lima",
        )
        assert word_document_name(report) == "Informe_Carlos_Lima.doc"


class TestDownload:
    def test_writes_bom_prefixed_markup(self, artifact, tmp_path):
        path = download_as_word_document(artifact, directory=tmp_path)

        assert path == tmp_path / "Contrato_Maria_Souza.doc"
        content = path.read_bytes()
        assert content.startswith(b"\xef\xbb\xbf")
        assert content[3:].decode("utf-8") == artifact.html

    def test_creates_missing_directory(self, artifact, tmp_path):
        path = download_as_word_document(artifact, directory=tmp_path / "out" / "2026")
        assert path.exists()

    def test_unwritable_target_raises_delivery_error(self, artifact, tmp_path):
        blocker = tmp_path / "not_a_directory"
        blocker.write_text("x")

        with pytest.raises(DeliveryError, match="Could not save"):
            download_as_word_document(artifact, directory=blocker)


class TestPrint:
    def test_script_injected_before_body_close(self, artifact):
        html = printable_html(artifact)

        assert PRINT_SCRIPT in html
        assert html.index(PRINT_SCRIPT) < html.rindex("</body>")
        assert "window.print()" in html

    def test_markup_without_body_gets_script_appended(self):
        bare = DocumentArtifact(
            kind=DocumentKindEnum.LEASE_CONTRACT, title="x", html="<p>x</p>", file_stem="x"
        )
        assert printable_html(bare) == "<p>x</p>" + PRINT_SCRIPT

    def test_opens_printable_copy(self, artifact, tmp_path):
        opened = []

        def opener(url):
            opened.append(url)
            return True

        path = print_document(artifact, opener=opener, directory=tmp_path)

        assert opened == [path.as_uri()]
        assert path.parent == tmp_path
        assert path.name.startswith("Contrato_Maria_Souza_")
        assert PRINT_SCRIPT in path.read_text(encoding="utf-8")

    def test_no_browser_raises_delivery_error(self, artifact, tmp_path):
        with pytest.raises(DeliveryError, match="No browser"):
            print_document(artifact, opener=lambda url: False, directory=tmp_path)

        assert list(tmp_path.iterdir()) == []
