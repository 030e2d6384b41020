import asyncio
import io

from docx import Document

from cia.domain.enums import ExportFailureKind, ExportKind
from cia.features.exports.docx_v1 import (
    DocxRequest,
    ExportFailure,
    ExportSuccess,
    ImageBlock,
    TableSpec,
    export_docx,
    export_filename,
)
from cia.features.exports.service import ExportsService
from cia.features.figures.gallery import PLACEHOLDER_DATA_URL
from cia.features.session.state import new_session, with_figure_selected

PROJECT = "Te Awa Industrial Upgrade - Stage 2"


def _open(result: ExportSuccess):
    return Document(io.BytesIO(result.content))


def test_export_filename_collapses_whitespace() -> None:
    assert export_filename("CIA_Mana_Whenua", PROJECT) == "CIA_Mana_Whenua_Te_Awa_Industrial_Upgrade_-_Stage_2.docx"
    assert export_filename("Cultural Monitoring  Programme", "A\tB") == "Cultural_Monitoring_Programme_A_B.docx"


def test_export_builds_title_paragraphs_table_and_images() -> None:
    req = DocxRequest(
        title="Report",
        filename="Report.docx",
        body_lines=["first", "", "third"],
        table=TableSpec(heading="Timeline", header=("A", "B"), rows=[("1", "2"), ("3", "4")]),
        images_heading="Figures",
        images=[ImageBlock(caption="Figure 1", data_url=PLACEHOLDER_DATA_URL)],
    )

    result = asyncio.run(export_docx(req))

    assert isinstance(result, ExportSuccess)
    assert result.filename == "Report.docx"
    doc = _open(result)
    texts = [p.text for p in doc.paragraphs]
    assert texts[:4] == ["Report", "first", "", "third"]
    assert "Figures" in texts and "Figure 1" in texts
    assert len(doc.tables) == 1
    assert [c.text for c in doc.tables[0].rows[0].cells] == ["A", "B"]
    assert len(doc.tables[0].rows) == 3
    assert len(doc.inline_shapes) == 1


def test_malformed_image_payload_fails_without_output() -> None:
    req = DocxRequest(
        title="Report",
        filename="Report.docx",
        body_lines=["ok"],
        images=[ImageBlock(caption="bad", data_url="data:image/png;base64,!!not-base64!!")],
    )

    result = asyncio.run(export_docx(req))

    assert isinstance(result, ExportFailure)
    assert result.kind is ExportFailureKind.serialization_failure


def test_undecodable_image_bytes_fail() -> None:
    req = DocxRequest(
        title="Report",
        filename="Report.docx",
        images=[ImageBlock(caption="bad", data_url="data:image/png;base64,aGVsbG8gd29ybGQ=")],
    )

    assert isinstance(asyncio.run(export_docx(req)), ExportFailure)


def test_non_xml_text_fails() -> None:
    req = DocxRequest(title="Report", filename="Report.docx", body_lines=["bad\x00line"])

    result = asyncio.run(export_docx(req))

    assert isinstance(result, ExportFailure)


def test_ragged_table_row_fails() -> None:
    req = DocxRequest(
        title="Report",
        filename="Report.docx",
        table=TableSpec(header=("A", "B"), rows=[("only one",)]),
    )

    assert isinstance(asyncio.run(export_docx(req)), ExportFailure)


def test_narrative_export_embeds_selected_figures(repository) -> None:
    state = with_figure_selected(new_session(PROJECT), "fig-8", True)

    result = asyncio.run(ExportsService(repository=repository).export(kind=ExportKind.community, state=state))

    assert isinstance(result, ExportSuccess)
    assert result.filename == "CIA_Mana_Whenua_Te_Awa_Industrial_Upgrade_-_Stage_2.docx"
    doc = _open(result)
    texts = [p.text for p in doc.paragraphs]
    assert texts[0] == "CIA_Mana_Whenua"
    assert "## Whakataukī / Context" in texts
    assert "Selected Figures (Inline)" in texts
    assert len(doc.inline_shapes) == 4


def test_monitoring_export_table_matches_derived_rows(repository) -> None:
    state = new_session(PROJECT)

    result = asyncio.run(ExportsService(repository=repository).export(kind=ExportKind.monitoring, state=state))

    assert isinstance(result, ExportSuccess)
    assert result.filename == "Cultural_Monitoring_Programme_Te_Awa_Industrial_Upgrade_-_Stage_2.docx"
    doc = _open(result)
    table = doc.tables[0]
    assert [c.text for c in table.rows[0].cells] == ["Phase", "Monitoring focus", "Role of Cultural Monitor", "Frequency"]
    assert len(table.rows) == 1 + 5
    assert table.rows[-1].cells[1].text == "He Pou Manawa Ora engagement checkpoint"
    assert any(p.text.startswith("• Represent mana whenua") for p in doc.paragraphs)
    assert len(doc.inline_shapes) == 0


def test_request_defaults_produce_title_only_document() -> None:
    req = DocxRequest(title="Bare", filename="Bare.docx")
    assert req.body_lines == () and req.closing_lines == () and req.images == ()

    result = asyncio.run(export_docx(req))

    assert isinstance(result, ExportSuccess)
    doc = _open(result)
    assert [p.text for p in doc.paragraphs] == ["Bare"]
    assert len(doc.tables) == 0
