from __future__ import annotations

import asyncio
import io
import logging
import re
from dataclasses import dataclass
from typing import Sequence, Union

from docx import Document
from docx.shared import Inches
from PIL import Image

from cia.domain.enums import ExportFailureKind
from cia.features.figures.gallery import decode_data_url

logger = logging.getLogger(__name__)

DOCX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

# 360 x 240 px at 96 dpi.
IMAGE_WIDTH = Inches(3.75)
IMAGE_HEIGHT = Inches(2.5)

_WS_RE = re.compile(r"\s+")


@dataclass(frozen=True)
class TableSpec:
    header: tuple[str, ...]
    rows: Sequence[tuple[str, ...]]
    heading: str | None = None


@dataclass(frozen=True)
class ImageBlock:
    caption: str
    data_url: str


@dataclass(frozen=True)
class DocxRequest:
    title: str
    filename: str
    body_lines: Sequence[str] = ()
    table: TableSpec | None = None
    closing_heading: str | None = None
    closing_lines: Sequence[str] = ()
    images_heading: str | None = None
    images: Sequence[ImageBlock] = ()


@dataclass(frozen=True)
class ExportSuccess:
    filename: str
    content: bytes
    media_type: str = DOCX_MEDIA_TYPE


@dataclass(frozen=True)
class ExportFailure:
    kind: ExportFailureKind
    message: str


ExportResult = Union[ExportSuccess, ExportFailure]


def export_filename(*parts: str) -> str:
    """Join `parts` with "_" and collapse whitespace runs to "_"."""

    stem = "_".join(_WS_RE.sub("_", p) for p in parts)
    return f"{stem}.docx"


def _decode_image(data_url: str) -> bytes:
    data = decode_data_url(data_url)
    with Image.open(io.BytesIO(data)) as im:
        im.verify()
    return data


def _build(req: DocxRequest) -> bytes:
    # Decode every image before creating the document so a bad payload fails fast.
    images = [(img.caption, _decode_image(img.data_url)) for img in req.images]

    doc = Document()
    doc.add_heading(req.title, level=0)

    for line in req.body_lines:
        doc.add_paragraph(line)

    if req.table is not None:
        if req.table.heading:
            doc.add_heading(req.table.heading, level=2)
        table = doc.add_table(rows=1, cols=len(req.table.header))
        table.style = "Table Grid"
        for cell, text in zip(table.rows[0].cells, req.table.header):
            cell.text = text
        for row in req.table.rows:
            if len(row) != len(req.table.header):
                raise ValueError(f"table row has {len(row)} cells, expected {len(req.table.header)}")
            for cell, text in zip(table.add_row().cells, row):
                cell.text = text

    if req.closing_heading:
        doc.add_heading(req.closing_heading, level=2)
    for line in req.closing_lines:
        doc.add_paragraph(line)

    if req.images_heading is not None:
        doc.add_heading(req.images_heading, level=2)
    for caption, data in images:
        doc.add_heading(caption, level=3)
        doc.add_paragraph().add_run().add_picture(io.BytesIO(data), width=IMAGE_WIDTH, height=IMAGE_HEIGHT)

    buf = io.BytesIO()
    doc.save(buf)
    return buf.getvalue()


async def export_docx(req: DocxRequest) -> ExportResult:
    """Serialize `req` to a DOCX blob.

    All-or-nothing: the whole document is built in memory off the event loop and
    only a complete blob is returned. Any failure comes back as ExportFailure.
    """

    try:
        content = await asyncio.to_thread(_build, req)
    except Exception as e:
        logger.warning("DOCX export failed for %s: %s", req.filename, e, exc_info=True)
        return ExportFailure(kind=ExportFailureKind.serialization_failure, message=str(e) or type(e).__name__)

    logger.info("Exported %s (%d bytes)", req.filename, len(content))
    return ExportSuccess(filename=req.filename, content=content)
