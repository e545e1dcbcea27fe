"""Flowed DOCX target built with python-docx.

Blocks become paragraphs and ``Table Grid`` tables appended to one
``Document``. Page layout is left to the word processor.
"""

import io
from dataclasses import dataclass
from typing import Any

from wedding_docs.documents.blocks import Block, FieldList, Subheading, Table, TextLine

TEXT_HEX = "2C2C2C"
TONE_HEX = {
    "normal": TEXT_HEX,
    "muted": "646464",
    "danger": "DC3545",
    "success": "28A745",
}
TOTAL_ROW_FILL = "F5F5F5"
PAGE_MARGIN_MM = 12.7


@dataclass(frozen=True)
class DocxBackend:
    """python-docx names the renderer needs, resolved once per document."""

    document_factory: Any
    Pt: Any
    Mm: Any
    RGBColor: Any
    align: Any
    OxmlElement: Any
    qn: Any


def load_python_docx() -> DocxBackend:
    from docx import Document
    from docx.enum.text import WD_ALIGN_PARAGRAPH
    from docx.oxml import OxmlElement
    from docx.oxml.ns import qn
    from docx.shared import Mm, Pt, RGBColor

    return DocxBackend(
        document_factory=Document,
        Pt=Pt,
        Mm=Mm,
        RGBColor=RGBColor,
        align={
            "left": WD_ALIGN_PARAGRAPH.LEFT,
            "center": WD_ALIGN_PARAGRAPH.CENTER,
            "right": WD_ALIGN_PARAGRAPH.RIGHT,
        },
        OxmlElement=OxmlElement,
        qn=qn,
    )


async def python_docx_backend() -> DocxBackend:
    """Default backend factory for ``generate_docx``."""
    return load_python_docx()


class DocxBuilder:
    def __init__(self, backend: DocxBackend) -> None:
        self.backend = backend
        self.document = backend.document_factory()
        section = self.document.sections[0]
        margin = backend.Mm(PAGE_MARGIN_MM)
        section.top_margin = section.bottom_margin = margin
        section.left_margin = section.right_margin = margin

    def _shade(self, cell, fill_hex: str) -> None:
        b = self.backend
        shd = b.OxmlElement("w:shd")
        shd.set(b.qn("w:val"), "clear")
        shd.set(b.qn("w:color"), "auto")
        shd.set(b.qn("w:fill"), fill_hex)
        cell._tc.get_or_add_tcPr().append(shd)

    def _bottom_border(self, paragraph, color_hex: str) -> None:
        b = self.backend
        borders = b.OxmlElement("w:pBdr")
        bottom = b.OxmlElement("w:bottom")
        bottom.set(b.qn("w:val"), "single")
        bottom.set(b.qn("w:sz"), "6")
        bottom.set(b.qn("w:space"), "1")
        bottom.set(b.qn("w:color"), color_hex)
        borders.append(bottom)
        paragraph._p.get_or_add_pPr().append(borders)

    def paragraph(
        self,
        text: str = "",
        *,
        size: float = 10,
        bold: bool = False,
        italic: bool = False,
        color_hex: str = TEXT_HEX,
        space_before: float = 0,
        space_after: float = 4,
    ):
        b = self.backend
        paragraph = self.document.add_paragraph()
        if text:
            run = paragraph.add_run(text)
            run.font.size = b.Pt(size)
            run.font.bold = bold
            run.font.italic = italic
            run.font.color.rgb = b.RGBColor.from_string(color_hex)
        fmt = paragraph.paragraph_format
        fmt.space_before = b.Pt(space_before)
        fmt.space_after = b.Pt(space_after)
        return paragraph

    def heading(self, label: str, color_hex: str):
        paragraph = self.paragraph(
            label, size=14, bold=True, color_hex=color_hex, space_before=20, space_after=10
        )
        self._bottom_border(paragraph, color_hex)
        return paragraph

    def image(self, data: bytes, width_mm: float):
        """Append a picture paragraph. Raises when python-docx cannot read the image."""
        paragraph = self.document.add_paragraph()
        paragraph.add_run().add_picture(io.BytesIO(data), width=self.backend.Mm(width_mm))
        return paragraph

    def field(self, label: str, value: str):
        b = self.backend
        paragraph = self.paragraph(space_after=2)
        label_run = paragraph.add_run(f"{label}: ")
        label_run.font.bold = True
        label_run.font.size = b.Pt(10)
        value_run = paragraph.add_run(value)
        value_run.font.size = b.Pt(10)
        for run in (label_run, value_run):
            run.font.color.rgb = b.RGBColor.from_string(TEXT_HEX)
        return paragraph

    def table(self, table: Table, color_hex: str):
        b = self.backend
        rows = [*table.rows, table.total_row] if table.total_row is not None else table.rows
        grid = self.document.add_table(rows=1 + len(rows), cols=len(table.columns))
        grid.style = "Table Grid"
        grid.autofit = False

        def fill(cell, value: str, column, *, bold=False, color=TEXT_HEX, size=table.font_size):
            cell.width = b.Mm(column.width)
            paragraph = cell.paragraphs[0]
            paragraph.alignment = b.align[column.align]
            run = paragraph.add_run(value)
            run.font.size = b.Pt(size)
            run.font.bold = bold
            run.font.color.rgb = b.RGBColor.from_string(color)

        for cell, column in zip(grid.rows[0].cells, table.columns):
            fill(cell, column.header, column, bold=True, color="FFFFFF", size=table.font_size + 1)
            self._shade(cell, color_hex)

        for row_index, values in enumerate(rows, start=1):
            is_total = table.total_row is not None and row_index == len(rows)
            for cell, column, value in zip(grid.rows[row_index].cells, table.columns, values):
                fill(cell, value, column, bold=is_total)
                if is_total:
                    self._shade(cell, TOTAL_ROW_FILL)
        return grid

    def add_blocks(self, blocks: list[Block], color_hex: str) -> list:
        """Append ``blocks`` and return the created nodes in document order."""
        nodes: list = []
        for block in blocks:
            match block:
                case Subheading(text=text):
                    nodes.append(
                        self.paragraph(
                            text,
                            size=11,
                            bold=True,
                            color_hex=color_hex,
                            space_before=8,
                            space_after=4,
                        )
                    )
                case TextLine(text=text, tone=tone, bold=bold, italic=italic):
                    nodes.append(
                        self.paragraph(
                            text,
                            size=9 if tone == "muted" else 10,
                            bold=bold,
                            italic=italic,
                            color_hex=TONE_HEX[tone],
                        )
                    )
                case FieldList(items=items):
                    nodes.extend(self.field(label, value) for label, value in items)
                case Table():
                    nodes.append(self.table(block, color_hex))
                    nodes.append(self.paragraph(space_after=4))
        return nodes

    def save(self) -> bytes:
        buffer = io.BytesIO()
        self.document.save(buffer)
        return buffer.getvalue()
