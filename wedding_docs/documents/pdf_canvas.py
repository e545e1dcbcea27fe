"""Paginated PDF target built directly on a reportlab canvas.

Positions are millimetres measured from the top of an A4 page. The cursor
is always passed in and returned; ``PdfCanvas`` never stores it.
"""

import io
import logging
from dataclasses import dataclass
from typing import Any

from wedding_docs.documents.blocks import Block, FieldList, Subheading, Table, TextLine

logger = logging.getLogger(__name__)

PAGE_WIDTH_MM = 210.0
PAGE_HEIGHT_MM = 297.0
MARGIN_MM = 20.0
CONTENT_WIDTH_MM = PAGE_WIDTH_MM - 2 * MARGIN_MM
PAGE_BREAK_THRESHOLD_MM = 250.0
BOTTOM_LIMIT_MM = PAGE_HEIGHT_MM - MARGIN_MM
FIELD_VALUE_X_MM = 60.0

TEXT_RGB = (44, 44, 44)
TONE_RGB = {
    "normal": TEXT_RGB,
    "muted": (100, 100, 100),
    "danger": (220, 53, 69),
    "success": (40, 167, 69),
}
FOOTER_RGB = (150, 150, 150)

_ALIGN = {"left": "LEFT", "center": "CENTER", "right": "RIGHT"}


@dataclass(frozen=True)
class ReportlabBackend:
    """reportlab names the renderer needs, resolved once per document."""

    canvas_class: type
    table_class: type
    table_style_class: type
    colors: Any
    image_reader: type
    split_text: Any
    mm: float
    pagesize: tuple[float, float]


def load_reportlab() -> ReportlabBackend:
    from reportlab.lib import colors
    from reportlab.lib.pagesizes import A4
    from reportlab.lib.units import mm
    from reportlab.lib.utils import ImageReader, simpleSplit
    from reportlab.pdfgen import canvas
    from reportlab.platypus import Table as RLTable
    from reportlab.platypus import TableStyle

    class NumberedCanvas(canvas.Canvas):
        """Buffers finished pages and stamps ``Page N of M`` on save."""

        def __init__(self, *args, **kwargs):
            super().__init__(*args, **kwargs)
            self._saved_page_states: list[dict] = []

        def showPage(self):
            self._saved_page_states.append(dict(self.__dict__))
            self._startPage()

        def save(self):
            total = len(self._saved_page_states)
            for state in self._saved_page_states:
                self.__dict__.update(state)
                self._draw_page_number(total)
                super().showPage()
            super().save()

        def _draw_page_number(self, total: int) -> None:
            self.saveState()
            self.setFont("Helvetica", 8)
            self.setFillColorRGB(*(c / 255 for c in FOOTER_RGB))
            self.drawCentredString(A4[0] / 2, 10 * mm, f"Page {self._pageNumber} of {total}")
            self.restoreState()

    return ReportlabBackend(
        canvas_class=NumberedCanvas,
        table_class=RLTable,
        table_style_class=TableStyle,
        colors=colors,
        image_reader=ImageReader,
        split_text=simpleSplit,
        mm=mm,
        pagesize=A4,
    )


async def reportlab_backend() -> ReportlabBackend:
    """Default backend factory for ``generate_pdf``."""
    return load_reportlab()


def _font(bold: bool = False, italic: bool = False) -> str:
    if bold and italic:
        return "Helvetica-BoldOblique"
    if bold:
        return "Helvetica-Bold"
    if italic:
        return "Helvetica-Oblique"
    return "Helvetica"


def _line_height(size: float) -> float:
    """Line advance in millimetres for a font size in points."""
    return size * 0.3528 * 1.45


class PdfCanvas:
    def __init__(self, backend: ReportlabBackend) -> None:
        self.backend = backend
        self._buffer = io.BytesIO()
        self._canvas = backend.canvas_class(self._buffer, pagesize=backend.pagesize)
        self.page_count = 1

    # -- coordinates -------------------------------------------------------

    def _x(self, x_mm: float) -> float:
        return x_mm * self.backend.mm

    def _y(self, y_mm: float) -> float:
        return (PAGE_HEIGHT_MM - y_mm) * self.backend.mm

    # -- pagination --------------------------------------------------------

    def new_page(self) -> float:
        self._canvas.showPage()
        self.page_count += 1
        return MARGIN_MM

    def break_if_low(self, y: float) -> float:
        """Start a new page when the cursor is past the section threshold."""
        if y > PAGE_BREAK_THRESHOLD_MM:
            return self.new_page()
        return y

    def ensure_space(self, y: float, needed: float) -> float:
        if y + needed > BOTTOM_LIMIT_MM and y > MARGIN_MM:
            return self.new_page()
        return y

    # -- primitives --------------------------------------------------------

    def draw_text(
        self,
        text: str,
        x: float,
        y: float,
        *,
        size: float = 10,
        bold: bool = False,
        italic: bool = False,
        rgb: tuple[int, int, int] = TEXT_RGB,
    ) -> None:
        self._canvas.setFont(_font(bold, italic), size)
        self._canvas.setFillColorRGB(*(c / 255 for c in rgb))
        self._canvas.drawString(self._x(x), self._y(y), text)

    def draw_rule(self, y: float, rgb: tuple[int, int, int], width: float = 0.5) -> None:
        self._canvas.setStrokeColorRGB(*(c / 255 for c in rgb))
        self._canvas.setLineWidth(width * self.backend.mm)
        self._canvas.line(
            self._x(MARGIN_MM), self._y(y), self._x(PAGE_WIDTH_MM - MARGIN_MM), self._y(y)
        )

    def draw_image(self, data: bytes, x: float, y: float, width: float, height: float) -> None:
        """Draw an image with its top-left corner at (x, y). Raises on bad image data."""
        image = self.backend.image_reader(io.BytesIO(data))
        self._canvas.drawImage(
            image,
            self._x(x),
            self._y(y + height),
            width=width * self.backend.mm,
            height=height * self.backend.mm,
            preserveAspectRatio=True,
            mask="auto",
        )

    def wrap(self, text: str, width_mm: float, size: float, bold: bool = False) -> list[str]:
        lines: list[str] = []
        for paragraph in text.splitlines() or [""]:
            lines.extend(
                self.backend.split_text(paragraph, _font(bold), size, width_mm * self.backend.mm)
                or [""]
            )
        return lines

    def draw_paragraph(
        self,
        text: str,
        y: float,
        *,
        x: float = MARGIN_MM,
        width: float = CONTENT_WIDTH_MM,
        size: float = 10,
        bold: bool = False,
        italic: bool = False,
        rgb: tuple[int, int, int] = TEXT_RGB,
    ) -> float:
        step = _line_height(size)
        for line in self.wrap(text, width, size, bold):
            y = self.ensure_space(y, step)
            self.draw_text(line, x, y, size=size, bold=bold, italic=italic, rgb=rgb)
            y += step
        return y

    # -- blocks ------------------------------------------------------------

    def draw_table(self, table: Table, rgb: tuple[int, int, int], y: float) -> float:
        """Draw ``table`` at the cursor, splitting across pages as needed.

        The header row repeats on every continuation page.
        """
        b = self.backend
        header_size = table.font_size + 1
        widths = [c.width for c in table.columns]

        def cell(value: str, i: int, size: float, bold: bool = False) -> str:
            return "\n".join(self.wrap(value, widths[i] - 3, size, bold))

        data = [[cell(h, i, header_size, True) for i, h in enumerate(table.headers)]]
        data += [[cell(v, i, table.font_size) for i, v in enumerate(row)] for row in table.rows]
        brand = b.colors.Color(*(c / 255 for c in rgb))
        commands = [
            ("GRID", (0, 0), (-1, -1), 0.25, b.colors.Color(0.78, 0.78, 0.78)),
            ("BACKGROUND", (0, 0), (-1, 0), brand),
            ("TEXTCOLOR", (0, 0), (-1, 0), b.colors.white),
            ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
            ("FONTSIZE", (0, 0), (-1, 0), header_size),
            ("FONTNAME", (0, 1), (-1, -1), "Helvetica"),
            ("FONTSIZE", (0, 1), (-1, -1), table.font_size),
            ("TEXTCOLOR", (0, 1), (-1, -1), b.colors.Color(*(c / 255 for c in TEXT_RGB))),
            ("VALIGN", (0, 0), (-1, -1), "TOP"),
            ("TOPPADDING", (0, 0), (-1, -1), 2),
            ("BOTTOMPADDING", (0, 0), (-1, -1), 2),
        ]
        for i, column in enumerate(table.columns):
            commands.append(("ALIGN", (i, 0), (i, -1), _ALIGN[column.align]))
        if table.total_row is not None:
            data.append([cell(v, i, table.font_size, True) for i, v in enumerate(table.total_row)])
            last = len(data) - 1
            commands += [
                ("FONTNAME", (0, last), (-1, last), "Helvetica-Bold"),
                ("BACKGROUND", (0, last), (-1, last), b.colors.Color(0.96, 0.96, 0.96)),
            ]

        flowable = b.table_class(data, colWidths=[w * b.mm for w in widths], repeatRows=1)
        flowable.setStyle(b.table_style_class(commands))
        width = CONTENT_WIDTH_MM * b.mm

        while True:
            available = (BOTTOM_LIMIT_MM - y) * b.mm
            _, height = flowable.wrapOn(self._canvas, width, available)
            if height <= available:
                flowable.drawOn(self._canvas, self._x(MARGIN_MM), self._y(y) - height)
                y += height / b.mm
                break
            parts = flowable.split(width, available)
            if len(parts) < 2:
                if y <= MARGIN_MM:
                    # A single row taller than a page; let it overflow.
                    flowable.drawOn(self._canvas, self._x(MARGIN_MM), self._y(y) - height)
                    y += height / b.mm
                    break
                y = self.new_page()
                continue
            head, rest = parts[0], parts[1]
            _, head_height = head.wrapOn(self._canvas, width, available)
            head.drawOn(self._canvas, self._x(MARGIN_MM), self._y(y) - head_height)
            y = self.new_page()
            flowable = rest
        return y + 5

    def draw_blocks(self, blocks: list[Block], rgb: tuple[int, int, int], y: float) -> float:
        for block in blocks:
            match block:
                case Subheading(text=text):
                    y = self.ensure_space(y, 12)
                    self.draw_text(text, MARGIN_MM, y, size=11, bold=True, rgb=rgb)
                    y += 6
                case TextLine(text=text, tone=tone, bold=bold, italic=italic):
                    size = 9 if tone == "muted" else 10
                    y = self.draw_paragraph(
                        text, y, size=size, bold=bold, italic=italic, rgb=TONE_RGB[tone]
                    )
                    y += 1
                case FieldList(items=items):
                    for label, value in items:
                        y = self.ensure_space(y, 6)
                        self.draw_text(f"{label}:", MARGIN_MM, y, bold=True)
                        y = self.draw_paragraph(
                            value,
                            y,
                            x=FIELD_VALUE_X_MM,
                            width=PAGE_WIDTH_MM - MARGIN_MM - FIELD_VALUE_X_MM,
                        )
                        y += 1
                case Table():
                    y = self.draw_table(block, rgb, y)
        return y

    def save(self) -> bytes:
        # NumberedCanvas only stamps pages that went through showPage.
        self._canvas.showPage()
        self._canvas.save()
        return self._buffer.getvalue()
