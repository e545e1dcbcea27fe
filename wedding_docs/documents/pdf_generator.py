"""Function Sheet PDF orchestrator."""

import logging
from collections.abc import Awaitable, Callable, Iterable
from datetime import datetime

from wedding_docs.core.config import settings
from wedding_docs.core.exceptions import RenderFailedError
from wedding_docs.core.observability import observe
from wedding_docs.documents.blocks import long_date, timestamp
from wedding_docs.documents.emptiness import get_section_data, should_include_section
from wedding_docs.documents.pdf_canvas import (
    FOOTER_RGB,
    MARGIN_MM,
    PAGE_WIDTH_MM,
    TONE_RGB,
    PdfCanvas,
    ReportlabBackend,
    reportlab_backend,
)
from wedding_docs.documents.registry import SECTION_RENDERERS
from wedding_docs.documents.schemas import DocumentBranding, FunctionSheetData
from wedding_docs.documents.sections import SECTION_LABELS, DocumentSection, dedupe_sections

logger = logging.getLogger(__name__)

PdfBackendFactory = Callable[[], Awaitable[ReportlabBackend]]

SECTION_GAP_MM = 10


def draw_logo(pdf: PdfCanvas, branding: DocumentBranding) -> bool:
    """Draw the logo in the top-right corner. A bad logo is logged and skipped."""
    if branding.logo is None:
        return False
    try:
        pdf.draw_image(branding.logo_bytes(), PAGE_WIDTH_MM - 50, 10, 40, 20)
    except Exception as e:
        logger.warning("Failed to add logo to PDF, continuing without it: %s", e)
        return False
    return True


def draw_header(
    pdf: PdfCanvas,
    data: FunctionSheetData,
    branding: DocumentBranding,
    generated_at: datetime,
) -> float:
    wedding = data.wedding
    draw_logo(pdf, branding)
    pdf.draw_text(settings.document_title, MARGIN_MM, 20, size=24, rgb=branding.rgb)
    pdf.draw_text(wedding.couple, MARGIN_MM, 30, size=16)
    pdf.draw_text(long_date(wedding.wedding_date), MARGIN_MM, 38, size=12)

    y = 45.0
    if wedding.venue_name:
        pdf.draw_text(wedding.venue_name, MARGIN_MM, y, size=10, rgb=TONE_RGB["muted"])
        y += 5
    for line in branding.contact_lines():
        pdf.draw_text(line, MARGIN_MM, y, size=9, rgb=TONE_RGB["muted"])
        y += 5
    y += 2
    pdf.draw_text(f"Generated: {timestamp(generated_at)}", MARGIN_MM, y, size=8, rgb=FOOTER_RGB)
    return y + 8


def draw_section_header(pdf: PdfCanvas, label: str, rgb: tuple[int, int, int], y: float) -> float:
    pdf.draw_rule(y, rgb)
    pdf.draw_text(label, MARGIN_MM, y + 8, size=14, rgb=rgb)
    return y + 15


@observe(name="generate_pdf")
async def generate_pdf(
    data: FunctionSheetData,
    branding: DocumentBranding,
    sections: Iterable[DocumentSection | str],
    *,
    backend_factory: PdfBackendFactory = reportlab_backend,
    generated_at: datetime | None = None,
) -> bytes:
    """Render the Function Sheet as PDF bytes.

    Sections print in the given order, duplicates dropped and empty
    sections skipped. Any renderer or reportlab failure is raised as
    ``RenderFailedError``.
    """
    try:
        backend = await backend_factory()
        pdf = PdfCanvas(backend)
        y = draw_header(pdf, data, branding, generated_at or datetime.now())
    except Exception as e:
        raise RenderFailedError("pdf") from e

    rendered = 0
    for section in dedupe_sections(sections):
        if not should_include_section(get_section_data(section, data)):
            logger.debug("Skipping empty section %s", section.value)
            continue
        try:
            y = pdf.break_if_low(y)
            y = draw_section_header(pdf, SECTION_LABELS[section], branding.rgb, y)
            y = SECTION_RENDERERS[section].render_pdf(pdf, data, branding, y)
        except Exception as e:
            logger.error("PDF section %s failed: %s", section.value, e)
            raise RenderFailedError("pdf", section.value) from e
        y += SECTION_GAP_MM
        rendered += 1

    try:
        content = pdf.save()
    except Exception as e:
        raise RenderFailedError("pdf") from e

    logger.info(
        "Rendered PDF for wedding %s: %d sections, %d pages, %d bytes",
        data.wedding.id,
        rendered,
        pdf.page_count,
        len(content),
    )
    return content
