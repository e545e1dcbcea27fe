"""Function Sheet DOCX orchestrator."""

import logging
from collections.abc import Awaitable, Callable, Iterable
from datetime import datetime

from wedding_docs.core.config import settings
from wedding_docs.core.exceptions import RenderFailedError
from wedding_docs.core.observability import observe
from wedding_docs.documents.blocks import long_date, timestamp
from wedding_docs.documents.docx_builder import DocxBackend, DocxBuilder, python_docx_backend
from wedding_docs.documents.emptiness import get_section_data, should_include_section
from wedding_docs.documents.registry import SECTION_RENDERERS
from wedding_docs.documents.schemas import DocumentBranding, FunctionSheetData
from wedding_docs.documents.sections import SECTION_LABELS, DocumentSection, dedupe_sections

logger = logging.getLogger(__name__)

DocxBackendFactory = Callable[[], Awaitable[DocxBackend]]

LOGO_WIDTH_MM = 40


def add_logo(builder: DocxBuilder, branding: DocumentBranding) -> bool:
    """Add the logo above the title. A bad logo is logged and skipped."""
    if branding.logo is None:
        return False
    try:
        builder.image(branding.logo_bytes(), LOGO_WIDTH_MM)
    except Exception as e:
        logger.warning("Failed to add logo to DOCX, continuing without it: %s", e)
        return False
    return True


def add_header(
    builder: DocxBuilder,
    data: FunctionSheetData,
    branding: DocumentBranding,
    generated_at: datetime,
) -> None:
    wedding = data.wedding
    add_logo(builder, branding)
    builder.paragraph(
        settings.document_title, size=24, bold=True, color_hex=branding.hex_digits, space_after=6
    )
    builder.paragraph(wedding.couple, size=16, bold=True, space_after=5)
    builder.paragraph(long_date(wedding.wedding_date), size=12, space_after=5)
    if wedding.venue_name:
        builder.paragraph(wedding.venue_name, size=10, color_hex="666666", space_after=5)
    for line in branding.contact_lines():
        builder.paragraph(line, size=9, color_hex="666666", space_after=3)
    builder.paragraph(
        f"Generated: {timestamp(generated_at)}", size=8, color_hex="999999", space_after=20
    )


@observe(name="generate_docx")
async def generate_docx(
    data: FunctionSheetData,
    branding: DocumentBranding,
    sections: Iterable[DocumentSection | str],
    *,
    backend_factory: DocxBackendFactory = python_docx_backend,
    generated_at: datetime | None = None,
) -> bytes:
    """Render the Function Sheet as DOCX bytes.

    Same section order and emptiness rule as ``generate_pdf``.
    """
    try:
        backend = await backend_factory()
        builder = DocxBuilder(backend)
        add_header(builder, data, branding, generated_at or datetime.now())
    except Exception as e:
        raise RenderFailedError("docx") from e

    node_count = 0
    rendered = 0
    for section in dedupe_sections(sections):
        if not should_include_section(get_section_data(section, data)):
            logger.debug("Skipping empty section %s", section.value)
            continue
        try:
            builder.heading(SECTION_LABELS[section], branding.hex_digits)
            nodes = await SECTION_RENDERERS[section].render_docx(builder, data, branding)
            builder.paragraph(space_after=10)
        except Exception as e:
            logger.error("DOCX section %s failed: %s", section.value, e)
            raise RenderFailedError("docx", section.value) from e
        node_count += len(nodes)
        rendered += 1

    try:
        content = builder.save()
    except Exception as e:
        raise RenderFailedError("docx") from e

    logger.info(
        "Rendered DOCX for wedding %s: %d sections, %d nodes, %d bytes",
        data.wedding.id,
        rendered,
        node_count,
        len(content),
    )
    return content
