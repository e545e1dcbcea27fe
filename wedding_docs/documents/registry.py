"""Renderer pair for every document section.

Each pair owns one content builder and two thin adapters that lay the
same blocks out on the PDF canvas and in the DOCX document. The registry
must cover every ``DocumentSection``; a gap is a programming error and
fails at import.
"""

from dataclasses import dataclass

from wedding_docs.documents.blocks import Block
from wedding_docs.documents.content import CONTENT_BUILDERS, ContentBuilder
from wedding_docs.documents.docx_builder import DocxBuilder
from wedding_docs.documents.pdf_canvas import PdfCanvas
from wedding_docs.documents.schemas import DocumentBranding, FunctionSheetData
from wedding_docs.documents.sections import DocumentSection


@dataclass(frozen=True)
class RendererPair:
    section: DocumentSection
    build: ContentBuilder

    def blocks(self, data: FunctionSheetData, branding: DocumentBranding) -> list[Block]:
        return self.build(data, branding)

    def render_pdf(
        self,
        canvas: PdfCanvas,
        data: FunctionSheetData,
        branding: DocumentBranding,
        y: float,
    ) -> float:
        """Draw the section at cursor ``y`` and return the new cursor."""
        return canvas.draw_blocks(self.blocks(data, branding), branding.rgb, y)

    async def render_docx(
        self,
        builder: DocxBuilder,
        data: FunctionSheetData,
        branding: DocumentBranding,
        position: float | None = None,
    ) -> list:
        """Append the section to the document; ``position`` is ignored."""
        return builder.add_blocks(self.blocks(data, branding), branding.hex_digits)


SECTION_RENDERERS: dict[DocumentSection, RendererPair] = {
    section: RendererPair(section, build) for section, build in CONTENT_BUILDERS.items()
}

_missing = [s.value for s in DocumentSection if s not in SECTION_RENDERERS]
if _missing:
    raise RuntimeError(f"No renderer registered for sections: {', '.join(_missing)}")


def get_renderer(section: DocumentSection) -> RendererPair:
    return SECTION_RENDERERS[section]
