"""Document export entry points.

Validates export options, aggregates once, renders one or both formats and
names the results. Nothing is written to disk.
"""

import logging
import re
from datetime import date

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from wedding_docs.core.exceptions import ValidationError
from wedding_docs.core.observability import observe
from wedding_docs.documents.aggregator import aggregate_document_data, aggregate_vendor_brief_data
from wedding_docs.documents.docx_generator import generate_docx
from wedding_docs.documents.pdf_generator import generate_pdf
from wedding_docs.documents.schemas import (
    DocumentFormat,
    FunctionSheetOptions,
    GeneratedDocument,
    VendorBriefOptions,
)
from wedding_docs.documents.vendor_brief import (
    generate_vendor_brief_docx,
    generate_vendor_brief_pdf,
)

logger = logging.getLogger(__name__)

CONTENT_TYPES = {
    "pdf": "application/pdf",
    "docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
}

_INVALID_FILENAME_CHARS = re.compile(r'[<>:"/\\|?*]')


def sanitize_filename(name: str) -> str:
    """Make ``name`` safe as a download filename (without extension)."""
    name = _INVALID_FILENAME_CHARS.sub("-", name)
    name = re.sub(r"\s+", "-", name)
    name = re.sub(r"-+", "-", name)
    return name.strip("-")


def output_formats(fmt: DocumentFormat) -> list[str]:
    return ["pdf", "docx"] if fmt == "both" else [fmt]


def _validate(options, model: type[BaseModel]):
    if isinstance(options, model):
        return options
    try:
        return model.model_validate(options)
    except PydanticValidationError as e:
        raise ValidationError(f"Invalid {model.__name__}: {e.error_count()} error(s)") from e


def _document(base_name: str, fmt: str, content: bytes) -> GeneratedDocument:
    return GeneratedDocument(
        filename=f"{base_name}.{fmt}",
        content_type=CONTENT_TYPES[fmt],
        content=content,
    )


@observe(name="generate_function_sheet")
async def generate_function_sheet(
    options: FunctionSheetOptions | dict,
    *,
    today: date | None = None,
) -> list[GeneratedDocument]:
    """Build the Function Sheet in the requested format(s).

    Returns one document for ``pdf`` or ``docx`` and two for ``both``.
    """
    options = _validate(options, FunctionSheetOptions)
    data = await aggregate_document_data(options.wedding_id, options.sections)

    stamp = (today or date.today()).isoformat()
    base_name = sanitize_filename(
        f"{data.wedding.bride_name}-{data.wedding.groom_name}-Function-Sheet-{stamp}"
    )

    documents = []
    for fmt in output_formats(options.format):
        if fmt == "pdf":
            content = await generate_pdf(data, options.branding, options.sections)
        else:
            content = await generate_docx(data, options.branding, options.sections)
        documents.append(_document(base_name, fmt, content))

    logger.info(
        "Function sheet for wedding %s: %s",
        options.wedding_id,
        ", ".join(d.filename for d in documents),
    )
    return documents


@observe(name="generate_vendor_brief")
async def generate_vendor_brief(
    options: VendorBriefOptions | dict,
    *,
    today: date | None = None,
) -> list[GeneratedDocument]:
    options = _validate(options, VendorBriefOptions)
    data = await aggregate_vendor_brief_data(options.vendor_id, options.wedding_id)

    stamp = (today or date.today()).isoformat()
    base_name = sanitize_filename(f"{data.vendor.company_name}-Vendor-Brief-{stamp}")

    documents = []
    for fmt in output_formats(options.format):
        if fmt == "pdf":
            content = await generate_vendor_brief_pdf(data, options.branding)
        else:
            content = await generate_vendor_brief_docx(data, options.branding)
        documents.append(_document(base_name, fmt, content))
    return documents
