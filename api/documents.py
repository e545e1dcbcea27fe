"""Document export REST API."""

import logging
import re
import uuid
from typing import Literal
from urllib.parse import quote

from fastapi import APIRouter, HTTPException, Response
from pydantic import BaseModel, Field

from wedding_docs.core.exceptions import (
    FetchFailedError,
    NotFoundError,
    RenderFailedError,
    ValidationError,
    WeddingDocsError,
)
from wedding_docs.documents.aggregator import get_section_counts
from wedding_docs.documents.schemas import (
    DocumentBranding,
    FunctionSheetOptions,
    GeneratedDocument,
    SectionCounts,
    VendorBriefOptions,
)
from wedding_docs.documents.sections import DEFAULT_FUNCTION_SHEET_SECTIONS, DocumentSection
from wedding_docs.documents.service import generate_function_sheet, generate_vendor_brief

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/weddings", tags=["documents"])


# --- Request schemas ---


class FunctionSheetRequest(BaseModel):
    sections: list[DocumentSection] = Field(
        default_factory=lambda: list(DEFAULT_FUNCTION_SHEET_SECTIONS), min_length=1
    )
    format: Literal["pdf", "docx"] = "pdf"
    branding: DocumentBranding = Field(default_factory=DocumentBranding)


class VendorBriefRequest(BaseModel):
    format: Literal["pdf", "docx"] = "pdf"
    branding: DocumentBranding = Field(default_factory=DocumentBranding)


# --- Helpers ---


def _http_error(e: WeddingDocsError) -> HTTPException:
    if isinstance(e, NotFoundError):
        return HTTPException(status_code=404, detail=str(e))
    if isinstance(e, ValidationError):
        return HTTPException(status_code=422, detail=str(e))
    if isinstance(e, FetchFailedError):
        return HTTPException(status_code=502, detail=str(e))
    if isinstance(e, RenderFailedError):
        return HTTPException(status_code=500, detail=str(e))
    return HTTPException(status_code=500, detail="Document export failed")


def _content_disposition(filename: str) -> str:
    """Attachment header that survives non-Latin-1 names.

    Headers are Latin-1 on the wire, so a name with other characters gets an
    ASCII ``filename`` fallback plus the RFC 5987 ``filename*`` form.
    """
    quoted = quote(filename)
    if quoted == filename:
        return f'attachment; filename="{filename}"'
    fallback = filename.encode("ascii", "ignore").decode("ascii")
    fallback = re.sub(r"-+", "-", fallback).lstrip("-").replace('"', "")
    return f"attachment; filename=\"{fallback}\"; filename*=UTF-8''{quoted}"


def _download(document: GeneratedDocument) -> Response:
    return Response(
        content=document.content,
        media_type=document.content_type,
        headers={"Content-Disposition": _content_disposition(document.filename)},
    )


# --- Endpoints ---


@router.get("/{wedding_id}/documents/section-counts", response_model=SectionCounts)
async def section_counts(wedding_id: uuid.UUID):
    try:
        return await get_section_counts(wedding_id)
    except WeddingDocsError as e:
        logger.warning("Section counts for %s failed: %s", wedding_id, e)
        raise _http_error(e) from e


@router.post("/{wedding_id}/documents/function-sheet")
async def function_sheet(wedding_id: uuid.UUID, body: FunctionSheetRequest):
    options = FunctionSheetOptions(
        wedding_id=wedding_id,
        sections=body.sections,
        format=body.format,
        branding=body.branding,
    )
    try:
        documents = await generate_function_sheet(options)
    except WeddingDocsError as e:
        logger.warning("Function sheet for %s failed: %s", wedding_id, e)
        raise _http_error(e) from e
    return _download(documents[0])


@router.post("/{wedding_id}/vendors/{vendor_id}/brief")
async def vendor_brief(wedding_id: uuid.UUID, vendor_id: uuid.UUID, body: VendorBriefRequest):
    options = VendorBriefOptions(
        vendor_id=vendor_id,
        wedding_id=wedding_id,
        format=body.format,
        branding=body.branding,
    )
    try:
        documents = await generate_vendor_brief(options)
    except WeddingDocsError as e:
        logger.warning("Vendor brief %s for %s failed: %s", vendor_id, wedding_id, e)
        raise _http_error(e) from e
    return _download(documents[0])
