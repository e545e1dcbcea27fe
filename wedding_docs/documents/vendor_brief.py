"""Vendor Brief: a one-vendor summary rendered through the same adapters."""

import logging
from datetime import datetime
from decimal import Decimal

from wedding_docs.core.exceptions import RenderFailedError
from wedding_docs.core.observability import observe
from wedding_docs.documents.blocks import (
    Block,
    Column,
    FieldList,
    Subheading,
    Table,
    TextLine,
    capitalize,
    long_date,
    money,
    short_date,
    text,
    timestamp,
)
from wedding_docs.documents.content.overview import events_table
from wedding_docs.documents.docx_builder import DocxBuilder, python_docx_backend
from wedding_docs.documents.docx_generator import DocxBackendFactory, add_logo
from wedding_docs.documents.pdf_canvas import (
    FOOTER_RGB,
    MARGIN_MM,
    PdfCanvas,
    reportlab_backend,
)
from wedding_docs.documents.pdf_generator import PdfBackendFactory, draw_logo
from wedding_docs.documents.schemas import DocumentBranding, VendorBriefData

logger = logging.getLogger(__name__)

TITLE = "Vendor Brief"


def build_vendor_brief(data: VendorBriefData) -> list[Block]:
    vendor = data.vendor
    contact = [
        ("Contact", vendor.contact_name),
        ("Email", vendor.contact_email),
        ("Phone", vendor.contact_phone),
        ("Address", vendor.address),
        ("Website", vendor.website),
    ]
    contract = [
        ("Vendor Type", vendor.vendor_type),
        ("Contract Value", money(vendor.contract_value) if vendor.contract_value else "N/A"),
        ("Contract Signed", "Yes" if vendor.contract_signed else "No"),
    ]
    if vendor.contract_date:
        contract.append(("Contract Date", long_date(vendor.contract_date)))

    blocks: list[Block] = [Subheading("Contact Information")]
    present = [(label, value) for label, value in contact if value]
    blocks.append(FieldList(present) if present else TextLine("No contact details", tone="muted"))
    blocks += [Subheading("Contract Details"), FieldList(contract)]

    if data.payments:
        total = sum((p.amount for p in data.payments), Decimal(0))
        blocks.append(Subheading("Payment Schedule"))
        blocks.append(
            Table(
                columns=[
                    Column("Milestone", 55),
                    Column("Due", 25),
                    Column("Amount", 30, "right"),
                    Column("Status", 25, "center"),
                    Column("Paid", 25),
                ],
                rows=[
                    [
                        p.milestone_name,
                        short_date(p.due_date),
                        money(p.amount),
                        capitalize(p.status),
                        short_date(p.paid_date) if p.paid_date else "-",
                    ]
                    for p in data.payments
                ],
                total_row=["Total", "", money(total), "", ""],
            )
        )

    if data.events:
        blocks.append(Subheading("Events"))
        blocks.append(events_table(data.events))

    if data.special_instructions:
        blocks.append(Subheading("Special Instructions"))
        blocks.append(TextLine(text(data.special_instructions)))
    return blocks


def _subtitle_lines(data: VendorBriefData) -> list[str]:
    return [
        f"Wedding: {data.wedding.couple}",
        long_date(data.wedding.wedding_date),
    ]


@observe(name="generate_vendor_brief_pdf")
async def generate_vendor_brief_pdf(
    data: VendorBriefData,
    branding: DocumentBranding,
    *,
    backend_factory: PdfBackendFactory = reportlab_backend,
    generated_at: datetime | None = None,
) -> bytes:
    try:
        pdf = PdfCanvas(await backend_factory())
        draw_logo(pdf, branding)
        pdf.draw_text(TITLE, MARGIN_MM, 20, size=24, rgb=branding.rgb)
        pdf.draw_text(data.vendor.company_name, MARGIN_MM, 32, size=16)
        y = 40.0
        for line in _subtitle_lines(data):
            pdf.draw_text(line, MARGIN_MM, y, size=12)
            y += 7
        stamp = timestamp(generated_at or datetime.now())
        pdf.draw_text(f"Generated: {stamp}", MARGIN_MM, y, size=8, rgb=FOOTER_RGB)
        pdf.draw_rule(y + 4, branding.rgb)
        pdf.draw_blocks(build_vendor_brief(data), branding.rgb, y + 12)
        return pdf.save()
    except Exception as e:
        logger.error("Vendor brief PDF for %s failed: %s", data.vendor.id, e)
        raise RenderFailedError("pdf") from e


@observe(name="generate_vendor_brief_docx")
async def generate_vendor_brief_docx(
    data: VendorBriefData,
    branding: DocumentBranding,
    *,
    backend_factory: DocxBackendFactory = python_docx_backend,
    generated_at: datetime | None = None,
) -> bytes:
    try:
        builder = DocxBuilder(await backend_factory())
        add_logo(builder, branding)
        builder.paragraph(TITLE, size=24, bold=True, color_hex=branding.hex_digits)
        builder.paragraph(data.vendor.company_name, size=16, bold=True)
        for line in _subtitle_lines(data):
            builder.paragraph(line, size=12)
        stamp = timestamp(generated_at or datetime.now())
        builder.paragraph(f"Generated: {stamp}", size=8, color_hex="999999", space_after=12)
        builder.add_blocks(build_vendor_brief(data), branding.hex_digits)
        return builder.save()
    except Exception as e:
        logger.error("Vendor brief DOCX for %s failed: %s", data.vendor.id, e)
        raise RenderFailedError("docx") from e
