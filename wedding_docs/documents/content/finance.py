"""Budget summary and vendor contacts."""

from decimal import Decimal

from wedding_docs.documents.blocks import (
    Block,
    Column,
    Table,
    TextLine,
    money,
    text,
)
from wedding_docs.documents.schemas import DocumentBranding, FunctionSheetData


def variance_label(variance: Decimal) -> str:
    """``$120.00 over`` / ``$80.00 under``; zero prints without a direction."""
    if variance > 0:
        return f"{money(variance)} over"
    if variance < 0:
        return f"{money(-variance)} under"
    return money(variance)


def build_budget_summary(data: FunctionSheetData, branding: DocumentBranding) -> list[Block]:
    budget = data.budget
    if budget is None:
        return []
    totals = budget.totals
    blocks: list[Block] = [
        TextLine(f"Projected Total: {money(totals.projected)}"),
        TextLine(f"Actual Total: {money(totals.actual)}"),
        TextLine(
            f"Variance: {variance_label(totals.variance)}",
            tone="danger" if totals.variance > 0 else "success",
        ),
    ]
    if budget.categories:
        blocks.append(
            Table(
                columns=[
                    Column("Category", 60),
                    Column("Projected", 35, "right"),
                    Column("Actual", 35, "right"),
                    Column("Variance", 35, "right"),
                ],
                rows=[
                    [
                        c.category_name,
                        money(c.projected_amount),
                        money(c.actual_amount),
                        variance_label(c.variance),
                    ]
                    for c in budget.categories
                ],
                total_row=[
                    "Total",
                    money(totals.projected),
                    money(totals.actual),
                    variance_label(totals.variance),
                ],
            )
        )
    return blocks


def build_vendor_contacts(data: FunctionSheetData, branding: DocumentBranding) -> list[Block]:
    vendors = data.vendors or []
    if not vendors:
        return []
    return [
        Table(
            columns=[
                Column("Type", 25),
                Column("Company", 35),
                Column("Contact", 30),
                Column("Phone", 25),
                Column("Email", 40),
                Column("Contract", 20, "right"),
            ],
            rows=[
                [
                    v.vendor_type,
                    v.company_name,
                    text(v.contact_name),
                    text(v.contact_phone),
                    text(v.contact_email),
                    money(v.contract_value) if v.contract_value else "-",
                ]
                for v in vendors
            ],
        )
    ]
