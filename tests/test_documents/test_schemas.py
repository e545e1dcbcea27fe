"""Tests for document models, branding and section metadata."""

import base64
import uuid
from decimal import Decimal

import pytest
from pydantic import ValidationError as PydanticValidationError

from wedding_docs.documents.schemas import (
    BudgetCategoryRow,
    BudgetSummary,
    DocumentBranding,
    FunctionSheetOptions,
    SectionCounts,
)
from wedding_docs.documents.sections import (
    DEFAULT_FUNCTION_SHEET_SECTIONS,
    SECTION_LABELS,
    SECTION_METADATA,
    DocumentSection,
    dedupe_sections,
)

PNG_1PX = (
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mP8z8BQDwAEhQGAhKmMIQAAAABJRU5ErkJggg=="
)


# ---------------------------------------------------------------------------
# Sections
# ---------------------------------------------------------------------------


def test_every_section_has_metadata():
    assert set(SECTION_METADATA) == set(DocumentSection)
    assert len(DocumentSection) == 17


def test_section_labels():
    assert SECTION_LABELS[DocumentSection.furniture_equipment] == "Furniture & Equipment"
    assert SECTION_LABELS[DocumentSection.repurposing] == "Repurposing Instructions"
    assert SECTION_METADATA[DocumentSection.budget_summary].category == "finance"


def test_default_sections_are_valid():
    assert DEFAULT_FUNCTION_SHEET_SECTIONS[0] is DocumentSection.wedding_overview
    assert len(set(DEFAULT_FUNCTION_SHEET_SECTIONS)) == len(DEFAULT_FUNCTION_SHEET_SECTIONS)


def test_dedupe_keeps_first_position():
    result = dedupe_sections(["guest_list", "timeline", DocumentSection.guest_list, "budget_summary"])
    assert result == [
        DocumentSection.guest_list,
        DocumentSection.timeline,
        DocumentSection.budget_summary,
    ]


def test_dedupe_rejects_unknown_section():
    with pytest.raises(ValueError):
        dedupe_sections(["guest_list", "seating_chart"])


# ---------------------------------------------------------------------------
# Budget totals
# ---------------------------------------------------------------------------


def test_budget_totals_are_recomputed_after_mutation():
    category = BudgetCategoryRow(
        id=uuid.uuid4(),
        category_name="Venue",
        projected_amount=Decimal("5000"),
        actual_amount=Decimal("5200"),
        variance=Decimal("200"),
    )
    budget = BudgetSummary(categories=[category])
    assert budget.totals.projected == Decimal("5000")

    category.projected_amount = Decimal("6000")
    budget.categories.append(
        BudgetCategoryRow(
            id=uuid.uuid4(),
            category_name="Music",
            projected_amount=Decimal("1000"),
            actual_amount=Decimal("900"),
            variance=Decimal("-100"),
        )
    )

    totals = budget.totals
    assert totals.projected == Decimal("7000")
    assert totals.actual == Decimal("6100")
    assert totals.variance == Decimal("100")


def test_empty_budget_totals_are_zero():
    assert BudgetSummary().totals == (Decimal(0), Decimal(0), Decimal(0))


# ---------------------------------------------------------------------------
# Branding
# ---------------------------------------------------------------------------


def test_branding_defaults_to_configured_colour():
    branding = DocumentBranding()
    assert branding.primary_color == "#D4A5A5"
    assert branding.rgb == (212, 165, 165)
    assert branding.hex_digits == "D4A5A5"


@pytest.mark.parametrize("color", ["D4A5A5", "#D4A5A", "#GGGGGG", "red"])
def test_branding_rejects_bad_colour(color):
    with pytest.raises(PydanticValidationError):
        DocumentBranding(primary_color=color)


def test_branding_is_frozen():
    branding = DocumentBranding()
    with pytest.raises(PydanticValidationError):
        branding.primary_color = "#000000"


def test_logo_bytes_from_data_url_and_bare_base64():
    raw = base64.b64decode(PNG_1PX)
    assert DocumentBranding(logo=f"data:image/png;base64,{PNG_1PX}").logo_bytes() == raw
    assert DocumentBranding(logo=PNG_1PX).logo_bytes() == raw
    assert DocumentBranding(logo=raw).logo_bytes() == raw
    assert DocumentBranding().logo_bytes() is None


def test_logo_bytes_rejects_garbage():
    with pytest.raises(ValueError):
        DocumentBranding(logo="data:image/png;base64,@@not-base64@@").logo_bytes()


def test_contact_lines():
    branding = DocumentBranding(
        company_name="Blush Planning",
        tagline="Weddings with heart",
        contact_email="hi@blush.test",
        website="blush.test",
    )
    assert branding.contact_lines() == [
        "Blush Planning",
        "Weddings with heart",
        "hi@blush.test | blush.test",
    ]
    assert DocumentBranding().contact_lines() == []


# ---------------------------------------------------------------------------
# Options and counts
# ---------------------------------------------------------------------------


def test_options_require_at_least_one_section():
    with pytest.raises(PydanticValidationError):
        FunctionSheetOptions(wedding_id=uuid.uuid4(), sections=[])


def test_options_reject_unknown_format():
    with pytest.raises(PydanticValidationError):
        FunctionSheetOptions(wedding_id=uuid.uuid4(), sections=["guest_list"], format="html")


def test_section_counts_per_section():
    counts = SectionCounts(guests=40, events=3, tasks=5, rooms=8, cottages=2, budget_categories=6)
    assert counts.for_section(DocumentSection.wedding_overview) == 1
    assert counts.for_section("guest_list") == 40
    assert counts.for_section(DocumentSection.meal_selections) == 40
    assert counts.for_section(DocumentSection.accommodation) == 8
    assert counts.for_section(DocumentSection.timeline) == 8
    assert counts.for_section(DocumentSection.budget_summary) == 6
    assert all(isinstance(counts.for_section(s), int) for s in DocumentSection)
