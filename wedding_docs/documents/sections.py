"""Section identifiers for exported wedding documents.

The enum order is the canonical order used by the UI. The order a caller
passes to an orchestrator is the render order.
"""

import enum
from typing import Literal, NamedTuple


class DocumentSection(str, enum.Enum):
    wedding_overview = "wedding_overview"
    event_summary = "event_summary"
    guest_list = "guest_list"
    attendance_matrix = "attendance_matrix"
    meal_selections = "meal_selections"
    bar_orders = "bar_orders"
    furniture_equipment = "furniture_equipment"
    repurposing = "repurposing"
    staff_requirements = "staff_requirements"
    transportation = "transportation"
    stationery = "stationery"
    beauty_services = "beauty_services"
    accommodation = "accommodation"
    shopping_list = "shopping_list"
    budget_summary = "budget_summary"
    vendor_contacts = "vendor_contacts"
    timeline = "timeline"


SectionCategory = Literal["overview", "guests", "logistics", "vendors", "finance"]


class SectionInfo(NamedTuple):
    label: str
    description: str
    category: SectionCategory


SECTION_METADATA: dict[DocumentSection, SectionInfo] = {
    DocumentSection.wedding_overview: SectionInfo(
        "Wedding Overview", "Couple names, date, venue, and key details", "overview"
    ),
    DocumentSection.event_summary: SectionInfo(
        "Event Summary", "All events with dates, times, and locations", "overview"
    ),
    DocumentSection.guest_list: SectionInfo(
        "Guest List", "Complete guest list with contact information", "guests"
    ),
    DocumentSection.attendance_matrix: SectionInfo(
        "Attendance Matrix", "Guest attendance across all events", "guests"
    ),
    DocumentSection.meal_selections: SectionInfo(
        "Meal Selections", "Dietary requirements and meal choices", "guests"
    ),
    DocumentSection.bar_orders: SectionInfo(
        "Bar Orders", "Beverage orders and bar inventory", "logistics"
    ),
    DocumentSection.furniture_equipment: SectionInfo(
        "Furniture & Equipment", "Tables, chairs, and rental items", "logistics"
    ),
    DocumentSection.repurposing: SectionInfo(
        "Repurposing Instructions", "Item movement between events", "logistics"
    ),
    DocumentSection.staff_requirements: SectionInfo(
        "Staff Requirements", "Staffing needs per event", "logistics"
    ),
    DocumentSection.transportation: SectionInfo(
        "Transportation", "Guest transportation arrangements", "logistics"
    ),
    DocumentSection.stationery: SectionInfo(
        "Stationery", "Invitations, programs, and printed materials", "logistics"
    ),
    DocumentSection.beauty_services: SectionInfo(
        "Beauty Services", "Hair, makeup, and spa appointments", "logistics"
    ),
    DocumentSection.accommodation: SectionInfo(
        "Accommodation", "Guest lodging and room assignments", "logistics"
    ),
    DocumentSection.shopping_list: SectionInfo(
        "Shopping List", "Items to purchase with costs", "logistics"
    ),
    DocumentSection.budget_summary: SectionInfo(
        "Budget Summary", "Financial overview and category breakdown", "finance"
    ),
    DocumentSection.vendor_contacts: SectionInfo(
        "Vendor Contacts", "All vendor contact information", "vendors"
    ),
    DocumentSection.timeline: SectionInfo(
        "Timeline", "Events and pre/post wedding tasks", "overview"
    ),
}

SECTION_LABELS: dict[DocumentSection, str] = {
    section: info.label for section, info in SECTION_METADATA.items()
}

DEFAULT_FUNCTION_SHEET_SECTIONS: tuple[DocumentSection, ...] = (
    DocumentSection.wedding_overview,
    DocumentSection.event_summary,
    DocumentSection.guest_list,
    DocumentSection.attendance_matrix,
    DocumentSection.meal_selections,
    DocumentSection.vendor_contacts,
    DocumentSection.timeline,
)


def dedupe_sections(sections) -> list[DocumentSection]:
    """Coerce to ``DocumentSection`` and drop repeats, keeping first positions."""
    seen: set[DocumentSection] = set()
    ordered: list[DocumentSection] = []
    for raw in sections:
        section = DocumentSection(raw)
        if section not in seen:
            seen.add(section)
            ordered.append(section)
    return ordered
