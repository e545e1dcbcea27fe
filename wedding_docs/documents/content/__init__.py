"""Per-section content builders.

Every builder has the signature ``build(data, branding) -> list[Block]`` and
reads only typed fields of ``FunctionSheetData``.
"""

from collections.abc import Callable

from wedding_docs.documents.blocks import Block
from wedding_docs.documents.content import finance, guests, logistics, overview
from wedding_docs.documents.schemas import DocumentBranding, FunctionSheetData
from wedding_docs.documents.sections import DocumentSection

ContentBuilder = Callable[[FunctionSheetData, DocumentBranding], list[Block]]

CONTENT_BUILDERS: dict[DocumentSection, ContentBuilder] = {
    DocumentSection.wedding_overview: overview.build_wedding_overview,
    DocumentSection.event_summary: overview.build_event_summary,
    DocumentSection.guest_list: guests.build_guest_list,
    DocumentSection.attendance_matrix: guests.build_attendance_matrix,
    DocumentSection.meal_selections: guests.build_meal_selections,
    DocumentSection.bar_orders: logistics.build_bar_orders,
    DocumentSection.furniture_equipment: logistics.build_furniture_equipment,
    DocumentSection.repurposing: logistics.build_repurposing,
    DocumentSection.staff_requirements: logistics.build_staff_requirements,
    DocumentSection.transportation: logistics.build_transportation,
    DocumentSection.stationery: logistics.build_stationery,
    DocumentSection.beauty_services: logistics.build_beauty_services,
    DocumentSection.accommodation: logistics.build_accommodation,
    DocumentSection.shopping_list: logistics.build_shopping_list,
    DocumentSection.budget_summary: finance.build_budget_summary,
    DocumentSection.vendor_contacts: finance.build_vendor_contacts,
    DocumentSection.timeline: overview.build_timeline,
}

__all__ = ["CONTENT_BUILDERS", "ContentBuilder"]
