"""Decide whether a populated section is worth printing.

Both orchestrators call ``should_include_section`` at render time, so a
section can be fetched and still be left out of the document.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel

from wedding_docs.documents.schemas import FunctionSheetData
from wedding_docs.documents.sections import DocumentSection

_SECTION_FIELDS: dict[DocumentSection, str] = {
    DocumentSection.event_summary: "events",
    DocumentSection.guest_list: "guests",
    DocumentSection.meal_selections: "meal_selections",
    DocumentSection.bar_orders: "bar_orders",
    DocumentSection.furniture_equipment: "wedding_items",
    DocumentSection.repurposing: "repurposing",
    DocumentSection.staff_requirements: "staff_requirements",
    DocumentSection.transportation: "transportation",
    DocumentSection.stationery: "stationery",
    DocumentSection.beauty_services: "beauty_services",
    DocumentSection.accommodation: "accommodation",
    DocumentSection.shopping_list: "shopping_list",
    DocumentSection.budget_summary: "budget",
    DocumentSection.vendor_contacts: "vendors",
    DocumentSection.timeline: "timeline",
}


def get_section_data(section: DocumentSection, data: FunctionSheetData) -> Any:
    """Return the slice of ``data`` a section renders.

    The overview is always present and is wrapped in a one-element list.
    The attendance matrix renders one row per guest, so its slice is the
    guest list, and it is ``None`` when there are no event columns.
    """
    if section is DocumentSection.wedding_overview:
        return [data.wedding]
    if section is DocumentSection.attendance_matrix:
        matrix = data.attendance
        if matrix is None or not matrix.events:
            return None
        return matrix.guests
    return getattr(data, _SECTION_FIELDS[section])


def should_include_section(section_data: Any) -> bool:
    """``None`` and empty lists are excluded.

    A composite (pydantic model or mapping) is excluded only when every
    contained list or mapping is empty and every scalar is falsy.
    """
    if section_data is None:
        return False
    if isinstance(section_data, (list, tuple)):
        return len(section_data) > 0
    if isinstance(section_data, BaseModel):
        values = [getattr(section_data, name) for name in type(section_data).model_fields]
    elif isinstance(section_data, Mapping):
        values = list(section_data.values())
    else:
        return bool(section_data)
    return any(bool(value) for value in values)
