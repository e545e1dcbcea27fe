"""Guest list, attendance matrix and meal selections."""

from wedding_docs.core.models.enums import GuestType
from wedding_docs.documents.blocks import (
    Block,
    Column,
    Subheading,
    Table,
    capitalize,
    text,
    truncate,
    yes_no,
)
from wedding_docs.documents.schemas import DocumentBranding, FunctionSheetData

EVENT_HEADER_LENGTH = 10
CONTENT_WIDTH_MM = 170
GUEST_COLUMN_MM = 40


def guest_type_label(guest_type: str) -> str:
    return "Adult" if guest_type == GuestType.adult.value else "Child"


def build_guest_list(data: FunctionSheetData, branding: DocumentBranding) -> list[Block]:
    guests = data.guests or []
    if not guests:
        return []
    return [
        Table(
            columns=[
                Column("Name", 50),
                Column("Type", 20, "center"),
                Column("Status", 20, "center"),
                Column("Table", 20, "center"),
                Column("Dietary", 60),
            ],
            rows=[
                [
                    g.name,
                    guest_type_label(g.guest_type),
                    capitalize(g.invitation_status),
                    text(g.table_number),
                    text(g.dietary_restrictions),
                ]
                for g in guests
            ],
        )
    ]


def build_attendance_matrix(data: FunctionSheetData, branding: DocumentBranding) -> list[Block]:
    matrix = data.attendance
    if matrix is None or not matrix.events or not matrix.guests:
        return []

    event_width = (CONTENT_WIDTH_MM - GUEST_COLUMN_MM) / len(matrix.events)
    columns = [Column("Guest", GUEST_COLUMN_MM)] + [
        Column(truncate(e.event_name, EVENT_HEADER_LENGTH), event_width, "center")
        for e in matrix.events
    ]
    rows = [
        [g.name] + [yes_no(matrix.is_attending(g.id, e.id)) for e in matrix.events]
        for g in matrix.guests
    ]
    return [Table(columns=columns, rows=rows, font_size=7)]


def _choice_table(title: str, counts: dict[str, int]) -> list[Block]:
    if not counts:
        return []
    return [
        Subheading(title),
        Table(
            columns=[Column("Choice", 100), Column("Count", 30, "center")],
            rows=[[choice, str(count)] for choice, count in counts.items()],
            total_row=["Total", str(sum(counts.values()))],
        ),
    ]


def build_meal_selections(data: FunctionSheetData, branding: DocumentBranding) -> list[Block]:
    meals = data.meal_selections
    if meals is None:
        return []
    return [
        *_choice_table("Starters", meals.starters),
        *_choice_table("Mains", meals.mains),
        *_choice_table("Desserts", meals.desserts),
        *_choice_table("Dietary Restrictions", meals.dietary_restrictions),
    ]
