"""Wedding overview, event summary and timeline."""

from wedding_docs.documents.blocks import (
    Block,
    Column,
    FieldList,
    Subheading,
    Table,
    TextLine,
    capitalize,
    clock,
    long_date,
    short_date,
    text,
    time_range,
)
from wedding_docs.documents.schemas import DocumentBranding, EventRow, FunctionSheetData


def build_wedding_overview(data: FunctionSheetData, branding: DocumentBranding) -> list[Block]:
    wedding = data.wedding
    adults = wedding.guest_count_adults
    children = wedding.guest_count_children
    items = [
        ("Couple", wedding.couple),
        ("Date", f"{wedding.wedding_date:%A}, {long_date(wedding.wedding_date)}"),
        ("Status", capitalize(wedding.status)),
        ("Total Guests", f"{adults + children} ({adults} adults, {children} children)"),
    ]
    optional = [
        ("Venue", wedding.venue_name),
        ("Address", wedding.venue_address),
        ("Venue Contact", wedding.venue_contact_name),
        ("Venue Phone", wedding.venue_contact_phone),
        ("Venue Email", wedding.venue_contact_email),
    ]
    items.extend((label, value) for label, value in optional if value)

    blocks: list[Block] = [FieldList(items)]
    if wedding.notes:
        blocks.append(TextLine("Notes:", bold=True))
        blocks.append(TextLine(wedding.notes))
    return blocks


def build_event_summary(data: FunctionSheetData, branding: DocumentBranding) -> list[Block]:
    events = data.events or []
    if not events:
        return []
    return [
        Table(
            columns=[
                Column("#", 10, "center"),
                Column("Event", 40),
                Column("Date", 20),
                Column("Time", 35),
                Column("Location", 50),
                Column("Guests", 15, "center"),
            ],
            rows=[
                [
                    str(e.event_order),
                    e.event_name,
                    short_date(e.event_date),
                    time_range(e.event_start_time, e.event_end_time),
                    text(e.event_location),
                    str(e.expected_guests_adults + e.expected_guests_children),
                ]
                for e in events
            ],
        )
    ]


def events_table(events: list[EventRow]) -> Table:
    return Table(
        columns=[
            Column("Date", 25),
            Column("Time", 35),
            Column("Event", 50),
            Column("Location", 60),
        ],
        rows=[
            [
                short_date(e.event_date),
                time_range(e.event_start_time, e.event_end_time),
                e.event_name,
                text(e.event_location),
            ]
            for e in events
        ],
    )


def build_timeline(data: FunctionSheetData, branding: DocumentBranding) -> list[Block]:
    if data.timeline is None:
        return []
    blocks: list[Block] = []
    if data.timeline.events:
        blocks.append(Subheading("Events"))
        blocks.append(events_table(data.timeline.events))
    if data.timeline.tasks:
        blocks.append(Subheading("Pre/Post Wedding Tasks"))
        blocks.append(
            Table(
                columns=[
                    Column("Date", 25),
                    Column("Time", 20),
                    Column("Task", 60),
                    Column("Assigned", 35),
                    Column("Status", 25),
                ],
                rows=[
                    [
                        short_date(t.due_date),
                        clock(t.due_time),
                        t.title,
                        text(t.assigned_to),
                        capitalize(t.status),
                    ]
                    for t in data.timeline.tasks
                ],
            )
        )
    return blocks
