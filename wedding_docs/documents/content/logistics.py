"""Bar, inventory, staffing, transport, stationery, beauty, lodging and shopping."""

from decimal import Decimal

from wedding_docs.documents.blocks import (
    Block,
    Column,
    Subheading,
    Table,
    TextLine,
    capitalize,
    clock,
    group_by,
    money,
    plain,
    text,
    yes_no,
)
from wedding_docs.documents.schemas import DocumentBranding, FunctionSheetData


def build_bar_orders(data: FunctionSheetData, branding: DocumentBranding) -> list[Block]:
    blocks: list[Block] = []
    for order in data.bar_orders or []:
        blocks.append(Subheading(order.event_name))
        blocks.append(
            TextLine(
                f"Guests: {order.guest_count_adults} adults, "
                f"{order.guest_count_children} children | "
                f"Duration: {plain(order.event_duration_hours)}h",
                tone="muted",
            )
        )
        if not order.items:
            continue
        total = sum((i.total_cost for i in order.items), Decimal(0))
        blocks.append(
            Table(
                columns=[
                    Column("Item", 50),
                    Column("%", 15, "center"),
                    Column("Servings", 20, "center"),
                    Column("Units", 15, "center"),
                    Column("Unit Cost", 25, "right"),
                    Column("Total", 25, "right"),
                ],
                rows=[
                    [
                        i.item_name,
                        f"{plain(i.percentage)}%",
                        plain(i.calculated_servings),
                        plain(i.units_needed),
                        money(i.cost_per_unit),
                        money(i.total_cost),
                    ]
                    for i in order.items
                ],
                total_row=["", "", "", "", "Total:", money(total)],
            )
        )
    return blocks


def build_furniture_equipment(data: FunctionSheetData, branding: DocumentBranding) -> list[Block]:
    blocks: list[Block] = []
    for category, items in group_by(data.wedding_items or [], lambda i: i.category).items():
        blocks.append(Subheading(category))
        blocks.append(
            Table(
                columns=[
                    Column("Item", 60),
                    Column("Required", 20, "center"),
                    Column("Available", 20, "center"),
                    Column("Supplier", 40),
                    Column("Cost", 25, "right"),
                ],
                rows=[
                    [
                        i.description,
                        str(i.total_required),
                        str(i.number_available),
                        text(i.supplier_name),
                        money(i.total_cost),
                    ]
                    for i in items
                ],
            )
        )
    return blocks


def build_repurposing(data: FunctionSheetData, branding: DocumentBranding) -> list[Block]:
    rows = data.repurposing or []
    if not rows:
        return []
    return [
        Table(
            columns=[
                Column("Item", 30),
                Column("Movement", 35),
                Column("Pickup", 30),
                Column("Dropoff", 30),
                Column("Responsible", 25),
                Column("Status", 20, "center"),
            ],
            rows=[
                [
                    r.item_description,
                    f"{r.from_event_name} -> {r.to_event_name}",
                    f"{clock(r.pickup_time)}\n{r.pickup_location}",
                    f"{clock(r.dropoff_time)}\n{r.dropoff_location}",
                    text(r.responsible_party),
                    capitalize(r.status),
                ]
                for r in rows
            ],
        )
    ]


def build_staff_requirements(data: FunctionSheetData, branding: DocumentBranding) -> list[Block]:
    rows = data.staff_requirements or []
    if not rows:
        return []
    counts = [Column(h, 15, "center") for h in ("Sup", "Wait", "Bar", "Run", "Scul", "Total")]
    return [
        Table(
            columns=[Column("Event", 40), Column("Vendor", 35), *counts],
            rows=[
                [
                    s.event_name,
                    text(s.vendor_name),
                    str(s.supervisors),
                    str(s.waiters),
                    str(s.bartenders),
                    str(s.runners),
                    str(s.scullers),
                    str(s.total_staff),
                ]
                for s in rows
            ],
        )
    ]


def build_transportation(data: FunctionSheetData, branding: DocumentBranding) -> list[Block]:
    rows = data.transportation or []
    if not rows:
        return []
    return [
        Table(
            columns=[
                Column("Event", 30),
                Column("Shuttle", 25),
                Column("Time", 20),
                Column("From", 40),
                Column("To", 40),
                Column("Guests", 15, "center"),
            ],
            rows=[
                [
                    t.event_name,
                    t.shuttle_name or t.transport_type,
                    clock(t.collection_time),
                    t.collection_location,
                    t.dropoff_location,
                    str(t.number_of_guests),
                ]
                for t in rows
            ],
        )
    ]


def build_stationery(data: FunctionSheetData, branding: DocumentBranding) -> list[Block]:
    rows = data.stationery or []
    if not rows:
        return []
    total = sum((s.total_cost for s in rows), Decimal(0))
    return [
        Table(
            columns=[
                Column("Item", 40),
                Column("Details", 60),
                Column("Qty", 15, "center"),
                Column("Unit Cost", 25, "right"),
                Column("Total", 25, "right"),
            ],
            rows=[
                [
                    s.item_name,
                    text(s.details),
                    str(s.quantity),
                    money(s.cost_per_item),
                    money(s.total_cost),
                ]
                for s in rows
            ],
            total_row=["", "", "", "Total:", money(total)],
        )
    ]


def build_beauty_services(data: FunctionSheetData, branding: DocumentBranding) -> list[Block]:
    rows = data.beauty_services or []
    if not rows:
        return []
    return [
        Table(
            columns=[
                Column("Person", 35),
                Column("Role", 25),
                Column("Hair", 15, "center"),
                Column("Makeup", 15, "center"),
                Column("Time", 30),
                Column("Vendor", 40),
            ],
            rows=[
                [
                    b.person_name,
                    b.role,
                    yes_no(b.requires_hair),
                    yes_no(b.requires_makeup),
                    clock(b.appointment_time),
                    text(b.vendor_name),
                ]
                for b in rows
            ],
        )
    ]


def build_accommodation(data: FunctionSheetData, branding: DocumentBranding) -> list[Block]:
    if data.accommodation is None:
        return []
    blocks: list[Block] = []
    for cottage in data.accommodation.cottages:
        blocks.append(
            Subheading(
                f"{cottage.cottage_name} ({money(cottage.charge_per_room_per_night)}/room/night)"
            )
        )
        if not cottage.rooms:
            continue
        blocks.append(
            Table(
                columns=[
                    Column("Room", 30),
                    Column("Bed", 30),
                    Column("Bath", 25),
                    Column("Guest", 35),
                    Column("Nights", 15, "center"),
                    Column("Cost", 25, "right"),
                ],
                rows=[
                    [
                        r.room_name,
                        r.bed_type,
                        r.bathroom_type,
                        text(r.guest_name),
                        str(r.number_of_nights),
                        money(r.room_cost),
                    ]
                    for r in cottage.rooms
                ],
            )
        )
    return blocks


def build_shopping_list(data: FunctionSheetData, branding: DocumentBranding) -> list[Block]:
    blocks: list[Block] = []
    for category, items in group_by(data.shopping_list or [], lambda i: i.category).items():
        blocks.append(Subheading(category))
        blocks.append(
            Table(
                columns=[
                    Column("Item", 60),
                    Column("Qty", 30),
                    Column("Store", 35),
                    Column("Bought", 15, "center"),
                    Column("Est. Cost", 25, "right"),
                ],
                rows=[
                    [
                        i.item_name,
                        f"{plain(i.quantity)} {i.unit}" if i.unit else plain(i.quantity),
                        text(i.store),
                        yes_no(i.purchased),
                        money(i.estimated_cost),
                    ]
                    for i in items
                ],
            )
        )
    return blocks
