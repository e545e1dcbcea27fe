"""Read-only queries that load one logical data source for a wedding.

Each fetcher takes an open ``AsyncSession`` and a wedding id and returns
pydantic rows, already ordered the way the document prints them.
"""

import uuid
from collections.abc import Awaitable, Callable
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from wedding_docs.core.models import (
    BarOrder,
    BeautyService,
    BudgetCategory,
    BudgetLineItem,
    Cottage,
    CottageRoom,
    Event,
    Guest,
    GuestEventAttendance,
    PrePostWeddingTask,
    RepurposingInstruction,
    ShoppingListItem,
    ShuttleTransport,
    StaffRequirement,
    StationeryItem,
    Vendor,
    VendorPayment,
    Wedding,
    WeddingItem,
    WeddingItemEventQuantity,
)
from wedding_docs.core.models.enums import GuestType
from wedding_docs.documents.schemas import (
    AccommodationData,
    AttendanceRecord,
    BarOrderItemRow,
    BarOrderRow,
    BeautyServiceRow,
    BudgetCategoryRow,
    BudgetLineItemRow,
    BudgetSummary,
    CottageRow,
    EventQuantityRow,
    EventRow,
    GuestRow,
    RepurposingRow,
    ShoppingItemRow,
    StaffRequirementRow,
    StationeryRow,
    TaskRow,
    TransportRow,
    VendorPaymentRow,
    VendorRow,
    WeddingItemRow,
    WeddingOverview,
)

Fetcher = Callable[[AsyncSession, uuid.UUID], Awaitable[Any]]

UNKNOWN_EVENT = "Unknown Event"


def _event_name(event: Event | None) -> str:
    return event.event_name if event is not None else UNKNOWN_EVENT


async def fetch_wedding(session: AsyncSession, wedding_id: uuid.UUID) -> WeddingOverview | None:
    wedding = await session.get(Wedding, wedding_id)
    if wedding is None:
        return None
    return WeddingOverview.model_validate(wedding)


async def fetch_events(session: AsyncSession, wedding_id: uuid.UUID) -> list[EventRow]:
    result = await session.scalars(
        select(Event).where(Event.wedding_id == wedding_id).order_by(Event.event_order)
    )
    return [EventRow.model_validate(e) for e in result.all()]


async def fetch_guests(session: AsyncSession, wedding_id: uuid.UUID) -> list[GuestRow]:
    result = await session.scalars(
        select(Guest).where(Guest.wedding_id == wedding_id).order_by(Guest.name)
    )
    return [GuestRow.model_validate(g) for g in result.all()]


async def fetch_attendance(
    session: AsyncSession, wedding_id: uuid.UUID
) -> list[AttendanceRecord]:
    result = await session.scalars(
        select(GuestEventAttendance)
        .join(Guest, GuestEventAttendance.guest_id == Guest.id)
        .where(Guest.wedding_id == wedding_id)
    )
    return [
        AttendanceRecord(
            guest_id=a.guest_id,
            event_id=a.event_id,
            attending=bool(a.attending),
            shuttle_to_event=bool(a.shuttle_to_event),
            shuttle_from_event=bool(a.shuttle_from_event),
        )
        for a in result.all()
    ]


async def fetch_bar_orders(session: AsyncSession, wedding_id: uuid.UUID) -> list[BarOrderRow]:
    result = await session.scalars(
        select(BarOrder)
        .where(BarOrder.wedding_id == wedding_id)
        .options(selectinload(BarOrder.items), selectinload(BarOrder.event))
        .order_by(BarOrder.created_at)
    )
    return [
        BarOrderRow(
            id=order.id,
            event_id=order.event_id,
            event_name=_event_name(order.event),
            guest_count_adults=order.guest_count_adults,
            guest_count_children=order.guest_count_children,
            event_duration_hours=order.event_duration_hours,
            total_servings_per_person=order.total_servings_per_person,
            items=[BarOrderItemRow.model_validate(i) for i in order.items],
        )
        for order in result.all()
    ]


async def fetch_wedding_items(
    session: AsyncSession, wedding_id: uuid.UUID
) -> list[WeddingItemRow]:
    result = await session.scalars(
        select(WeddingItem)
        .where(WeddingItem.wedding_id == wedding_id)
        .options(
            selectinload(WeddingItem.event_quantities).selectinload(
                WeddingItemEventQuantity.event
            )
        )
        .order_by(WeddingItem.category)
    )
    return [
        WeddingItemRow(
            id=item.id,
            category=item.category,
            description=item.description,
            aggregation_method=item.aggregation_method,
            number_available=item.number_available,
            total_required=item.total_required,
            cost_per_unit=item.cost_per_unit,
            total_cost=item.total_cost,
            supplier_name=item.supplier_name,
            event_quantities=[
                EventQuantityRow(
                    event_id=q.event_id,
                    event_name=_event_name(q.event),
                    quantity_required=q.quantity_required,
                )
                for q in item.event_quantities
            ],
        )
        for item in result.all()
    ]


async def fetch_repurposing(
    session: AsyncSession, wedding_id: uuid.UUID
) -> list[RepurposingRow]:
    result = await session.scalars(
        select(RepurposingInstruction)
        .where(RepurposingInstruction.wedding_id == wedding_id)
        .options(
            selectinload(RepurposingInstruction.wedding_item),
            selectinload(RepurposingInstruction.from_event),
            selectinload(RepurposingInstruction.to_event),
        )
        .order_by(RepurposingInstruction.pickup_time)
    )
    return [
        RepurposingRow(
            id=r.id,
            item_description=r.wedding_item.description if r.wedding_item else "Unknown Item",
            from_event_name=_event_name(r.from_event),
            to_event_name=_event_name(r.to_event),
            pickup_location=r.pickup_location,
            pickup_time=r.pickup_time,
            dropoff_location=r.dropoff_location,
            dropoff_time=r.dropoff_time,
            responsible_party=r.responsible_party,
            handling_notes=r.handling_notes,
            status=r.status,
        )
        for r in result.all()
    ]


async def fetch_staff(
    session: AsyncSession, wedding_id: uuid.UUID
) -> list[StaffRequirementRow]:
    result = await session.scalars(
        select(StaffRequirement)
        .where(StaffRequirement.wedding_id == wedding_id)
        .options(selectinload(StaffRequirement.event), selectinload(StaffRequirement.vendor))
        .order_by(StaffRequirement.created_at)
    )
    return [
        StaffRequirementRow(
            id=s.id,
            event_id=s.event_id,
            event_name=_event_name(s.event),
            vendor_name=s.vendor.company_name if s.vendor else None,
            supervisors=s.supervisors,
            waiters=s.waiters,
            bartenders=s.bartenders,
            runners=s.runners,
            scullers=s.scullers,
            total_staff=s.total_staff,
            staff_notes=s.staff_notes,
        )
        for s in result.all()
    ]


async def fetch_transport(session: AsyncSession, wedding_id: uuid.UUID) -> list[TransportRow]:
    result = await session.scalars(
        select(ShuttleTransport)
        .where(ShuttleTransport.wedding_id == wedding_id)
        .options(selectinload(ShuttleTransport.event))
        .order_by(ShuttleTransport.collection_time)
    )
    return [
        TransportRow(
            id=t.id,
            event_id=t.event_id,
            event_name=_event_name(t.event),
            transport_type=t.transport_type,
            shuttle_name=t.shuttle_name,
            collection_location=t.collection_location,
            dropoff_location=t.dropoff_location,
            collection_time=t.collection_time,
            number_of_guests=t.number_of_guests,
            guest_names=t.guest_names,
        )
        for t in result.all()
    ]


async def fetch_stationery(session: AsyncSession, wedding_id: uuid.UUID) -> list[StationeryRow]:
    result = await session.scalars(
        select(StationeryItem)
        .where(StationeryItem.wedding_id == wedding_id)
        .order_by(StationeryItem.item_name)
    )
    return [StationeryRow.model_validate(s) for s in result.all()]


async def fetch_beauty(session: AsyncSession, wedding_id: uuid.UUID) -> list[BeautyServiceRow]:
    result = await session.scalars(
        select(BeautyService)
        .where(BeautyService.wedding_id == wedding_id)
        .options(selectinload(BeautyService.vendor))
        .order_by(BeautyService.appointment_time)
    )
    return [
        BeautyServiceRow(
            id=b.id,
            vendor_name=b.vendor.company_name if b.vendor else None,
            person_name=b.person_name,
            role=b.role,
            requires_hair=b.requires_hair,
            requires_makeup=b.requires_makeup,
            appointment_time=b.appointment_time,
        )
        for b in result.all()
    ]


async def fetch_cottages(session: AsyncSession, wedding_id: uuid.UUID) -> AccommodationData:
    result = await session.scalars(
        select(Cottage)
        .where(Cottage.wedding_id == wedding_id)
        .options(selectinload(Cottage.rooms))
        .order_by(Cottage.cottage_name)
    )
    return AccommodationData(cottages=[CottageRow.model_validate(c) for c in result.all()])


async def fetch_shopping(session: AsyncSession, wedding_id: uuid.UUID) -> list[ShoppingItemRow]:
    result = await session.scalars(
        select(ShoppingListItem)
        .where(ShoppingListItem.wedding_id == wedding_id)
        .order_by(ShoppingListItem.category)
    )
    return [ShoppingItemRow.model_validate(s) for s in result.all()]


async def fetch_budget(session: AsyncSession, wedding_id: uuid.UUID) -> BudgetSummary:
    result = await session.scalars(
        select(BudgetCategory)
        .where(BudgetCategory.wedding_id == wedding_id)
        .options(selectinload(BudgetCategory.line_items).selectinload(BudgetLineItem.vendor))
        .order_by(BudgetCategory.category_name)
    )
    return BudgetSummary(
        categories=[
            BudgetCategoryRow(
                id=c.id,
                category_name=c.category_name,
                projected_amount=c.projected_amount,
                actual_amount=c.actual_amount,
                variance=c.variance,
                line_items=[
                    BudgetLineItemRow(
                        id=li.id,
                        item_description=li.item_description,
                        vendor_name=li.vendor.company_name if li.vendor else None,
                        projected_cost=li.projected_cost,
                        actual_cost=li.actual_cost,
                        payment_status=li.payment_status,
                    )
                    for li in c.line_items
                ],
            )
            for c in result.all()
        ]
    )


async def fetch_vendors(session: AsyncSession, wedding_id: uuid.UUID) -> list[VendorRow]:
    result = await session.scalars(
        select(Vendor)
        .where(Vendor.wedding_id == wedding_id)
        .options(selectinload(Vendor.payments))
        .order_by(Vendor.vendor_type)
    )
    return [VendorRow.model_validate(v) for v in result.all()]


async def fetch_tasks(session: AsyncSession, wedding_id: uuid.UUID) -> list[TaskRow]:
    result = await session.scalars(
        select(PrePostWeddingTask)
        .where(PrePostWeddingTask.wedding_id == wedding_id)
        .order_by(PrePostWeddingTask.due_date, PrePostWeddingTask.due_time)
    )
    return [TaskRow.model_validate(t) for t in result.all()]


SOURCE_FETCHERS: dict[str, Fetcher] = {
    "events": fetch_events,
    "guests": fetch_guests,
    "attendance": fetch_attendance,
    "bar_orders": fetch_bar_orders,
    "wedding_items": fetch_wedding_items,
    "repurposing": fetch_repurposing,
    "staff": fetch_staff,
    "transport": fetch_transport,
    "stationery": fetch_stationery,
    "beauty": fetch_beauty,
    "cottages": fetch_cottages,
    "shopping": fetch_shopping,
    "budget": fetch_budget,
    "vendors": fetch_vendors,
    "tasks": fetch_tasks,
}


# ---------------------------------------------------------------------------
# Vendor brief
# ---------------------------------------------------------------------------


async def fetch_vendor(session: AsyncSession, vendor_id: uuid.UUID) -> VendorRow | None:
    vendor = await session.get(Vendor, vendor_id)
    if vendor is None:
        return None
    # payments stay unloaded here; fetch_vendor_payments queries them
    fields = {name: getattr(vendor, name) for name in VendorRow.model_fields if name != "payments"}
    return VendorRow(**fields)


async def fetch_vendor_payments(
    session: AsyncSession, vendor_id: uuid.UUID
) -> list[VendorPaymentRow]:
    result = await session.scalars(
        select(VendorPayment)
        .where(VendorPayment.vendor_id == vendor_id)
        .order_by(VendorPayment.due_date)
    )
    return [VendorPaymentRow.model_validate(p) for p in result.all()]


# ---------------------------------------------------------------------------
# Section counts
# ---------------------------------------------------------------------------


def _count_where(model, wedding_id: uuid.UUID):
    return select(func.count()).select_from(model).where(model.wedding_id == wedding_id)


def count_queries(wedding_id: uuid.UUID) -> dict[str, Any]:
    """Count-only statements keyed by ``SectionCounts`` field name."""

    def guests_of_type(guest_type: GuestType):
        return _count_where(Guest, wedding_id).where(Guest.guest_type == guest_type.value)

    return {
        "events": _count_where(Event, wedding_id),
        "guests": _count_where(Guest, wedding_id),
        "adult_guests": guests_of_type(GuestType.adult),
        "child_guests": guests_of_type(GuestType.child),
        "vendors": _count_where(Vendor, wedding_id),
        "bar_orders": _count_where(BarOrder, wedding_id),
        "wedding_items": _count_where(WeddingItem, wedding_id),
        "repurposing_instructions": _count_where(RepurposingInstruction, wedding_id),
        "staff_positions": _count_where(StaffRequirement, wedding_id),
        "shuttles": _count_where(ShuttleTransport, wedding_id),
        "stationery_items": _count_where(StationeryItem, wedding_id),
        "beauty_appointments": _count_where(BeautyService, wedding_id),
        "cottages": _count_where(Cottage, wedding_id),
        "rooms": (
            select(func.count())
            .select_from(CottageRoom)
            .join(Cottage, CottageRoom.cottage_id == Cottage.id)
            .where(Cottage.wedding_id == wedding_id)
        ),
        "shopping_items": _count_where(ShoppingListItem, wedding_id),
        "budget_categories": _count_where(BudgetCategory, wedding_id),
        "tasks": _count_where(PrePostWeddingTask, wedding_id),
    }
