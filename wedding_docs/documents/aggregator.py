"""Section data aggregation for wedding documents.

Builds a ``FunctionSheetData`` for a wedding and a set of requested
sections. Each logical data source is fetched at most once, in its own
session, and all sources run concurrently. Any single failure aborts the
whole aggregation.
"""

import asyncio
import logging
import uuid
from collections import Counter
from collections.abc import Iterable

from wedding_docs.core.db import async_session
from wedding_docs.core.exceptions import FetchFailedError, NotFoundError, ValidationError
from wedding_docs.core.observability import observe
from wedding_docs.documents.fetchers import (
    SOURCE_FETCHERS,
    count_queries,
    fetch_events,
    fetch_vendor,
    fetch_vendor_payments,
    fetch_wedding,
)
from wedding_docs.documents.schemas import (
    AttendanceMatrix,
    AttendanceRecord,
    EventRow,
    FunctionSheetData,
    GuestRow,
    MealSelectionSummary,
    SectionCounts,
    TimelineData,
    VendorBriefData,
)
from wedding_docs.documents.sections import DocumentSection, dedupe_sections

logger = logging.getLogger(__name__)

# Data sources each section needs. Sources shared between sections are
# fetched once per aggregation.
SECTION_SOURCES: dict[DocumentSection, tuple[str, ...]] = {
    DocumentSection.wedding_overview: (),
    DocumentSection.event_summary: ("events",),
    DocumentSection.guest_list: ("guests",),
    DocumentSection.attendance_matrix: ("guests", "events", "attendance"),
    DocumentSection.meal_selections: ("guests",),
    DocumentSection.bar_orders: ("bar_orders",),
    DocumentSection.furniture_equipment: ("wedding_items",),
    DocumentSection.repurposing: ("repurposing",),
    DocumentSection.staff_requirements: ("staff",),
    DocumentSection.transportation: ("transport",),
    DocumentSection.stationery: ("stationery",),
    DocumentSection.beauty_services: ("beauty",),
    DocumentSection.accommodation: ("cottages",),
    DocumentSection.shopping_list: ("shopping",),
    DocumentSection.budget_summary: ("budget",),
    DocumentSection.vendor_contacts: ("vendors",),
    DocumentSection.timeline: ("events", "tasks"),
}


def _as_uuid(value: uuid.UUID | str, field: str) -> uuid.UUID:
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(str(value))
    except ValueError as e:
        raise ValidationError(f"Invalid {field}: {value!r}") from e


def resolve_sources(sections: Iterable[DocumentSection]) -> dict[str, list[DocumentSection]]:
    """Map each distinct source to the requested sections it feeds."""
    sources: dict[str, list[DocumentSection]] = {}
    for section in sections:
        for source in SECTION_SOURCES[section]:
            sources.setdefault(source, []).append(section)
    return sources


async def _fetch_source(source: str, ident: uuid.UUID, fetcher, sections=()):
    try:
        async with async_session() as session:
            return await fetcher(session, ident)
    except Exception as e:
        logger.error("Failed to fetch %s for %s: %s", source, ident, e)
        raise FetchFailedError(source, [s.value for s in sections]) from e


# ---------------------------------------------------------------------------
# Derived aggregates
# ---------------------------------------------------------------------------


def aggregate_meal_selections(guests: Iterable[GuestRow]) -> MealSelectionSummary:
    """Tally course choices and dietary restriction tokens across guests."""
    starters: Counter[str] = Counter()
    mains: Counter[str] = Counter()
    desserts: Counter[str] = Counter()
    dietary: Counter[str] = Counter()

    for guest in guests:
        if guest.starter_choice:
            starters[guest.starter_choice] += 1
        if guest.main_choice:
            mains[guest.main_choice] += 1
        if guest.dessert_choice:
            desserts[guest.dessert_choice] += 1
        if guest.dietary_restrictions:
            for token in guest.dietary_restrictions.split(","):
                token = token.strip()
                if token:
                    dietary[token] += 1

    return MealSelectionSummary(
        starters=dict(starters),
        mains=dict(mains),
        desserts=dict(desserts),
        dietary_restrictions=dict(dietary),
    )


def build_attendance_pivot(
    guests: Iterable[GuestRow],
    events: Iterable[EventRow],
    records: Iterable[AttendanceRecord],
) -> dict[uuid.UUID, dict[uuid.UUID, bool]]:
    """Guest x event attendance matrix.

    Every guest gets an entry for every event, defaulting to ``False``.
    Records pointing at guests or events outside the lists are ignored.
    """
    event_ids = [e.id for e in events]
    pivot = {g.id: dict.fromkeys(event_ids, False) for g in guests}
    for record in records:
        row = pivot.get(record.guest_id)
        if row is not None and record.event_id in row:
            row[record.event_id] = record.attending
    return pivot


# ---------------------------------------------------------------------------
# Function sheet
# ---------------------------------------------------------------------------


@observe(name="aggregate_document_data")
async def aggregate_document_data(
    wedding_id: uuid.UUID | str,
    sections: Iterable[DocumentSection | str],
) -> FunctionSheetData:
    """Fetch everything the requested sections need and assemble the model.

    Raises:
        NotFoundError: the wedding does not exist.
        FetchFailedError: any query failed; names the source and its sections.
    """
    wedding_id = _as_uuid(wedding_id, "wedding_id")
    requested = dedupe_sections(sections)

    wedding = await _fetch_source("wedding", wedding_id, fetch_wedding, requested)
    if wedding is None:
        raise NotFoundError("wedding", str(wedding_id))

    sources = resolve_sources(requested)
    names = list(sources)
    fetched = await asyncio.gather(
        *(
            _fetch_source(name, wedding_id, SOURCE_FETCHERS[name], sources[name])
            for name in names
        )
    )
    results = dict(zip(names, fetched))
    logger.info(
        "Aggregated wedding %s: %d sections from %d sources",
        wedding_id,
        len(requested),
        len(names),
    )

    fields: dict = {}
    for section in requested:
        match section:
            case DocumentSection.event_summary:
                fields["events"] = results["events"]
            case DocumentSection.guest_list:
                fields["guests"] = results["guests"]
            case DocumentSection.attendance_matrix:
                fields["attendance"] = AttendanceMatrix(
                    events=results["events"],
                    guests=results["guests"],
                    records=results["attendance"],
                    pivot=build_attendance_pivot(
                        results["guests"], results["events"], results["attendance"]
                    ),
                )
            case DocumentSection.meal_selections:
                fields["meal_selections"] = aggregate_meal_selections(results["guests"])
            case DocumentSection.bar_orders:
                fields["bar_orders"] = results["bar_orders"]
            case DocumentSection.furniture_equipment:
                fields["wedding_items"] = results["wedding_items"]
            case DocumentSection.repurposing:
                fields["repurposing"] = results["repurposing"]
            case DocumentSection.staff_requirements:
                fields["staff_requirements"] = results["staff"]
            case DocumentSection.transportation:
                fields["transportation"] = results["transport"]
            case DocumentSection.stationery:
                fields["stationery"] = results["stationery"]
            case DocumentSection.beauty_services:
                fields["beauty_services"] = results["beauty"]
            case DocumentSection.accommodation:
                fields["accommodation"] = results["cottages"]
            case DocumentSection.shopping_list:
                fields["shopping_list"] = results["shopping"]
            case DocumentSection.budget_summary:
                fields["budget"] = results["budget"]
            case DocumentSection.vendor_contacts:
                fields["vendors"] = results["vendors"]
            case DocumentSection.timeline:
                fields["timeline"] = TimelineData(
                    events=results["events"], tasks=results["tasks"]
                )

    return FunctionSheetData(wedding=wedding, **fields)


# ---------------------------------------------------------------------------
# Preview counts
# ---------------------------------------------------------------------------


async def _count(name: str, statement) -> int:
    try:
        async with async_session() as session:
            return (await session.scalar(statement)) or 0
    except Exception as e:
        logger.error("Count query %s failed: %s", name, e)
        raise FetchFailedError(name) from e


@observe(name="get_section_counts")
async def get_section_counts(wedding_id: uuid.UUID | str) -> SectionCounts:
    """Row counts for every section in one concurrent round of count queries."""
    wedding_id = _as_uuid(wedding_id, "wedding_id")
    queries = count_queries(wedding_id)
    counts = await asyncio.gather(*(_count(name, stmt) for name, stmt in queries.items()))
    return SectionCounts(**dict(zip(queries, counts)))


# ---------------------------------------------------------------------------
# Vendor brief
# ---------------------------------------------------------------------------


@observe(name="aggregate_vendor_brief_data")
async def aggregate_vendor_brief_data(
    vendor_id: uuid.UUID | str,
    wedding_id: uuid.UUID | str,
) -> VendorBriefData:
    vendor_id = _as_uuid(vendor_id, "vendor_id")
    wedding_id = _as_uuid(wedding_id, "wedding_id")

    vendor, wedding, events, payments = await asyncio.gather(
        _fetch_source("vendor", vendor_id, fetch_vendor),
        _fetch_source("wedding", wedding_id, fetch_wedding),
        _fetch_source("events", wedding_id, fetch_events),
        _fetch_source("payments", vendor_id, fetch_vendor_payments),
    )
    if vendor is None:
        raise NotFoundError("vendor", str(vendor_id))
    if wedding is None:
        raise NotFoundError("wedding", str(wedding_id))

    return VendorBriefData(
        vendor=vendor.model_copy(update={"payments": payments}),
        wedding=wedding,
        events=events,
        payments=payments,
        special_instructions=vendor.special_instructions,
    )
