"""Tests for section data aggregation."""

import uuid
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from wedding_docs.core.exceptions import FetchFailedError, NotFoundError, ValidationError
from wedding_docs.documents.aggregator import (
    aggregate_document_data,
    aggregate_meal_selections,
    aggregate_vendor_brief_data,
    build_attendance_pivot,
    get_section_counts,
    resolve_sources,
)
from wedding_docs.documents.schemas import (
    AccommodationData,
    BudgetSummary,
    SectionCounts,
    TimelineData,
)
from wedding_docs.documents.sections import DocumentSection

AGG = "wedding_docs.documents.aggregator"
FETCHERS = "wedding_docs.documents.fetchers.SOURCE_FETCHERS"


def _session_ctx(session=None):
    mock_session_ctx = AsyncMock()
    mock_session_ctx.__aenter__ = AsyncMock(return_value=session or AsyncMock())
    mock_session_ctx.__aexit__ = AsyncMock(return_value=False)
    return mock_session_ctx


def _source_mocks(events, guests, attendance_records):
    return {
        "events": AsyncMock(return_value=events),
        "guests": AsyncMock(return_value=guests),
        "attendance": AsyncMock(return_value=attendance_records),
        "bar_orders": AsyncMock(return_value=[]),
        "wedding_items": AsyncMock(return_value=[]),
        "repurposing": AsyncMock(return_value=[]),
        "staff": AsyncMock(return_value=[]),
        "transport": AsyncMock(return_value=[]),
        "stationery": AsyncMock(return_value=[]),
        "beauty": AsyncMock(return_value=[]),
        "cottages": AsyncMock(return_value=AccommodationData()),
        "shopping": AsyncMock(return_value=[]),
        "budget": AsyncMock(return_value=BudgetSummary()),
        "vendors": AsyncMock(return_value=[]),
        "tasks": AsyncMock(return_value=[]),
    }


# ---------------------------------------------------------------------------
# Derived aggregates
# ---------------------------------------------------------------------------


def test_meal_tally_counts_only_guests_with_a_choice(guests):
    summary = aggregate_meal_selections(guests)

    assert summary.starters == {"Soup": 1, "Salad": 1}
    assert sum(summary.starters.values()) == 2
    assert summary.mains == {"Beef": 1}
    assert summary.desserts == {"Cake": 1}


def test_meal_tally_trims_and_drops_empty_dietary_tokens(guests):
    summary = aggregate_meal_selections(guests)
    assert summary.dietary_restrictions == {"Vegan": 1, "Nut-free": 1}


def test_meal_tally_empty_guest_list():
    summary = aggregate_meal_selections([])
    assert summary.starters == {}
    assert summary.dietary_restrictions == {}


def test_attendance_pivot_covers_every_guest_and_event(guests, events, attendance_records):
    pivot = build_attendance_pivot(guests, events, attendance_records)

    assert len(pivot) == 3
    assert all(len(row) == 2 for row in pivot.values())
    alice, bobby, carol = guests
    ceremony, reception = events
    assert pivot[alice.id] == {ceremony.id: True, reception.id: True}
    assert pivot[bobby.id] == {ceremony.id: True, reception.id: False}
    assert pivot[carol.id] == {ceremony.id: False, reception.id: False}


def test_attendance_pivot_ignores_unknown_records(guests, events, attendance_records):
    from wedding_docs.documents.schemas import AttendanceRecord

    stray = AttendanceRecord(guest_id=uuid.uuid4(), event_id=events[0].id, attending=True)
    pivot = build_attendance_pivot(guests, events, [*attendance_records, stray])
    assert stray.guest_id not in pivot
    assert len(pivot) == 3


def test_resolve_sources_shares_guest_fetch():
    sources = resolve_sources(
        [
            DocumentSection.guest_list,
            DocumentSection.meal_selections,
            DocumentSection.attendance_matrix,
        ]
    )
    assert set(sources) == {"guests", "events", "attendance"}
    assert sources["guests"] == [
        DocumentSection.guest_list,
        DocumentSection.meal_selections,
        DocumentSection.attendance_matrix,
    ]


def test_resolve_sources_overview_needs_nothing():
    assert resolve_sources([DocumentSection.wedding_overview]) == {}


# ---------------------------------------------------------------------------
# aggregate_document_data
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_only_requested_sections_are_populated(
    wedding, events, guests, attendance_records
):
    mocks = _source_mocks(events, guests, attendance_records)
    with (
        patch(f"{AGG}.async_session", return_value=_session_ctx()),
        patch(f"{AGG}.fetch_wedding", AsyncMock(return_value=wedding)),
        patch.dict(FETCHERS, mocks),
    ):
        data = await aggregate_document_data(
            wedding.id, [DocumentSection.wedding_overview, DocumentSection.guest_list]
        )

    assert data.wedding == wedding
    assert data.guests == guests
    for field in (
        "events",
        "attendance",
        "meal_selections",
        "bar_orders",
        "budget",
        "vendors",
        "timeline",
        "accommodation",
    ):
        assert getattr(data, field) is None, field


@pytest.mark.asyncio
async def test_each_source_fetched_once(wedding, events, guests, attendance_records):
    mocks = _source_mocks(events, guests, attendance_records)
    with (
        patch(f"{AGG}.async_session", return_value=_session_ctx()),
        patch(f"{AGG}.fetch_wedding", AsyncMock(return_value=wedding)),
        patch.dict(FETCHERS, mocks),
    ):
        await aggregate_document_data(
            str(wedding.id),
            [
                "guest_list",
                "meal_selections",
                "attendance_matrix",
                "event_summary",
                "timeline",
                "guest_list",
            ],
        )

    assert mocks["guests"].await_count == 1
    assert mocks["events"].await_count == 1
    assert mocks["attendance"].await_count == 1
    assert mocks["tasks"].await_count == 1
    assert mocks["budget"].await_count == 0
    assert mocks["vendors"].await_count == 0


@pytest.mark.asyncio
async def test_guest_sections_scenario(wedding, events, guests, attendance_records):
    mocks = _source_mocks(events, guests, attendance_records)
    with (
        patch(f"{AGG}.async_session", return_value=_session_ctx()),
        patch(f"{AGG}.fetch_wedding", AsyncMock(return_value=wedding)),
        patch.dict(FETCHERS, mocks),
    ):
        data = await aggregate_document_data(
            wedding.id,
            [
                DocumentSection.guest_list,
                DocumentSection.meal_selections,
                DocumentSection.attendance_matrix,
            ],
        )

    assert len(data.guests) == 3
    assert sum(data.meal_selections.starters.values()) == 2
    cells = [v for row in data.attendance.pivot.values() for v in row.values()]
    assert len(cells) == 6
    assert all(isinstance(v, bool) for v in cells)


@pytest.mark.asyncio
async def test_requested_but_empty_sections_are_empty_not_none(wedding):
    mocks = _source_mocks([], [], [])
    with (
        patch(f"{AGG}.async_session", return_value=_session_ctx()),
        patch(f"{AGG}.fetch_wedding", AsyncMock(return_value=wedding)),
        patch.dict(FETCHERS, mocks),
    ):
        data = await aggregate_document_data(
            wedding.id,
            [DocumentSection.bar_orders, DocumentSection.accommodation, DocumentSection.timeline],
        )

    assert data.bar_orders == []
    assert data.accommodation == AccommodationData()
    assert data.timeline == TimelineData()


@pytest.mark.asyncio
async def test_missing_wedding_raises_not_found(events, guests, attendance_records):
    mocks = _source_mocks(events, guests, attendance_records)
    wedding_id = uuid.uuid4()
    with (
        patch(f"{AGG}.async_session", return_value=_session_ctx()),
        patch(f"{AGG}.fetch_wedding", AsyncMock(return_value=None)),
        patch.dict(FETCHERS, mocks),
    ):
        with pytest.raises(NotFoundError) as exc_info:
            await aggregate_document_data(wedding_id, [DocumentSection.guest_list])

    assert exc_info.value.entity == "wedding"
    assert exc_info.value.entity_id == str(wedding_id)
    assert mocks["guests"].await_count == 0


@pytest.mark.asyncio
async def test_failed_source_aborts_with_source_name(
    wedding, events, guests, attendance_records
):
    mocks = _source_mocks(events, guests, attendance_records)
    mocks["budget"] = AsyncMock(side_effect=RuntimeError("connection reset"))
    with (
        patch(f"{AGG}.async_session", return_value=_session_ctx()),
        patch(f"{AGG}.fetch_wedding", AsyncMock(return_value=wedding)),
        patch.dict(FETCHERS, mocks),
    ):
        with pytest.raises(FetchFailedError) as exc_info:
            await aggregate_document_data(
                wedding.id, [DocumentSection.guest_list, DocumentSection.budget_summary]
            )

    assert exc_info.value.source == "budget"
    assert exc_info.value.sections == ("budget_summary",)
    assert isinstance(exc_info.value.__cause__, RuntimeError)


@pytest.mark.asyncio
async def test_invalid_wedding_id_raises_validation_error():
    with pytest.raises(ValidationError):
        await aggregate_document_data("not-a-uuid", [DocumentSection.guest_list])


@pytest.mark.asyncio
async def test_unknown_section_is_rejected(wedding):
    with pytest.raises(ValueError):
        await aggregate_document_data(wedding.id, ["seating_chart"])


# ---------------------------------------------------------------------------
# Section counts
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_section_counts_run_every_count_query(wedding):
    mock_session = AsyncMock()
    mock_session.scalar = AsyncMock(return_value=4)
    with patch(f"{AGG}.async_session", return_value=_session_ctx(mock_session)):
        counts = await get_section_counts(wedding.id)

    assert isinstance(counts, SectionCounts)
    assert counts.guests == 4
    assert counts.rooms == 4
    assert mock_session.scalar.await_count == len(SectionCounts.model_fields)


@pytest.mark.asyncio
async def test_section_counts_treat_null_as_zero(wedding):
    mock_session = AsyncMock()
    mock_session.scalar = AsyncMock(return_value=None)
    with patch(f"{AGG}.async_session", return_value=_session_ctx(mock_session)):
        counts = await get_section_counts(wedding.id)
    assert counts.tasks == 0


@pytest.mark.asyncio
async def test_section_count_failure_raises_fetch_failed(wedding):
    mock_session = AsyncMock()
    mock_session.scalar = AsyncMock(side_effect=RuntimeError("boom"))
    with patch(f"{AGG}.async_session", return_value=_session_ctx(mock_session)):
        with pytest.raises(FetchFailedError):
            await get_section_counts(wedding.id)


# ---------------------------------------------------------------------------
# Vendor brief
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_vendor_brief_data_combines_vendor_wedding_events(wedding, events, vendors):
    vendor = vendors[0].model_copy(update={"payments": []})
    payments = vendors[0].payments
    with (
        patch(f"{AGG}.async_session", return_value=_session_ctx()),
        patch(f"{AGG}.fetch_vendor", AsyncMock(return_value=vendor)),
        patch(f"{AGG}.fetch_wedding", AsyncMock(return_value=wedding)),
        patch(f"{AGG}.fetch_events", AsyncMock(return_value=events)),
        patch(f"{AGG}.fetch_vendor_payments", AsyncMock(return_value=payments)),
    ):
        data = await aggregate_vendor_brief_data(vendor.id, wedding.id)

    assert data.vendor.company_name == "Feast Co"
    assert data.vendor.payments == payments
    assert data.payments == payments
    assert data.events == events
    assert data.special_instructions == "Load in through the kitchen door."


@pytest.mark.asyncio
async def test_vendor_brief_missing_vendor(wedding, events):
    with (
        patch(f"{AGG}.async_session", return_value=_session_ctx()),
        patch(f"{AGG}.fetch_vendor", AsyncMock(return_value=None)),
        patch(f"{AGG}.fetch_wedding", AsyncMock(return_value=wedding)),
        patch(f"{AGG}.fetch_events", AsyncMock(return_value=events)),
        patch(f"{AGG}.fetch_vendor_payments", AsyncMock(return_value=[])),
    ):
        with pytest.raises(NotFoundError) as exc_info:
            await aggregate_vendor_brief_data(uuid.uuid4(), wedding.id)
    assert exc_info.value.entity == "vendor"


@pytest.mark.asyncio
async def test_fetch_runs_in_its_own_session(wedding):
    mock_session = MagicMock(name="session")
    fetcher = AsyncMock(return_value=[])
    with (
        patch(f"{AGG}.async_session", return_value=_session_ctx(mock_session)) as factory,
        patch(f"{AGG}.fetch_wedding", AsyncMock(return_value=wedding)),
        patch.dict(FETCHERS, {"events": fetcher}),
    ):
        await aggregate_document_data(wedding.id, [DocumentSection.event_summary])

    assert factory.call_count == 2
    fetcher.assert_awaited_once_with(mock_session, wedding.id)
