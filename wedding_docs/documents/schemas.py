"""Pydantic models for the unified document model and export options."""

import base64
import uuid
from datetime import date, time
from decimal import Decimal
from typing import Literal, NamedTuple

from pydantic import BaseModel, ConfigDict, Field

from wedding_docs.core.config import settings
from wedding_docs.core.models.enums import AggregationMethod
from wedding_docs.documents.sections import DocumentSection


class _Row(BaseModel):
    model_config = ConfigDict(from_attributes=True)


# ---------------------------------------------------------------------------
# Section rows
# ---------------------------------------------------------------------------


class WeddingOverview(_Row):
    id: uuid.UUID
    bride_name: str
    groom_name: str
    wedding_date: date
    venue_name: str | None = None
    venue_address: str | None = None
    venue_contact_name: str | None = None
    venue_contact_phone: str | None = None
    venue_contact_email: str | None = None
    guest_count_adults: int = 0
    guest_count_children: int = 0
    status: str = "planning"
    notes: str | None = None

    @property
    def couple(self) -> str:
        return f"{self.bride_name} & {self.groom_name}"


class EventRow(_Row):
    id: uuid.UUID
    event_order: int
    event_name: str
    event_date: date
    event_start_time: time
    event_end_time: time
    event_location: str | None = None
    event_type: str = ""
    expected_guests_adults: int = 0
    expected_guests_children: int = 0
    duration_hours: Decimal = Decimal(0)
    notes: str | None = None


class GuestRow(_Row):
    id: uuid.UUID
    name: str
    guest_type: str = "adult"
    invitation_status: str = "pending"
    table_number: str | None = None
    dietary_restrictions: str | None = None
    allergies: str | None = None
    starter_choice: str | None = None
    main_choice: str | None = None
    dessert_choice: str | None = None
    email: str | None = None
    phone: str | None = None


class AttendanceRecord(BaseModel):
    guest_id: uuid.UUID
    event_id: uuid.UUID
    attending: bool = False
    shuttle_to_event: bool = False
    shuttle_from_event: bool = False


class AttendanceMatrix(BaseModel):
    """Guests, events and the flat attendance tuples joining them.

    ``pivot`` is keyed by guest id then event id and covers every guest and
    every event. A pair missing from ``records`` is ``False``.
    """

    events: list[EventRow] = []
    guests: list[GuestRow] = []
    records: list[AttendanceRecord] = []
    pivot: dict[uuid.UUID, dict[uuid.UUID, bool]] = {}

    def is_attending(self, guest_id: uuid.UUID, event_id: uuid.UUID) -> bool:
        return self.pivot.get(guest_id, {}).get(event_id, False)


class MealSelectionSummary(BaseModel):
    starters: dict[str, int] = {}
    mains: dict[str, int] = {}
    desserts: dict[str, int] = {}
    dietary_restrictions: dict[str, int] = {}


class BarOrderItemRow(_Row):
    id: uuid.UUID
    item_name: str
    percentage: Decimal = Decimal(0)
    calculated_servings: Decimal = Decimal(0)
    servings_per_unit: Decimal = Decimal(1)
    units_needed: Decimal = Decimal(0)
    cost_per_unit: Decimal = Decimal(0)
    total_cost: Decimal = Decimal(0)


class BarOrderRow(BaseModel):
    id: uuid.UUID
    event_id: uuid.UUID | None = None
    event_name: str = "Unknown Event"
    guest_count_adults: int = 0
    guest_count_children: int = 0
    event_duration_hours: Decimal = Decimal(0)
    total_servings_per_person: Decimal = Decimal(0)
    items: list[BarOrderItemRow] = []


class EventQuantityRow(BaseModel):
    event_id: uuid.UUID
    event_name: str
    quantity_required: int = 0


class WeddingItemRow(BaseModel):
    id: uuid.UUID
    category: str
    description: str
    aggregation_method: AggregationMethod = AggregationMethod.ADD
    number_available: int = 0
    total_required: int = 0
    cost_per_unit: Decimal = Decimal(0)
    total_cost: Decimal = Decimal(0)
    supplier_name: str | None = None
    event_quantities: list[EventQuantityRow] = []


class RepurposingRow(BaseModel):
    id: uuid.UUID
    item_description: str
    from_event_name: str
    to_event_name: str
    pickup_location: str
    pickup_time: time
    dropoff_location: str
    dropoff_time: time
    responsible_party: str | None = None
    handling_notes: str | None = None
    status: str = "pending"


class StaffRequirementRow(BaseModel):
    id: uuid.UUID
    event_id: uuid.UUID
    event_name: str
    vendor_name: str | None = None
    supervisors: int = 0
    waiters: int = 0
    bartenders: int = 0
    runners: int = 0
    scullers: int = 0
    total_staff: int = 0
    staff_notes: str | None = None


class TransportRow(BaseModel):
    id: uuid.UUID
    event_id: uuid.UUID
    event_name: str
    transport_type: str
    shuttle_name: str | None = None
    collection_location: str
    dropoff_location: str
    collection_time: time
    number_of_guests: int = 0
    guest_names: str | None = None


class StationeryRow(_Row):
    id: uuid.UUID
    item_name: str
    details: str | None = None
    quantity: int = 0
    cost_per_item: Decimal = Decimal(0)
    total_cost: Decimal = Decimal(0)
    content: str | None = None


class BeautyServiceRow(BaseModel):
    id: uuid.UUID
    vendor_name: str | None = None
    person_name: str
    role: str
    requires_hair: bool = False
    requires_makeup: bool = False
    appointment_time: time | None = None


class CottageRoomRow(_Row):
    id: uuid.UUID
    room_name: str
    bed_type: str
    bathroom_type: str
    guest_name: str | None = None
    is_occupied: bool = False
    number_of_nights: int = 0
    room_cost: Decimal = Decimal(0)


class CottageRow(_Row):
    id: uuid.UUID
    cottage_name: str
    charge_per_room_per_night: Decimal = Decimal(0)
    rooms: list[CottageRoomRow] = []


class AccommodationData(BaseModel):
    cottages: list[CottageRow] = []


class ShoppingItemRow(_Row):
    id: uuid.UUID
    item_name: str
    category: str
    description: str | None = None
    quantity: Decimal = Decimal(1)
    unit: str | None = None
    estimated_cost: Decimal = Decimal(0)
    actual_cost: Decimal | None = None
    store: str | None = None
    purchased: bool = False


class BudgetLineItemRow(BaseModel):
    id: uuid.UUID
    item_description: str
    vendor_name: str | None = None
    projected_cost: Decimal = Decimal(0)
    actual_cost: Decimal | None = None
    payment_status: str = "pending"


class BudgetCategoryRow(BaseModel):
    id: uuid.UUID
    category_name: str
    projected_amount: Decimal = Decimal(0)
    actual_amount: Decimal = Decimal(0)
    variance: Decimal = Decimal(0)
    line_items: list[BudgetLineItemRow] = []


class BudgetTotals(NamedTuple):
    projected: Decimal
    actual: Decimal
    variance: Decimal


class BudgetSummary(BaseModel):
    categories: list[BudgetCategoryRow] = []

    @property
    def totals(self) -> BudgetTotals:
        """Grand totals, summed from ``categories`` on every access."""
        return BudgetTotals(
            projected=sum((c.projected_amount for c in self.categories), Decimal(0)),
            actual=sum((c.actual_amount for c in self.categories), Decimal(0)),
            variance=sum((c.variance for c in self.categories), Decimal(0)),
        )


class VendorPaymentRow(_Row):
    id: uuid.UUID
    milestone_name: str
    due_date: date
    amount: Decimal = Decimal(0)
    status: str = "pending"
    paid_date: date | None = None


class VendorRow(_Row):
    id: uuid.UUID
    vendor_type: str
    company_name: str
    contact_name: str | None = None
    contact_email: str | None = None
    contact_phone: str | None = None
    address: str | None = None
    website: str | None = None
    contract_signed: bool = False
    contract_date: date | None = None
    contract_value: Decimal | None = None
    special_instructions: str | None = None
    payments: list[VendorPaymentRow] = []


class TaskRow(_Row):
    id: uuid.UUID
    task_type: str
    title: str
    description: str | None = None
    due_date: date
    due_time: time | None = None
    is_pre_wedding: bool = True
    assigned_to: str | None = None
    location: str | None = None
    status: str = "pending"
    priority: str = "medium"


class TimelineData(BaseModel):
    events: list[EventRow] = []
    tasks: list[TaskRow] = []


# ---------------------------------------------------------------------------
# Aggregated models
# ---------------------------------------------------------------------------


class FunctionSheetData(BaseModel):
    """Everything one Function Sheet renders.

    A section field is ``None`` when its section was not requested and an
    empty list (or empty composite) when it was requested but had no rows.
    """

    wedding: WeddingOverview
    events: list[EventRow] | None = None
    guests: list[GuestRow] | None = None
    attendance: AttendanceMatrix | None = None
    meal_selections: MealSelectionSummary | None = None
    bar_orders: list[BarOrderRow] | None = None
    wedding_items: list[WeddingItemRow] | None = None
    repurposing: list[RepurposingRow] | None = None
    staff_requirements: list[StaffRequirementRow] | None = None
    transportation: list[TransportRow] | None = None
    stationery: list[StationeryRow] | None = None
    beauty_services: list[BeautyServiceRow] | None = None
    accommodation: AccommodationData | None = None
    shopping_list: list[ShoppingItemRow] | None = None
    budget: BudgetSummary | None = None
    vendors: list[VendorRow] | None = None
    timeline: TimelineData | None = None


class SectionCounts(BaseModel):
    events: int = 0
    guests: int = 0
    adult_guests: int = 0
    child_guests: int = 0
    vendors: int = 0
    bar_orders: int = 0
    wedding_items: int = 0
    repurposing_instructions: int = 0
    staff_positions: int = 0
    shuttles: int = 0
    stationery_items: int = 0
    beauty_appointments: int = 0
    cottages: int = 0
    rooms: int = 0
    shopping_items: int = 0
    budget_categories: int = 0
    tasks: int = 0

    def for_section(self, section: DocumentSection | str) -> int:
        """Preview row count shown next to a section checkbox."""
        section = DocumentSection(section)
        match section:
            case DocumentSection.wedding_overview:
                return 1
            case DocumentSection.event_summary:
                return self.events
            case (
                DocumentSection.guest_list
                | DocumentSection.attendance_matrix
                | DocumentSection.meal_selections
            ):
                return self.guests
            case DocumentSection.bar_orders:
                return self.bar_orders
            case DocumentSection.furniture_equipment:
                return self.wedding_items
            case DocumentSection.repurposing:
                return self.repurposing_instructions
            case DocumentSection.staff_requirements:
                return self.staff_positions
            case DocumentSection.transportation:
                return self.shuttles
            case DocumentSection.stationery:
                return self.stationery_items
            case DocumentSection.beauty_services:
                return self.beauty_appointments
            case DocumentSection.accommodation:
                return self.rooms
            case DocumentSection.shopping_list:
                return self.shopping_items
            case DocumentSection.budget_summary:
                return self.budget_categories
            case DocumentSection.vendor_contacts:
                return self.vendors
            case DocumentSection.timeline:
                return self.events + self.tasks


class VendorBriefData(BaseModel):
    vendor: VendorRow
    wedding: WeddingOverview
    events: list[EventRow] = []
    payments: list[VendorPaymentRow] = []
    special_instructions: str | None = None


# ---------------------------------------------------------------------------
# Branding and options
# ---------------------------------------------------------------------------

HEX_COLOR_PATTERN = r"^#[0-9A-Fa-f]{6}$"

DocumentFormat = Literal["pdf", "docx", "both"]


class DocumentBranding(BaseModel):
    model_config = ConfigDict(frozen=True)

    primary_color: str = Field(
        default_factory=lambda: settings.default_primary_color,
        pattern=HEX_COLOR_PATTERN,
    )
    logo: str | bytes | None = None
    company_name: str | None = None
    tagline: str | None = None
    contact_email: str | None = None
    contact_phone: str | None = None
    website: str | None = None

    @property
    def rgb(self) -> tuple[int, int, int]:
        value = self.primary_color.lstrip("#")
        return int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16)

    @property
    def hex_digits(self) -> str:
        """Colour without the leading ``#``, upper-cased."""
        return self.primary_color.lstrip("#").upper()

    def logo_bytes(self) -> bytes | None:
        """Decode the logo into raw image bytes.

        Accepts raw bytes, a ``data:image/...;base64,`` URL or bare base64.
        Raises ``ValueError`` when the payload is not valid base64.
        """
        if self.logo is None:
            return None
        if isinstance(self.logo, bytes):
            return self.logo
        payload = self.logo
        if payload.startswith("data:"):
            _, _, payload = payload.partition(",")
        return base64.b64decode(payload, validate=True)

    def contact_lines(self) -> list[str]:
        lines = [v for v in (self.company_name, self.tagline) if v]
        contacts = [v for v in (self.contact_email, self.contact_phone, self.website) if v]
        if contacts:
            lines.append(" | ".join(contacts))
        return lines


class FunctionSheetOptions(BaseModel):
    wedding_id: uuid.UUID
    sections: list[DocumentSection] = Field(min_length=1)
    format: DocumentFormat = "pdf"
    branding: DocumentBranding = Field(default_factory=DocumentBranding)


class VendorBriefOptions(BaseModel):
    vendor_id: uuid.UUID
    wedding_id: uuid.UUID
    format: DocumentFormat = "pdf"
    branding: DocumentBranding = Field(default_factory=DocumentBranding)


class GeneratedDocument(BaseModel):
    filename: str
    content_type: str
    content: bytes
