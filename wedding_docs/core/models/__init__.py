from wedding_docs.core.models.accommodation import Cottage, CottageRoom
from wedding_docs.core.models.bar_order import BarOrder, BarOrderItem
from wedding_docs.core.models.base import Base
from wedding_docs.core.models.budget import BudgetCategory, BudgetLineItem
from wedding_docs.core.models.enums import AggregationMethod, GuestType
from wedding_docs.core.models.guest import Guest, GuestEventAttendance
from wedding_docs.core.models.inventory import (
    RepurposingInstruction,
    WeddingItem,
    WeddingItemEventQuantity,
)
from wedding_docs.core.models.logistics import (
    BeautyService,
    ShuttleTransport,
    StaffRequirement,
    StationeryItem,
)
from wedding_docs.core.models.shopping_list import ShoppingListItem
from wedding_docs.core.models.task import PrePostWeddingTask
from wedding_docs.core.models.vendor import Vendor, VendorPayment
from wedding_docs.core.models.wedding import Event, Wedding

__all__ = [
    "Base",
    "AggregationMethod",
    "GuestType",
    "Wedding",
    "Event",
    "Guest",
    "GuestEventAttendance",
    "BarOrder",
    "BarOrderItem",
    "WeddingItem",
    "WeddingItemEventQuantity",
    "RepurposingInstruction",
    "StaffRequirement",
    "ShuttleTransport",
    "StationeryItem",
    "BeautyService",
    "Cottage",
    "CottageRoom",
    "ShoppingListItem",
    "BudgetCategory",
    "BudgetLineItem",
    "Vendor",
    "VendorPayment",
    "PrePostWeddingTask",
]
