"""Format-neutral content blocks shared by the PDF and DOCX renderers.

Section content is built once as a list of blocks. The two targets only
decide how each block is laid out, so the rows and labels they print are
identical.
"""

from dataclasses import dataclass
from datetime import date, datetime, time
from decimal import Decimal
from typing import Literal

Tone = Literal["normal", "muted", "danger", "success"]
Align = Literal["left", "center", "right"]


@dataclass(frozen=True)
class Subheading:
    text: str


@dataclass(frozen=True)
class TextLine:
    text: str
    tone: Tone = "normal"
    bold: bool = False
    italic: bool = False


@dataclass(frozen=True)
class FieldList:
    """Label/value pairs printed as ``Label: value`` lines."""

    items: list[tuple[str, str]]


@dataclass(frozen=True)
class Column:
    header: str
    width: float  # millimetres on the PDF page, scaled for DOCX
    align: Align = "left"


@dataclass(frozen=True)
class Table:
    columns: list[Column]
    rows: list[list[str]]
    total_row: list[str] | None = None
    font_size: float = 8

    @property
    def headers(self) -> list[str]:
        return [c.header for c in self.columns]


Block = Subheading | TextLine | FieldList | Table


# ---------------------------------------------------------------------------
# Value formatting shared by all section builders
# ---------------------------------------------------------------------------


def money(value: Decimal | float | int | None) -> str:
    if value is None:
        return "-"
    if value < 0:
        return f"-${-value:,.2f}"
    return f"${value:,.2f}"


def long_date(value: date | None) -> str:
    """``June 14, 2025``"""
    if value is None:
        return "-"
    return f"{value:%B} {value.day}, {value.year}"


def short_date(value: date | None) -> str:
    """``Jun 14``"""
    if value is None:
        return "-"
    return f"{value:%b} {value.day}"


def clock(value: time | None) -> str:
    if value is None:
        return "-"
    return f"{value:%H:%M}"


def time_range(start: time | None, end: time | None) -> str:
    return f"{clock(start)} - {clock(end)}"


def yes_no(value: bool, yes: str = "Yes", no: str = "-") -> str:
    return yes if value else no


def text(value: object | None, default: str = "-") -> str:
    if value is None or value == "":
        return default
    return str(value)


def number(value: Decimal | float | int | None, places: int = 0) -> str:
    if value is None:
        return "-"
    if places == 0:
        return f"{value:,.0f}"
    return f"{value:,.{places}f}"


def capitalize(value: str | None) -> str:
    if not value:
        return "-"
    return value.replace("_", " ").capitalize()


def truncate(value: str, length: int) -> str:
    return value if len(value) <= length else value[:length]


def plain(value: Decimal | float | int) -> str:
    """Number without trailing zeros: ``25``, ``2.5``."""
    if isinstance(value, Decimal):
        return format(value.normalize(), "f")
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


def group_by(items, key):
    """Group ``items`` by ``key(item)`` keeping first-seen group order."""
    groups: dict = {}
    for item in items:
        groups.setdefault(key(item), []).append(item)
    return groups


def timestamp(value: datetime) -> str:
    """``Jun 14, 2025, 3:05 PM``"""
    hour = value.hour % 12 or 12
    return f"{value:%b} {value.day}, {value.year}, {hour}:{value:%M %p}"
