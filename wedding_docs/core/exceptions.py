"""Exception hierarchy for wedding document export."""

from __future__ import annotations

from collections.abc import Iterable


class WeddingDocsError(Exception):
    """Base exception for all document export errors."""
    pass


class NotFoundError(WeddingDocsError):
    """A wedding or vendor identifier did not resolve."""

    def __init__(self, entity: str, entity_id: str) -> None:
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity.capitalize()} not found: {entity_id}")


class FetchFailedError(WeddingDocsError):
    """A read query for one data source failed; the whole export is aborted."""

    def __init__(self, source: str, sections: Iterable[str] = ()) -> None:
        self.source = source
        self.sections = tuple(sections)
        detail = f"Failed to fetch {source}"
        if self.sections:
            detail += f" (sections: {', '.join(self.sections)})"
        super().__init__(detail)


class RenderFailedError(WeddingDocsError):
    """A section renderer or the document library raised while building output.

    ``section`` is ``None`` when the failure happened outside a section
    (document header, serialization).
    """

    def __init__(self, fmt: str, section: str | None = None) -> None:
        self.format = fmt
        self.section = section
        where = f"section '{section}'" if section else "document"
        super().__init__(f"Failed to render {fmt.upper()} {where}")


class ValidationError(WeddingDocsError):
    """Export options failed validation."""
    pass
