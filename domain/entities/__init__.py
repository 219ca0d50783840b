"""Domain entities for the DocumentHub system."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Mapping

from domain.errors import UnsupportedLocaleError

WILDCARD = "All"


class Locale(str, Enum):
    """Display languages supported by the catalog. ``EN`` is the source locale."""

    EN = "en"
    ZH = "zh"

    @classmethod
    def parse(cls, value: str | Locale) -> Locale:
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError as exc:
            raise UnsupportedLocaleError(f"Unsupported locale '{value}'") from exc


class FacetCategory(str, Enum):
    """Facets that carry a per-locale display label."""

    DEPARTMENTS = "departments"
    MINISTRIES = "ministries"
    DOC_TYPES = "doc_types"
    STATUSES = "statuses"


@dataclass(frozen=True, slots=True)
class Attachment:
    """Opaque file handle attached to a document. Its bytes are never inspected."""

    filename: str
    content_type: str = "application/octet-stream"
    data: bytes = field(default=b"", repr=False)

    @property
    def size(self) -> int:
        return len(self.data)


@dataclass(frozen=True, slots=True)
class Document:
    """A catalogued document. Immutable once created."""

    id: str
    title: str
    attachment: Attachment
    department: str
    ministry: str
    doc_type: str
    year: int
    status: str
    created_at: datetime


@dataclass(frozen=True, slots=True)
class DocumentDraft:
    """User supplied fields of a document that has not been catalogued yet."""

    title: str
    attachment: Attachment | None
    department: str
    ministry: str
    doc_type: str
    year: int
    status: str


def _facet_value(value: Any) -> Any:
    if value is None:
        return None
    if isinstance(value, str) and (not value.strip() or value == WILDCARD):
        return None
    return value


@dataclass(frozen=True, slots=True)
class FilterCriteria:
    """Per-query facet constraints plus free text. ``None`` is the wildcard."""

    search_text: str = ""
    department: str | None = None
    ministry: str | None = None
    doc_type: str | None = None
    year: str | int | None = None
    status: str | None = None

    def __post_init__(self) -> None:
        # "All" is accepted as the wildcard and stored as None
        for name in ("department", "ministry", "doc_type", "year", "status"):
            object.__setattr__(self, name, _facet_value(getattr(self, name)))
        if self.search_text is None:
            object.__setattr__(self, "search_text", "")

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> FilterCriteria:
        """Build criteria from raw request parameters such as query strings."""
        return cls(
            search_text=values.get("search_text") or values.get("q") or "",
            department=values.get("department"),
            ministry=values.get("ministry"),
            doc_type=values.get("doc_type"),
            year=values.get("year"),
            status=values.get("status"),
        )

    def facet_constraints(self) -> dict[str, str | int]:
        """Return the non-wildcard facets keyed by document attribute name."""
        constraints = {
            "department": self.department,
            "ministry": self.ministry,
            "doc_type": self.doc_type,
            "year": self.year,
            "status": self.status,
        }
        return {name: value for name, value in constraints.items() if value is not None}

    @property
    def is_wildcard(self) -> bool:
        return not self.facet_constraints()


@dataclass(frozen=True, slots=True)
class Vocabulary:
    """Finite value sets of each facet."""

    departments: tuple[str, ...]
    ministries: tuple[str, ...]
    doc_types: tuple[str, ...]
    statuses: tuple[str, ...]
    years: tuple[int, ...] = ()

    def values_for(self, facet: str) -> tuple[str, ...]:
        return {
            "department": self.departments,
            "ministry": self.ministries,
            "doc_type": self.doc_types,
            "status": self.statuses,
        }[facet]


@dataclass(frozen=True, slots=True)
class ScoredDocument:
    """A document paired with the relevance score it earned for a query."""

    document: Document
    score: int = 0


__all__ = [
    "WILDCARD",
    "Locale",
    "FacetCategory",
    "Attachment",
    "Document",
    "DocumentDraft",
    "FilterCriteria",
    "Vocabulary",
    "ScoredDocument",
]
