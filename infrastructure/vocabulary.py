"""Fixed facet vocabularies of the church document catalog."""
from __future__ import annotations

from datetime import date

from domain.entities import Vocabulary

DEPARTMENTS: tuple[str, ...] = (
    "Executive Committee",
    "Missions Department",
    "Nurture & Education Department",
    "Pastoral Department (Adult Zone)",
    "Pastoral Department (Youth Zone)",
    "Pastoral Department (Children Zone)",
    "Admin & Resources Department",
    "Worship Department",
)
MINISTRIES: tuple[str, ...] = (
    "General",
    "Short-term Mission",
    "English Class",
    "Cha Kwo Ling Community",
    "Mommy's Group",
    "Homework Class",
    "Shared Space",
)
DOC_TYPES: tuple[str, ...] = (
    "Meeting Minutes",
    "Annual Plan",
    "Project Plan",
    "Budget Report",
    "Event Proposal",
)
STATUSES: tuple[str, ...] = ("Draft", "Final", "For Review")


def recent_years(count: int = 10, *, today: date | None = None) -> tuple[int, ...]:
    """Current year first, then the ``count - 1`` years before it."""
    current = (today or date.today()).year
    return tuple(current - offset for offset in range(count))


def build_vocabulary(year_count: int = 10, *, today: date | None = None) -> Vocabulary:
    return Vocabulary(
        departments=DEPARTMENTS,
        ministries=MINISTRIES,
        doc_types=DOC_TYPES,
        statuses=STATUSES,
        years=recent_years(year_count, today=today),
    )


DEFAULT_VOCABULARY = build_vocabulary()


__all__ = [
    "DEPARTMENTS",
    "MINISTRIES",
    "DOC_TYPES",
    "STATUSES",
    "DEFAULT_VOCABULARY",
    "build_vocabulary",
    "recent_years",
]
