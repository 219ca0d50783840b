"""Facet filter: exact-match AND semantics over the raw document attributes."""
from __future__ import annotations

import re
from typing import Iterable

from domain.entities import Document, FilterCriteria, Vocabulary
from domain.errors import InvalidFacetValueError

_YEAR_PATTERN = re.compile(r"[0-9]{1,4}")


def parse_year(value: str | int) -> int:
    """Parse a year constraint, rejecting anything that is not an integer."""
    if isinstance(value, bool):
        raise InvalidFacetValueError("year", value, f"Year constraint must be numeric, got {value!r}")
    if isinstance(value, int):
        return value
    text = str(value).strip()
    if not _YEAR_PATTERN.fullmatch(text):
        raise InvalidFacetValueError("year", value, f"Year constraint must be numeric, got {value!r}")
    return int(text)


def validate_criteria(criteria: FilterCriteria, vocabulary: Vocabulary) -> None:
    """Raise ``InvalidFacetValueError`` for a constraint outside its facet vocabulary."""
    for facet, value in criteria.facet_constraints().items():
        if facet == "year":
            parse_year(value)
            continue
        if value not in vocabulary.values_for(facet):
            raise InvalidFacetValueError(facet, value)


def filter_documents(
    documents: Iterable[Document],
    criteria: FilterCriteria,
    *,
    vocabulary: Vocabulary | None = None,
) -> list[Document]:
    """Return the documents matching every non-wildcard facet, in input order.

    Constraints are compared against raw attribute values, never against
    their localized labels. A non-numeric year is always rejected; other
    facets are checked against ``vocabulary`` when one is given.
    """

    if vocabulary is not None:
        validate_criteria(criteria, vocabulary)

    constraints = criteria.facet_constraints()
    if "year" in constraints:
        constraints["year"] = parse_year(constraints["year"])

    return [
        document
        for document in documents
        if all(getattr(document, facet) == value for facet, value in constraints.items())
    ]


__all__ = ["filter_documents", "validate_criteria", "parse_year"]
