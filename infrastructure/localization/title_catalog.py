"""Bidirectional title dictionary keyed by (locale, canonical id)."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

from domain.entities import Locale


@dataclass(slots=True)
class TitleCatalog:
    """Maps every known rendering of a title back to its canonical id.

    A title may be stored in any locale; ``render`` resolves it through the
    reverse index and returns the rendering for the requested locale.
    Lookups are dictionary hits, not scans.
    """

    _forward: dict[tuple[Locale, str], str] = field(default_factory=dict)
    _reverse: dict[tuple[Locale, str], str] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, titles: Mapping[str, Mapping[Locale, str]]) -> TitleCatalog:
        catalog = cls()
        for canonical_id, renderings in titles.items():
            for locale, text in renderings.items():
                catalog.register(canonical_id, locale, text)
        return catalog

    def register(self, canonical_id: str, locale: Locale, text: str) -> None:
        previous = self._reverse.get((locale, text))
        if previous is not None and previous != canonical_id:
            raise ValueError(f"Title {text!r} ({locale.value}) is already registered for '{previous}'")
        stale = self._forward.get((locale, canonical_id))
        if stale is not None and stale != text:
            self._reverse.pop((locale, stale), None)
        self._forward[(locale, canonical_id)] = text
        self._reverse[(locale, text)] = canonical_id

    def canonical_id(self, text: str) -> str | None:
        for locale in Locale:
            canonical_id = self._reverse.get((locale, text))
            if canonical_id is not None:
                return canonical_id
        return None

    def render(self, text: str, locale: Locale) -> str:
        canonical_id = self.canonical_id(text)
        if canonical_id is None:
            return text
        return self._forward.get((locale, canonical_id), text)

    def __len__(self) -> int:
        return len({canonical_id for _, canonical_id in self._forward})


__all__ = ["TitleCatalog"]
