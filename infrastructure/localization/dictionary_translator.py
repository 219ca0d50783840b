"""Translator backed by in-memory dictionaries."""
from __future__ import annotations

from typing import Mapping

from domain.entities import FacetCategory, Locale
from domain.interfaces import Translator
from infrastructure.localization.dictionaries import FACET_LABELS_ZH, TITLES
from infrastructure.localization.title_catalog import TitleCatalog


class DictionaryTranslator(Translator):
    """Looks up facet labels and titles; unknown values render as themselves."""

    def __init__(
        self,
        facet_labels: Mapping[Locale, Mapping[FacetCategory, Mapping[str, str]]] | None = None,
        titles: TitleCatalog | None = None,
    ) -> None:
        self._facet_labels = facet_labels if facet_labels is not None else {Locale.ZH: FACET_LABELS_ZH}
        self._titles = titles if titles is not None else TitleCatalog.from_mapping(TITLES)

    def translate(self, category: FacetCategory, value: str, locale: Locale) -> str:
        labels = self._facet_labels.get(locale, {}).get(FacetCategory(category), {})
        return labels.get(value, value)

    def translate_title(self, title: str, locale: Locale) -> str:
        return self._titles.render(title, locale)


__all__ = ["DictionaryTranslator"]
