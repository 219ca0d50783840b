from infrastructure.localization.dictionaries import FACET_LABELS_ZH, TITLES, UI_LABELS, ui_label
from infrastructure.localization.dictionary_translator import DictionaryTranslator
from infrastructure.localization.title_catalog import TitleCatalog

__all__ = [
    "DictionaryTranslator",
    "TitleCatalog",
    "FACET_LABELS_ZH",
    "TITLES",
    "UI_LABELS",
    "ui_label",
]
