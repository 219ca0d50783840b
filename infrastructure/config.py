"""Dependency wiring for the DocumentHub application."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from domain.entities import Locale, Vocabulary
from domain.interfaces import DocumentRepository, Translator
from infrastructure.localization.dictionary_translator import DictionaryTranslator
from infrastructure.repositories.in_memory_document_repository import InMemoryDocumentRepository
from infrastructure.seed import demo_documents
from infrastructure.vocabulary import build_vocabulary

logger = logging.getLogger(__name__)

_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass(slots=True)
class Container:
    """Simple container bundling concrete infrastructure implementations."""

    document_repository: DocumentRepository
    translator: Translator
    vocabulary: Vocabulary
    default_locale: Locale


@dataclass(slots=True)
class ContainerConfig:
    """Configuration for the catalog wiring."""

    default_locale: str = "en"
    seed_demo_documents: bool = True
    vocabulary_years: int = 10

    @classmethod
    def from_env(cls) -> ContainerConfig:
        defaults = cls()
        seed = os.getenv("DOCHUB_SEED_DEMO")
        years = os.getenv("DOCHUB_VOCABULARY_YEARS")
        return cls(
            default_locale=os.getenv("DOCHUB_DEFAULT_LOCALE", defaults.default_locale),
            seed_demo_documents=defaults.seed_demo_documents if seed is None else seed.strip().lower() in _TRUE_VALUES,
            vocabulary_years=int(years) if years else defaults.vocabulary_years,
        )


def build_default_container(config: ContainerConfig | None = None) -> Container:
    """Instantiate the default infrastructure stack."""

    cfg = config or ContainerConfig()
    default_locale = Locale.parse(cfg.default_locale)
    if cfg.vocabulary_years <= 0:
        raise ValueError(f"vocabulary_years must be positive, got {cfg.vocabulary_years}")

    seed = demo_documents() if cfg.seed_demo_documents else []
    document_repository = InMemoryDocumentRepository(seed)
    logger.info("Catalog ready with %d documents, default locale %s", len(seed), default_locale.value)

    return Container(
        document_repository=document_repository,
        translator=DictionaryTranslator(),
        vocabulary=build_vocabulary(cfg.vocabulary_years),
        default_locale=default_locale,
    )


__all__ = ["Container", "ContainerConfig", "build_default_container"]
