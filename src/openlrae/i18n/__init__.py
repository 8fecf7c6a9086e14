"""Localized messages and language change notifications."""

import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional, Union

from openlrae.i18n import catalog_en, catalog_es

logger = logging.getLogger(__name__)


class Language(str, Enum):
    """Languages messages are available in."""

    ENGLISH = "en"
    SPANISH = "es"

    @classmethod
    def default(cls) -> "Language":
        return cls.ENGLISH

    @classmethod
    def from_locale(cls, locale: Optional[str]) -> "Language":
        """
        Pick the language for a locale tag such as "es", "es_ES" or "es-ES.UTF-8".

        Unknown or empty tags fall back to the default language.
        """
        if not locale:
            return cls.default()
        tag = locale.split(".")[0].replace("-", "_").lower()
        language = tag.split("_")[0]
        for member in cls:
            if member.value == language:
                return member
        logger.warning(f"Language {locale!r} not available, using {cls.default().value}")
        return cls.default()


CATALOGS = {
    Language.ENGLISH: catalog_en.MESSAGES,
    Language.SPANISH: catalog_es.MESSAGES,
}


class Messages:
    """Message templates of one language, falling back to English."""

    def __init__(self, language: Language = Language.ENGLISH):
        self.language = language
        self._catalog = CATALOGS[language]

    def get(self, key: str, **fields) -> str:
        template = self._catalog.get(key)
        if template is None:
            template = CATALOGS[Language.default()][key]
        return template.format(**fields) if fields else template


class LanguageListener(ABC):
    """Anything whose text output follows the selected language."""

    @abstractmethod
    def on_language_change(self, language: Language) -> None:
        pass


class LanguageNotifier:
    """Holds the current language and tells every subscriber when it changes."""

    def __init__(self, language: Language = Language.ENGLISH):
        self.language = language
        self._listeners: list[LanguageListener] = []

    def subscribe(self, listener: LanguageListener) -> None:
        """Register a listener and bring it up to date immediately."""
        self._listeners.append(listener)
        listener.on_language_change(self.language)

    def set_language(self, language: Union[Language, str]) -> None:
        if not isinstance(language, Language):
            language = Language.from_locale(language)
        self.language = language
        logger.debug(f"Language changed to {language.value}")
        for listener in self._listeners:
            listener.on_language_change(language)

    def set_default_language(self) -> None:
        self.set_language(Language.default())


__all__ = [
    "Language",
    "LanguageListener",
    "LanguageNotifier",
    "Messages",
]
