"""This module defines the abstract base class for translation services and related exceptions.

Every concrete service registers itself by name when its class is defined, declares which
language codes it supports and how they map to the service's own codes, and implements a single
asynchronous translate() capability.
"""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar

from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging

    from handlers.async_comm import AsyncHttp
    from models.config_models import Settings

__all__: list[str] = [
    "NotSupportedLanguagesError",
    "TransInterface",
    "TranslateExceptionError",
    "TranslationQuotaExceededError",
    "TranslationRateLimitError",
]

logger: logging.Logger = LoggerUtils.get_logger(__name__)


class TranslateExceptionError(Exception):
    """An error occurred during the translation process."""


class NotSupportedLanguagesError(TranslateExceptionError):
    """An unsupported language code was specified."""


class TranslationQuotaExceededError(TranslateExceptionError):
    """The translatable character quota has been exceeded."""


class TranslationRateLimitError(TranslateExceptionError):
    """The translation request was rate-limited by the API."""


class TransInterface(ABC):
    """Abstract base class for translation services.

    Attributes:
        registered (ClassVar[dict[str, type[TransInterface]]]): Registered service classes,
            keyed by their distinguished names.
        languages_map (ClassVar[dict[str, str]]): Supported language codes mapped to the
            service-specific codes. A code that is not a key is unsupported.
        display_names (ClassVar[dict[str, str]]): Service display name per interface language.
    """

    registered: ClassVar[dict[str, type[TransInterface]]] = {}
    languages_map: ClassVar[dict[str, str]] = {}
    display_names: ClassVar[dict[str, str]] = {}

    def __init_subclass__(cls, **kwargs) -> None:
        """Register the subclass under its distinguished name.

        Subclasses whose fetch_engine_name() returns an empty string are not registered.

        Raises:
            TypeError: If the subclass does not provide fetch_engine_name().
            ValueError: If another service is already registered under the same name.
        """
        super().__init_subclass__(**kwargs)
        if not hasattr(cls, "fetch_engine_name") or not callable(cls.fetch_engine_name):
            msg = "Subclasses of TransInterface must implement the static method fetch_engine_name()."
            raise TypeError(msg)

        name = cls.fetch_engine_name()
        if not isinstance(name, str) or name == "":
            return

        if name in cls.registered:
            msg: str = f"A translation service with the name '{name}' is already registered."
            raise ValueError(msg)

        cls.registered[name] = cls

    @property
    def engine_name(self) -> str:
        return self.fetch_engine_name()

    def supports(self, code: str) -> bool:
        """Check whether the service supports a language code."""
        return code in self.languages_map

    def service_code(self, code: str) -> str | None:
        """Map a language code to the service-specific code.

        Returns:
            str | None: The service code, or None if the language is not supported.
        """
        return self.languages_map.get(code)

    def display_name(self, interface_language: str) -> str:
        """Get the display name for the interface language, falling back to English, then the name."""
        return self.display_names.get(interface_language) or self.display_names.get("en") or self.engine_name

    @staticmethod
    @abstractmethod
    def fetch_engine_name() -> str:
        """Fetch the distinguished name of the translation service.

        Called during class registration in __init_subclass__, so the implementation must be
        available at subclass definition time.
        """
        raise NotImplementedError

    @abstractmethod
    async def translate(self, text: str, src_code: str, tgt_code: str, http: AsyncHttp, settings: Settings) -> str:
        """Translate the text.

        Args:
            text (str): Text to be translated.
            src_code (str): Service-specific source language code.
            tgt_code (str): Service-specific target language code.
            http (AsyncHttp): Shared HTTP client.
            settings (Settings): Settings of the current request, for service-specific options.

        Returns:
            str: The translated text.

        Raises:
            NotSupportedLanguagesError: If the service rejects the language pair.
            TranslationQuotaExceededError: If the character quota has been exceeded.
            TranslationRateLimitError: If the request is rate-limited.
            TranslateExceptionError: If translation fails for any other reason.
        """
        raise NotImplementedError

    async def close(self) -> None:  # noqa: B027
        """Release service resources. Services without resources keep this no-op."""

    def get_authentication_key(self, configured: str = "") -> str:
        """Return the configured key, or the '<NAME>_API_OAUTH' environment variable.

        For a service named 'deepl' the variable is 'DEEPL_API_OAUTH'.

        Args:
            configured (str): Key taken from the settings, preferred when not blank.

        Returns:
            str: The authentication key, or an empty string if none is available.
        """
        if configured.strip():
            return configured.strip()
        return os.getenv(f"{self.fetch_engine_name().upper()}_API_OAUTH", "")
