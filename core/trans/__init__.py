"""Translation service registry and interfaces.

This package provides translation through pluggable service implementations
(Google, DeepL and Google Cloud) that register themselves by name.
"""

from core.trans.interface import (
    NotSupportedLanguagesError,
    TransInterface,
    TranslateExceptionError,
    TranslationQuotaExceededError,
    TranslationRateLimitError,
)
from core.trans.manager import TransManager

__all__: list[str] = [
    "NotSupportedLanguagesError",
    "TransInterface",
    "TransManager",
    "TranslateExceptionError",
    "TranslationQuotaExceededError",
    "TranslationRateLimitError",
]
