"""Localized user-facing messages."""

from __future__ import annotations

from types import MappingProxyType
from typing import Final

__all__: list[str] = ["MESSAGES", "localize"]

_MESSAGES: dict[str, dict[str, str]] = {
    "unsupported_source_language": {
        "en": "Unsupported source language",
        "tr": "Desteklenmeyen kaynak dil",
        "zh": "不支持的源语言",
    },
    "unsupported_target_language": {
        "en": "Unsupported target language",
        "tr": "Desteklenmeyen hedef dil",
        "zh": "不支持的目标语言",
    },
    "no_services_configured": {
        "en": "No services configured",
        "tr": "Yapılandırılmış hizmet yok",
        "zh": "未配置翻译服务",
    },
    "invalid_configuration": {
        "en": "Invalid configuration",
        "tr": "Geçersiz yapılandırma",
        "zh": "配置无效",
    },
    "check_configuration": {
        "en": "Please check your configuration.",
        "tr": "Lütfen yapılandırmanızı kontrol edin.",
        "zh": "请检查您的配置。",
    },
    "translation_failed": {
        "en": "Translation failed",
        "tr": "Çeviri başarısız oldu",
        "zh": "翻译失败",
    },
    "default_selected": {
        "en": "Default selected:",
        "tr": "Varsayılan seçili:",
        "zh": "默认选择:",
    },
    "quick_select": {
        "en": "Quick select:",
        "tr": "Hızlı seçim:",
        "zh": "快速选择:",
    },
    "auto_language": {
        "en": "Auto",
        "tr": "Otomatik",
        "zh": "自动",
    },
}

MESSAGES: Final[MappingProxyType[str, dict[str, str]]] = MappingProxyType(_MESSAGES)


def localize(key: str, interface_language: str) -> str:
    """Return the message for the interface language, falling back to English.

    Raises:
        KeyError: If the message key is unknown.
    """
    texts: dict[str, str] = MESSAGES[key]
    return texts.get(interface_language) or texts["en"]
