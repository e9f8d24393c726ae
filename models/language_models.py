"""Static language table.

Maps every supported language code to its display name in each interface language.
The sentinel code 'auto' is deliberately absent from LANGUAGE_NAMES; see AUTO_LANGUAGE_CODE.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Final

__all__: list[str] = [
    "AUTO_LANGUAGE_CODE",
    "INTERFACE_LANGUAGES",
    "LANGUAGE_CODES",
    "LANGUAGE_NAMES",
    "is_valid_code",
    "language_name",
]

AUTO_LANGUAGE_CODE: Final[str] = "auto"

INTERFACE_LANGUAGES: Final[tuple[str, ...]] = ("en", "tr", "zh")

_NAMES: dict[str, dict[str, str]] = {
    "ar": {"en": "Arabic", "tr": "Arapça", "zh": "阿拉伯语"},
    "cs": {"en": "Czech", "tr": "Çekçe", "zh": "捷克语"},
    "da": {"en": "Danish", "tr": "Danca", "zh": "丹麦语"},
    "de": {"en": "German", "tr": "Almanca", "zh": "德语"},
    "el": {"en": "Greek", "tr": "Yunanca", "zh": "希腊语"},
    "en": {"en": "English", "tr": "İngilizce", "zh": "英语"},
    "es": {"en": "Spanish", "tr": "İspanyolca", "zh": "西班牙语"},
    "fi": {"en": "Finnish", "tr": "Fince", "zh": "芬兰语"},
    "fr": {"en": "French", "tr": "Fransızca", "zh": "法语"},
    "hi": {"en": "Hindi", "tr": "Hintçe", "zh": "印地语"},
    "hu": {"en": "Hungarian", "tr": "Macarca", "zh": "匈牙利语"},
    "id": {"en": "Indonesian", "tr": "Endonezce", "zh": "印尼语"},
    "it": {"en": "Italian", "tr": "İtalyanca", "zh": "意大利语"},
    "ja": {"en": "Japanese", "tr": "Japonca", "zh": "日语"},
    "ko": {"en": "Korean", "tr": "Korece", "zh": "韩语"},
    "nl": {"en": "Dutch", "tr": "Felemenkçe", "zh": "荷兰语"},
    "pl": {"en": "Polish", "tr": "Lehçe", "zh": "波兰语"},
    "pt": {"en": "Portuguese", "tr": "Portekizce", "zh": "葡萄牙语"},
    "ro": {"en": "Romanian", "tr": "Rumence", "zh": "罗马尼亚语"},
    "ru": {"en": "Russian", "tr": "Rusça", "zh": "俄语"},
    "sv": {"en": "Swedish", "tr": "İsveççe", "zh": "瑞典语"},
    "th": {"en": "Thai", "tr": "Tayca", "zh": "泰语"},
    "tr": {"en": "Turkish", "tr": "Türkçe", "zh": "土耳其语"},
    "uk": {"en": "Ukrainian", "tr": "Ukraynaca", "zh": "乌克兰语"},
    "vi": {"en": "Vietnamese", "tr": "Vietnamca", "zh": "越南语"},
    "zh": {"en": "Chinese (Simplified)", "tr": "Çince (Basitleştirilmiş)", "zh": "简体中文"},
    "zh_tw": {"en": "Chinese (Traditional)", "tr": "Çince (Geleneksel)", "zh": "繁体中文"},
}

LANGUAGE_NAMES: Final[MappingProxyType[str, dict[str, str]]] = MappingProxyType(_NAMES)

# 'auto' is accepted wherever a code is parsed, but never has a table entry.
LANGUAGE_CODES: Final[frozenset[str]] = frozenset(_NAMES) | {AUTO_LANGUAGE_CODE}


def is_valid_code(code: str) -> bool:
    """Return True if the code is a table key or the 'auto' sentinel."""
    return code in LANGUAGE_CODES


def language_name(code: str, interface_language: str, auto_name: str = "Auto") -> str:
    """Look up the display name of a language code.

    Args:
        code (str): Language code.
        interface_language (str): Interface language used for the display name.
        auto_name (str): Name to return for the 'auto' sentinel.

    Returns:
        str: The localized name, the English name if the interface language is missing,
            or the code itself if the code is unknown.
    """
    if code == AUTO_LANGUAGE_CODE:
        return auto_name
    names: dict[str, str] | None = LANGUAGE_NAMES.get(code)
    if names is None:
        return code
    return names.get(interface_language) or names["en"]
