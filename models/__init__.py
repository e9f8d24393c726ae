"""Data models for FlowTrans.

This package contains the settings dataclass, the static language table, localized messages,
result item models and the regular expressions used by the prompt parser.
"""

from __future__ import annotations

from models.config_models import Settings
from models.language_models import (
    AUTO_LANGUAGE_CODE,
    INTERFACE_LANGUAGES,
    LANGUAGE_CODES,
    LANGUAGE_NAMES,
    is_valid_code,
    language_name,
)
from models.message_models import MESSAGES, localize
from models.re_models import (
    CJK_IDEOGRAPH_PATTERN,
    LANGUAGE_PAIR_PATTERN,
    SOURCE_ONLY_PREFIX_PATTERN,
    SOURCE_TARGET_PREFIX_PATTERN,
    TARGET_ONLY_PREFIX_PATTERN,
    WHITESPACE_PATTERN,
)
from models.result_models import DispatchResult, JsonRPCAction, ParsedPrompt, ResultItem

__all__: list[str] = [
    "AUTO_LANGUAGE_CODE",
    "CJK_IDEOGRAPH_PATTERN",
    "INTERFACE_LANGUAGES",
    "LANGUAGE_CODES",
    "LANGUAGE_NAMES",
    "LANGUAGE_PAIR_PATTERN",
    "MESSAGES",
    "SOURCE_ONLY_PREFIX_PATTERN",
    "SOURCE_TARGET_PREFIX_PATTERN",
    "TARGET_ONLY_PREFIX_PATTERN",
    "WHITESPACE_PATTERN",
    "DispatchResult",
    "JsonRPCAction",
    "ParsedPrompt",
    "ResultItem",
    "Settings",
    "is_valid_code",
    "language_name",
    "localize",
]
