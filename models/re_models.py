"""Regular expressions for the prompt prefix grammar and language pair strings."""

from __future__ import annotations

import re
from re import Pattern
from typing import Final

__all__: list[str] = [
    "CJK_IDEOGRAPH_PATTERN",
    "LANGUAGE_PAIR_PATTERN",
    "SOURCE_ONLY_PREFIX_PATTERN",
    "SOURCE_TARGET_PREFIX_PATTERN",
    "TARGET_ONLY_PREFIX_PATTERN",
    "WHITESPACE_PATTERN",
]

# Both languages designated
# Example: "en>zh"
SOURCE_TARGET_PREFIX_PATTERN: Final[Pattern[str]] = re.compile(r"^(?P<source>[a-z_]+)>(?P<target>[a-z_]+)$")

# Source language only, target kept from the settings
# Example: "en>"
SOURCE_ONLY_PREFIX_PATTERN: Final[Pattern[str]] = re.compile(r"^(?P<source>[a-z_]+)>$")

# Target language only, with an optional leading '>'
# Example: "zh" or ">zh"
TARGET_ONLY_PREFIX_PATTERN: Final[Pattern[str]] = re.compile(r"^>?(?P<target>[a-z_]+)$")

# Configured quick-select pair, whitespace allowed around '>'
# Example: "en>ja" or " en > ja "
LANGUAGE_PAIR_PATTERN: Final[Pattern[str]] = re.compile(r"^\s*(?P<source>[a-z_]+)\s*>\s*(?P<target>[a-z_]+)\s*$")

WHITESPACE_PATTERN: Final[Pattern[str]] = re.compile(r"\s")

# CJK Unified Ideographs, U+4E00 to U+9FA5
CJK_IDEOGRAPH_PATTERN: Final[Pattern[str]] = re.compile(r"[\u4e00-\u9fa5]")
