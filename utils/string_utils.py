from __future__ import annotations

from typing import TYPE_CHECKING

from models.re_models import CJK_IDEOGRAPH_PATTERN, LANGUAGE_PAIR_PATTERN

if TYPE_CHECKING:
    from re import Match

__all__: list[str] = ["StringUtils"]


class StringUtils:
    """Utility class for string handling shared by the parser, builders and service clients."""

    @staticmethod
    def ensure_str(value: str | None) -> str:
        """Ensure that the value is a string, returning an empty string if None.

        Args:
            value (str | None): The value to ensure as a string.

        Returns:
            str: The value as a string, or empty string if None.
        """
        if not isinstance(value, str):
            value = str(value) if value is not None else ""
        return value

    @staticmethod
    def contains_cjk(value: str) -> bool:
        """Return True if the text contains at least one CJK Unified Ideograph."""
        return CJK_IDEOGRAPH_PATTERN.search(StringUtils.ensure_str(value)) is not None

    @staticmethod
    def split_language_pair(value: str) -> tuple[str, str] | None:
        """Split a 'source>target' string, tolerating whitespace around '>'.

        Args:
            value (str): Pair string from the settings.

        Returns:
            tuple[str, str] | None: (source, target), or None if the string is not a pair.
        """
        match: Match[str] | None = LANGUAGE_PAIR_PATTERN.match(StringUtils.ensure_str(value))
        if match is None:
            return None
        return match.group("source"), match.group("target")

    @staticmethod
    def split_list(value: str) -> list[str]:
        """Split a comma or newline separated string into trimmed, non-empty items."""
        normalized: str = StringUtils.ensure_str(value).replace("\r", "\n").replace(",", "\n")
        return [item.strip() for item in normalized.split("\n") if item.strip()]
