"""Prompt prefix parser.

Syntax examples:
    "en>zh hello"  # source 'en', target 'zh'
    "en> hello"    # source 'en', target unchanged
    "zh hello"     # target 'zh', source unchanged
    ">zh hello"    # same as above
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from models.language_models import is_valid_code
from models.re_models import (
    SOURCE_ONLY_PREFIX_PATTERN,
    SOURCE_TARGET_PREFIX_PATTERN,
    TARGET_ONLY_PREFIX_PATTERN,
    WHITESPACE_PATTERN,
)
from models.result_models import ParsedPrompt
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging
    from re import Match

__all__: list[str] = ["MAX_PREFIX_LENGTH", "PromptParser"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

# A longer first word is treated as text, never as a language directive.
MAX_PREFIX_LENGTH: Final[int] = 15


class PromptParser:
    """Extracts an optional language directive from the start of a prompt."""

    @staticmethod
    def parse(prompt: str, old_source: str, old_target: str) -> ParsedPrompt:
        """Resolve the language pair and the text to translate.

        Never fails: if no prefix form matches with valid codes, the whole prompt is returned as text
        together with the unchanged language codes.

        Args:
            prompt (str): Raw query text after the trigger keyword.
            old_source (str): Source language code used when the prefix does not set one.
            old_target (str): Target language code used when the prefix does not set one.

        Returns:
            ParsedPrompt: The resolved (source, target, text).
        """
        fallback = ParsedPrompt(old_source, old_target, prompt)

        space: Match[str] | None = WHITESPACE_PATTERN.search(prompt)
        if space is None:
            prefix, rest = prompt, ""
        else:
            if space.start() > MAX_PREFIX_LENGTH:
                return fallback
            prefix, rest = prompt[: space.start()], prompt[space.end() :].strip()

        if (match := SOURCE_TARGET_PREFIX_PATTERN.match(prefix)) and (
            is_valid_code(match.group("source")) and is_valid_code(match.group("target"))
        ):
            logger.debug("Prefix '%s' sets source and target", prefix)
            return ParsedPrompt(match.group("source"), match.group("target"), rest)

        if (match := SOURCE_ONLY_PREFIX_PATTERN.match(prefix)) and is_valid_code(match.group("source")):
            logger.debug("Prefix '%s' sets source", prefix)
            return ParsedPrompt(match.group("source"), old_target, rest)

        if (match := TARGET_ONLY_PREFIX_PATTERN.match(prefix)) and is_valid_code(match.group("target")):
            logger.debug("Prefix '%s' sets target", prefix)
            return ParsedPrompt(old_source, match.group("target"), rest)

        return fallback
