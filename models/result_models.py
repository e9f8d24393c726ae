"""Data models for parsed prompts, dispatch outcomes and launcher result items."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, NamedTuple

from dataclasses_json import DataClassJsonMixin, config, dataclass_json

__all__: list[str] = ["DispatchResult", "JsonRPCAction", "ParsedPrompt", "ResultItem"]


class ParsedPrompt(NamedTuple):
    """Language codes resolved from a prompt prefix and the text that follows it."""

    source: str
    target: str
    text: str


@dataclass(frozen=True)
class DispatchResult:
    """Outcome of one service's translation request.

    Attributes:
        name (str): Registered service name.
        text (str): Translated text, or a localized error message when is_error is True.
        source (str): Source language code the request was made with.
        target (str): Effective target language code for this service.
        is_error (bool): Whether text is an error message.
    """

    name: str
    text: str
    source: str
    target: str
    is_error: bool = False


@dataclass_json
@dataclass(frozen=True)
class JsonRPCAction(DataClassJsonMixin):
    """Action the host performs when a result item is selected."""

    method: str
    parameters: list[Any] = field(default_factory=list)


@dataclass_json
@dataclass(frozen=True)
class ResultItem(DataClassJsonMixin):
    """A single row rendered by the launcher.

    Encoded with the key names the host deserializes: title, subTitle, icoPath and jsonRPCAction.
    """

    title: str
    subtitle: str = field(default="", metadata=config(field_name="subTitle"))
    ico_path: str = field(default="", metadata=config(field_name="icoPath"))
    action: JsonRPCAction | None = field(
        default=None, metadata=config(field_name="jsonRPCAction", exclude=lambda value: value is None)
    )
