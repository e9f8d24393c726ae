"""Builds launcher result items from notices, language pairs and dispatch outcomes."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Final

from models.language_models import language_name
from models.message_models import localize
from models.result_models import JsonRPCAction, ResultItem

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from models.result_models import DispatchResult

__all__: list[str] = ["ASSETS_PATH", "COPY_METHOD", "CHANGE_QUERY_METHOD", "ResultPresenter"]

ASSETS_PATH: Final[Path] = Path(__file__).resolve().parents[2] / "assets"

COPY_METHOD: Final[str] = "copy"
CHANGE_QUERY_METHOD: Final[str] = "Flow.Launcher.ChangeQuery"


class ResultPresenter:
    """Maps core outputs to ResultItem values in the given interface language.

    Args:
        interface_language (str): Language of messages and display names.
        service_name_resolver (Callable[[str, str], str]): Returns the display name of a service
            for (service name, interface language).
        assets_path (Path): Directory holding the icons.
    """

    def __init__(
        self,
        interface_language: str,
        service_name_resolver: Callable[[str, str], str],
        assets_path: Path = ASSETS_PATH,
    ) -> None:
        self.interface_language: str = interface_language
        self._service_name_resolver: Callable[[str, str], str] = service_name_resolver
        self.assets_path: Path = assets_path

    @property
    def warning_icon(self) -> str:
        return str(self.assets_path / "warning.png")

    @property
    def info_icon(self) -> str:
        return str(self.assets_path / "info.png")

    def service_icon(self, name: str) -> str:
        return str(self.assets_path / "service_icon" / f"{name}.png")

    def language_name(self, code: str) -> str:
        auto_name: str = localize("auto_language", self.interface_language)
        return language_name(code, self.interface_language, auto_name=auto_name)

    def pair_title(self, source: str, target: str) -> str:
        return f"{self.language_name(source)} → {self.language_name(target)}"

    def notice(self, message_key: str, detail: str = "") -> ResultItem:
        """Build a warning item for a configuration problem.

        Args:
            message_key (str): Key of the localized title message.
            detail (str): Appended to the title, e.g. the offending language code.
        """
        title: str = localize(message_key, self.interface_language)
        if detail:
            title = f"{title} {detail}"
        return ResultItem(
            title=title,
            subtitle=localize("check_configuration", self.interface_language),
            ico_path=self.warning_icon,
        )

    def pair_item(self, source: str, target: str, *, label_key: str, action: JsonRPCAction | None = None) -> ResultItem:
        """Build an informational item describing a language pair.

        Args:
            source (str): Source language code.
            target (str): Target language code.
            label_key (str): Message key of the subtitle label, e.g. 'default_selected'.
            action (JsonRPCAction | None): Action performed when the item is selected.
        """
        return ResultItem(
            title=self.pair_title(source, target),
            subtitle=f"{localize(label_key, self.interface_language)} {source} → {target}",
            ico_path=self.info_icon,
            action=action,
        )

    def translation_item(self, result: DispatchResult) -> ResultItem:
        """Build the item for one service's outcome; selecting it copies the title."""
        service_name: str = self._service_name_resolver(result.name, self.interface_language)
        return ResultItem(
            title=result.text,
            subtitle=f"{self.pair_title(result.source, result.target)}  [{service_name}]",
            ico_path=self.service_icon(result.name),
            action=JsonRPCAction(method=COPY_METHOD, parameters=[result.text]),
        )

    def translation_items(self, results: Iterable[DispatchResult]) -> list[ResultItem]:
        return [self.translation_item(result) for result in results]
