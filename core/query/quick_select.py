from __future__ import annotations

from typing import TYPE_CHECKING, Final

from core.query.presenter import CHANGE_QUERY_METHOD
from models.language_models import is_valid_code
from models.result_models import JsonRPCAction
from utils.logger_utils import LoggerUtils
from utils.string_utils import StringUtils

if TYPE_CHECKING:
    import logging
    from collections.abc import Iterable

    from core.query.presenter import ResultPresenter
    from models.result_models import ResultItem

__all__: list[str] = ["QuickSelectBuilder"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

# Keywords meaning the plugin answers every query without a trigger.
GLOBAL_TRIGGER_KEYWORDS: Final[frozenset[str]] = frozenset({"", "*"})


class QuickSelectBuilder:
    """Builds the language pair suggestions shown while the prompt has no text.

    Args:
        presenter (ResultPresenter): Presenter used to render each suggestion.
        trigger_keyword (str): Action keyword written back into the query box.
    """

    def __init__(self, presenter: ResultPresenter, trigger_keyword: str) -> None:
        self.presenter: ResultPresenter = presenter
        self.trigger_keyword: str = trigger_keyword.strip()

    @staticmethod
    def valid_pairs(language_pairs: Iterable[str]) -> list[tuple[str, str]]:
        """Parse configured pairs, keeping only those whose codes are both valid, in configured order."""
        pairs: list[tuple[str, str]] = []
        for pair in language_pairs:
            parsed: tuple[str, str] | None = StringUtils.split_language_pair(pair)
            if parsed is None or not (is_valid_code(parsed[0]) and is_valid_code(parsed[1])):
                logger.debug("Ignoring invalid language pair: '%s'", pair)
                continue
            pairs.append(parsed)
        return pairs

    def change_query(self, source: str, target: str) -> JsonRPCAction:
        """Action that rewrites the query box to select the pair and asks the host to query again."""
        query: str = f"{source}>{target} "
        if self.trigger_keyword not in GLOBAL_TRIGGER_KEYWORDS:
            query = f"{self.trigger_keyword} {query}"
        return JsonRPCAction(method=CHANGE_QUERY_METHOD, parameters=[query, True])

    def build(self, source: str, target: str, language_pairs: Iterable[str]) -> list[ResultItem]:
        """Build the suggestion list.

        The current pair always comes first, followed by every valid configured pair.

        Args:
            source (str): Currently resolved source language code.
            target (str): Currently resolved target language code.
            language_pairs (Iterable[str]): Configured 'source>target' strings.

        Returns:
            list[ResultItem]: The ordered suggestions.
        """
        items: list[ResultItem] = [self.presenter.pair_item(source, target, label_key="default_selected")]
        items.extend(
            self.presenter.pair_item(
                pair_source,
                pair_target,
                label_key="quick_select",
                action=self.change_query(pair_source, pair_target),
            )
            for pair_source, pair_target in self.valid_pairs(language_pairs)
        )
        return items
