"""Query handling for FlowTrans.

This package contains the prompt parser, the quick-select builder, the translation dispatcher and
the presenter that turns their outputs into launcher result items.
"""

from core.query.dispatcher import TranslationDispatcher, auto_target
from core.query.presenter import ASSETS_PATH, CHANGE_QUERY_METHOD, COPY_METHOD, ResultPresenter
from core.query.prompt_parser import MAX_PREFIX_LENGTH, PromptParser
from core.query.quick_select import QuickSelectBuilder

__all__: list[str] = [
    "ASSETS_PATH",
    "CHANGE_QUERY_METHOD",
    "COPY_METHOD",
    "MAX_PREFIX_LENGTH",
    "PromptParser",
    "QuickSelectBuilder",
    "ResultPresenter",
    "TranslationDispatcher",
    "auto_target",
]
