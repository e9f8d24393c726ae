"""Flow Launcher JSON-RPC adapter.

Each host invocation carries one request of the form::

    {"method": "query" | "copy", "parameters": [...], "settings": {...}}

`query` answers with ``{"result": [...]}``; `copy` answers with nothing.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from config.loader import ConfigLoaderError, SettingsLoader
from core.query.dispatcher import TranslationDispatcher
from core.query.presenter import ResultPresenter
from core.query.prompt_parser import PromptParser
from core.query.quick_select import QuickSelectBuilder
from core.trans.manager import TransManager
from handlers.async_comm import HttpClientProvider
from models.config_models import Settings
from utils.clipboard_utils import ClipboardError, ClipboardUtils
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging
    from collections.abc import Mapping

    from handlers.async_comm import AsyncHttp
    from models.result_models import ParsedPrompt, ResultItem

__all__: list[str] = ["FlowPlugin"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)


class FlowPlugin:
    """Entry point for host requests.

    Args:
        manager (TransManager | None): Service registry front-end. A new one is created if omitted.
    """

    def __init__(self, manager: TransManager | None = None) -> None:
        self.manager: TransManager = manager if manager is not None else TransManager()

    async def handle(self, request: Mapping[str, Any]) -> dict[str, Any] | None:
        """Run one host request and release the resources it used.

        Args:
            request (Mapping[str, Any]): Decoded JSON-RPC request.

        Returns:
            dict[str, Any] | None: The response to write to stdout, or None if there is nothing to write.
        """
        method: str = str(request.get("method", ""))
        parameters: list[Any] = list(request.get("parameters") or [])
        first: str = str(parameters[0]) if parameters else ""
        logger.debug("Request received: method='%s' parameters=%s", method, parameters)

        try:
            match method:
                case "query":
                    items: list[ResultItem] = await self.query(first, request.get("settings"))
                    return {"result": [item.to_dict() for item in items]}
                case "copy":
                    self.copy(first)
                    return None
                case _:
                    logger.warning("Unknown method: '%s'", method)
                    return None
        finally:
            await self.shutdown()

    async def query(self, prompt: str, raw_settings: Mapping[str, Any] | None) -> list[ResultItem]:
        """Answer a query.

        Args:
            prompt (str): Query text after the trigger keyword.
            raw_settings (Mapping[str, Any] | None): Raw settings sent by the host.

        Returns:
            list[ResultItem]: A notice, quick-select suggestions or one item per service.
        """
        try:
            settings: Settings = SettingsLoader(raw_settings, known_services=self.manager.fetch_engine_names()).settings
        except ConfigLoaderError as err:
            logger.error("Invalid settings: %s", err)
            presenter = ResultPresenter(Settings().interface_language, self.manager.display_name)
            return [presenter.notice("invalid_configuration", str(err))]

        LoggerUtils.enable_debug(settings.debug)

        presenter = ResultPresenter(settings.interface_language, self.manager.display_name)
        http: AsyncHttp = HttpClientProvider.get(total_timeout=settings.timeout, proxies=settings.proxies)
        dispatcher = TranslationDispatcher(settings, self.manager, http, presenter)

        notice: ResultItem | None = dispatcher.check_preconditions(
            settings.source_language_code, settings.target_language_code
        )
        if notice is not None:
            return [notice]

        parsed: ParsedPrompt = PromptParser.parse(prompt, settings.source_language_code, settings.target_language_code)
        logger.debug("Prompt parsed: %s", parsed)

        if not parsed.text.strip():
            builder = QuickSelectBuilder(presenter, settings.trigger_keyword)
            return builder.build(parsed.source, parsed.target, settings.language_pairs)

        return await dispatcher.run(parsed.source, parsed.target, parsed.text)

    @staticmethod
    def copy(text: str) -> None:
        """Put the selected translation on the clipboard."""
        try:
            ClipboardUtils.copy(text)
        except ClipboardError as err:
            logger.error("Failed to copy to the clipboard: %s", err)
        else:
            logger.debug("Copied %d characters to the clipboard", len(text))

    async def shutdown(self) -> None:
        """Close the shared HTTP client and every service instance."""
        await self.manager.shutdown_engines()
        await HttpClientProvider.close()
