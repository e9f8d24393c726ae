"""Concurrent fan-out of one translation request to every configured service."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import TYPE_CHECKING

from models.language_models import AUTO_LANGUAGE_CODE, is_valid_code
from models.message_models import localize
from models.result_models import DispatchResult
from utils.logger_utils import LoggerUtils
from utils.string_utils import StringUtils

if TYPE_CHECKING:
    import logging

    from core.query.presenter import ResultPresenter
    from core.trans.interface import TransInterface
    from core.trans.manager import TransManager
    from handlers.async_comm import AsyncHttp
    from models.config_models import Settings
    from models.result_models import ResultItem

__all__: list[str] = ["TranslationDispatcher", "auto_target"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)


def auto_target(text: str) -> str:
    """Pick a target from the script of the text: English for Chinese input, Chinese otherwise."""
    return "en" if StringUtils.contains_cjk(text) else "zh"


@dataclass(frozen=True)
class _ServiceRequest:
    """A request ready to be sent to one service."""

    name: str
    service: TransInterface
    source: str
    target: str
    src_code: str
    tgt_code: str


class TranslationDispatcher:
    """Sends the text to every configured service concurrently and collects the outcomes in order.

    Args:
        settings (Settings): Settings of the current request.
        manager (TransManager): Registry used to look up services by name.
        http (AsyncHttp): Shared HTTP client handed to every service.
        presenter (ResultPresenter): Presenter for notices and result items.
    """

    def __init__(self, settings: Settings, manager: TransManager, http: AsyncHttp, presenter: ResultPresenter) -> None:
        self.settings: Settings = settings
        self.manager: TransManager = manager
        self.http: AsyncHttp = http
        self.presenter: ResultPresenter = presenter

    @property
    def interface_language(self) -> str:
        return self.settings.interface_language

    def check_preconditions(self, source: str, target: str) -> ResultItem | None:
        """Check the configuration before anything is dispatched.

        Returns:
            ResultItem | None: A notice describing the first failed check, or None if all checks pass.
        """
        if not self.settings.services:
            logger.warning("No translation services configured")
            return self.presenter.notice("no_services_configured")
        if not is_valid_code(source):
            logger.warning("Unsupported source language: '%s'", source)
            return self.presenter.notice("unsupported_source_language", source)
        if not is_valid_code(target):
            logger.warning("Unsupported target language: '%s'", target)
            return self.presenter.notice("unsupported_target_language", target)
        return None

    async def run(
        self, source: str, target: str, text: str, *, cancel_event: asyncio.Event | None = None
    ) -> list[ResultItem]:
        """Check the preconditions, dispatch and render the outcomes.

        Returns:
            list[ResultItem]: A single notice, or one item per known service in configured order.
        """
        notice: ResultItem | None = self.check_preconditions(source, target)
        if notice is not None:
            return [notice]
        results: list[DispatchResult] = await self.dispatch(source, target, text, cancel_event=cancel_event)
        return self.presenter.translation_items(results)

    async def dispatch(
        self, source: str, target: str, text: str, *, cancel_event: asyncio.Event | None = None
    ) -> list[DispatchResult]:
        """Translate the text with every configured service.

        Waits for the debounce delay first. If cancel_event is set by the time the delay ends,
        nothing is sent. Failures of one service never affect the others.

        Args:
            source (str): Source language code.
            target (str): Target language code, or 'auto'.
            text (str): Text to translate.
            cancel_event (asyncio.Event | None): Set by the caller when this request has been superseded.

        Returns:
            list[DispatchResult]: Outcomes in configured service order; unknown services are omitted.
        """
        if not text.strip():
            return []

        await self._debounce()
        if cancel_event is not None and cancel_event.is_set():
            logger.debug("Dispatch superseded during debounce")
            return []

        planned: list[_ServiceRequest | DispatchResult | None] = [
            self._plan(name, source, target, text) for name in self.settings.services
        ]
        outcomes: list[DispatchResult | BaseException | None] = await asyncio.gather(
            *(self._send(item, text) for item in planned), return_exceptions=True
        )

        results: list[DispatchResult] = []
        for item, outcome in zip(planned, outcomes, strict=True):
            if isinstance(outcome, BaseException):
                if not isinstance(outcome, Exception):
                    raise outcome
                # _send only raises for planned requests
                results.append(self._failure(item, outcome))  # type: ignore[arg-type]
            elif outcome is not None:
                results.append(outcome)
        return results

    async def _debounce(self) -> None:
        delay: float = self.settings.translate_delay / 1000
        if delay > 0:
            logger.debug("Debouncing for %.3f sec", delay)
            await asyncio.sleep(delay)

    def _plan(self, name: str, source: str, target: str, text: str) -> _ServiceRequest | DispatchResult | None:
        """Resolve the service and its language codes without sending anything.

        The effective target is derived only from the requested target and the text, so every
        service decides independently.

        Returns:
            _ServiceRequest | DispatchResult | None: A request to send, an immediate error result,
                or None if the service is unknown.
        """
        service: TransInterface | None = self.manager.get_service(name)
        if service is None:
            return None

        src_code: str | None = service.service_code(source)
        if src_code is None:
            logger.info("'%s' does not support source language '%s'", name, source)
            return DispatchResult(
                name, localize("unsupported_source_language", self.interface_language), source, target, is_error=True
            )

        effective_target: str = target
        if target == AUTO_LANGUAGE_CODE or not service.supports(target):
            effective_target = auto_target(text)
            logger.debug("'%s' target resolved from '%s' to '%s'", name, target, effective_target)

        tgt_code: str | None = service.service_code(effective_target)
        if tgt_code is None:
            logger.info("'%s' does not support target language '%s'", name, effective_target)
            return DispatchResult(
                name,
                localize("unsupported_target_language", self.interface_language),
                source,
                effective_target,
                is_error=True,
            )

        return _ServiceRequest(name, service, source, effective_target, src_code, tgt_code)

    async def _send(self, item: _ServiceRequest | DispatchResult | None, text: str) -> DispatchResult | None:
        if not isinstance(item, _ServiceRequest):
            return item
        translated: str = await item.service.translate(text, item.src_code, item.tgt_code, self.http, self.settings)
        return DispatchResult(item.name, StringUtils.ensure_str(translated), item.source, item.target)

    def _failure(self, item: _ServiceRequest, err: Exception) -> DispatchResult:
        logger.error("'%s' translation failed: %s", item.name, err, exc_info=err)
        reason: str = str(err) or type(err).__name__
        message: str = f"{localize('translation_failed', self.interface_language)}: {reason}"
        return DispatchResult(item.name, message, item.source, item.target, is_error=True)
