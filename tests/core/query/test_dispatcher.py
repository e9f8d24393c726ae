from __future__ import annotations

import asyncio
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar
from unittest.mock import AsyncMock, MagicMock

import pytest

from core.query.dispatcher import TranslationDispatcher, auto_target
from core.query.presenter import ResultPresenter
from core.trans.interface import TransInterface, TranslateExceptionError
from models.config_models import Settings
from models.result_models import DispatchResult

if TYPE_CHECKING:
    from handlers.async_comm import AsyncHttp


class DummyEngine(TransInterface):
    languages_map: ClassVar[dict[str, str]] = {"auto": "auto", "en": "EN", "zh": "ZH", "ja": "JA"}

    def __init__(self, reply: str = "ok", *, delay: float = 0.0, error: Exception | None = None) -> None:
        self.reply: str = reply
        self.delay: float = delay
        self.error: Exception | None = error
        self.calls: list[tuple[str, str, str]] = []

    @staticmethod
    def fetch_engine_name() -> str:
        # not registered
        return ""

    async def translate(self, text: str, src_code: str, tgt_code: str, http: AsyncHttp, settings: Settings) -> str:
        self.calls.append((text, src_code, tgt_code))
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return f"{self.reply}:{tgt_code}"


class EnglishOnlyEngine(DummyEngine):
    languages_map: ClassVar[dict[str, str]] = {"auto": "auto", "en": "EN"}


class DummyManager:
    def __init__(self, services: dict[str, TransInterface]) -> None:
        self.services: dict[str, TransInterface] = services

    def get_service(self, name: str) -> TransInterface | None:
        return self.services.get(name)

    def display_name(self, name: str, interface_language: str) -> str:
        _ = interface_language
        return name


def make_dispatcher(engines: dict[str, TransInterface], **overrides: Any) -> TranslationDispatcher:
    values: dict[str, Any] = {"services": list(engines), "translate_delay": 0, **overrides}
    settings = Settings(**values)
    manager = DummyManager(engines)
    presenter = ResultPresenter(settings.interface_language, manager.display_name, assets_path=Path("/assets"))
    return TranslationDispatcher(settings, manager, MagicMock(), presenter)  # type: ignore[arg-type]


@pytest.mark.parametrize(
    ("text", "expected"), [("你好世界", "en"), ("hello", "zh"), ("こんにちは", "zh"), ("", "zh")]
)
def test_auto_target(text: str, expected: str) -> None:
    assert auto_target(text) == expected


def test_no_services_gives_single_notice() -> None:
    dispatcher = make_dispatcher({})
    notice = dispatcher.check_preconditions("auto", "auto")
    assert notice is not None
    assert notice.title == "No services configured"


def test_unsupported_default_codes() -> None:
    dispatcher = make_dispatcher({"a": DummyEngine()})
    source_notice = dispatcher.check_preconditions("xx", "en")
    target_notice = dispatcher.check_preconditions("en", "yy")
    assert source_notice is not None
    assert source_notice.title == "Unsupported source language xx"
    assert target_notice is not None
    assert target_notice.title == "Unsupported target language yy"
    assert dispatcher.check_preconditions("auto", "auto") is None


@pytest.mark.asyncio
async def test_run_with_no_services_makes_no_calls() -> None:
    engine = DummyEngine()
    dispatcher = make_dispatcher({}, services=[])
    dispatcher.manager = DummyManager({"a": engine})  # type: ignore[assignment]

    items = await dispatcher.run("auto", "zh", "hello")

    assert len(items) == 1
    assert items[0].title == "No services configured"
    assert engine.calls == []


@pytest.mark.asyncio
async def test_results_follow_configured_order() -> None:
    slow = DummyEngine("slow", delay=0.05)
    fast = DummyEngine("fast")
    dispatcher = make_dispatcher({"slow": slow, "fast": fast})

    results = await dispatcher.dispatch("en", "ja", "hello")

    assert [result.name for result in results] == ["slow", "fast"]
    assert [result.text for result in results] == ["slow:JA", "fast:JA"]


@pytest.mark.asyncio
async def test_failure_does_not_suppress_other_services() -> None:
    broken = DummyEngine(error=TranslateExceptionError("boom"))
    working = DummyEngine("ok")
    dispatcher = make_dispatcher({"broken": broken, "working": working})

    results = await dispatcher.dispatch("en", "zh", "hello")

    assert results[0] == DispatchResult("broken", "Translation failed: boom", "en", "zh", is_error=True)
    assert results[1] == DispatchResult("working", "ok:ZH", "en", "zh")


@pytest.mark.asyncio
async def test_unexpected_exception_becomes_error_result() -> None:
    dispatcher = make_dispatcher({"a": DummyEngine(error=RuntimeError())})
    results = await dispatcher.dispatch("en", "zh", "hello")
    assert results == [DispatchResult("a", "Translation failed: RuntimeError", "en", "zh", is_error=True)]


@pytest.mark.asyncio
async def test_unknown_service_is_omitted() -> None:
    dispatcher = make_dispatcher({"a": DummyEngine()}, services=["missing", "a"])
    results = await dispatcher.dispatch("en", "zh", "hello")
    assert [result.name for result in results] == ["a"]


@pytest.mark.asyncio
async def test_unsupported_source_is_per_service() -> None:
    limited = EnglishOnlyEngine()
    full = DummyEngine()
    dispatcher = make_dispatcher({"limited": limited, "full": full})

    results = await dispatcher.dispatch("ja", "en", "こんにちは")

    assert results[0].is_error
    assert results[0].text == "Unsupported source language"
    assert limited.calls == []
    assert results[1] == DispatchResult("full", "ok:EN", "ja", "en")


@pytest.mark.asyncio
async def test_auto_target_is_resolved_per_service() -> None:
    english_only = EnglishOnlyEngine()
    full = DummyEngine()
    dispatcher = make_dispatcher({"english_only": english_only, "full": full})

    results = await dispatcher.dispatch("auto", "auto", "hello")

    # 'hello' resolves to 'zh', which one service lacks; the other still gets 'zh'.
    assert results[0] == DispatchResult("english_only", "Unsupported target language", "auto", "zh", is_error=True)
    assert results[1] == DispatchResult("full", "ok:ZH", "auto", "zh")


@pytest.mark.asyncio
async def test_auto_target_for_chinese_text() -> None:
    engine = DummyEngine()
    dispatcher = make_dispatcher({"a": engine})
    results = await dispatcher.dispatch("auto", "auto", "你好")
    assert results == [DispatchResult("a", "ok:EN", "auto", "en")]
    assert engine.calls == [("你好", "auto", "EN")]


@pytest.mark.asyncio
async def test_target_unsupported_by_service_falls_back_to_auto_rule() -> None:
    engine = EnglishOnlyEngine()
    dispatcher = make_dispatcher({"a": engine})
    results = await dispatcher.dispatch("auto", "ja", "你好")
    assert results == [DispatchResult("a", "ok:EN", "auto", "en")]


@pytest.mark.asyncio
async def test_debounce_waits_before_dispatching(monkeypatch: pytest.MonkeyPatch) -> None:
    sleep = AsyncMock()
    monkeypatch.setattr("core.query.dispatcher.asyncio.sleep", sleep)
    dispatcher = make_dispatcher({"a": DummyEngine()}, translate_delay=250)

    await dispatcher.dispatch("en", "zh", "hello")

    sleep.assert_awaited_once_with(0.25)


@pytest.mark.asyncio
async def test_cancelled_request_dispatches_nothing() -> None:
    engine = DummyEngine()
    dispatcher = make_dispatcher({"a": engine})
    cancel_event = asyncio.Event()
    cancel_event.set()

    results = await dispatcher.dispatch("en", "zh", "hello", cancel_event=cancel_event)

    assert results == []
    assert engine.calls == []


@pytest.mark.asyncio
async def test_blank_text_dispatches_nothing() -> None:
    engine = DummyEngine()
    dispatcher = make_dispatcher({"a": engine})
    assert await dispatcher.dispatch("en", "zh", "   ") == []
    assert engine.calls == []


@pytest.mark.asyncio
async def test_run_renders_items() -> None:
    dispatcher = make_dispatcher({"a": DummyEngine()})
    items = await dispatcher.run("en", "zh", "hello")
    assert len(items) == 1
    assert items[0].title == "ok:ZH"
    assert items[0].subtitle == "English → Chinese (Simplified)  [a]"
