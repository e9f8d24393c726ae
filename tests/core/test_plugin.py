from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, ClassVar

import pytest
import pytest_asyncio

from core import plugin as plugin_module
from core.plugin import FlowPlugin
from core.trans.interface import TransInterface
from core.trans.manager import TransManager
from handlers.async_comm import HttpClientProvider
from utils.clipboard_utils import ClipboardError
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from handlers.async_comm import AsyncHttp
    from models.config_models import Settings


class EchoEngine(TransInterface):
    languages_map: ClassVar[dict[str, str]] = {"auto": "auto", "en": "en", "zh": "zh", "ja": "ja"}
    display_names: ClassVar[dict[str, str]] = {"en": "Echo"}
    calls: ClassVar[list[tuple[str, str, str]]] = []

    @staticmethod
    def fetch_engine_name() -> str:
        # registered by the fixture below
        return ""

    async def translate(self, text: str, src_code: str, tgt_code: str, http: AsyncHttp, settings: Settings) -> str:
        type(self).calls.append((text, src_code, tgt_code))
        return f"[{tgt_code}] {text}"


@pytest.fixture(autouse=True)
def registry(monkeypatch: pytest.MonkeyPatch) -> None:
    EchoEngine.calls = []
    monkeypatch.setattr(TransInterface, "registered", {"echo": EchoEngine})


@pytest_asyncio.fixture(autouse=True)
async def release_shared_state() -> AsyncIterator[None]:
    # query() alone leaves the namespace level and the shared client behind
    namespace_logger = LoggerUtils.get_logger()
    previous = namespace_logger.level
    yield
    namespace_logger.setLevel(previous)
    await HttpClientProvider.close()


@pytest.fixture
def plugin() -> FlowPlugin:
    return FlowPlugin(TransManager())


def raw_settings(**overrides: Any) -> dict[str, Any]:
    return {"services": "echo", "translateDelay": "0", "triggerKeyword": "tr", **overrides}


@pytest.mark.asyncio
async def test_handle_query_encodes_host_keys(plugin: FlowPlugin) -> None:
    response = await plugin.handle({"method": "query", "parameters": ["en>ja hello"], "settings": raw_settings()})

    assert response is not None
    assert len(response["result"]) == 1
    item = response["result"][0]
    assert item["title"] == "[ja] hello"
    assert item["subTitle"] == "English → Japanese  [Echo]"
    assert item["icoPath"].endswith("echo.png")
    assert item["jsonRPCAction"] == {"method": "copy", "parameters": ["[ja] hello"]}


@pytest.mark.asyncio
async def test_auto_target_from_text(plugin: FlowPlugin) -> None:
    items = await plugin.query("你好", raw_settings())
    assert [item.title for item in items] == ["[en] 你好"]


@pytest.mark.asyncio
async def test_invalid_settings_give_notice(plugin: FlowPlugin) -> None:
    items = await plugin.query("hello", raw_settings(translateDelay="soon"))
    assert len(items) == 1
    assert items[0].title.startswith("Invalid configuration")
    assert EchoEngine.calls == []


@pytest.mark.asyncio
async def test_no_services_gives_notice(plugin: FlowPlugin) -> None:
    items = await plugin.query("hello", raw_settings(services=""))
    assert [item.title for item in items] == ["No services configured"]
    assert EchoEngine.calls == []


@pytest.mark.asyncio
async def test_unsupported_default_source(plugin: FlowPlugin) -> None:
    items = await plugin.query("hello", raw_settings(sourceLanguageCode="xx"))
    assert [item.title for item in items] == ["Unsupported source language xx"]


@pytest.mark.asyncio
async def test_prefix_only_shows_quick_select(plugin: FlowPlugin) -> None:
    items = await plugin.query("en>zh", raw_settings(languagePairs="en>ja\nxx>yy\nja>en"))

    assert [item.subtitle for item in items] == [
        "Default selected: en → zh",
        "Quick select: en → ja",
        "Quick select: ja → en",
    ]
    assert items[1].action is not None
    assert items[1].action.parameters == ["tr en>ja ", True]
    assert EchoEngine.calls == []


@pytest.mark.asyncio
async def test_empty_prompt_without_pairs_shows_default_pair(plugin: FlowPlugin) -> None:
    items = await plugin.query("   ", raw_settings(interfaceLanguage="tr"))
    assert len(items) == 1
    assert items[0].title == "Otomatik → Otomatik"


@pytest.mark.asyncio
async def test_handle_copy(monkeypatch: pytest.MonkeyPatch, plugin: FlowPlugin) -> None:
    copied: list[str] = []
    monkeypatch.setattr(plugin_module.ClipboardUtils, "copy", staticmethod(copied.append))

    assert await plugin.handle({"method": "copy", "parameters": ["你好"]}) is None
    assert copied == ["你好"]


def test_copy_failure_is_logged(monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture) -> None:
    def fail(text: str) -> None:
        _ = text
        msg = "Clipboard is not available"
        raise ClipboardError(msg)

    monkeypatch.setattr(plugin_module.ClipboardUtils, "copy", staticmethod(fail))
    with caplog.at_level(logging.ERROR):
        FlowPlugin.copy("text")
    assert "Failed to copy to the clipboard" in caplog.text


@pytest.mark.asyncio
async def test_unknown_method_is_ignored(plugin: FlowPlugin) -> None:
    assert await plugin.handle({"method": "context_menu", "parameters": []}) is None


@pytest.mark.asyncio
async def test_debug_setting_lowers_log_level(plugin: FlowPlugin) -> None:
    await plugin.query("", raw_settings(debug="true"))
    assert LoggerUtils.get_logger().level == logging.DEBUG


@pytest.mark.asyncio
async def test_leading_whitespace_is_not_a_prefix(plugin: FlowPlugin) -> None:
    items = await plugin.query(" en>ja hello", raw_settings())

    assert EchoEngine.calls == [(" en>ja hello", "auto", "zh")]
    assert [item.title for item in items] == ["[zh]  en>ja hello"]


@pytest.mark.asyncio
async def test_debug_records_are_captured_after_query(plugin: FlowPlugin, caplog: pytest.LogCaptureFixture) -> None:
    await plugin.query("hello", raw_settings())
    await HttpClientProvider.close()

    caplog.set_level(logging.DEBUG, logger="FlowTrans")
    HttpClientProvider.get().initialize_session()
    assert any("AsyncHttp session initialized" in rec.message for rec in caplog.records)
