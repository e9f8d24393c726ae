"""Unit tests for core.trans.interface module."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

import pytest

from core.trans.interface import TransInterface

if TYPE_CHECKING:
    from handlers.async_comm import AsyncHttp
    from models.config_models import Settings


class SampleEngine(TransInterface):
    languages_map: ClassVar[dict[str, str]] = {"auto": "", "en": "EN-US", "zh": "ZH"}
    display_names: ClassVar[dict[str, str]] = {"en": "Sample"}

    @staticmethod
    def fetch_engine_name() -> str:
        return ""

    async def translate(self, text: str, src_code: str, tgt_code: str, http: AsyncHttp, settings: Settings) -> str:
        _ = src_code, tgt_code, http, settings
        return text


@pytest.fixture(autouse=True)
def isolated_registry(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(TransInterface, "registered", {})


def test_subclass_with_name_is_registered() -> None:
    class Named(SampleEngine):
        @staticmethod
        def fetch_engine_name() -> str:
            return "named"

    assert TransInterface.registered == {"named": Named}


def test_subclass_with_empty_name_is_not_registered() -> None:
    class Unnamed(SampleEngine):
        pass

    assert Unnamed not in TransInterface.registered.values()
    assert TransInterface.registered == {}


def test_duplicate_name_raises() -> None:
    class First(SampleEngine):
        @staticmethod
        def fetch_engine_name() -> str:
            return "dup"

    with pytest.raises(ValueError, match="already registered"):

        class Second(SampleEngine):
            @staticmethod
            def fetch_engine_name() -> str:
                return "dup"


def test_language_support() -> None:
    engine = SampleEngine()
    assert engine.supports("en")
    assert not engine.supports("ja")
    assert engine.service_code("en") == "EN-US"
    assert engine.service_code("auto") == ""
    assert engine.service_code("ja") is None


def test_display_name_falls_back_to_english() -> None:
    assert SampleEngine().display_name("zh") == "Sample"


def test_authentication_key_prefers_configured(monkeypatch: pytest.MonkeyPatch) -> None:
    class Keyed(SampleEngine):
        @staticmethod
        def fetch_engine_name() -> str:
            return "keyed"

    monkeypatch.setenv("KEYED_API_OAUTH", "from-env")
    engine = Keyed()

    assert engine.get_authentication_key(" configured ") == "configured"
    assert engine.get_authentication_key("") == "from-env"
    monkeypatch.delenv("KEYED_API_OAUTH")
    assert engine.get_authentication_key() == ""
