"""Settings model for a single plugin invocation.

The host stores settings under camelCase keys (see SettingsTemplate.yaml), so the dataclass is
decoded with dataclasses_json using LetterCase.CAMEL. Instances are built fresh for every request.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from dataclasses_json import DataClassJsonMixin, LetterCase, dataclass_json

__all__: list[str] = ["Settings"]


@dataclass_json(letter_case=LetterCase.CAMEL)
@dataclass(frozen=True)
class Settings(DataClassJsonMixin):
    """Typed plugin settings.

    Attributes:
        interface_language (str): Language of notices and display names ('en', 'tr' or 'zh').
        source_language_code (str): Default source language code.
        target_language_code (str): Default target language code, 'auto' to infer it from the text.
        trigger_keyword (str): Action keyword the plugin is registered under.
        services (list[str]): Translation service names, in display order.
        language_pairs (list[str]): Quick-select pairs written as 'source>target'.
        translate_delay (int): Debounce delay before dispatching, in milliseconds.
        timeout (float): Total HTTP timeout per request, in seconds.
        proxy_enabled (bool): Whether proxy_url is applied to outgoing requests.
        proxy_url (str): Proxy URL, e.g. 'http://127.0.0.1:7890'.
        debug (bool): Lower the log level to DEBUG.
        google_url_suffix (str): Top-level domain of the Google endpoint, e.g. 'com' or 'co.jp'.
        deepl_api_key (str): DeepL authentication key.
        google_cloud_api_key (str): Google Cloud Translation API key.
    """

    interface_language: str = "en"
    source_language_code: str = "auto"
    target_language_code: str = "auto"
    trigger_keyword: str = "tr"
    services: list[str] = field(default_factory=lambda: ["google"])
    language_pairs: list[str] = field(default_factory=list)
    translate_delay: int = 300
    timeout: float = 10.0
    proxy_enabled: bool = False
    proxy_url: str = ""
    debug: bool = False
    google_url_suffix: str = "com"
    deepl_api_key: str = ""
    google_cloud_api_key: str = ""

    @property
    def proxies(self) -> dict[str, str]:
        """Proxy mapping in the form AsyncHttp expects, empty when disabled."""
        if not self.proxy_enabled or not self.proxy_url.strip():
            return {}
        url: str = self.proxy_url.strip()
        return {"http": url, "https": url}
