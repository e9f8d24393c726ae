"""Google Cloud Translation API Basic (v2) service.

Requires the google-cloud-translate library. Authentication uses either an API key
(settings or GOOGLE_CLOUD_API_OAUTH) or the application default credentials
(GOOGLE_APPLICATION_CREDENTIALS).
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Any, ClassVar

from google.api_core.exceptions import BadRequest, GoogleAPIError, TooManyRequests, Unauthorized
from google.auth.credentials import AnonymousCredentials
from google.auth.exceptions import DefaultCredentialsError
from google.auth.transport.requests import AuthorizedSession
from google.cloud import translate_v2 as translate

from core.trans.interface import (
    NotSupportedLanguagesError,
    TransInterface,
    TranslateExceptionError,
    TranslationRateLimitError,
)
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging

    from handlers.async_comm import AsyncHttp
    from models.config_models import Settings

__all__: list[str] = ["GoogleCloudTranslation"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)


class APIKeySession:
    """HTTP session that appends the API key to every request URL."""

    def __init__(self, api_key: str) -> None:
        self.api_key: str = api_key
        self._session: AuthorizedSession = AuthorizedSession(AnonymousCredentials())

    def request(self, method: str, url: str, **kwargs):
        separator = "&" if "?" in url else "?"
        url_with_key: str = f"{url}{separator}key={self.api_key}"
        return self._session.request(method, url_with_key, **kwargs)


class GoogleCloudTranslation(TransInterface):
    languages_map: ClassVar[dict[str, str]] = {
        "auto": "",
        "ar": "ar",
        "cs": "cs",
        "da": "da",
        "de": "de",
        "el": "el",
        "en": "en",
        "es": "es",
        "fi": "fi",
        "fr": "fr",
        "hi": "hi",
        "hu": "hu",
        "id": "id",
        "it": "it",
        "ja": "ja",
        "ko": "ko",
        "nl": "nl",
        "pl": "pl",
        "pt": "pt",
        "ro": "ro",
        "ru": "ru",
        "sv": "sv",
        "th": "th",
        "tr": "tr",
        "uk": "uk",
        "vi": "vi",
        "zh": "zh-CN",
        "zh_tw": "zh-TW",
    }
    display_names: ClassVar[dict[str, str]] = {"en": "Google Cloud", "tr": "Google Cloud", "zh": "谷歌云翻译"}

    def __init__(self) -> None:
        super().__init__()
        self.__inst: translate.Client | None = None
        self.__inst_key: str | None = None

    @staticmethod
    def fetch_engine_name() -> str:
        return "google_cloud"

    def _get_client(self, settings: Settings) -> translate.Client:
        """Get a client for the configured API key, recreating it when the key changes.

        Raises:
            TranslateExceptionError: If no credentials are available.
        """
        api_key: str = self.get_authentication_key(settings.google_cloud_api_key)
        if self.__inst is not None and self.__inst_key == api_key:
            return self.__inst

        try:
            if api_key:
                logger.debug("Using API key authentication")
                self.__inst = translate.Client(credentials=AnonymousCredentials(), _http=APIKeySession(api_key))
            else:
                logger.debug("Using default credentials (GOOGLE_APPLICATION_CREDENTIALS)")
                self.__inst = translate.Client()
        except DefaultCredentialsError as err:
            logger.error("No Google Cloud credentials: %s", err)
            msg = (
                "Authentication failed. Please set the Google Cloud API key "
                "or the GOOGLE_APPLICATION_CREDENTIALS environment variable"
            )
            raise TranslateExceptionError(msg) from err
        self.__inst_key = api_key
        return self.__inst

    async def translate(self, text: str, src_code: str, tgt_code: str, http: AsyncHttp, settings: Settings) -> str:
        """Translate the text with Google Cloud Translation.

        Raises:
            NotSupportedLanguagesError: If the API rejects the language codes.
            TranslationRateLimitError: If the request is rate-limited.
            TranslateExceptionError: If authentication or translation fails.
        """
        _ = http  # The client library uses its own transport.
        logger.info("'%s': 'start translation'", self.__class__.__name__)
        logger.debug("'text': '%s', 'src_code': '%s', 'tgt_code': '%s'", text, src_code, tgt_code)
        client: translate.Client = self._get_client(settings)

        try:
            translation_result: dict[str, Any] = await asyncio.to_thread(
                client.translate,
                text,
                target_language=tgt_code,
                source_language=src_code or None,
                format_="text",
            )
            translated_text: str = translation_result["translatedText"]
        except BadRequest as err:
            logger.error("Invalid language code: %s", err)
            msg: str = f"Unsupported language pair (src: '{src_code}', tgt: '{tgt_code}'): {err}"
            raise NotSupportedLanguagesError(msg) from err
        except TooManyRequests as err:
            logger.error("Google API rate limit during translation: %s", err)
            msg = f"Translation rate limited: {err}"
            raise TranslationRateLimitError(msg) from err
        except Unauthorized as err:
            logger.error("Authentication failed: %s", err)
            msg = "Authentication failed. Please check the Google Cloud API key"
            raise TranslateExceptionError(msg) from err
        except GoogleAPIError as err:
            logger.error("Google API error during translation: %s", err)
            msg = f"Translation failed: {err}"
            raise TranslateExceptionError(msg) from err
        except (KeyError, TypeError) as err:
            msg = "invalid response format from Google Cloud"
            raise TranslateExceptionError(msg) from err

        logger.info("translation completed (%s > %s)", src_code or "auto", tgt_code)
        return translated_text

    async def close(self) -> None:
        self.__inst = None
        self.__inst_key = None
        logger.debug("'%s' process termination", self.__class__.__name__)
