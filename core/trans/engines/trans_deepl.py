from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, ClassVar

from deepl import DeepLClient, TextResult
from deepl.exceptions import (
    AuthorizationException,
    ConnectionException,
    DeepLException,
    QuotaExceededException,
    TooManyRequestsException,
)

from core.trans.interface import (
    TransInterface,
    TranslateExceptionError,
    TranslationQuotaExceededError,
    TranslationRateLimitError,
)
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging

    from handlers.async_comm import AsyncHttp
    from models.config_models import Settings


__all__: list[str] = ["DeeplTranslation"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)


class DeeplTranslation(TransInterface):
    """DeepL translation through the official client library.

    The library is synchronous, so calls run in a worker thread. The map holds target codes;
    the source code is the base part before the region (e.g. 'EN-US' is sent as source 'EN').
    An empty source code lets DeepL detect the language.
    """

    languages_map: ClassVar[dict[str, str]] = {
        "auto": "",
        "ar": "AR",
        "cs": "CS",
        "da": "DA",
        "de": "DE",
        "el": "EL",
        "en": "EN-US",
        "es": "ES",
        "fi": "FI",
        "fr": "FR",
        "hu": "HU",
        "id": "ID",
        "it": "IT",
        "ja": "JA",
        "ko": "KO",
        "nl": "NL",
        "pl": "PL",
        "pt": "PT-PT",
        "ro": "RO",
        "ru": "RU",
        "sv": "SV",
        "tr": "TR",
        "uk": "UK",
        "zh": "ZH-HANS",
        "zh_tw": "ZH-HANT",
    }
    display_names: ClassVar[dict[str, str]] = {"en": "DeepL", "tr": "DeepL", "zh": "DeepL翻译"}

    def __init__(self) -> None:
        super().__init__()
        self.__inst: DeepLClient | None = None
        self.__inst_key: tuple[str, str] | None = None

    @staticmethod
    def fetch_engine_name() -> str:
        return "deepl"

    def _get_client(self, settings: Settings) -> DeepLClient:
        """Get a client for the configured key and proxy, recreating it when either changes.

        Raises:
            TranslateExceptionError: If no authentication key is configured or the client cannot be created.
        """
        auth_key: str = self.get_authentication_key(settings.deepl_api_key)
        if not auth_key:
            msg = "DeepL authentication key is not configured"
            raise TranslateExceptionError(msg)

        proxy: str = settings.proxies.get("https", "")
        if self.__inst is None or self.__inst_key != (auth_key, proxy):
            try:
                # The key is only verified when the API is used, not when the client is created.
                self.__inst = DeepLClient(auth_key, proxy=proxy or None)
            except (AttributeError, ValueError) as err:
                logger.critical(err)
                msg = "An error occurred while creating the DeepL client instance"
                raise TranslateExceptionError(msg) from err
            self.__inst_key = (auth_key, proxy)
            logger.debug("'%s': 'set instance'", self.__class__.__name__)
        return self.__inst

    async def translate(self, text: str, src_code: str, tgt_code: str, http: AsyncHttp, settings: Settings) -> str:
        """Translate the text with DeepL.

        Raises:
            TranslationQuotaExceededError: If the translation quota has been exceeded.
            TranslationRateLimitError: If DeepL rate-limits the request.
            TranslateExceptionError: If authorization, connection or translation fails.
        """
        _ = http  # DeepL manages its own connection pool.
        logger.debug("'text': '%s', 'src_code': '%s', 'tgt_code': '%s'", text, src_code, tgt_code)
        source_lang: str | None = src_code.split("-")[0] or None
        client: DeepLClient = self._get_client(settings)

        try:
            results: TextResult | list[TextResult] = await asyncio.to_thread(
                client.translate_text,
                text,
                source_lang=source_lang,
                target_lang=tgt_code,
            )
        except QuotaExceededException as err:
            raise TranslationQuotaExceededError(err) from None
        except AuthorizationException:
            msg = "Authorisation failed. Please check your authentication key"
            raise TranslateExceptionError(msg) from None
        except TooManyRequestsException as err:
            msg = "DeepL rate limit reached"
            raise TranslationRateLimitError(msg) from err
        except ConnectionException:
            msg = "An error occurred when connecting to the DeepL server"
            raise TranslateExceptionError(msg) from None
        except DeepLException:
            msg = "An anomaly occurred during the translation process at DeepL"
            raise TranslateExceptionError(msg) from None
        except (ValueError, TypeError):
            msg = "An anomaly occurred during the translation process at DeepL"
            raise TranslateExceptionError(msg) from None

        logger.info("translation completed (%s > %s)", source_lang, tgt_code)
        return self._build_result(results)

    def _build_result(self, results: TextResult | list[TextResult]) -> str:
        if isinstance(results, list):
            # A single string is sent, so a list never has more than one entry.
            if not results:
                msg = "An anomaly occurred during the translation process at DeepL"
                raise TranslateExceptionError(msg)
            return results[0].text
        return results.text

    async def close(self) -> None:
        self.__inst = None
        self.__inst_key = None
        logger.debug("'%s' process termination", self.__class__.__name__)
