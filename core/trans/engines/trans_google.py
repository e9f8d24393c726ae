"""Google Translate service using the free web endpoint.

Requests go through the shared AsyncHttp client, so proxy and timeout settings apply.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar, Final

from core.trans.interface import TransInterface, TranslateExceptionError, TranslationRateLimitError
from handlers.async_comm import AsyncCommError
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging

    from handlers.async_comm import AsyncHttp
    from models.config_models import Settings

__all__: list[str] = ["GoogleTranslation"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

URL_SUFFIX_DEFAULT: Final[str] = "com"
URLS_SUFFIX: Final[frozenset[str]] = frozenset(
    {"com", "co.jp", "co.kr", "co.uk", "com.hk", "com.tr", "com.tw", "de", "fr", "ru"}
)
HTTP_TOO_MANY_REQUESTS: Final[int] = 429
MAX_TEXT_LENGTH: Final[int] = 5000


class GoogleTranslation(TransInterface):
    languages_map: ClassVar[dict[str, str]] = {
        "auto": "auto",
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
    display_names: ClassVar[dict[str, str]] = {"en": "Google", "tr": "Google", "zh": "谷歌翻译"}

    @staticmethod
    def fetch_engine_name() -> str:
        return "google"

    @staticmethod
    def build_url(url_suffix: str) -> str:
        suffix: str = url_suffix.strip().lower()
        if suffix not in URLS_SUFFIX:
            suffix = URL_SUFFIX_DEFAULT
        return f"https://translate.google.{suffix}/translate_a/single"

    async def translate(self, text: str, src_code: str, tgt_code: str, http: AsyncHttp, settings: Settings) -> str:
        logger.info("'%s': 'start translation'", self.__class__.__name__)
        logger.debug("'text': '%s', 'src_code': '%s', 'tgt_code': '%s'", text, src_code, tgt_code)

        if len(text) >= MAX_TEXT_LENGTH:
            msg = f"Google can only translate less than {MAX_TEXT_LENGTH} characters"
            raise TranslateExceptionError(msg)

        params: list[tuple[str, str]] = [
            ("client", "gtx"),
            ("sl", src_code),
            ("tl", tgt_code),
            ("dt", "t"),
            ("q", text),
        ]
        try:
            data: Any = await http.get(url=self.build_url(settings.google_url_suffix), params=params)
        except AsyncCommError as err:
            logger.error(err)
            msg = "an anomaly occurred during translation at Google"
            if getattr(err, "status", None) == HTTP_TOO_MANY_REQUESTS:
                raise TranslationRateLimitError(msg) from err
            raise TranslateExceptionError(msg) from err

        result: str = self._process_response(data)
        logger.info("translation completed (%s > %s)", src_code, tgt_code)
        return result

    @staticmethod
    def _process_response(data: Any) -> str:
        """Join the translated sentence segments of a translate_a/single response.

        The response looks like [[["Hello ", "你好", ...], ["world", "世界", ...]], null, "zh-CN", ...].

        Raises:
            TranslateExceptionError: If the response does not have the expected structure.
        """
        try:
            segments: list[Any] = data[0]
            return "".join(segment[0] for segment in segments if segment and segment[0])
        except (IndexError, KeyError, TypeError) as err:
            msg = "invalid response format from Google"
            raise TranslateExceptionError(msg) from err
