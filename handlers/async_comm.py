"""Asynchronous HTTP communication shared by the translation services.

`AsyncHttp` wraps an aiohttp session with content-type based response decoding, timeouts and an
optional proxy. `HttpClientProvider` hands out a single `AsyncHttp` per process so that every
service and every concurrent request reuses the same connection pool.
"""

from __future__ import annotations

import json
import threading
from typing import TYPE_CHECKING, Any, ClassVar, Final, Literal

import aiohttp
from aiohttp.client import ClientSession

from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging
    from collections.abc import Callable

    from aiohttp.client import ClientResponse


__all__: list[str] = [
    "AsyncCommError",
    "AsyncCommInvalidContentTypeError",
    "AsyncCommTimeoutError",
    "AsyncHttp",
    "HttpClientProvider",
]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

HTTPMethod = Literal["GET"]

CONNECT_TIMEOUT: Final[float] = 1.0


class AsyncHttp:
    """Asynchronous HTTP client for making requests and decoding responses.

    The aiohttp session is created lazily on the first request, because aiohttp sessions must be
    created while an event loop is running.
    """

    def __init__(self, *, total_timeout: float = 10.0, proxies: dict[str, str] | None = None) -> None:
        """Initialize the client.

        Args:
            total_timeout (float): Default total timeout for each request, in seconds.
            proxies (dict[str, str] | None): Optional proxies keyed by scheme ('http', 'https').
        """
        logger.info("%s initializing", self.__class__.__name__)
        self.__session: ClientSession | None = None
        self.total_timeout: float = total_timeout
        self.proxies: dict[str, str] = proxies if isinstance(proxies, dict) else {}
        self.content_handlers: dict[str, Callable[[bytes], Any]] = {}

        self.add_handler("text/plain", lambda x: x.decode("utf-8"))
        self.add_handler("text/html", lambda x: x.decode("utf-8"))
        self.add_handler("application/json", lambda x: json.loads(x.decode("utf-8")))
        self.add_handler("text/javascript", lambda x: json.loads(x.decode("utf-8")))

    def initialize_session(self) -> None:
        """Create the aiohttp session if it does not exist or has been closed."""
        if self.__session is None or self.__session.closed:
            self.__session = ClientSession(raise_for_status=True)
            logger.debug("%s session initialized", self.__class__.__name__)

    @property
    def session(self) -> ClientSession:
        """Get the current aiohttp session, creating it on first use."""
        self.initialize_session()
        if self.__session is None:
            msg = "Session is not initialized"
            raise RuntimeError(msg)
        return self.__session

    @property
    def closed(self) -> bool:
        return self.__session is None or self.__session.closed

    async def close(self) -> None:
        """Close the aiohttp session if it is open."""
        if self.__session and not self.__session.closed:
            await self.__session.close()
            logger.info("%s session closed", self.__class__.__name__)

    async def get(
        self,
        *,
        url: str,
        params: dict[str, str] | list[tuple[str, str]] | None = None,
        headers: dict[str, str] | None = None,
        total_timeout: float | None = None,
    ) -> Any:
        """Perform an asynchronous HTTP GET request.

        Args:
            url (str): The URL to send the GET request to.
            params (dict[str, str] | list[tuple[str, str]] | None): Optional query parameters.
                A list of tuples allows repeated keys.
            headers (dict[str, str] | None): Optional request headers.
            total_timeout (float | None): Total timeout in seconds. None uses the client default.

        Returns:
            Any: The decoded response data.
        """
        logger.debug("'url': '%s', 'params': '%s'", url, params)
        return await self._request("GET", url=url, total_timeout=total_timeout, params=params, headers=headers)

    async def decode_response(self, resp: ClientResponse) -> Any:
        """Decode a response body using the handler registered for its Content-Type.

        Raises:
            AsyncCommInvalidContentTypeError: If no handler is registered for the content type.
        """
        content_type: str = resp.headers.get("Content-Type", "").split(";")[0].strip()
        logger.debug("'Content-Type': '%s'", content_type)

        raw: bytes = await resp.read()
        if not raw:
            logger.debug("Received empty response")
            return None

        handler: Callable[[bytes], Any] | None = self.content_handlers.get(content_type)
        if handler:
            return handler(raw)

        msg: str = f"Unknown Content-Type '{content_type}'"
        raise AsyncCommInvalidContentTypeError(msg)

    def add_handler(self, content_type: str, handler: Callable[[bytes], Any]) -> None:
        """Register a decoder for a content type, replacing any existing one."""
        if self.content_handlers.get(content_type):
            logger.warning("Handler for content type '%s' already exists, replacing it", content_type)
        self.content_handlers[content_type] = handler
        logger.debug("Added handler for content type '%s'", content_type)

    def _build_timeout(self, total_timeout: float | None) -> aiohttp.ClientTimeout:
        total: float = self.total_timeout if total_timeout is None else total_timeout
        if total <= 0:
            # no timeout at all
            return aiohttp.ClientTimeout(total=None)
        if total < CONNECT_TIMEOUT:
            # keep the connect phase from being cut shorter than the total
            return aiohttp.ClientTimeout(total=total)
        return aiohttp.ClientTimeout(connect=CONNECT_TIMEOUT, total=total)

    async def _request(
        self,
        method: HTTPMethod,
        *,
        url: str,
        total_timeout: float | None,
        **kwargs: Any,
    ) -> Any:
        """Perform an asynchronous HTTP request and translate transport errors.

        Raises:
            AsyncCommTimeoutError: If the server does not respond in time.
            AsyncCommError: If the connection fails or the server answers with an error status.
        """
        proxy: str | None = self.proxies.get("https") or self.proxies.get("http")
        try:
            async with self.session.request(
                method=method,
                url=url,
                timeout=self._build_timeout(total_timeout),
                proxy=proxy,
                **kwargs,
            ) as resp:
                resp.raise_for_status()
                return await self.decode_response(resp)

        except TimeoutError as err:
            logger.debug(err)
            msg = "Timeout due to a lack of response from the server."
            raise AsyncCommTimeoutError(msg) from err
        except ConnectionResetError as err:
            logger.debug(err)
            msg = "The connection to the server has been disconnected."
            raise AsyncCommError(msg) from err
        except aiohttp.ClientConnectorError as err:
            logger.debug(err)
            msg = "Unable to connect to the server."
            raise AsyncCommError(msg) from err
        except aiohttp.ClientResponseError as err:
            logger.debug(err)
            msg = "Error response from the server."
            raise AsyncCommError(msg, response=err) from err


class HttpClientProvider:
    """Process-wide holder of the shared AsyncHttp client.

    The first call to get() creates the client from the settings of that call; later calls return
    the same instance regardless of their settings.
    """

    _client: ClassVar[AsyncHttp | None] = None
    _lock: ClassVar[threading.Lock] = threading.Lock()

    @classmethod
    def get(cls, *, total_timeout: float = 10.0, proxies: dict[str, str] | None = None) -> AsyncHttp:
        if cls._client is None:
            with cls._lock:
                if cls._client is None:
                    cls._client = AsyncHttp(total_timeout=total_timeout, proxies=proxies)
        return cls._client

    @classmethod
    async def close(cls) -> None:
        """Close and forget the shared client, if one was created."""
        with cls._lock:
            client: AsyncHttp | None = cls._client
            cls._client = None
        if client is not None:
            await client.close()


class AsyncCommError(Exception):
    """Base class for asynchronous communication errors."""

    def __init__(self, msg: str | BaseException, **kwargs: Any) -> None:
        self.msg: str = str(msg)

        rsp: aiohttp.ClientResponseError | None = kwargs.pop("response", None)
        if isinstance(rsp, aiohttp.ClientResponseError):
            self.msg = f"{self.msg}: status='{rsp.status}'"
            self.status: int | None = rsp.status
        else:
            self.status = None

        super().__init__(self.msg)


class AsyncCommTimeoutError(AsyncCommError):
    """An HTTP request did not complete within its timeout."""


class AsyncCommInvalidContentTypeError(AsyncCommError):
    """A response had a content type with no registered handler."""
