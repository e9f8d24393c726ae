from __future__ import annotations

from typing import TYPE_CHECKING

from core.trans.engines import (
    DeeplTranslation,  # noqa: F401
    GoogleCloudTranslation,  # noqa: F401
    GoogleTranslation,  # noqa: F401
)
from core.trans.interface import TransInterface
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging


__all__: list[str] = ["TransManager"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)


class TransManager:
    """Registry front-end for translation services.

    Looks up registered service classes by name and keeps one instance per service for the
    lifetime of the manager. Unknown names resolve to None instead of raising.
    """

    def __init__(self) -> None:
        self._trans_instance: dict[str, TransInterface] = {}
        logger.debug("Registered translation services: %s", list(TransInterface.registered))

    @staticmethod
    def fetch_engine_names() -> list[str]:
        """Get the names of all registered services."""
        return list(TransInterface.registered)

    def get_service(self, name: str) -> TransInterface | None:
        """Get the service instance registered under the name.

        Args:
            name (str): Service name from the settings.

        Returns:
            TransInterface | None: The shared instance, or None if no service has this name.
        """
        instance: TransInterface | None = self._trans_instance.get(name)
        if instance is not None:
            return instance

        _cls: type[TransInterface] | None = TransInterface.registered.get(name)
        if _cls is None:
            logger.warning("Translation service not found: '%s'", name)
            return None

        instance = _cls()
        self._trans_instance[name] = instance
        logger.debug("Translation service instantiated: '%s'", name)
        return instance

    def display_name(self, name: str, interface_language: str) -> str:
        """Get the localized display name of a service, or the raw name if it is unknown."""
        service: TransInterface | None = self.get_service(name)
        if service is None:
            return name
        return service.display_name(interface_language)

    async def shutdown_engines(self) -> None:
        """Close every instantiated service."""
        logger.debug("Class '%s' termination process started.", self.__class__.__name__)
        for _inst in self._trans_instance.values():
            await _inst.close()
        self._trans_instance.clear()
        logger.debug("Class '%s' termination process completed.", self.__class__.__name__)
