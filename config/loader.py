"""Settings loader and validator.

Turns the raw settings mapping supplied by the host on every request into a typed Settings value.
The host stores most values as strings, so each value is coerced to the type of the matching
Settings field before decoding. Raises exceptions for any value that cannot be used.
"""

from __future__ import annotations

import ast
from collections.abc import Iterable, Mapping
from dataclasses import MISSING, fields
from typing import TYPE_CHECKING, Any, Final

from models.config_models import Settings
from models.language_models import INTERFACE_LANGUAGES
from utils.logger_utils import LoggerUtils
from utils.string_utils import StringUtils

if TYPE_CHECKING:
    import logging
    from collections.abc import Callable
    from dataclasses import Field as DataclassField

__all__: list[str] = [
    "ConfigFormatError",
    "ConfigLoaderError",
    "ConfigTypeError",
    "ConfigValueError",
    "SettingsLoader",
]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

TRUE_WORDS: Final[frozenset[str]] = frozenset({"1", "yes", "true", "on"})
FALSE_WORDS: Final[frozenset[str]] = frozenset({"0", "no", "false", "off", ""})
DEFAULT_INTERFACE_LANGUAGE: Final[str] = "en"


class ConfigLoaderError(Exception):
    """An error occurred while processing the settings."""


class ConfigFormatError(ConfigLoaderError):
    """The settings are not formatted correctly."""


class ConfigValueError(ConfigFormatError):
    """The settings contain an invalid value."""


class ConfigTypeError(ConfigFormatError):
    """The settings contain an invalid type."""


def to_camel(name: str) -> str:
    """Convert a snake_case field name to the camelCase key the host uses."""
    head, *tail = name.split("_")
    return head + "".join(part.title() for part in tail)


class SettingsLoader:
    """Handles conversion and validation of the raw host settings.

    Args:
        raw (Mapping[str, Any] | None): Raw settings from the request. Unknown keys are ignored.
        known_services (Iterable[str] | None): Registered service names. When given, configured
            names outside this set are reported as warnings.

    Raises:
        ConfigTypeError: If raw is not a mapping or a value has an unusable type.
        ConfigValueError: If a value is out of range or cannot be coerced.
        ConfigFormatError: If a list literal cannot be parsed.
    """

    def __init__(self, raw: Mapping[str, Any] | None, *, known_services: Iterable[str] | None = None) -> None:
        if raw is None:
            raw = {}
        if not isinstance(raw, Mapping):
            msg: str = f"Settings must be a mapping, not {type(raw).__name__}"
            raise ConfigTypeError(msg)

        self._known_services: frozenset[str] | None = (
            frozenset(known_services) if known_services is not None else None
        )
        values: dict[str, Any] = self._convert_settings(raw)
        self._validate_settings(values)
        self.settings: Settings = Settings.from_dict(values)
        logger.debug("Settings loaded: %s", self.settings)

    def _convert_settings(self, raw: Mapping[str, Any]) -> dict[str, Any]:
        """Coerce every known raw value to the type of its Settings field.

        Returns:
            dict[str, Any]: Coerced values keyed by camelCase name.
        """
        formatter = _SettingsFormatter(raw)
        values: dict[str, Any] = {}
        for key in fields(Settings):
            raw_key: str = to_camel(key.name)
            if raw_key not in raw or raw[raw_key] is None:
                logger.debug("Skipping undefined setting: '%s'", raw_key)
                continue
            values[raw_key] = formatter.apply_format(key, raw_key)
        return values

    def _validate_settings(self, values: dict[str, Any]) -> None:
        """Validate and normalize coerced values in place.

        Raises:
            ConfigValueError: If a numeric value is negative.
        """
        self._validate_interface_language(values)
        self._normalize_language_code(values, "sourceLanguageCode")
        self._normalize_language_code(values, "targetLanguageCode")
        self._validate_non_negative(values, "translateDelay")
        self._validate_non_negative(values, "timeout")
        self._inspect_services(values)

    def _validate_interface_language(self, values: dict[str, Any]) -> None:
        value: str | None = values.get("interfaceLanguage")
        if value is None:
            return
        value = value.strip().lower()
        if value not in INTERFACE_LANGUAGES:
            logger.warning(
                "Unsupported interface language '%s'. Falling back to '%s'.", value, DEFAULT_INTERFACE_LANGUAGE
            )
            value = DEFAULT_INTERFACE_LANGUAGE
        values["interfaceLanguage"] = value

    def _normalize_language_code(self, values: dict[str, Any], key: str) -> None:
        if key in values:
            values[key] = values[key].strip().lower()

    def _validate_non_negative(self, values: dict[str, Any], key: str) -> None:
        value: float | None = values.get(key)
        if value is not None and value < 0:
            msg: str = f"'{key}' must not be negative: {value}"
            raise ConfigValueError(msg)

    def _inspect_services(self, values: dict[str, Any]) -> None:
        """Report configured services that are not registered.

        Unknown names are kept; the dispatcher drops them silently.
        """
        services: list[str] | None = values.get("services")
        if services is None or self._known_services is None:
            return
        for name in services:
            if name not in self._known_services:
                logger.warning("Unknown value '%s' is set for 'services'", name)


class _SettingsFormatter:
    """Converts raw host values (usually strings) to typed Python objects."""

    def __init__(self, raw: Mapping[str, Any]) -> None:
        self.raw: Mapping[str, Any] = raw

    def apply_format(self, key: DataclassField[Any], raw_key: str) -> Any:
        """Convert a raw value to the type of the field's default value.

        Raises:
            ConfigValueError: If a value cannot be coerced to the expected type.
            ConfigTypeError: If the raw value has a type that cannot be coerced at all.
            ConfigFormatError: If a list literal has invalid syntax.
        """
        formatters: dict[type, Callable[[Any], Any]] = {
            bool: self.parse_as_boolean,
            int: self.parse_as_integer,
            float: self.parse_as_float,
            list: self.parse_as_list,
            str: self.parse_as_string,
        }

        value: Any = self.raw[raw_key]
        formatter: Callable[[Any], Any] | None = formatters.get(type(_default_of(key)))
        if formatter is None:
            return value
        try:
            return formatter(value)
        except (ValueError, OverflowError) as err:
            msg = f"Invalid value for {raw_key}: {err}"
            raise ConfigValueError(msg) from err
        except TypeError as err:
            msg = f"Invalid value for {raw_key}: {err}"
            raise ConfigTypeError(msg) from err

    @staticmethod
    def _strip_quotes(value: Any) -> str:
        text: str = str(value).strip()
        for char in ("'", '"'):
            text = text.removeprefix(char).removesuffix(char)
        return text.strip()

    def parse_as_boolean(self, value: Any) -> bool:
        if isinstance(value, bool):
            return value
        text: str = self._strip_quotes(value).lower()
        if text in TRUE_WORDS:
            return True
        if text in FALSE_WORDS:
            return False
        msg: str = f"not a boolean: '{value}'"
        raise ValueError(msg)

    def parse_as_integer(self, value: Any) -> int:
        if isinstance(value, bool):
            msg = "boolean is not an integer"
            raise TypeError(msg)
        if isinstance(value, (int, float)):
            return int(value)
        return int(float(self._strip_quotes(value)))

    def parse_as_float(self, value: Any) -> float:
        if isinstance(value, bool):
            msg = "boolean is not a number"
            raise TypeError(msg)
        if isinstance(value, (int, float)):
            return float(value)
        return float(self._strip_quotes(value))

    def parse_as_string(self, value: Any) -> str:
        if isinstance(value, (list, dict)):
            msg: str = f"expected a string, got {type(value).__name__}"
            raise TypeError(msg)
        return StringUtils.ensure_str(value).strip()

    def parse_as_list(self, value: Any) -> list[str]:
        """Accept a list, a list literal such as "['google', 'deepl']", or a comma/newline separated string."""
        if isinstance(value, (list, tuple)):
            return [str(item).strip() for item in value if str(item).strip()]
        if not isinstance(value, str):
            msg: str = f"expected a list or string, got {type(value).__name__}"
            raise TypeError(msg)

        text: str = value.strip()
        if text.startswith("["):
            try:
                parsed: Any = ast.literal_eval(text)
            except (ValueError, SyntaxError) as err:
                msg = f"Invalid list literal: {text}"
                raise ConfigFormatError(msg) from err
            if not isinstance(parsed, list):
                msg = f"Invalid list literal: {text}"
                raise ConfigFormatError(msg)
            return [str(item).strip() for item in parsed if str(item).strip()]
        return StringUtils.split_list(text)


def _default_of(key: DataclassField[Any]) -> Any:
    if key.default is not MISSING:
        return key.default
    if key.default_factory is not MISSING:
        return key.default_factory()
    return None
