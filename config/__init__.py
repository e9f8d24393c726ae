"""Settings loading and validation for FlowTrans.

This package converts the raw settings the host sends with every request into a typed Settings value.
"""

from config.loader import (
    ConfigFormatError,
    ConfigLoaderError,
    ConfigTypeError,
    ConfigValueError,
    SettingsLoader,
)

__all__: list[str] = [
    "ConfigFormatError",
    "ConfigLoaderError",
    "ConfigTypeError",
    "ConfigValueError",
    "SettingsLoader",
]
