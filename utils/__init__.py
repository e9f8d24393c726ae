"""Utility modules for FlowTrans.

This package provides logging setup, string helpers and clipboard access.
"""

from utils.clipboard_utils import ClipboardError, ClipboardUtils
from utils.logger_utils import LoggerUtils
from utils.string_utils import StringUtils

__all__: list[str] = ["ClipboardError", "ClipboardUtils", "LoggerUtils", "StringUtils"]
