from __future__ import annotations

from typing import TYPE_CHECKING

from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging

__all__: list[str] = ["ClipboardError", "ClipboardUtils"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)


class ClipboardError(Exception):
    """The clipboard could not be written."""


class ClipboardUtils:
    """Clipboard access through a hidden Tk root window."""

    @staticmethod
    def copy(text: str) -> None:
        """Replace the clipboard contents with the given text.

        Args:
            text (str): Text to place on the clipboard.

        Raises:
            ClipboardError: If Tk is unavailable (no display) or the clipboard cannot be written.
        """
        import tkinter as tk  # noqa: PLC0415  tkinter is optional on headless hosts

        logger.debug("Copying %d characters to the clipboard", len(text))
        try:
            root = tk.Tk()
        except tk.TclError as err:
            msg = "Clipboard is not available"
            raise ClipboardError(msg) from err

        try:
            root.withdraw()
            root.clipboard_clear()
            root.clipboard_append(text)
            # Flush to the system clipboard before the window goes away.
            root.update()
        except tk.TclError as err:
            msg = "Failed to write to the clipboard"
            raise ClipboardError(msg) from err
        finally:
            root.destroy()
        logger.info("Copied translation to the clipboard")
