"""System clipboard access via pyperclip."""

from __future__ import annotations

import logging

import pyperclip

from cidfiller.errors import ClipboardError

logger = logging.getLogger(__name__)


class Clipboard:
    """Thin wrapper around the OS clipboard. Call init() once before use."""

    def __init__(self) -> None:
        self._ready = False

    def init(self) -> None:
        """Check that a clipboard mechanism is available on this host."""
        try:
            pyperclip.paste()
        except pyperclip.PyperclipException as exc:
            raise ClipboardError(f"Failed to initialize clipboard: {exc}") from exc
        self._ready = True
        logger.debug("Clipboard initialised")

    def _require_init(self) -> None:
        if not self._ready:
            raise ClipboardError("Clipboard not initialised, call init() first.")

    def read_text(self) -> str:
        """Return the clipboard text, or "" if it is empty or not text."""
        self._require_init()
        try:
            content = pyperclip.paste()
        except pyperclip.PyperclipException as exc:
            raise ClipboardError(f"Failed to read from clipboard: {exc}") from exc
        return content if isinstance(content, str) else ""

    def write_text(self, content: str) -> None:
        """Replace the clipboard content with content."""
        self._require_init()
        try:
            pyperclip.copy(content)
        except pyperclip.PyperclipException as exc:
            raise ClipboardError(f"Failed to write to clipboard: {exc}") from exc
