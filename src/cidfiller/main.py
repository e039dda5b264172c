"""CID Filler command-line entry point."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import List, Optional, Union

from cidfiller import __author__, __version__
from cidfiller import config as config_module
from cidfiller.clipboard import Clipboard
from cidfiller.database import lookup_codes
from cidfiller.errors import ClipboardError, CodeLookupError, ConfigError

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def configure_logging() -> None:
    level = os.environ.get("CIDFILLER_LOG_LEVEL", "INFO").upper()
    logging.basicConfig(level=getattr(logging, level, logging.INFO), format=LOG_FORMAT)


def banner() -> str:
    return f"📃 CID Filler version: v{__version__}\n🐦‍🔥 Author: {__author__}"


def parse_codes(text: str) -> List[str]:
    """Split clipboard text into trimmed, non-empty codes, keeping their order."""
    return [line.strip() for line in text.split("\n") if line.strip()]


def main(env_file: Optional[Union[str, Path]] = None) -> int:
    """Run one lookup batch. Returns the process exit status."""
    print(banner())

    try:
        config = config_module.load(env_file)
    except ConfigError as exc:
        logger.error("❌ Configuration error: %s", exc)
        return 1

    clipboard = Clipboard()
    try:
        clipboard.init()
    except ClipboardError as exc:
        logger.error("%s", exc)
        return 1

    print("♨️ Reading input codes from clipboard...")
    print(f"🗂️ Database: {config.db_path}")
    print(
        f"🔍 Looking up: {config.table_name}.{config.input_column}"
        f" -> {config.table_name}.{config.output_column}"
    )

    try:
        content = clipboard.read_text()
    except ClipboardError as exc:
        logger.error("%s", exc)
        return 1
    if not content:
        print("❌ No content found in clipboard, recopy and try again")
        return 0

    codes = parse_codes(content)
    if not codes:
        print("❌ No input codes found in clipboard, recopy and try again")
        return 0
    print(f"💡 Found {len(codes)} input codes.")

    try:
        results = lookup_codes(codes, config)
    except CodeLookupError as exc:
        logger.warning("⚠️ Check your clipboard, the codes may be malformed: %s", exc)
        return 0

    if not results:
        print("⚠️ No results found")
        return 0

    output = "\n".join(results)
    print("\nℹ️ Lookup Results:")
    print(output)
    try:
        clipboard.write_text(output)
    except ClipboardError as exc:
        logger.error("%s", exc)
        return 1
    print("\n✅ Results have been copied to clipboard.")
    return 0


def run() -> None:
    configure_logging()
    sys.exit(main())
