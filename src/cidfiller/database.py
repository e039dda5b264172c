"""Read-only SQLite access and the code lookup."""

from __future__ import annotations

import logging
import sqlite3
from contextlib import closing, contextmanager
from pathlib import Path
from typing import Iterator, List, Sequence

from cidfiller.errors import CodeLookupError
from cidfiller.models import LookupConfig

logger = logging.getLogger(__name__)

NOT_FOUND = "Not found"


@contextmanager
def connect(db_path: str) -> Iterator[sqlite3.Connection]:
    """Open db_path read-only and close it on exit.

    mode=ro makes a missing file an error instead of silently creating an
    empty database.
    """
    uri = Path(db_path).resolve().as_uri() + "?mode=ro"
    conn = sqlite3.connect(uri, uri=True)
    with closing(conn):
        yield conn


def build_query(config: LookupConfig) -> str:
    # Identifiers are validated by LookupConfig; only the code is bound.
    return (
        f"SELECT {config.output_column} FROM {config.table_name} "
        f"WHERE {config.input_column} = ?"
    )


def _as_text(value: object) -> str:
    if value is None:
        return NOT_FOUND
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return str(value)


def lookup_codes(codes: Sequence[str], config: LookupConfig) -> List[str]:
    """Resolve each code to its output column value, in input order.

    A code without a matching row yields NOT_FOUND. Any database error aborts
    the whole batch with CodeLookupError.
    """
    query = build_query(config)
    results: List[str] = []
    try:
        with connect(config.db_path) as conn:
            for code in codes:
                code = code.strip()
                row = conn.execute(query, (code,)).fetchone()
                if row is None:
                    logger.debug("No row for code %r", code)
                    results.append(NOT_FOUND)
                else:
                    results.append(_as_text(row[0]))
    except sqlite3.Error as exc:
        raise CodeLookupError(f"database query error: {exc}") from exc
    return results
