"""Shared test fixtures."""

from __future__ import annotations

import sqlite3

import pytest
import pyperclip

from cidfiller.config import SETTINGS

CODES = [
    ("101", "Alpha"),
    ("202", "Beta"),
    ("303", "Gamma"),
]


@pytest.fixture()
def db_path(tmp_path):
    """A SQLite file with a populated `codes` table."""
    path = tmp_path / "codes.db"
    conn = sqlite3.connect(str(path))
    conn.execute("CREATE TABLE codes (sc TEXT PRIMARY KEY, cid TEXT)")
    conn.executemany("INSERT INTO codes (sc, cid) VALUES (?, ?)", CODES)
    conn.commit()
    conn.close()
    return path


@pytest.fixture()
def clean_env(tmp_path, monkeypatch):
    """No lookup settings in the environment and no .env in reach."""
    for setting in SETTINGS:
        # setenv first so monkeypatch also undoes values load_dotenv adds later
        monkeypatch.setenv(setting, "")
        monkeypatch.delenv(setting)
    monkeypatch.chdir(tmp_path)
    return monkeypatch


@pytest.fixture()
def env(clean_env, db_path):
    """Environment pointing at the test database."""
    clean_env.setenv("DB_PATH", str(db_path))
    clean_env.setenv("TABLE_NAME", "codes")
    clean_env.setenv("INPUT_COLUMN", "sc")
    clean_env.setenv("OUTPUT_COLUMN", "cid")
    return clean_env


class FakeClipboard:
    def __init__(self, content: str = "") -> None:
        self.content = content
        self.writes = []

    def copy(self, text: str) -> None:
        self.content = text
        self.writes.append(text)

    def paste(self) -> str:
        return self.content


@pytest.fixture()
def fake_clipboard(monkeypatch):
    """In-memory stand-in for the OS clipboard."""
    fake = FakeClipboard()
    monkeypatch.setattr(pyperclip, "copy", fake.copy)
    monkeypatch.setattr(pyperclip, "paste", fake.paste)
    return fake
