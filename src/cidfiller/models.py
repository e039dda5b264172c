"""Pydantic models for cidfiller."""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, field_validator

IDENTIFIER = r"[A-Za-z_][A-Za-z0-9_]*"
IDENTIFIER_PATTERN = re.compile(rf"^{IDENTIFIER}$")
# Table names may carry a schema prefix, e.g. main.codes
TABLE_PATTERN = re.compile(rf"^({IDENTIFIER}\.)?{IDENTIFIER}$")


class LookupConfig(BaseModel):
    """Where to look codes up. Built once at startup."""

    model_config = ConfigDict(frozen=True)

    db_path: str
    table_name: str
    input_column: str
    output_column: str

    @field_validator("db_path")
    @classmethod
    def validate_db_path(cls, v: str) -> str:
        if not v:
            raise ValueError("must not be empty")
        return v

    @field_validator("table_name")
    @classmethod
    def validate_table_name(cls, v: str) -> str:
        if not TABLE_PATTERN.match(v):
            raise ValueError(f"{v!r} is not a valid table name")
        return v

    @field_validator("input_column", "output_column")
    @classmethod
    def validate_column(cls, v: str) -> str:
        if not IDENTIFIER_PATTERN.match(v):
            raise ValueError(f"{v!r} is not a valid column name")
        return v
