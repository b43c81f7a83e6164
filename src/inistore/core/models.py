from __future__ import annotations

import codecs
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator


# ================================
# Enums
# ================================


class DiagnosticKind(str, Enum):
    MALFORMED_SECTION = "malformed_section"
    MALFORMED_KEY_VALUE = "malformed_key_value"


class OutputFormat(str, Enum):
    TEXT = "text"
    JSON = "json"
    YAML = "yaml"


class ValueType(str, Enum):
    STRING = "string"
    INT = "int"
    FLOAT = "float"
    BOOL = "bool"


# ================================
# Diagnostics
# ================================

DIAGNOSTIC_MESSAGES = {
    DiagnosticKind.MALFORMED_SECTION: "Syntax error: malformed section header.",
    DiagnosticKind.MALFORMED_KEY_VALUE: "Syntax error: malformed key-value pair.",
}


class Diagnostic(BaseModel):
    kind: DiagnosticKind
    line: Optional[int] = None
    text: str = ""

    @property
    def message(self) -> str:
        return DIAGNOSTIC_MESSAGES[self.kind]


# ================================
# Config (defaults only)
# ================================


class ParseConfig(BaseModel):
    """
    Defaults live here.
    Global/repo/CLI overrides are merged by core/config.py.
    """

    encoding: str = Field(default="utf-8", min_length=1)
    strict: bool = Field(
        default=False, description="Exit non-zero when the file has malformed lines."
    )

    @field_validator("encoding")
    @classmethod
    def _encoding_must_exist(cls, v: str) -> str:
        try:
            codecs.lookup(v)
        except LookupError as e:
            raise ValueError(f"unknown encoding: {v}") from e
        return v


class OutputConfig(BaseModel):
    format: OutputFormat = OutputFormat.TEXT
    sort_keys: bool = False
