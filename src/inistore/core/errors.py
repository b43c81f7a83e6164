from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    OK = 0
    ERROR = 1
    DIAGNOSTICS = 2


class InistoreError(Exception):
    """Base class for errors raised by inistore."""


class ConfigError(InistoreError):
    """A config file could not be read or validated."""
