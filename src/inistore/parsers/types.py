from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ParsedKV:
    """ A normalized key-value pair read from an INI line."""
    key: str
    value: Optional[str]
    line: Optional[int] = None
