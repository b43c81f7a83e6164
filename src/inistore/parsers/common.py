from __future__ import annotations

from typing import Optional, Tuple

COMMENT_PREFIXES = ("#", ";")
QUOTES = ('"', "'")
SECTION_SEP = ":"
LINE_BREAKS = ("\n", "\r")


def normalize_key(key: Optional[str]) -> str:
    return (key or "").lower()


def normalize_name(name: str) -> str:
    """Trim and lower-case a section or key name read from a file."""
    return name.strip().lower()


def unquote(val: str) -> str:
    v = val.strip()
    if len(v) >= 2 and v[0] == v[-1] and v[0] in QUOTES:
        v = v[1:-1]
    return v


def needs_quotes(val: str) -> bool:
    """
    True if writing `val` bare would not read back as the same value:
    surrounding whitespace gets trimmed, and one outer quote pair gets stripped.
    """
    if val != val.strip():
        return True
    return len(val) >= 2 and val[0] == val[-1] and val[0] in QUOTES


def join_entry_key(section: str, key: str) -> str:
    return f"{section}{SECTION_SEP}{key}"


def split_entry_key(entry: str) -> Tuple[str, Optional[str]]:
    """
    Split on the first colon only.

      "pizza:ham"  -> ("pizza", "ham")
      ":orphan"    -> ("", "orphan")
      "pizza"      -> ("pizza", None)   # section declaration
    """
    section, sep, key = entry.partition(SECTION_SEP)
    if not sep:
        return section, None
    return section, key


def _has_line_break(text: str) -> bool:
    return any(c in text for c in LINE_BREAKS)


def check_entry(entry: str, value: Optional[str]) -> None:
    """
    Raise ValueError unless `entry` and `value` read back unchanged after
    INI write-back. A header is cut at its first "]"; a key line is split
    on its first "=" and skipped when it starts like a comment or header.
    """
    section, key = split_entry_key(entry)
    if section and ("]" in section or section != section.strip() or _has_line_break(section)):
        raise ValueError(f"section name {section!r} cannot be written as an INI header")
    if value is None:
        return
    if key is None:
        raise ValueError(f"{entry!r} is a section name; a value needs a section:key entry")
    if (
        "=" in key
        or key != key.strip()
        or key.startswith(COMMENT_PREFIXES + ("[",))
        or _has_line_break(key)
    ):
        raise ValueError(f"key {key!r} cannot be written as an INI key")
    if _has_line_break(value):
        raise ValueError(f"value for {entry!r} spans more than one line")
