from __future__ import annotations

import re
from collections.abc import MutableMapping
from typing import Dict, Iterator, List, Optional

from inistore.core.sink import DiagnosticSink, SinkLike, as_sink
from inistore.parsers.common import normalize_key, split_entry_key

_INT_RE = re.compile(r"^[+-]?[0-9]+$")

_TRUE = frozenset({"1", "y", "yes", "true"})
_FALSE = frozenset({"0", "n", "no", "false"})


def parse_bool(value: str) -> Optional[bool]:
    v = value.lower()
    if v in _TRUE:
        return True
    if v in _FALSE:
        return False
    return None


class IniStore(MutableMapping[str, Optional[str]]):
    """
    Flat INI dictionary keyed by "section:key".

    All keys are stored lower-cased and every lookup lower-cases its key,
    so "PIZZA:HAM" and "pizza:ham" name the same entry. Values are kept as
    raw strings (or None for a bare section declaration) and only coerced
    by the typed getters.

    Iteration, dump() and section enumeration follow insertion order;
    overwriting a key keeps its original position.

    Not thread-safe. Serialize access externally if shared.
    """

    def __init__(self, sink: SinkLike = None) -> None:
        self._data: Dict[str, Optional[str]] = {}
        self._sink: Optional[DiagnosticSink] = None if sink is None else as_sink(sink)

    @property
    def sink(self) -> DiagnosticSink:
        # resolved lazily so an unset sink never has to be configured up front
        if self._sink is None:
            self._sink = as_sink(None)
        return self._sink

    # ----------------------------
    # Mapping protocol
    # ----------------------------

    def __getitem__(self, key: str) -> Optional[str]:
        return self._data[normalize_key(key)]

    def __setitem__(self, key: str, value: Optional[str]) -> None:
        if not self.set_entry(key, value):
            raise KeyError("entry key must not be empty")

    def __delitem__(self, key: str) -> None:
        del self._data[normalize_key(key)]

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.find_entry(key)

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __repr__(self) -> str:
        return f"IniStore(entries={len(self._data)}, sections={self.section_count()})"

    # ----------------------------
    # Typed getters
    # ----------------------------

    def get_string(self, key: str, default: Optional[str] = None) -> Optional[str]:
        value = self._data.get(normalize_key(key))
        return default if value is None else value

    def get_int(self, key: str, default: Optional[int] = None) -> Optional[int]:
        value = self._data.get(normalize_key(key))
        if value is None or not _INT_RE.match(value):
            return default
        return int(value)

    def get_float(self, key: str, default: Optional[float] = None) -> Optional[float]:
        value = self._data.get(normalize_key(key))
        if value is None:
            return default
        try:
            return float(value.strip())
        except ValueError:
            return default

    def get_boolean(self, key: str, default: Optional[bool] = None) -> Optional[bool]:
        value = self._data.get(normalize_key(key))
        if value is None:
            return default
        flag = parse_bool(value)
        return default if flag is None else flag

    # ----------------------------
    # Sections
    # ----------------------------

    def sections(self) -> List[str]:
        """Distinct section names in first-seen order ("" is the root section)."""
        seen: Dict[str, None] = {}
        for entry in self._data:
            section, _ = split_entry_key(entry)
            seen.setdefault(section, None)
        return list(seen)

    def section_count(self) -> int:
        return len(self.sections())

    def section_name(self, index: int) -> Optional[str]:
        names = self.sections()
        if 0 <= index < len(names):
            return names[index]
        return None

    def section_keys(self, section: str) -> List[str]:
        section = normalize_key(section)
        out: List[str] = []
        for entry in self._data:
            s, key = split_entry_key(entry)
            if s == section and key is not None:
                out.append(entry)
        return out

    # ----------------------------
    # Mutation
    # ----------------------------

    def find_entry(self, key: str) -> bool:
        return normalize_key(key) in self._data

    def set_entry(self, key: Optional[str], value: Optional[str]) -> bool:
        """
        Insert or overwrite an entry.

        Returns False (and leaves the store untouched) for an empty key.
        A None value declares a section with no keys, e.g. set_entry("pizza", None).
        """
        if not key:
            return False
        self._data[normalize_key(key)] = value
        return True

    def unset_entry(self, key: str) -> None:
        self._data.pop(normalize_key(key), None)

    # ----------------------------
    # Output
    # ----------------------------

    def dump(self, sink: SinkLike = None) -> None:
        out = self.sink if sink is None else as_sink(sink)
        for key, value in self._data.items():
            out.emit(f"[{key}]={'' if value is None else value}")

    def to_dict(self) -> Dict[str, Dict[str, Optional[str]]]:
        """
        Nested view for export:
          {"pizza": {"ham": "yes ;"}, "": {"orphan": "1"}}
        Section declarations show up as empty dicts.
        """
        out: Dict[str, Dict[str, Optional[str]]] = {}
        for entry, value in self._data.items():
            section, key = split_entry_key(entry)
            bucket = out.setdefault(section, {})
            if key is not None:
                bucket[key] = value
        return out
