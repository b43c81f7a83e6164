from __future__ import annotations

from pathlib import Path

import pytest

from inistore.core.sink import MemorySink

EXAMPLE = """\
# This is an example of an ini file

[Pizza]
Ham       = yes ;
Mushrooms = TRUE ;
Capres    = 0 ;
Cheese    = Non ;

[Wine]
Grape     = Cabernet Sauvignon ;
Year      = 1989 ;
Country   = Spain ;
Alcohol   = 12.5 ;
"""


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep real ~/.config/inistore and repo configs out of every test."""
    home = tmp_path / "home"
    home.mkdir()
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(work)
    return home


@pytest.fixture
def sink() -> MemorySink:
    return MemorySink()


@pytest.fixture
def example_file(tmp_path: Path) -> Path:
    p = tmp_path / "work" / "example.ini"
    p.write_text(EXAMPLE, encoding="utf-8")
    return p
