from pathlib import Path

import pytest

from inistore.core.config import find_repo_config, load_config
from inistore.core.errors import ConfigError
from inistore.core.models import OutputFormat


def _write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def test_defaults(tmp_path):
    loaded = load_config(tmp_path)

    assert loaded.parse.encoding == "utf-8"
    assert loaded.parse.strict is False
    assert loaded.output.format is OutputFormat.TEXT
    assert loaded.output.sort_keys is False
    assert loaded.global_path is None
    assert loaded.repo_path is None


def test_precedence(tmp_path, isolated_home):
    global_cfg = _write(
        isolated_home / ".config" / "inistore" / "config.toml",
        '[parse]\nencoding = "latin-1"\nstrict = true\n[output]\nformat = "yaml"\n',
    )
    repo = tmp_path / "repo"
    repo_cfg = _write(repo / ".inistore" / "config.toml", '[output]\nformat = "json"\n')
    nested = repo / "a" / "b"
    nested.mkdir(parents=True)

    loaded = load_config(nested, cli_overrides={"parse": {"strict": False, "encoding": None}})

    assert loaded.global_path == global_cfg.resolve()
    assert loaded.repo_path == repo_cfg.resolve()
    assert loaded.parse.encoding == "latin-1"   # global
    assert loaded.output.format is OutputFormat.JSON  # repo beats global
    assert loaded.parse.strict is False  # cli beats everything


def test_find_repo_config_picks_closest(tmp_path):
    outer = _write(tmp_path / ".inistore" / "config.toml", "")
    inner = _write(tmp_path / "x" / ".inistore" / "config.toml", "")

    assert find_repo_config(tmp_path / "x") == inner.resolve()
    assert find_repo_config(tmp_path) == outer.resolve()


def test_invalid_toml_raises_config_error(tmp_path):
    _write(tmp_path / ".inistore" / "config.toml", "[parse\n")

    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_invalid_values_raise_config_error(tmp_path):
    _write(tmp_path / ".inistore" / "config.toml", '[parse]\nencoding = "no-such-codec"\n')

    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_non_table_section_is_ignored(tmp_path):
    _write(tmp_path / ".inistore" / "config.toml", 'parse = "oops"\n')

    assert load_config(tmp_path).parse.encoding == "utf-8"


def test_unreadable_config_raises_config_error(tmp_path, monkeypatch):
    cfg = _write(tmp_path / ".inistore" / "config.toml", "[parse]\nstrict = true\n")
    real_read_text = Path.read_text

    def deny(self, *args, **kwargs):
        if self == cfg.resolve():
            raise PermissionError(13, "Permission denied", str(self))
        return real_read_text(self, *args, **kwargs)

    monkeypatch.setattr(Path, "read_text", deny)

    with pytest.raises(ConfigError, match="Permission denied"):
        load_config(tmp_path)
