from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import ValidationError

from inistore.core.errors import ConfigError
from inistore.core.models import OutputConfig, ParseConfig

# Python 3.11+ has tomllib; for 3.9/3.10 use tomli
try:
    import tomllib  # type: ignore
except ModuleNotFoundError:  # pragma: no cover
    import tomli as tomllib  # type: ignore


# Repo-local config (closest one above the working directory wins)
DEFAULT_REPO_CONFIG_FILES = (".inistore/config.toml",)

# Global config (applies on this machine)
DEFAULT_GLOBAL_CONFIG_FILES = (
    "~/.config/inistore/config.toml",
    "~/.inistore/config.toml",
)


def _read_toml(path: Path) -> Dict[str, Any]:
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8", errors="replace"))
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(f"{path}: {e}") from e
    if not isinstance(data, dict):
        return {}
    return data


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Deep-merge override into base (dict-only). Lists/scalars are replaced.
    """
    out = dict(base)
    for k, v in override.items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = _deep_merge(out[k], v)  # type: ignore[arg-type]
        else:
            out[k] = v
    return out


def _expand_paths(paths: tuple[str, ...]) -> list[Path]:
    return [Path(p).expanduser().resolve() for p in paths]


def find_repo_config(start_dir: Path) -> Optional[Path]:
    cur = start_dir.resolve()
    for parent in [cur, *cur.parents]:
        for rel in DEFAULT_REPO_CONFIG_FILES:
            p = (parent / rel).resolve()
            if p.exists() and p.is_file():
                return p
    return None


def find_global_config() -> Optional[Path]:
    for p in _expand_paths(DEFAULT_GLOBAL_CONFIG_FILES):
        if p.exists() and p.is_file():
            return p
    return None


def _table(merged: Dict[str, Any], name: str) -> Dict[str, Any]:
    t = merged.get(name) or {}
    if not isinstance(t, dict):
        return {}
    return t


@dataclass(frozen=True)
class LoadedConfig:
    parse: ParseConfig
    output: OutputConfig
    global_path: Optional[Path]
    repo_path: Optional[Path]


def load_config(
    start_dir: Path,
    cli_overrides: Optional[Dict[str, Any]] = None,
) -> LoadedConfig:
    """
    Precedence (lowest -> highest):
      defaults (models) ->
      global config ->
      repo config (closest) ->
      cli_overrides
    """
    cli_overrides = cli_overrides or {}

    global_path = find_global_config()
    repo_path = find_repo_config(start_dir)

    merged: Dict[str, Any] = {}
    if global_path:
        merged = _deep_merge(merged, _read_toml(global_path))
    if repo_path:
        merged = _deep_merge(merged, _read_toml(repo_path))

    # CLI overrides use the same shape as TOML; None means "not given"
    for section, values in cli_overrides.items():
        given = {k: v for k, v in (values or {}).items() if v is not None}
        merged = _deep_merge(merged, {section: given})

    try:
        parse_cfg = ParseConfig.model_validate(_table(merged, "parse"))
        output_cfg = OutputConfig.model_validate(_table(merged, "output"))
    except ValidationError as e:
        raise ConfigError(str(e)) from e

    return LoadedConfig(
        parse=parse_cfg,
        output=output_cfg,
        global_path=global_path,
        repo_path=repo_path,
    )
