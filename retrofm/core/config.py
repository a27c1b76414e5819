"""Persistent config loader/saver for RetroFM."""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass
from pathlib import Path

from ..filesystem.entries import DirPlacement, SortMode
from ..theme import DEFAULT_THEME, THEMES

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppConfig:
    """Persistent user-facing configuration."""

    theme: str = DEFAULT_THEME
    show_hidden: bool = False
    sort_mode: SortMode = SortMode.UNSORTED
    dir_placement: DirPlacement = DirPlacement.NONE
    follow_process_cwd: bool = False
    start_path: str | None = None


def default_config_path() -> Path:
    """Return default config path (~/.config/retrofm/config.toml)."""
    return Path.home() / ".config" / "retrofm" / "config.toml"


def _coerce_bool(value, default=False):
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lower = value.strip().lower()
        if lower in ("1", "true", "yes", "on"):
            return True
        if lower in ("0", "false", "no", "off"):
            return False
    return default


def _coerce_enum(enum_cls, value, default):
    try:
        return enum_cls(str(value).strip().lower())
    except ValueError:
        return default


def _parse_toml(text: str) -> dict:
    try:
        return tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        LOGGER.warning("Ignoring invalid config file: %s", exc)
        return {}


def _normalize_config(raw: dict) -> AppConfig:
    ui = raw.get("ui", {})
    if not isinstance(ui, dict):
        ui = {}
    explorer = raw.get("explorer", {})
    if not isinstance(explorer, dict):
        explorer = {}

    theme = str(ui.get("theme", DEFAULT_THEME)).strip().lower() or DEFAULT_THEME
    if theme not in THEMES:
        theme = DEFAULT_THEME

    start_path = explorer.get("start_path")
    if not isinstance(start_path, str) or not start_path.strip():
        start_path = None
    else:
        start_path = str(Path(start_path.strip()).expanduser())

    return AppConfig(
        theme=theme,
        show_hidden=_coerce_bool(ui.get("show_hidden"), default=False),
        sort_mode=_coerce_enum(SortMode, explorer.get("sort", ""), SortMode.UNSORTED),
        dir_placement=_coerce_enum(DirPlacement, explorer.get("dir_placement", ""), DirPlacement.NONE),
        follow_process_cwd=_coerce_bool(explorer.get("follow_process_cwd"), default=False),
        start_path=start_path,
    )


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load config from TOML file; return defaults when missing/invalid."""
    cfg_path = Path(path) if path is not None else default_config_path()
    try:
        text = cfg_path.read_text(encoding="utf-8")
    except OSError:
        return AppConfig()
    return _normalize_config(_parse_toml(text))


def _toml_bool(value: bool) -> str:
    return "true" if value else "false"


def serialize_config(config: AppConfig) -> str:
    """Serialize AppConfig as TOML text."""
    lines = [
        "# RetroFM user configuration",
        "[ui]",
        f'theme = "{config.theme}"',
        f"show_hidden = {_toml_bool(config.show_hidden)}",
        "",
        "[explorer]",
        f'sort = "{SortMode(config.sort_mode).value}"',
        f'dir_placement = "{DirPlacement(config.dir_placement).value}"',
        f"follow_process_cwd = {_toml_bool(config.follow_process_cwd)}",
    ]
    if config.start_path:
        escaped = config.start_path.replace("\\", "\\\\").replace('"', '\\"')
        lines.append(f'start_path = "{escaped}"')
    return "\n".join(lines) + "\n"


def save_config(config: AppConfig, path: str | Path | None = None) -> Path:
    """Persist config and return written path."""
    cfg_path = Path(path) if path is not None else default_config_path()
    cfg_path.parent.mkdir(parents=True, exist_ok=True)
    cfg_path.write_text(serialize_config(config), encoding="utf-8", newline="\n")
    return cfg_path
