from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import os
import tomllib
from typing import Any, Optional

from .domain import Method
from .errors import ConfigError


@dataclass(frozen=True)
class TuiConfig:
    header_icon: str = "☕"
    layout: str = "auto"
    density: str = "cozy"


@dataclass(frozen=True)
class EffectiveConfig:
    catalog_path: Optional[str]
    notes_path: str
    default_method: Method
    tui: TuiConfig


def config_root() -> Path:
    return Path(os.path.expanduser("~/.config/brewbook"))


def default_notes_path() -> Path:
    return config_root() / "notes.json"


def load_global_config() -> dict[str, Any]:
    path = config_root() / "config.toml"
    if not path.exists():
        return {}
    return _load_toml(path)


def _load_toml(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as fh:
            return tomllib.load(fh)
    except OSError as exc:
        raise ConfigError(f"Failed to read config: {path}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in config: {path}") from exc


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def merge_config(cli: dict[str, Any], global_cfg: dict[str, Any]) -> dict[str, Any]:
    return _deep_merge(global_cfg, cli)


def resolve_config(cli_args: dict[str, Any]) -> EffectiveConfig:
    merged = merge_config(_cli_to_dict(cli_args), load_global_config())

    catalog_path = merged.get("catalog_path")
    notes_path = merged.get("notes_path") or default_notes_path()
    tui_cfg = merged.get("tui", {})
    if not isinstance(tui_cfg, dict):
        raise ConfigError("[tui] must be a table")

    return EffectiveConfig(
        catalog_path=str(os.path.expanduser(catalog_path)) if catalog_path else None,
        notes_path=str(os.path.expanduser(str(notes_path))),
        default_method=_normalize_method(merged.get("default_method")),
        tui=TuiConfig(
            header_icon=str(tui_cfg.get("header_icon", "☕")),
            layout=_normalize_tui_layout(tui_cfg.get("layout", "auto")),
            density=_normalize_tui_density(tui_cfg.get("density", "cozy")),
        ),
    )


def _cli_to_dict(cli_args: dict[str, Any]) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for key in ("catalog_path", "notes_path", "default_method"):
        if cli_args.get(key) is not None:
            out[key] = cli_args[key]

    tui: dict[str, Any] = {}
    for key in ("header_icon", "layout", "density"):
        if cli_args.get(f"tui_{key}") is not None:
            tui[key] = cli_args[f"tui_{key}"]
    if tui:
        out["tui"] = tui

    return out


def config_to_toml(cfg: EffectiveConfig) -> str:
    lines = []
    if cfg.catalog_path:
        lines.append(f"catalog_path = {cfg.catalog_path!r}")
    lines.append(f"notes_path = {cfg.notes_path!r}")
    lines.append(f"default_method = {cfg.default_method.value!r}")
    lines.append("")
    lines.append("[tui]")
    lines.append(f"header_icon = {cfg.tui.header_icon!r}")
    lines.append(f"layout = {cfg.tui.layout!r}")
    lines.append(f"density = {cfg.tui.density!r}")
    return "\n".join(lines) + "\n"


def _normalize_method(value: Any) -> Method:
    text = str(value or "").strip().lower()
    try:
        return Method(text)
    except ValueError:
        return Method.ESPRESSO


def _normalize_tui_layout(value: Any) -> str:
    text = str(value or "").strip().lower()
    if text in {"auto", "compact", "normal", "wide"}:
        return text
    return "auto"


def _normalize_tui_density(value: Any) -> str:
    text = str(value or "").strip().lower()
    if text in {"cozy", "compact"}:
        return text
    return "cozy"
