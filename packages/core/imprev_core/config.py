"""Read-only app settings schema and JSON loader."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from imprev_renderer.ansi import EXIT_HINT
from imprev_renderer.fit import DEFAULT_HEIGHT_SCALE

from .logging_setup import LEVELS


CONFIG_VERSION = 1


@dataclass
class RenderConfig:
    height_scale: float = DEFAULT_HEIGHT_SCALE
    exit_hint: str = EXIT_HINT
    clear_on_resize: bool = True


@dataclass
class LoggingConfig:
    level: str = "WARNING"
    json: bool = False


@dataclass
class AppConfig:
    config_version: int = CONFIG_VERSION
    render: RenderConfig = field(default_factory=RenderConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _merge(dataclass_type, raw: Any):
    defaults = dataclass_type()  # type: ignore[misc]
    if not isinstance(raw, dict):
        return defaults
    for k, v in raw.items():
        if hasattr(defaults, k):
            setattr(defaults, k, v)
    return defaults


def _normalize_render(cfg: AppConfig) -> None:
    try:
        scale = float(cfg.render.height_scale)
    except (TypeError, ValueError):
        scale = DEFAULT_HEIGHT_SCALE
    cfg.render.height_scale = max(0.1, min(4.0, scale))
    cfg.render.exit_hint = str(cfg.render.exit_hint)
    cfg.render.clear_on_resize = bool(cfg.render.clear_on_resize)


def _normalize_logging(cfg: AppConfig) -> None:
    level = str(cfg.logging.level).upper()
    cfg.logging.level = level if level in LEVELS else "WARNING"
    cfg.logging.json = bool(cfg.logging.json)


def load_config(path: Path | None = None) -> AppConfig:
    """Settings from ``path``, or defaults when it is absent or unreadable."""
    if path is None or not path.exists():
        return AppConfig()

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return AppConfig()
    if not isinstance(raw, dict):
        return AppConfig()

    cfg = AppConfig(
        config_version=CONFIG_VERSION,
        render=_merge(RenderConfig, raw.get("render", {})),
        logging=_merge(LoggingConfig, raw.get("logging", {})),
    )

    _normalize_render(cfg)
    _normalize_logging(cfg)
    return cfg
