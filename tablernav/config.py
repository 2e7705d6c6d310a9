"""Configuration helpers for the menu renderer."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict

from .models import RendererConfig

_LOGGER = logging.getLogger(__name__)
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_DEFAULT_CONFIG_PATH = _PROJECT_ROOT / "configs" / "menu.json"
_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(value: str) -> bool:
    return value.strip().lower() in _TRUTHY


def load_renderer_config(path: Path | None = None) -> RendererConfig:
    """Load renderer settings from disk and environment overrides.

    A missing or undecodable file yields the defaults; values that decode but
    fail validation raise :class:`pydantic.ValidationError`.
    """

    config_path = path or _DEFAULT_CONFIG_PATH
    data: Dict[str, Any] = {}

    if config_path.exists():
        try:
            data = json.loads(config_path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            _LOGGER.warning(
                "Unable to decode renderer config at %s: %s", config_path, exc
            )
        if not isinstance(data, dict):
            _LOGGER.warning("Ignoring renderer config at %s: expected an object", config_path)
            data = {}

    env_active_class = os.environ.get("TABLERNAV_ACTIVE_CSS_CLASS")
    if env_active_class is not None:
        data["active_css_class"] = env_active_class

    env_activate_parents = os.environ.get("TABLERNAV_ACTIVATE_PARENTS")
    if env_activate_parents is not None:
        data["activate_parents"] = _env_flag(env_activate_parents)

    return RendererConfig(**data)


__all__ = ["load_renderer_config"]
