"""Tests for :mod:`tablernav.config`."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict

import pytest
from pydantic import ValidationError

from tablernav.config import load_renderer_config
from tablernav.models import RendererConfig


@pytest.fixture(autouse=True)
def clear_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("TABLERNAV_ACTIVE_CSS_CLASS", raising=False)
    monkeypatch.delenv("TABLERNAV_ACTIVATE_PARENTS", raising=False)


def test_load_renderer_config_merges_file_and_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Given a JSON config When env overrides are set Then env values win over the file."""

    payload: Dict[str, Any] = {
        "active_css_class": "current",
        "activate_parents": True,
        "item_options": {"class": "menu-entry"},
    }
    config_path = tmp_path / "menu.json"
    config_path.write_text(json.dumps(payload), encoding="utf-8")
    monkeypatch.setenv("TABLERNAV_ACTIVE_CSS_CLASS", "is-active")
    monkeypatch.setenv("TABLERNAV_ACTIVATE_PARENTS", "off")

    config = load_renderer_config(config_path)

    assert config.active_css_class == "is-active"
    assert config.activate_parents is False
    assert config.item_options == {"class": "menu-entry"}


def test_load_renderer_config_defaults_when_missing(tmp_path: Path) -> None:
    config = load_renderer_config(tmp_path / "missing.json")

    assert config == RendererConfig()


def test_load_renderer_config_warns_on_bad_json(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    config_path = tmp_path / "menu.json"
    config_path.write_text("{not json", encoding="utf-8")

    with caplog.at_level(logging.WARNING, logger="tablernav.config"):
        config = load_renderer_config(config_path)

    assert config == RendererConfig()
    assert "Unable to decode renderer config" in caplog.text


def test_load_renderer_config_rejects_invalid_values(tmp_path: Path) -> None:
    config_path = tmp_path / "menu.json"
    config_path.write_text(json.dumps({"container_options": {"tag": 7}}), encoding="utf-8")

    with pytest.raises(ValidationError):
        load_renderer_config(config_path)
