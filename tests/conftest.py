"""Shared pytest fixtures for the tablernav test-suite."""

from __future__ import annotations

from pathlib import Path
from typing import List

import sys

import pytest

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from tablernav.models import MenuItem, RendererConfig


@pytest.fixture
def plain_config() -> RendererConfig:
    """Return a config with terse templates and no wrapping tags.

    Output becomes easy to assert on exactly: links render as
    ``label|url|active|target`` and submenus as ``[id:active:items]``.
    """

    return RendererConfig(
        link_template="{label}|{url}|{active}|{target}",
        label_template="{label}",
        submenu_template="[{id}:{active}:{items}]",
        submenu_links_template="{label}>{url}",
        item_options={"tag": False},
        container_options={"tag": False},
    )


@pytest.fixture
def sample_menu() -> List[MenuItem]:
    """Return the two-level Home/Products menu."""

    return [
        MenuItem(label="Home", url={"route": "site/index"}, active=True),
        MenuItem(
            label="Products",
            active=True,
            items=[MenuItem(label="New", url={"route": "p/index"}, active=False)],
        ),
    ]


@pytest.fixture
def menu_payload() -> list:
    """Return a JSON-style menu definition as accepted by the CLI."""

    return [
        {"label": "Dashboard", "url": "/dashboard", "active": True},
        {"label": "Sections", "header": True},
        {
            "label": "Reports",
            "badge": {"message": "2", "badgeType": "warning"},
            "items": [
                {"label": "Sales", "url": {"route": "reports/sales"}},
                {"label": "Hidden", "url": "/hidden", "visible": False},
            ],
        },
    ]
