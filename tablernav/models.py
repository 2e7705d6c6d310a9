"""Data models describing menu trees and renderer settings."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

UrlSpec = Union[str, Mapping[str, Any], Sequence[Any]]

_DEFAULT_LINK_TEMPLATE = '<a class="nav-link {active}" href="{url}" {target}>{label}</a>'
_DEFAULT_LABEL_TEMPLATE = "{label} {submenu} {badge}"
_DEFAULT_SUBMENU_TEMPLATE = (
    "\n<ul id='{id}' class='nav nav-pills collapse {active}'>\n{items}\n</ul>\n"
)
_DEFAULT_SUBMENU_LINKS_TEMPLATE = (
    '<a class="nav-link collapsed" href="{url}" data-bs-toggle="collapse" '
    'aria-expanded="false">{label}</a>'
)

# camelCase spellings accepted by MenuItem.from_dict
_ITEM_KEY_ALIASES = {
    "submenuTemplate": "submenu_template",
}
# optional fields substituted verbatim into markup
_STRING_KEYS = ("id", "target", "template", "submenu_template")


@dataclass(slots=True)
class Serializable:
    """Base dataclass converting menu trees into JSON-ready dictionaries."""

    def to_dict(self) -> Dict:
        """Convert the dataclass to a serialisable dictionary."""

        def _convert(value):
            if dataclasses.is_dataclass(value):
                return {f.name: _convert(getattr(value, f.name)) for f in dataclasses.fields(value)}
            if isinstance(value, (list, tuple)):
                return [_convert(item) for item in value]
            if isinstance(value, dict):
                return {key: _convert(val) for key, val in value.items()}
            return value

        return _convert(self)


@dataclass(slots=True)
class Badge(Serializable):
    message: str
    badge_type: str = "info"

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Badge":
        badge_type = payload.get("badge_type", payload.get("badgeType")) or "info"
        return cls(message=str(payload.get("message", "")), badge_type=str(badge_type))


@dataclass(slots=True)
class MenuItem(Serializable):
    """A node of the menu tree.

    ``items`` distinguishes "absent" (``None``) from "present but empty"
    (``[]``); only the former renders as a plain link.
    """

    label: str = ""
    url: Optional[UrlSpec] = None
    items: Optional[List["MenuItem"]] = None
    active: bool = False
    visible: bool = True
    header: bool = False
    encode: Optional[bool] = None
    badge: Optional[Badge] = None
    target: Optional[str] = None
    template: Optional[str] = None
    submenu_template: Optional[str] = None
    options: Optional[Dict[str, Any]] = None
    id: Optional[str] = None

    @property
    def has_submenu(self) -> bool:
        """Return whether the item carries a child list, even an empty one."""

        return self.items is not None

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "MenuItem":
        """Build an item (and its children) from a JSON-style mapping."""

        if not isinstance(payload, Mapping):
            raise ValueError(f"Menu item must be a mapping, got {type(payload).__name__}")

        data = {_ITEM_KEY_ALIASES.get(key, key): value for key, value in payload.items()}
        known = {f.name for f in dataclasses.fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown menu item keys: {', '.join(unknown)}")

        if "label" not in data and not data.get("header"):
            raise ValueError("Menu item is missing a 'label'")

        children = data.get("items")
        if children is not None:
            if isinstance(children, (str, bytes)) or not isinstance(children, Sequence):
                raise ValueError("Menu item 'items' must be a list")
            data["items"] = [cls.from_dict(child) for child in children]

        badge = data.get("badge")
        if isinstance(badge, Mapping):
            data["badge"] = Badge.from_dict(badge)
        elif not badge:
            data["badge"] = None
        elif not isinstance(badge, Badge):
            raise ValueError("Menu item 'badge' must be a mapping")

        for key in _STRING_KEYS:
            value = data.get(key)
            if value is not None and not isinstance(value, str):
                raise ValueError(f"Menu item '{key}' must be a string, got {type(value).__name__}")

        options = data.get("options")
        if options is not None:
            if not isinstance(options, Mapping):
                raise ValueError("Menu item 'options' must be a mapping")
            data["options"] = dict(options)

        data["label"] = str(data.get("label", ""))
        data["active"] = bool(data.get("active", False))
        data["visible"] = bool(data.get("visible", True))
        data["header"] = bool(data.get("header", False))
        return cls(**data)


def load_menu_items(payload: Sequence[Mapping[str, Any]]) -> List[MenuItem]:
    """Convert a list of item mappings into :class:`MenuItem` objects."""

    if isinstance(payload, (str, bytes)) or not isinstance(payload, Sequence):
        raise ValueError("Menu definition must be a list of items")
    return [MenuItem.from_dict(entry) for entry in payload]


class RendererConfig(BaseModel):
    """Process-wide rendering defaults shared by every render pass."""

    model_config = ConfigDict(frozen=True)

    link_template: str = Field(
        default=_DEFAULT_LINK_TEMPLATE,
        description="Body template for plain link items",
    )
    label_template: str = Field(
        default=_DEFAULT_LABEL_TEMPLATE,
        description="Template combining the label with submenu and badge markers",
    )
    submenu_template: str = Field(
        default=_DEFAULT_SUBMENU_TEMPLATE,
        description="Wrapper around rendered child items",
    )
    submenu_links_template: str = Field(
        default=_DEFAULT_SUBMENU_LINKS_TEMPLATE,
        description="Body template for items owning a submenu",
    )
    item_options: Dict[str, Any] = Field(
        default_factory=lambda: {"class": "nav-item"},
        description="HTML attributes shared by all item container tags",
    )
    active_css_class: str = Field(
        default="active",
        description="Value substituted for {active} in link templates",
    )
    activate_parents: bool = Field(
        default=True,
        description="Mark parents active when one of their descendants is active",
    )
    hide_empty_items: bool = Field(
        default=True,
        description="Drop submenus left empty after visibility filtering",
    )
    encode_labels: bool = Field(
        default=True,
        description="HTML-encode labels unless an item opts out",
    )
    container_options: Dict[str, Any] = Field(
        default_factory=lambda: {
            "class": "nav nav-pills nav-vertical navbar-nav pt-lg-3",
            "role": "menu",
            "data-accordion": "false",
        },
        description="HTML attributes of the outermost list tag",
    )

    @field_validator("active_css_class", mode="before")
    @classmethod
    def _normalise_active_class(cls, value: str | None) -> str:
        return (value or "").strip()

    @field_validator("item_options", "container_options")
    @classmethod
    def _check_tag_option(cls, value: Dict[str, Any]) -> Dict[str, Any]:
        if "tag" in value:
            tag = value["tag"]
            if tag is not False and not (isinstance(tag, str) and tag.strip()):
                raise ValueError("'tag' option must be a tag name or false")
        return value


__all__ = [
    "Badge",
    "MenuItem",
    "RendererConfig",
    "Serializable",
    "UrlSpec",
    "load_menu_items",
]
