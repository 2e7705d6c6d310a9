"""Small HTML helpers used as the renderer's default collaborators."""

from __future__ import annotations

import html
from typing import Any, Dict, Mapping, MutableMapping, Optional

# attributes whose dict values expand to prefixed attributes
_EXPANDABLE = ("data", "aria")


def _encode(value: Any) -> str:
    return html.escape(str(value), quote=True)


def render_tag_attributes(attributes: Optional[Mapping[str, Any]]) -> str:
    """Serialise ``attributes`` into a string with a leading space.

    ``True`` renders a bare attribute, ``False`` and ``None`` are skipped,
    lists are joined with spaces and ``data``/``aria`` dictionaries expand to
    ``data-*``/``aria-*`` attributes.
    """

    if not attributes:
        return ""

    parts = []
    for name, value in attributes.items():
        if value is None or value is False:
            continue
        if value is True:
            parts.append(f" {name}")
        elif name in _EXPANDABLE and isinstance(value, Mapping):
            for key, nested in value.items():
                if nested is None or nested is False:
                    continue
                if nested is True:
                    parts.append(f" {name}-{key}")
                else:
                    parts.append(f' {name}-{key}="{_encode(nested)}"')
        elif isinstance(value, (list, tuple)):
            joined = " ".join(str(entry) for entry in value if entry)
            parts.append(f' {name}="{_encode(joined)}"')
        else:
            parts.append(f' {name}="{_encode(value)}"')
    return "".join(parts)


def tag(name: Any, content: str = "", attributes: Optional[Mapping[str, Any]] = None) -> str:
    """Return ``content`` wrapped in a ``name`` element.

    A falsy ``name`` returns ``content`` unchanged. ``content`` is emitted raw.
    """

    if not name:
        return content
    return f"<{name}{render_tag_attributes(attributes)}>{content}</{name}>"


def merge_options(
    base: Optional[Mapping[str, Any]], override: Optional[Mapping[str, Any]]
) -> Dict[str, Any]:
    """Shallow-merge two attribute mappings; keys of ``override`` win."""

    merged: Dict[str, Any] = dict(base or {})
    merged.update(override or {})
    return merged


def pop_option(options: MutableMapping[str, Any], key: str, default: Any = None) -> Any:
    """Remove ``key`` from ``options`` and return its value (or ``default``)."""

    return options.pop(key, default)


__all__ = ["merge_options", "pop_option", "render_tag_attributes", "tag"]
