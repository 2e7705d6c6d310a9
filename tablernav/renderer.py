"""Recursive menu renderer producing Tabler sidebar markup."""

from __future__ import annotations

import html
import logging
import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Callable, Mapping, Optional, Pattern, Sequence, Tuple

from .markup import merge_options, pop_option, tag
from .models import MenuItem, RendererConfig
from .normalize import normalize_items
from .urls import RouteUrlBuilder, UrlBuilder

_LOGGER = logging.getLogger(__name__)

TagBuilder = Callable[[Any, str, Mapping[str, Any]], str]

SUBMENU_MARKER = '<span class="nav-link-toggle"></span>'
SUBMENU_SHOW_CLASS = "show"


@lru_cache(maxsize=32)
def _token_pattern(tokens: Tuple[str, ...]) -> Pattern[str]:
    # longest first so overlapping tokens resolve like strtr
    ordered = sorted(tokens, key=len, reverse=True)
    return re.compile("|".join(re.escape(token) for token in ordered))


def substitute(template: str, replacements: Mapping[str, str]) -> str:
    """Replace every token of ``replacements`` found in ``template``.

    All tokens are replaced in one pass, so text coming from a replacement is
    never scanned again. Tokens not listed are left as literal text.
    """

    tokens = tuple(token for token in replacements if token)
    if not tokens or not template:
        return template
    pattern = _token_pattern(tokens)
    return pattern.sub(lambda match: replacements[match.group(0)], template)


@dataclass(slots=True)
class RenderState:
    """Id allocator scoped to a single top-level render call."""

    counter: int = 0

    def next_id(self) -> str:
        identifier = f"m{self.counter}"
        self.counter += 1
        return identifier


class MenuRenderer:
    """Render a tree of :class:`MenuItem` objects into nested HTML lists."""

    def __init__(
        self,
        config: Optional[RendererConfig] = None,
        *,
        url_builder: Optional[UrlBuilder] = None,
        tag_builder: Optional[TagBuilder] = None,
    ) -> None:
        self._config = config if config is not None else RendererConfig()
        self._url_builder = url_builder or RouteUrlBuilder()
        self._tag_builder = tag_builder or tag

    @property
    def config(self) -> RendererConfig:
        return self._config

    def render(self, items: Sequence[MenuItem], config: Optional[RendererConfig] = None) -> str:
        """Render ``items`` inside the configured container tag."""

        if config is None:
            config = self._config
        state = RenderState()
        inner = self._render_items(items, config, state)

        options = dict(config.container_options)
        container_tag = pop_option(options, "tag", "ul")
        _LOGGER.debug(
            "Rendered menu with %d top-level items and %d submenu ids",
            len(items),
            state.counter,
        )
        return self._tag_builder(container_tag, inner, options)

    def _render_items(
        self, items: Sequence[MenuItem], config: RendererConfig, state: RenderState
    ) -> str:
        lines = []
        for item in items:
            options = merge_options(config.item_options, item.options)
            item_tag = pop_option(options, "tag", "li")

            item_id = None
            if item.has_submenu:
                item_id = item.id if item.id is not None else state.next_id()

            menu = self._render_item(item, item_id, config)
            if item.has_submenu:
                submenu_template = item.submenu_template
                if submenu_template is None:
                    submenu_template = config.submenu_template
                menu += substitute(
                    submenu_template,
                    {
                        "{id}": item_id,
                        "{items}": self._render_items(item.items, config, state),
                        "{active}": SUBMENU_SHOW_CLASS if item.active else "",
                    },
                )

            lines.append(self._tag_builder(item_tag, menu, options))

        return "\n".join(lines)

    def _render_item(self, item: MenuItem, item_id: Optional[str], config: RendererConfig) -> str:
        """Render the body of one item, without container or submenu."""

        if item.header:
            return item.label

        submenu = SUBMENU_MARKER if item.has_submenu else ""

        badge = ""
        if item.badge is not None and item.badge.message:
            badge_type = item.badge.badge_type or "info"
            badge = f'<span class="right badge badge-{badge_type}">{item.badge.message}</span>'

        if item.template is not None:
            template = item.template
        elif item.has_submenu:
            template = config.submenu_links_template
        else:
            template = config.link_template

        if item.has_submenu:
            url = f"#{item_id}"
        elif item.url is not None:
            url = self._url_builder.resolve(item.url)
        else:
            url = "#"

        target = ""
        if item.target is not None:
            target = f'target="{html.escape(item.target, quote=True)}"'

        label = substitute(
            config.label_template,
            {"{label}": item.label, "{badge}": badge, "{submenu}": submenu},
        )
        return substitute(
            template,
            {
                "{label}": label,
                "{url}": url,
                "{active}": config.active_css_class if item.active else "",
                "{target}": target,
            },
        )


def render_menu(
    items: Sequence[MenuItem],
    config: Optional[RendererConfig] = None,
    *,
    normalize: bool = True,
    url_builder: Optional[UrlBuilder] = None,
    tag_builder: Optional[TagBuilder] = None,
) -> str:
    """Normalize ``items`` (optionally) and render them in one call."""

    if config is None:
        config = RendererConfig()
    if normalize:
        items, _ = normalize_items(
            items,
            activate_parents=config.activate_parents,
            hide_empty_items=config.hide_empty_items,
            encode_labels=config.encode_labels,
        )
    renderer = MenuRenderer(config, url_builder=url_builder, tag_builder=tag_builder)
    return renderer.render(items)


__all__ = [
    "MenuRenderer",
    "RenderState",
    "SUBMENU_MARKER",
    "TagBuilder",
    "render_menu",
    "substitute",
]
