"""Multi-level navigation menu rendering for the Tabler admin theme."""

from .assets import TABLER_ASSETS, AssetBundle
from .config import load_renderer_config
from .models import Badge, MenuItem, RendererConfig, load_menu_items
from .normalize import normalize_items
from .renderer import MenuRenderer, RenderState, render_menu, substitute
from .urls import RouteUrlBuilder, UrlBuilder

__all__ = [
    "AssetBundle",
    "Badge",
    "MenuItem",
    "MenuRenderer",
    "RenderState",
    "RendererConfig",
    "RouteUrlBuilder",
    "TABLER_ASSETS",
    "UrlBuilder",
    "load_menu_items",
    "load_renderer_config",
    "normalize_items",
    "render_menu",
    "substitute",
]
