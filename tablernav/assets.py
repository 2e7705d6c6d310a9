"""Static asset bundle of the Tabler theme."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Tuple

from jinja2 import Environment, FileSystemLoader, select_autoescape

from .models import Serializable

_TEMPLATE_DIR = Path(__file__).resolve().parent / "templates"

_ENV = Environment(
    loader=FileSystemLoader(str(_TEMPLATE_DIR)),
    autoescape=select_autoescape(["html", "xml", "jinja"]),
    trim_blocks=True,
    lstrip_blocks=True,
)


def _join(base_url: str, *parts: str) -> str:
    segments = [segment.strip("/") for segment in parts if segment and segment.strip("/")]
    prefix = base_url.rstrip("/")
    return "/".join([prefix, *segments]) if segments else prefix or "/"


@dataclass(slots=True)
class AssetBundle(Serializable):
    """CSS and JS files published from ``source_path``."""

    source_path: str
    css: List[str] = field(default_factory=list)
    js: List[str] = field(default_factory=list)

    def urls(self, base_url: str = "") -> Tuple[List[str], List[str]]:
        """Return the public CSS and JS URLs below ``base_url``."""

        css_urls = [_join(base_url, self.source_path, path) for path in self.css]
        js_urls = [_join(base_url, self.source_path, path) for path in self.js]
        return css_urls, js_urls

    def render_tags(self, base_url: str = "") -> str:
        """Render ``<link>`` and ``<script>`` tags for every declared file."""

        css_urls, js_urls = self.urls(base_url)
        template = _ENV.get_template("assets.html.jinja")
        return template.render(css_urls=css_urls, js_urls=js_urls)


TABLER_ASSETS = AssetBundle(
    source_path="dist",
    css=["css/tabler.min.css"],
    js=["js/tabler.min.js"],
)


__all__ = ["AssetBundle", "TABLER_ASSETS"]
