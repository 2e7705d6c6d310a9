"""Command line entrypoint rendering a JSON menu definition to HTML."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from bs4 import BeautifulSoup
from dotenv import load_dotenv

from .assets import TABLER_ASSETS
from .config import load_renderer_config
from .logging_config import configure_logging, parse_log_level
from .models import load_menu_items
from .normalize import normalize_items
from .renderer import render_menu
from .urls import RouteUrlBuilder

_LOGGER = logging.getLogger(__name__)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render a Tabler navigation menu")
    parser.add_argument("menu", type=Path, help="JSON file holding the list of menu items.")
    parser.add_argument("--config", type=Path, help="JSON file with renderer settings.")
    parser.add_argument(
        "--base-url",
        default="",
        help="Prefix for route-style item URLs (default: none).",
    )
    parser.add_argument(
        "--no-normalize",
        dest="normalize",
        action="store_false",
        help="Render items as given, without visibility filtering or label encoding.",
    )
    parser.add_argument(
        "--assets",
        metavar="BASE_URL",
        help="Prepend the Tabler CSS/JS tags published below BASE_URL.",
    )
    parser.add_argument("--pretty", action="store_true", help="Indent the generated markup.")
    parser.add_argument("--output", type=Path, help="Write the markup here instead of stdout.")
    parser.add_argument(
        "--dump",
        type=Path,
        metavar="PATH",
        help="Also write the menu tree, as rendered, to PATH as JSON.",
    )
    parser.add_argument("--log-level", default="WARNING", help="Python logging level (default: WARNING)")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    load_dotenv()
    args = parse_args(argv)
    configure_logging(parse_log_level(args.log_level))

    try:
        payload = json.loads(args.menu.read_text(encoding="utf-8"))
        items = load_menu_items(payload)
        config = load_renderer_config(args.config) if args.config else load_renderer_config()
    except (OSError, ValueError) as exc:
        _LOGGER.error("Unable to load menu definition %s: %s", args.menu, exc)
        return 1

    if args.normalize:
        items, _ = normalize_items(
            items,
            activate_parents=config.activate_parents,
            hide_empty_items=config.hide_empty_items,
            encode_labels=config.encode_labels,
        )

    try:
        markup = render_menu(
            items,
            config,
            normalize=False,
            url_builder=RouteUrlBuilder(args.base_url),
        )
    except ValueError as exc:
        _LOGGER.error("Unable to render menu: %s", exc)
        return 1

    parts: List[str] = []
    if args.assets is not None:
        parts.append(TABLER_ASSETS.render_tags(args.assets))
    parts.append(markup)
    document = "\n".join(part.strip("\n") for part in parts)
    if args.pretty:
        document = BeautifulSoup(document, "html.parser").prettify()

    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(document + "\n", encoding="utf-8")
        _LOGGER.info("Wrote menu markup to %s", args.output)
    else:
        sys.stdout.write(document + "\n")

    if args.dump:
        args.dump.parent.mkdir(parents=True, exist_ok=True)
        tree = [item.to_dict() for item in items]
        args.dump.write_text(json.dumps(tree, indent=2, ensure_ascii=False), encoding="utf-8")
        _LOGGER.info("Wrote menu tree to %s", args.dump)
    return 0


if __name__ == "__main__":
    sys.exit(main())
