"""Preparation pass run on menu trees before rendering."""

from __future__ import annotations

import html
from dataclasses import replace
from typing import List, Sequence, Tuple

from .models import MenuItem


def normalize_items(
    items: Sequence[MenuItem],
    *,
    activate_parents: bool = True,
    hide_empty_items: bool = True,
    encode_labels: bool = True,
) -> Tuple[List[MenuItem], bool]:
    """Return a filtered copy of ``items`` and whether any of them is active.

    Invisible items are dropped and labels are HTML-encoded unless the item
    sets ``encode=False``. Submenus emptied by filtering are removed when
    ``hide_empty_items`` is set; an item left without submenu and URL is
    dropped as well. With ``activate_parents`` an item is marked active when
    one of its descendants is. The ``active`` flags of leaves are taken as
    given.
    """

    normalized: List[MenuItem] = []
    any_active = False

    for item in items:
        if not item.visible:
            continue

        encode = item.encode if item.encode is not None else encode_labels
        label = html.escape(item.label, quote=True) if encode else item.label

        children = item.items
        has_active_child = False
        if children is not None:
            children, has_active_child = normalize_items(
                children,
                activate_parents=activate_parents,
                hide_empty_items=hide_empty_items,
                encode_labels=encode_labels,
            )
            if not children and hide_empty_items:
                children = None
                if item.url is None:
                    continue

        active = item.active or (activate_parents and has_active_child)
        if active:
            any_active = True

        normalized.append(replace(item, label=label, items=children, active=active))

    return normalized, any_active


__all__ = ["normalize_items"]
