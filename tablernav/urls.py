"""URL resolution for menu items."""

from __future__ import annotations

from typing import Any, Dict, Mapping, Protocol, Sequence
from urllib.parse import urlencode

from .models import UrlSpec


class UrlBuilder(Protocol):
    """Turn a route/URL descriptor into an ``href`` string."""

    def resolve(self, url_spec: UrlSpec) -> str:
        ...


class RouteUrlBuilder:
    """Resolve ``route`` descriptors into paths below ``base_url``.

    Strings are returned unchanged. A mapping ``{"route": "site/index",
    "id": 3}`` or a sequence ``("site/index", {"id": 3})`` becomes
    ``<base_url>/site/index?id=3``; a ``"#"`` parameter becomes the fragment.
    """

    def __init__(self, base_url: str = "") -> None:
        self._base_url = base_url.rstrip("/")

    @property
    def base_url(self) -> str:
        return self._base_url

    def resolve(self, url_spec: UrlSpec) -> str:
        if isinstance(url_spec, str):
            return url_spec
        if isinstance(url_spec, Mapping):
            params: Dict[str, Any] = dict(url_spec)
            route = params.pop("route", None)
        elif isinstance(url_spec, Sequence) and url_spec:
            route = url_spec[0]
            params = {}
            for extra in url_spec[1:]:
                if not isinstance(extra, Mapping):
                    raise ValueError(f"Unsupported route parameters: {extra!r}")
                params.update(extra)
        else:
            raise ValueError(f"Unsupported URL descriptor: {url_spec!r}")

        if not isinstance(route, str) or not route.strip():
            raise ValueError(f"URL descriptor is missing a route: {url_spec!r}")

        fragment = params.pop("#", None)
        url = f"{self._base_url}/{route.strip().strip('/')}"
        query = {key: value for key, value in params.items() if value is not None}
        if query:
            url += "?" + urlencode(query, doseq=True)
        if fragment:
            url += f"#{fragment}"
        return url


__all__ = ["RouteUrlBuilder", "UrlBuilder"]
