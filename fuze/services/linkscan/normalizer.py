from __future__ import annotations

from typing import Optional
from urllib.parse import ParseResult, urlparse, urlunparse

SCHEMES = ("http", "https")
DEFAULT_PORTS = {"http": 80, "https": 443}


class InvalidSeedURL(ValueError):
    def __init__(self, url: str):
        super().__init__(f"'{url}' is not a valid URL")
        self.url = url


def _authority(parsed: ParseResult) -> str:
    # raises ValueError on a non-numeric port
    scheme = parsed.scheme.lower()
    host = parsed.hostname or ""
    if ":" in host:
        host = f"[{host}]"
    port = parsed.port
    if port is not None and port != DEFAULT_PORTS.get(scheme):
        return f"{host}:{port}"
    return host


def _origin(parsed: ParseResult) -> str:
    return f"{parsed.scheme.lower()}://{_authority(parsed)}"


def canonical_seed(url: str) -> str:
    try:
        parsed = urlparse(url.strip())
        if parsed.scheme.lower() in SCHEMES and parsed.hostname:
            return _origin(parsed) + "/"
    except ValueError as e:
        raise InvalidSeedURL(url) from e
    raise InvalidSeedURL(url)


def normalize(base_url: str, href: str) -> Optional[str]:
    base = urlparse(base_url)
    if not base.scheme or not base.hostname:
        raise ValueError(f"base URL must be absolute: {base_url!r}")

    href = href.strip()
    if href.startswith("#"):
        return None

    try:
        parsed = urlparse(href)
        if parsed.scheme:
            if not parsed.hostname or parsed.hostname != base.hostname:
                return None
            return urlunparse(
                parsed._replace(
                    scheme=parsed.scheme.lower(),
                    netloc=_authority(parsed),
                    path=parsed.path or "/",
                )
            )
    except ValueError:
        # unbalanced IPv6 bracket, bad port
        return None

    if href.startswith("/"):
        return _origin(base) + href
    # joined against the domain root, not the current page's directory
    return f"{_origin(base)}/{href}"
