"""Shared URL utilities."""

from __future__ import annotations

from urllib.parse import urlparse


def force_https(url: str) -> str:
    """Upgrade a plain ``http://`` URL to ``https://``."""
    if url.startswith("http://"):
        return "https://" + url[len("http://"):]
    return url


def is_absolute_url(url: str) -> bool:
    parsed = urlparse(url)
    return bool(parsed.scheme) and bool(parsed.netloc)


def component_file_url(base_url: str, component: str, filename: str) -> str:
    return f"{base_url}{component}/{filename}"
