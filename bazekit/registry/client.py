"""Remote registry client: fetch, validate, and cache the registry JSON."""

from __future__ import annotations

import json
import logging
from typing import Any, Optional

import httpx

from bazekit.errors import (
    RegistryFetchError,
    RegistryParseError,
    RegistrySizeLimitError,
)
from bazekit.models.registry import Registry
from bazekit.registry.schema_validator import validate_registry
from bazekit.url_utils import force_https

logger = logging.getLogger(__name__)

DEFAULT_SIZE_LIMIT = 200_000


def new_http_client(transport: Optional[httpx.BaseTransport] = None) -> httpx.Client:
    return httpx.Client(timeout=None, follow_redirects=False, transport=transport)


def fetch_json(
    client: httpx.Client,
    url: str,
    size_limit: int = DEFAULT_SIZE_LIMIT,
) -> Any:
    """GET ``url`` and parse the body as JSON.

    The body is accumulated chunk by chunk and the transfer is abandoned as
    soon as it grows past ``size_limit`` bytes.
    """
    url = force_https(url)
    logger.debug("Fetching registry JSON from %s", url)
    body = bytearray()
    try:
        with client.stream("GET", url) as response:
            if response.status_code >= 300:
                raise RegistryFetchError(
                    f"HTTP {response.status_code}", status_code=response.status_code
                )
            for chunk in response.iter_bytes():
                body.extend(chunk)
                if len(body) > size_limit:
                    logger.debug("Registry body exceeded %d bytes, aborting", size_limit)
                    raise RegistrySizeLimitError("Registry too large")
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        raise RegistryFetchError(str(e) or type(e).__name__) from e

    logger.debug("Received %d bytes", len(body))
    try:
        return json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise RegistryParseError(f"Invalid JSON: {e}") from e


class RegistryClient:
    """Loads remote registries, remembering the last one fetched."""

    def __init__(
        self,
        http_client: Optional[httpx.Client] = None,
        size_limit: int = DEFAULT_SIZE_LIMIT,
    ):
        self.http = http_client or new_http_client()
        self.size_limit = size_limit
        self._cache: Optional[tuple[str, Registry]] = None
        self._fetch_count = 0

    @property
    def fetch_count(self) -> int:
        return self._fetch_count

    def load(self, url: str, force: bool = False) -> Registry:
        """Return the validated registry at ``url``.

        A previous result is reused only when ``url`` is exactly the string
        last fetched and ``force`` is not set.
        """
        if not force and self._cache is not None and self._cache[0] == url:
            logger.debug("Registry cache hit for %s", url)
            return self._cache[1]
        if not isinstance(url, str):
            raise RegistryFetchError(f"Registry URL must be a string, got {url!r}")

        self._fetch_count += 1
        data = fetch_json(self.http, url, self.size_limit)
        registry = Registry.from_raw(validate_registry(data))
        self._cache = (url, registry)
        logger.info(
            "Loaded registry with %d snippet(s) from %s", len(registry.snippets), url
        )
        return registry

    def close(self) -> None:
        self.http.close()


_default_client: Optional[RegistryClient] = None


def get_registry_client() -> RegistryClient:
    """Process-wide client; its cache lives as long as the process."""
    global _default_client
    if _default_client is None:
        _default_client = RegistryClient()
    return _default_client


def load_registry_remote(url: str, force: bool = False) -> Registry:
    return get_registry_client().load(url, force=force)
