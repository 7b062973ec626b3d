"""Helpers shared by the registry-backed actions."""

from __future__ import annotations

from bazekit.errors import RegistryError
from bazekit.models.config import CONFIG_FILENAME, BazekitConfig
from bazekit.models.registry import Registry
from bazekit.registry.client import RegistryClient


def registry_hint(cfg: BazekitConfig) -> str:
    return (
        f"Set a valid 'registryUrl' in {CONFIG_FILENAME} (current: {cfg.registry_url}) "
        "using 'bazekit set-registry <url>', 'bazekit init' or manual edit."
    )


def load_registry_for(cfg: BazekitConfig, client: RegistryClient) -> Registry:
    """Load the configured registry, attaching a remediation hint on failure."""
    try:
        return client.load(cfg.registry_url)
    except RegistryError as e:
        e.hint = registry_hint(cfg)
        raise
