"""Point the project at a different registry URL."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.markup import escape

from bazekit.errors import UsageError
from bazekit.models.config import BazekitConfig


def set_registry(
    url: str,
    *,
    console: Console,
    force: bool = False,
    cwd: Optional[Path] = None,
) -> Optional[BazekitConfig]:
    """Update ``registryUrl`` and return the saved config, or None if unchanged."""
    if not url:
        raise UsageError("Registry URL required")

    cfg = BazekitConfig.load(cwd)
    previous = cfg.registry_url
    if not force and previous == url:
        console.print(f"[yellow]Registry URL already set to {escape(url)}[/yellow]")
        return None

    cfg.registry_url = url
    path = cfg.save(cwd)
    console.print(f"[green]Saved configuration to[/green] {escape(str(path))}")
    console.print(f"Updated registryUrl from '{escape(str(previous))}' to '{escape(url)}'")
    return cfg
