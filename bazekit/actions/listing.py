"""List the components available in the configured registry."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.markup import escape

from bazekit.actions.common import load_registry_for
from bazekit.models.config import BazekitConfig
from bazekit.registry.client import RegistryClient


def list_components(
    *,
    client: RegistryClient,
    console: Console,
    verbose: bool = False,
    cwd: Optional[Path] = None,
) -> list[str]:
    cfg = BazekitConfig.load(cwd)
    registry = load_registry_for(cfg, client)

    names = list(registry.snippets)
    if not names:
        console.print("[yellow]No components in registry[/yellow]")
        return names

    for name in names:
        if not verbose:
            console.print(escape(name))
            continue
        snippet = registry.snippets[name]
        line = f"{name}: {', '.join(snippet.files)}"
        extras = []
        if snippet.kind != "component":
            extras.append(f"type={snippet.kind}")
        if snippet.folder and snippet.folder != name:
            extras.append(f"folder={snippet.folder}")
        if extras:
            line += f" ({', '.join(extras)})"
        console.print(escape(line))
    return names
