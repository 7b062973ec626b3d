"""Create or overwrite the project's ``.bazekitrc``."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.markup import escape

from bazekit.models.config import BazekitConfig
from bazekit.prompts import Prompter


def init(
    *,
    prompter: Prompter,
    console: Console,
    use_defaults: bool = False,
    cwd: Optional[Path] = None,
) -> BazekitConfig:
    """Persist a configuration, prompting for each field unless ``use_defaults``."""
    defaults = BazekitConfig.load(cwd)
    if use_defaults:
        cfg = defaults
    else:
        cfg = BazekitConfig(
            root=prompter.ask("Component root folder", defaults.root),
            main=prompter.ask("Main file name", defaults.main),
            base_subfolder=prompter.ask("Base subfolder", defaults.base_subfolder),
            registry_url=prompter.ask("Registry URL", defaults.registry_url),
        )
    path = cfg.save(cwd)
    console.print(f"[green]Saved configuration to[/green] {escape(str(path))}")
    return cfg
