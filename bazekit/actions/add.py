"""Download registry components into the project."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import httpx
from rich.console import Console
from rich.markup import escape

from bazekit.actions.common import load_registry_for
from bazekit.errors import (
    ComponentError,
    EmptyFileListError,
    FileFetchError,
    UnknownComponentError,
    UsageError,
)
from bazekit.models.config import BazekitConfig
from bazekit.models.registry import Registry, Snippet
from bazekit.prompts import Prompter
from bazekit.registry.client import RegistryClient
from bazekit.url_utils import component_file_url, force_https

logger = logging.getLogger(__name__)


def contained_path(root: Path, relative: str) -> Optional[Path]:
    """Join ``relative`` under ``root`` with leading separators dropped.

    Returns None when the result is ``root`` itself or resolves outside it.
    """
    path = root / relative.lstrip("/\\")
    resolved, base = path.resolve(), root.resolve()
    if resolved == base or not resolved.is_relative_to(base):
        return None
    return path


@dataclass
class ComponentResult:
    name: str
    destination: Optional[Path] = None
    created: list[Path] = field(default_factory=list)
    skipped: list[Path] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)
    overwrite_declined: bool = False
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None and not self.failed


@dataclass
class AddResult:
    components: list[ComponentResult] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return all(c.ok for c in self.components)

    def get(self, name: str) -> Optional[ComponentResult]:
        for c in self.components:
            if c.name == name:
                return c
        return None


class ComponentFetcher:
    """Resolves components against a registry and downloads their files."""

    def __init__(
        self,
        registry: Registry,
        http: httpx.Client,
        prompter: Prompter,
        console: Console,
    ):
        self.registry = registry
        self.http = http
        self.prompter = prompter
        self.console = console

    def resolve(self, name: str) -> Snippet:
        snippet = self.registry.snippets.get(name)
        if snippet is None:
            raise UnknownComponentError(f"Unknown component '{name}'")
        if not snippet.files:
            raise EmptyFileListError(f"No files for component '{name}'")
        return snippet

    def fetch_component(self, name: str, root: Path) -> ComponentResult:
        result = ComponentResult(name=name)
        try:
            snippet = self.resolve(name)
            dest_dir = contained_path(root, snippet.folder or name)
            if dest_dir is None:
                raise ComponentError(
                    f"Destination for component '{name}' is outside {root}"
                )
        except ComponentError as e:
            result.error = str(e)
            self.console.print(f"[red]{escape(str(e))}[/red]")
            return result

        dest_dir.mkdir(parents=True, exist_ok=True)
        result.destination = dest_dir

        targets = {f: contained_path(dest_dir, f) for f in snippet.files}
        existing = [f for f, p in targets.items() if p is not None and p.exists()]
        overwrite = True
        if existing:
            overwrite = self.prompter.confirm(
                f"Component '{name}' has existing files ({', '.join(existing)}). Overwrite?"
            )
            if not overwrite:
                result.overwrite_declined = True
                self.console.print(
                    f"[yellow]Skipping overwrite for component '{escape(name)}'[/yellow]"
                )

        for filename in snippet.files:
            dest_path = targets[filename]
            if dest_path is None:
                result.failed.append(filename)
                self.console.print(
                    f"[red]Failed {escape(filename)} (outside {escape(str(dest_dir))})[/red]"
                )
                continue
            if not overwrite and filename in existing:
                result.skipped.append(dest_path)
                self.console.print(f"[yellow]Skip existing {escape(str(dest_path))}[/yellow]")
                continue
            url = component_file_url(self.registry.base_url, name, filename)
            try:
                self.download(url, dest_path)
            except FileFetchError as e:
                result.failed.append(filename)
                self.console.print(f"[red]Failed {escape(filename)} ({escape(str(e))})[/red]")
                continue
            result.created.append(dest_path)
            self.console.print(f"[green]Created[/green] {escape(str(dest_path))}")

        self.console.print(
            f"Component '{escape(name)}' added in [blue]{escape(str(dest_dir))}[/blue]"
        )
        if snippet.dependencies:
            deps = " ".join(snippet.dependencies)
            self.console.print(
                f"  '{escape(name)}' depends on: {escape(', '.join(snippet.dependencies))}"
                f" (run [blue]bazekit add {escape(deps)}[/blue] if they are missing)"
            )
        return result

    def download(self, url: str, dest_path: Path) -> None:
        """Stream ``url`` into ``dest_path``, truncating any existing file."""
        url = force_https(url)
        logger.debug("GET %s -> %s", url, dest_path)
        try:
            with self.http.stream("GET", url) as response:
                if response.status_code != 200:
                    raise FileFetchError(
                        str(response.status_code), status_code=response.status_code
                    )
                dest_path.parent.mkdir(parents=True, exist_ok=True)
                with open(dest_path, "wb") as out:
                    for chunk in response.iter_bytes():
                        out.write(chunk)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise FileFetchError(f"Network error: {e}") from e
        except OSError as e:
            raise FileFetchError(f"Write error: {e}") from e


def add(
    components: list[str],
    *,
    client: RegistryClient,
    prompter: Prompter,
    console: Console,
    cwd: Optional[Path] = None,
) -> AddResult:
    """Download each named component, continuing past per-component failures."""
    if not components:
        raise UsageError("At least one component name required")

    cfg = BazekitConfig.load(cwd)
    registry = load_registry_for(cfg, client)

    root = cfg.components_dir(cwd)
    root.mkdir(parents=True, exist_ok=True)

    fetcher = ComponentFetcher(registry, client.http, prompter, console)
    result = AddResult()
    for name in components:
        result.components.append(fetcher.fetch_component(name, root))
    return result
