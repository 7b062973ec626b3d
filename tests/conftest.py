"""Pytest configuration and shared fixtures."""

import json
from io import StringIO
from pathlib import Path
from typing import Any, Optional

import httpx
import pytest
from rich.console import Console

from bazekit.models.config import BazekitConfig
from bazekit.registry.client import RegistryClient, new_http_client

REGISTRY_URL = "https://registry.example.com/registry.json"
REPO_URL = "https://raw.example.com/acme/ui"
BASE_URL = f"{REPO_URL}/main/components/"


# ============================================================================
# Fake remote
# ============================================================================


class FakeRemote:
    """Serves canned responses through httpx.MockTransport and records requests."""

    def __init__(self):
        self.routes: dict[str, Any] = {}
        self.requests: list[str] = []

    def add(self, url: str, content: bytes = b"", status: int = 200) -> None:
        self.routes[url] = httpx.Response(status, content=content)

    def add_json(self, url: str, data: Any, status: int = 200) -> None:
        self.add(url, json.dumps(data).encode(), status)

    def add_error(self, url: str, message: str = "connection refused") -> None:
        self.routes[url] = httpx.ConnectError(message)

    def add_stream(self, url: str, chunks, status: int = 200) -> None:
        self.routes[url] = lambda: httpx.Response(status, content=chunks)

    def count(self, url: str) -> int:
        return self.requests.count(url)

    def handler(self, request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        self.requests.append(url)
        route = self.routes.get(url)
        if route is None:
            return httpx.Response(404, content=b"Not Found")
        if isinstance(route, Exception):
            raise type(route)(str(route), request=request)
        if callable(route):
            return route()
        return httpx.Response(route.status_code, content=route.content)


@pytest.fixture
def remote() -> FakeRemote:
    return FakeRemote()


@pytest.fixture
def registry_client(remote: FakeRemote) -> RegistryClient:
    transport = httpx.MockTransport(remote.handler)
    return RegistryClient(http_client=new_http_client(transport=transport))


# ============================================================================
# Prompts and console
# ============================================================================


class ScriptedPrompter:
    """Answers prompts from a fixed script, recording what was asked."""

    def __init__(self, confirms: Optional[list[bool]] = None, answers: Optional[list[str]] = None):
        self.confirms = list(confirms or [])
        self.answers = list(answers or [])
        self.confirm_prompts: list[str] = []
        self.ask_prompts: list[tuple[str, str]] = []

    def confirm(self, message: str) -> bool:
        self.confirm_prompts.append(message)
        return self.confirms.pop(0) if self.confirms else False

    def ask(self, message: str, default: str) -> str:
        self.ask_prompts.append((message, default))
        answer = self.answers.pop(0) if self.answers else ""
        return answer.strip() or default


@pytest.fixture
def prompter() -> ScriptedPrompter:
    return ScriptedPrompter()


@pytest.fixture
def console() -> Console:
    return Console(file=StringIO(), width=300, no_color=True, highlight=False)


def console_output(console: Console) -> str:
    return console.file.getvalue()


# ============================================================================
# Registry and project fixtures
# ============================================================================


@pytest.fixture
def registry_data() -> dict:
    """A registry document with two components."""
    return {
        "source": {
            "type": "github",
            "url": REPO_URL,
            "branch": "main",
            "basePath": "/components/",
        },
        "snippets": {
            "button": {
                "files": ["Button.tsx", "button.css"],
            },
            "accordion": {
                "type": "component",
                "folder": "disclosure",
                "files": ["Accordion.tsx"],
                "dependencies": ["button"],
            },
        },
    }


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """A project directory whose .bazekitrc points at the fake registry."""
    cfg = BazekitConfig(root="src/components", base_subfolder="base", registry_url=REGISTRY_URL)
    cfg.save(tmp_path)
    return tmp_path


@pytest.fixture
def served_registry(remote: FakeRemote, registry_data: dict) -> FakeRemote:
    """Fake remote serving the registry and every declared file."""
    remote.add_json(REGISTRY_URL, registry_data)
    remote.add(f"{BASE_URL}button/Button.tsx", b"export const Button = () => null;\n")
    remote.add(f"{BASE_URL}button/button.css", b".button { color: red; }\n")
    remote.add(f"{BASE_URL}accordion/Accordion.tsx", b"export const Accordion = () => null;\n")
    return remote
