from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable

import httpx
import pytest
from rich.console import Console

import cli.main as cli_main
from adapters.http_client import build_client

API_KEY = "secret-key"
SERVER_URL = "https://fallo.example"

VALID_CONFIG = f'api_key = "{API_KEY}"\nserver_url = "{SERVER_URL}"\n'


@dataclass
class FakeServer:
    status_code: int = 200
    body: str | bytes = b""
    error: Exception | None = None
    requests: list[httpx.Request] = field(default_factory=list)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status_code, content=self.body)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch) -> Path:
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    for name in ("FALLO_API_KEY", "FALLO_SERVER_URL", "FALLO_LOG_LEVEL", "FORCE_COLOR"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(cli_main, "_console", Console(force_terminal=False))
    monkeypatch.setattr(cli_main, "_err_console", Console(stderr=True, force_terminal=False))
    return home


@pytest.fixture
def write_config(isolated_env: Path) -> Callable[[str], Path]:
    def _write(text: str) -> Path:
        path = isolated_env / ".config" / "fallo" / "config.toml"
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def server(monkeypatch) -> FakeServer:
    fake = FakeServer()
    monkeypatch.setattr(
        cli_main,
        "build_client",
        lambda: build_client(transport=fake.transport),
    )
    return fake
