import stat
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any

import pytest
from fastapi.testclient import TestClient

from coreason_move_agent.api import create_app
from coreason_move_agent.config import AgentConfig


class FakeAssistant:
    """Stands in for the text-generation client."""

    def __init__(self, reply: str = "assistant reply") -> None:
        self.reply = reply
        self.audited: list[str] = []
        self.questions: list[str] = []
        self.closed = False

    async def audit(self, code: str) -> str:
        self.audited.append(code)
        return self.reply

    async def chat(self, question: str) -> str:
        self.questions.append(question)
        if not question.strip():
            return "Empty question"
        return self.reply

    async def aclose(self) -> None:
        self.closed = True


@pytest.fixture
def stub_tool(tmp_path: Path) -> Callable[[str], Path]:
    """Write an executable shell script that plays the Move CLI."""

    def _make(body: str, name: str = "fake-aptos") -> Path:
        path = tmp_path / name
        path.write_text(f"#!/bin/sh\n{body}\n")
        path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return path

    return _make


@pytest.fixture
def fake_assistant() -> FakeAssistant:
    return FakeAssistant()


@pytest.fixture
def make_client(fake_assistant: FakeAssistant) -> Generator[Callable[..., TestClient], None, None]:
    clients: list[TestClient] = []

    def _make(cli_binary: str = "aptos", **overrides: Any) -> TestClient:
        settings: dict[str, Any] = {"cli_binary": cli_binary, "openai_api_key": None, "execution_timeout": 30.0}
        settings.update(overrides)
        config = AgentConfig(**settings)
        client = TestClient(create_app(config, assistant=fake_assistant))  # type: ignore[arg-type]
        client.__enter__()
        clients.append(client)
        return client

    yield _make

    for client in clients:
        client.__exit__(None, None, None)


@pytest.fixture
def submission_payload() -> dict[str, str]:
    return {"code": "module 0x1::M {}", "move_toml": '[package]\nname="M"'}
