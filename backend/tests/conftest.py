import json
import sys
from pathlib import Path

import httpx
import pytest
from fastapi.testclient import TestClient

# Ensure backend package is importable without an install
backend_root = Path(__file__).resolve().parents[1]
if str(backend_root) not in sys.path:
    sys.path.insert(0, str(backend_root))

from resume_polish.ai_service import PolishService  # noqa: E402
from resume_polish.config import ServiceConfig  # noqa: E402


class FakeCompletionsAPI:
    """Stand-in for the remote chat completions endpoint.

    Records every request it sees and answers with whatever ``respond`` is
    set to: an httpx.Response, an exception to raise, or a zero-argument
    callable building a fresh response (for streamed bodies).
    """

    def __init__(self):
        self.requests = []
        self.respond = self.reply("Polished text")

    @staticmethod
    def reply(content, status_code=200):
        return httpx.Response(
            status_code,
            json={"choices": [{"message": {"role": "assistant", "content": content}}]},
        )

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if isinstance(self.respond, Exception):
            raise self.respond
        if callable(self.respond):
            return self.respond()
        # fresh copy per call so the same canned reply can be served repeatedly
        return httpx.Response(
            self.respond.status_code,
            headers=self.respond.headers,
            content=self.respond.content,
        )

    @property
    def last_payload(self):
        return json.loads(self.requests[-1].content)


@pytest.fixture
def fake_api():
    return FakeCompletionsAPI()


@pytest.fixture
def config():
    return ServiceConfig(api_base="https://llm.example.com/v1", api_key="sk-test", model="test-model")


@pytest.fixture
def service(config, fake_api):
    return PolishService(config, client=httpx.AsyncClient(transport=httpx.MockTransport(fake_api.handler)))


@pytest.fixture
def client(monkeypatch, service):
    """TestClient whose polish route talks to the fake completions API."""
    monkeypatch.setenv("CORS_ORIGINS", "*")

    from resume_polish.main import create_app

    with TestClient(create_app(service=service)) as c:
        yield c
