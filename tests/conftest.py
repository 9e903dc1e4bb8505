# tests/conftest.py
import os
import json
import logging
from types import SimpleNamespace
import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

# Ensure test-friendly env before anything reads config
os.environ.setdefault("PROVIDER", "openai")
os.environ.setdefault("OPENAI_API_KEY", "sk-test")
os.environ.setdefault("OPENAI_BASE_URL", "http://openai.test/v1")
os.environ.setdefault("OPENAI_MAX_RETRIES", "0")

# IMPORTANT: import the package after envs are set
from genai_facade.main import create_app
from genai_facade.providers.openai import make_client
from genai_facade.services.generation import GenerationService

BASE = "http://openai.test/v1"


@pytest.fixture
def service():
    return GenerationService(make_client())

@pytest_asyncio.fixture
async def app():
    return create_app()

@pytest_asyncio.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

@pytest.fixture
def caplog_info(caplog):
    caplog.set_level(logging.INFO)
    return caplog


# --- provider payload helpers ---

def completion_json(content, model="gpt-4.1-mini"):
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "created": 1,
        "model": model,
        "choices": [
            {"index": 0, "message": {"role": "assistant", "content": content}, "finish_reason": "stop"}
        ],
    }

def chunk_json(content, model="gpt-4.1-mini"):
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion.chunk",
        "created": 1,
        "model": model,
        "choices": [{"index": 0, "delta": {"content": content}, "finish_reason": None}],
    }

def sse_body(events):
    # events are dicts sent as data lines, closed with [DONE] like the real endpoint
    lines = [f"data: {json.dumps(e)}\n\n" for e in events]
    lines.append("data: [DONE]\n\n")
    return "".join(lines).encode("utf-8")

def embeddings_json(vectors, model="text-embedding-3-small"):
    return {
        "object": "list",
        "data": [{"object": "embedding", "index": i, "embedding": v} for i, v in enumerate(vectors)],
        "model": model,
        "usage": {"prompt_tokens": len(vectors), "total_tokens": len(vectors)},
    }


# --- in-memory stand-ins for the openai client ---

class FakeStream:
    """Async-iterable chunk source that records whether it was closed."""

    def __init__(self, pieces, error=None):
        self._pieces = list(pieces)
        self._error = error
        self.closed = False

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        self.closed = True

    def __aiter__(self):
        return self._iterate()

    async def _iterate(self):
        for p in self._pieces:
            yield SimpleNamespace(choices=[SimpleNamespace(delta=SimpleNamespace(content=p))])
        if self._error is not None:
            raise self._error


def fake_client(create=None, embed=None):
    return SimpleNamespace(
        chat=SimpleNamespace(completions=SimpleNamespace(create=create)),
        embeddings=SimpleNamespace(create=embed),
    )
