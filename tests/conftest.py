import asyncio
from dataclasses import dataclass
from dataclasses import field
from typing import Any
from typing import Optional

import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer


@dataclass
class FakeOpenAI:
    """State and recorded requests of the fake OpenAI API."""

    speech_status: int = 200
    speech_body: bytes = b"\x00" * 48000
    models_status: int = 200
    delay: float = 0.0
    requests: list[dict[str, Any]] = field(default_factory=list)
    base_url: str = ""

    @property
    def last_request(self) -> Optional[dict[str, Any]]:
        return self.requests[-1] if self.requests else None


@pytest_asyncio.fixture
async def fake_openai():
    """Serve /v1/audio/speech and /v1/models from a local aiohttp app."""

    state = FakeOpenAI()

    async def speech(request: web.Request) -> web.Response:
        state.requests.append(
            {
                "path": request.path,
                "method": request.method,
                "headers": request.headers.copy(),
                "json": await request.json(),
            }
        )
        if state.delay:
            await asyncio.sleep(state.delay)
        if state.speech_status != 200:
            return web.Response(status=state.speech_status, body=state.speech_body)
        return web.Response(body=state.speech_body, content_type="application/octet-stream")

    async def models(request: web.Request) -> web.Response:
        state.requests.append({"path": request.path, "method": request.method, "headers": request.headers.copy()})
        if state.delay:
            await asyncio.sleep(state.delay)
        return web.json_response({"object": "list", "data": []}, status=state.models_status)

    app = web.Application()
    app.router.add_post("/v1/audio/speech", speech)
    app.router.add_get("/v1/models", models)

    server = TestServer(app)
    await server.start_server()
    state.base_url = str(server.make_url("/v1"))
    try:
        yield state
    finally:
        await server.close()


@pytest.fixture
def no_env_key(monkeypatch):
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    monkeypatch.delenv("OPENAI_TTS_URL", raising=False)
