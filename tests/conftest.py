"""Test configuration and fixtures."""

import json

import httpx
import pytest
from fastapi import FastAPI, Request, Response

from twitter_generator.providers.openai import OpenAIProvider

CHAT_BODY = {
    "id": "chatcmpl-123",
    "object": "chat.completion",
    "created": 1700000000,
    "model": "gpt-3.5-turbo-0125",
    "system_fingerprint": "fp_44709d6fcb",
    "choices": [
        {
            "index": 0,
            "message": {"role": "assistant", "content": "Peace is not a side. Pick it anyway."},
            "logprobs": None,
            "finish_reason": "stop",
        }
    ],
    "usage": {"prompt_tokens": 60, "completion_tokens": 12, "total_tokens": 72},
}

IMAGE_BODY = {
    "created": 1700000000,
    "data": [{"url": "https://images.example/1.png"}, {"url": "https://images.example/2.png"}],
}


class StubOpenAI:
    """In-process stand-in for api.openai.com."""

    def __init__(self) -> None:
        self.status = 200
        self.body = json.dumps(CHAT_BODY)
        self.requests = []
        self.app = FastAPI()

        @self.app.post("/v1/chat/completions")
        @self.app.post("/v1/images/generations")
        async def completions(request: Request):
            self.requests.append(
                {
                    "path": request.url.path,
                    "host": request.headers.get("host"),
                    "headers": dict(request.headers),
                    "json": await request.json(),
                }
            )
            return Response(content=self.body, status_code=self.status, media_type="application/json")

    def reply(self, status: int, body) -> None:
        self.status = status
        self.body = body if isinstance(body, str) else json.dumps(body)


@pytest.fixture
def chat_body():
    return json.loads(json.dumps(CHAT_BODY))


@pytest.fixture
def image_body():
    return json.loads(json.dumps(IMAGE_BODY))


@pytest.fixture
def stub():
    return StubOpenAI()


@pytest.fixture
def provider(stub):
    return OpenAIProvider(api_key="sk-test", transport=httpx.ASGITransport(app=stub.app))
