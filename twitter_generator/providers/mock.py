import asyncio
import time

from .base import Provider
from ..schemas import (
    ChatCompletionsResponse,
    Choice,
    ImageGenerationResponse,
    ImageUrl,
    OpenAIEndpoint,
    OpenAIRequest,
    OpenAIResponse,
    ReplyMessage,
    Usage,
)


class MockProvider(Provider):
    def __init__(self, delay: float = 0.0):
        self.delay = delay

    async def send(self, request: OpenAIRequest) -> OpenAIResponse:
        payload = request.payload()
        if self.delay:
            await asyncio.sleep(self.delay)

        if request.endpoint is OpenAIEndpoint.IMAGES:
            return OpenAIResponse(
                endpoint=request.endpoint,
                image=ImageGenerationResponse(
                    created=int(time.time()),
                    data=[ImageUrl(url="https://example.invalid/mock.png")],
                ),
            )

        user_last = ""
        for m in reversed(payload.messages):
            if m.role == "user":
                user_last = m.content
                break

        text = f"(mock) {payload.model} was asked: {user_last}"
        prompt_tokens = sum(len(m.content.split()) for m in payload.messages)
        completion_tokens = len(text.split())
        return OpenAIResponse(
            endpoint=request.endpoint,
            chat=ChatCompletionsResponse(
                id="chatcmpl-mock",
                object="chat.completion",
                created=int(time.time()),
                model=payload.model,
                choices=[
                    Choice(
                        index=0,
                        message=ReplyMessage(role="assistant", content=text),
                        finish_reason="stop",
                    )
                ],
                usage=Usage(
                    prompt_tokens=prompt_tokens,
                    completion_tokens=completion_tokens,
                    total_tokens=prompt_tokens + completion_tokens,
                ),
            ),
        )
