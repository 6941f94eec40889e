import logging
import os
from typing import Optional

import httpx
from pydantic import ValidationError

from .base import Provider
from ..errors import (
    ConnectionFailedError,
    MissingAPIKeyError,
    RequestFailedError,
    ResponseDecodeError,
)
from ..schemas import (
    ChatCompletionsResponse,
    ImageGenerationResponse,
    OpenAIEndpoint,
    OpenAIRequest,
    OpenAIResponse,
)

logger = logging.getLogger(__name__)

API_KEY_ENV = "OPENAI_API_KEY"


class OpenAIProvider(Provider):
    """
    Sends one request to the OpenAI REST API:
    POST {endpoint url}
    with the request's active payload as the JSON body,
    and decodes the body into the response model for that endpoint.
    """
    def __init__(
        self,
        api_key: str,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.timeout = timeout
        self.transport = transport

    async def send(self, request: OpenAIRequest) -> OpenAIResponse:
        payload = request.payload()
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }
        body = payload.model_dump(exclude_none=True)

        logger.debug("POST %s (model=%s)", request.url, payload.model)
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                r = await client.post(request.url, headers=headers, json=body)
        except httpx.DecodingError as exc:
            raise ResponseDecodeError(f"Could not read OpenAI response body: {exc}") from exc
        except httpx.HTTPError as exc:
            raise ConnectionFailedError(f"Unable to reach {request.url}: {exc}") from exc

        if r.status_code != httpx.codes.OK:
            logger.warning("OpenAI returned %s: %s", r.status_code, r.text)
            raise RequestFailedError(r.status_code, r.text)

        try:
            if request.endpoint is OpenAIEndpoint.CHAT:
                return OpenAIResponse(
                    endpoint=request.endpoint,
                    chat=ChatCompletionsResponse.model_validate_json(r.content),
                )
            return OpenAIResponse(
                endpoint=request.endpoint,
                image=ImageGenerationResponse.model_validate_json(r.content),
            )
        except ValidationError as exc:
            raise ResponseDecodeError(f"Could not decode OpenAI response: {exc}") from exc


def build_openai_from_env(timeout: Optional[float] = None) -> OpenAIProvider:
    api_key = os.getenv(API_KEY_ENV, "").strip()
    if not api_key:
        raise MissingAPIKeyError(f"${API_KEY_ENV} is not set.")
    return OpenAIProvider(api_key=api_key, timeout=timeout)
