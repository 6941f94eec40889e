from enum import Enum
from typing import Any, List, Literal, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from .errors import InvalidRequestError

Role = Literal["system", "user", "assistant"]

SYSTEM_MESSAGE = (
    "You are a content creator who is specialized in making content which will "
    "generate a lot of engagement. You focus on making sure to take a side on the "
    "issue so that people can reply to your tweet with clear agreement or dissent."
)


class OpenAIEndpoint(Enum):
    CHAT = "chat"
    IMAGES = "images"

    @property
    def url(self) -> str:
        return ENDPOINT_URLS[self]


ENDPOINT_URLS = {
    OpenAIEndpoint.CHAT: "https://api.openai.com/v1/chat/completions",
    OpenAIEndpoint.IMAGES: "https://api.openai.com/v1/images/generations",
}


class OpenAIModel(str, Enum):
    GPT35_TURBO = "gpt-3.5-turbo"
    GPT35_TURBO_INSTRUCT = "gpt-3.5-turbo-instruct"
    DALLE2 = "dall-e-2"


class Message(BaseModel):
    role: Role
    content: str


class ChatRequest(BaseModel):
    model: str = Field(..., description="model id")
    messages: List[Message]
    temperature: float
    max_tokens: int


class ImageRequest(BaseModel):
    model: str = Field(..., description="model id")
    prompt: Optional[str] = None
    n: Optional[int] = None
    size: Optional[str] = None


def _model_id(model: Union[OpenAIModel, str]) -> str:
    return model.value if isinstance(model, OpenAIModel) else model


class OpenAIRequest(BaseModel):
    """
    One request to a fixed OpenAI endpoint.

    Exactly one of ``chat`` / ``image`` is populated once configured, and it
    always matches ``endpoint``.
    """
    model_config = ConfigDict(frozen=True)

    endpoint: OpenAIEndpoint
    url: str
    chat: Optional[ChatRequest] = None
    image: Optional[ImageRequest] = None

    @classmethod
    def new(cls, endpoint: OpenAIEndpoint) -> "OpenAIRequest":
        return cls(endpoint=endpoint, url=endpoint.url)

    def with_chat_payload(
        self,
        model: Union[OpenAIModel, str],
        prompt: str,
        temperature: float,
        max_tokens: int,
    ) -> "OpenAIRequest":
        if self.endpoint is not OpenAIEndpoint.CHAT:
            raise InvalidRequestError(
                f"Chat payload needs the chat endpoint, got {self.endpoint.name}"
            )
        chat = ChatRequest(
            model=_model_id(model),
            messages=[
                Message(role="system", content=SYSTEM_MESSAGE),
                Message(role="user", content=prompt),
            ],
            temperature=temperature,
            max_tokens=max_tokens,
        )
        return self.model_copy(update={"chat": chat, "image": None})

    def with_image_payload(
        self,
        model: Union[OpenAIModel, str],
        prompt: Optional[str] = None,
        n: Optional[int] = None,
        size: Optional[str] = None,
    ) -> "OpenAIRequest":
        if self.endpoint is not OpenAIEndpoint.IMAGES:
            raise InvalidRequestError(
                f"Image payload needs the images endpoint, got {self.endpoint.name}"
            )
        image = ImageRequest(model=_model_id(model), prompt=prompt, n=n, size=size)
        return self.model_copy(update={"image": image, "chat": None})

    def payload(self) -> Union[ChatRequest, ImageRequest]:
        """Return the payload selected by ``endpoint``."""
        if self.endpoint is OpenAIEndpoint.CHAT and self.chat is not None and self.image is None:
            return self.chat
        if self.endpoint is OpenAIEndpoint.IMAGES and self.image is not None and self.chat is None:
            return self.image
        raise InvalidRequestError(
            f"Request for {self.endpoint.name} has no matching payload"
        )


class ReplyMessage(BaseModel):
    role: Optional[str] = None
    content: Optional[str] = None
    refusal: Optional[str] = None


class Choice(BaseModel):
    index: Optional[int] = None
    message: Optional[ReplyMessage] = None
    logprobs: Optional[Any] = Field(
        default=None, validation_alias=AliasChoices("logprobs", "log_probs")
    )
    finish_reason: Optional[str] = None


class Usage(BaseModel):
    prompt_tokens: Optional[int] = None
    completion_tokens: Optional[int] = None
    total_tokens: Optional[int] = None


class ChatCompletionsResponse(BaseModel):
    id: Optional[str] = None
    object: Optional[str] = None
    created: Optional[int] = None
    model: Optional[str] = None
    system_fingerprint: Optional[str] = None
    choices: Optional[List[Choice]] = None
    usage: Optional[Usage] = None


class ImageUrl(BaseModel):
    url: str


class ImageGenerationResponse(BaseModel):
    created: int
    data: List[ImageUrl]


class OpenAIResponse(BaseModel):
    endpoint: OpenAIEndpoint
    chat: Optional[ChatCompletionsResponse] = None
    image: Optional[ImageGenerationResponse] = None
