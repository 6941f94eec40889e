import asyncio
import logging
import sys

from .errors import TwitterGeneratorError
from .providers.base import Provider
from .providers.openai import build_openai_from_env
from .schemas import ChatCompletionsResponse, OpenAIEndpoint, OpenAIModel, OpenAIRequest

logger = logging.getLogger(__name__)

PROMPT = (
    "Write a tweet which would make a commentary on the global conflicts "
    "in the middle east."
)
MODEL = OpenAIModel.GPT35_TURBO
TEMPERATURE = 1.0
MAX_TOKENS = 200


def build_request() -> OpenAIRequest:
    return OpenAIRequest.new(OpenAIEndpoint.CHAT).with_chat_payload(
        MODEL, PROMPT, TEMPERATURE, MAX_TOKENS
    )


async def generate(provider: Provider) -> ChatCompletionsResponse:
    resp = await provider.send(build_request())
    return resp.chat


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    try:
        provider = build_openai_from_env()
        chat = asyncio.run(generate(provider))
    except TwitterGeneratorError as e:
        logger.error("%s", e)
        sys.exit(1)
    print(chat.model_dump_json(indent=2))


if __name__ == "__main__":
    main()
