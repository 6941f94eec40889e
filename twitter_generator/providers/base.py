from abc import ABC, abstractmethod

from ..schemas import OpenAIRequest, OpenAIResponse


class Provider(ABC):
    @abstractmethod
    async def send(self, request: OpenAIRequest) -> OpenAIResponse:
        """
        Perform one request/response exchange for ``request``.
        """
        raise NotImplementedError
