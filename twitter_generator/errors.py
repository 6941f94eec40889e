class TwitterGeneratorError(Exception):
    """Base class for every error raised by the client."""


class MissingAPIKeyError(TwitterGeneratorError):
    pass


class InvalidRequestError(TwitterGeneratorError):
    pass


class ConnectionFailedError(TwitterGeneratorError):
    pass


class RequestFailedError(TwitterGeneratorError):
    def __init__(self, status_code: int, body: str):
        super().__init__("Invalid OpenAI request response.")
        self.status_code = status_code
        self.body = body


class ResponseDecodeError(TwitterGeneratorError):
    pass
