class ChatCLIError(RuntimeError):
    pass


class ConfigError(ChatCLIError):
    """Raised when the API key or the prompt is missing."""


class TransportError(ChatCLIError):
    """Raised when the request never produced an HTTP response."""


class APIError(ChatCLIError):
    """Raised when the API answers with a status other than 200."""

    def __init__(self, status: str, body: str):
        super().__init__(f"API error: {status}\n{body}")
        self.status = status
        self.body = body


class DecodeError(ChatCLIError):
    """Raised when a 200 response body is not a chat-completion document."""


class EmptyResponseError(ChatCLIError):
    def __init__(self, message: str = "no response from model"):
        super().__init__(message)


class EncodeError(ChatCLIError):
    """Raised when the request cannot be serialized as UTF-8 JSON."""
