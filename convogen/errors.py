from __future__ import annotations


class ConvogenError(Exception):
    """Base class for every error raised by convogen."""


class ConfigError(ConvogenError):
    pass


class TransportError(ConvogenError):
    """A bearer HTTP exchange failed."""

    def __init__(self, message: str, *, url: str) -> None:
        super().__init__(message)
        self.url = url


class SerializationError(TransportError):
    pass


class NetworkError(TransportError):
    pass


class HTTPStatusError(TransportError):
    def __init__(self, status_code: int, *, url: str) -> None:
        super().__init__(f"non 2xx status: {status_code}", url=url)
        self.status_code = status_code


class DecodeError(TransportError):
    def __init__(self, message: str, *, url: str, response_body: str) -> None:
        super().__init__(message, url=url)
        self.response_body = response_body


class EmptyResponseError(ConvogenError):
    """The provider answered successfully but returned no choices."""
