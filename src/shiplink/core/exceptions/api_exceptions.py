"""Errors raised for non-2xx responses and transport failures."""

from typing import Any

import httpx


class ShipLinkException(Exception):
    """Base class for every error raised by the client."""


class MissingAPIKeyException(ShipLinkException):
    """No API key was passed to the call and the client has no default."""

    def __init__(self, message: str = "No API key provided. Pass api_key or configure SHIPLINK_API_KEY.") -> None:
        super().__init__(message)


class TransportException(ShipLinkException):
    """The request never produced an HTTP response (connect error, timeout, ...)."""

    def __init__(self, message: str, method: str, path: str) -> None:
        super().__init__(message)
        self.method = method
        self.path = path


class EmptyResponseException(ShipLinkException):
    """The API answered with a success status but no body where a resource was expected."""

    def __init__(self, method: str, path: str) -> None:
        super().__init__(f"{method} {path} returned an empty body")
        self.method = method
        self.path = path


class APIException(ShipLinkException):
    """
    The API answered with an error status.

    Attributes:
        status_code: HTTP status of the response.
        message: Human readable message from the error envelope, or the raw body.
        code: Machine readable error code from the envelope, if any.
        errors: Field level errors from the envelope, if any.
        body: The decoded JSON body, or the raw text when it was not JSON.
    """

    def __init__(
        self,
        status_code: int,
        message: str,
        code: str | None = None,
        errors: list[Any] | None = None,
        body: Any = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.code = code
        self.errors = errors or []
        self.body = body

    def __str__(self) -> str:
        if self.code:
            return f"{self.status_code} {self.code}: {self.message}"
        return f"{self.status_code}: {self.message}"


class BadRequestException(APIException):
    pass


class UnauthorizedException(APIException):
    pass


class ForbiddenException(APIException):
    pass


class NotFoundException(APIException):
    pass


class UnprocessableEntityException(APIException):
    pass


class RateLimitException(APIException):
    pass


class ServerErrorException(APIException):
    pass


STATUS_EXCEPTIONS: dict[int, type[APIException]] = {
    400: BadRequestException,
    401: UnauthorizedException,
    403: ForbiddenException,
    404: NotFoundException,
    422: UnprocessableEntityException,
    429: RateLimitException,
}


def exception_for_response(response: httpx.Response) -> APIException:
    """Build the typed exception matching an error response.

    The API wraps errors as ``{"error": {"code", "message", "errors"}}``.
    Bodies that do not follow the envelope fall back to the raw text.
    """
    try:
        body: Any = response.json()
    except ValueError:
        body = response.text

    code = None
    errors = None
    message = response.reason_phrase or "Unknown error"
    envelope = body.get("error") if isinstance(body, dict) else None
    if isinstance(envelope, dict):
        code = envelope.get("code")
        message = envelope.get("message") or message
        errors = envelope.get("errors")
    elif isinstance(envelope, str):
        message = envelope
    elif isinstance(body, str) and body:
        message = body

    if response.status_code >= 500:
        exc_class: type[APIException] = ServerErrorException
    else:
        exc_class = STATUS_EXCEPTIONS.get(response.status_code, APIException)
    return exc_class(response.status_code, message, code=code, errors=errors, body=body)
