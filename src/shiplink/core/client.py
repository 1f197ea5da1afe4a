"""HTTP client context shared by every service."""

import logging
from typing import Any

import httpx
import structlog

from .config import DEFAULT_API_BASE_URL, DEFAULT_REQUEST_TIMEOUT, DEFAULT_USER_AGENT, ClientSettings
from .exceptions import MissingAPIKeyException, TransportException, exception_for_response

logger = logging.getLogger(__name__)


class ShipLinkClient:
    """
    Connection context for the shipping API.

    Holds the default API key, base URL and the underlying httpx.Client.
    A client is passed explicitly to every service; there is no
    process-wide default key. Each call may still override the key with
    its own ``api_key`` argument, resolved for that call only.

    Usage:
        with ShipLinkClient.from_settings() as client:
            pickup = PickupService(client).retrieve("pickup_123")
    """

    def __init__(
        self,
        api_key: str | None = None,
        *,
        base_url: str = DEFAULT_API_BASE_URL,
        timeout: float = DEFAULT_REQUEST_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            api_key: Default API key used when a call does not pass one.
            base_url: API root, e.g. https://api.easypost.com/v2.
            timeout: Per-request timeout in seconds.
            user_agent: Value sent in the User-Agent header.
            transport: Optional httpx transport, e.g. httpx.MockTransport in tests.
        """
        self._api_key = api_key
        self._http = httpx.Client(
            base_url=base_url,
            timeout=timeout,
            headers={"User-Agent": user_agent, "Accept": "application/json"},
            transport=transport,
        )

    @classmethod
    def from_settings(cls, settings: ClientSettings | None = None, **overrides: Any) -> "ShipLinkClient":
        """Build a client from ClientSettings (environment / .env). Keyword overrides win."""
        settings = settings or ClientSettings()
        api_key = settings.SHIPLINK_API_KEY.get_secret_value() if settings.SHIPLINK_API_KEY else None
        options: dict[str, Any] = {
            "api_key": api_key,
            "base_url": settings.SHIPLINK_API_BASE_URL,
            "timeout": settings.SHIPLINK_REQUEST_TIMEOUT,
            "user_agent": settings.SHIPLINK_USER_AGENT,
        }
        options.update(overrides)
        return cls(**options)

    @property
    def base_url(self) -> str:
        return str(self._http.base_url)

    @property
    def has_default_api_key(self) -> bool:
        return bool(self._api_key)

    def _resolve_api_key(self, api_key: str | None) -> str:
        key = api_key if api_key is not None else self._api_key
        if not key:
            raise MissingAPIKeyException()
        return key

    def send(
        self,
        method: str,
        path: str,
        *,
        json: dict[str, Any] | None = None,
        api_key: str | None = None,
    ) -> Any:
        """
        Send one request and return the decoded JSON payload.

        Args:
            method: HTTP verb.
            path: Path relative to the base URL, already substituted.
            json: Optional JSON body.
            api_key: Key for this call only. Defaults to the client's key.

        Returns:
            The decoded JSON body (dict or list), or None for an empty body.

        Raises:
            MissingAPIKeyException: No key available for this call.
            TransportException: The request failed before a response arrived.
            APIException: The API answered with an error status.
        """
        key = self._resolve_api_key(api_key)

        with structlog.contextvars.bound_contextvars(method=method, path=path, status_code=None):
            logger.debug("Sending request")
            try:
                response = self._http.request(method, path, json=json, auth=(key, ""))
            except httpx.TransportError as e:
                logger.warning("Request failed: %s", e)
                raise TransportException(str(e), method, path) from e

            structlog.contextvars.bind_contextvars(status_code=response.status_code)
            if response.is_error:
                error = exception_for_response(response)
                logger.warning("API error: %s", error)
                raise error

            logger.debug("Request succeeded")

        if not response.content:
            return None
        return response.json()

    def close(self) -> None:
        """Close the underlying connection pool."""
        self._http.close()

    def __enter__(self) -> "ShipLinkClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
