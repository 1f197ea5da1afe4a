"""Request builder: path template, verb, URL segments and body."""

import re
from collections.abc import Iterable, Mapping
from typing import Any, TypeVar
from urllib.parse import quote

from pydantic import TypeAdapter
from pydantic_core import to_jsonable_python

from .client import ShipLinkClient
from .exceptions import EmptyResponseException

T = TypeVar("T")

_SEGMENT_PATTERN = re.compile(r"\{(\w+)\}")


def to_wire(value: Any) -> Any:
    """Convert models, datetimes and containers into JSON-ready values, dropping None fields."""
    return to_jsonable_python(value, exclude_none=True)


class Request:
    """
    A single API call waiting to be executed.

    Example:
        request = Request("pickups/{id}/buy", "POST")
        request.add_url_segment("id", pickup.id)
        request.add_body([("carrier", "UPS"), ("service", "Future-day Pickup")])
        pickup = request.execute(client, Pickup)
    """

    def __init__(self, resource: str, method: str = "GET") -> None:
        self.resource = resource
        self.method = method.upper()
        self._segments: dict[str, str] = {}
        self._body: dict[str, Any] | None = None

    def add_url_segment(self, name: str, value: str) -> None:
        """Substitute ``{name}`` in the path template with ``value``."""
        if value is None or value == "":
            raise ValueError(f"URL segment '{name}' must be a non-empty string")
        self._segments[name] = quote(str(value), safe="")

    def add_body(
        self,
        parameters: Mapping[str, Any] | Iterable[tuple[str, Any]],
        root: str | None = None,
    ) -> None:
        """
        Attach a JSON body.

        Args:
            parameters: A mapping, or an ordered iterable of (key, value) pairs.
                        Key order is kept on the wire.
            root: When given, the body becomes ``{root: parameters}``.
        """
        pairs = parameters.items() if isinstance(parameters, Mapping) else parameters
        payload = to_wire({key: value for key, value in pairs if value is not None})
        self._body = {root: payload} if root else payload

    @property
    def body(self) -> dict[str, Any] | None:
        return self._body

    @property
    def path(self) -> str:
        """The path template with every segment substituted."""

        def substitute(match: re.Match[str]) -> str:
            name = match.group(1)
            if name not in self._segments:
                raise ValueError(f"No value for URL segment '{name}' in '{self.resource}'")
            return self._segments[name]

        return _SEGMENT_PATTERN.sub(substitute, self.resource)

    def execute(self, client: ShipLinkClient, response_type: type[T], api_key: str | None = None) -> T:
        """
        Send the request through ``client`` and decode the payload.

        Args:
            client: The client context to send with.
            response_type: A resource model, or a generic like list[CarrierAccount].
            api_key: Key for this call only. Defaults to the client's key.

        Returns:
            The decoded response.

        Raises:
            EmptyResponseException: The API sent a success status with no body.
        """
        payload = client.send(self.method, self.path, json=self._body, api_key=api_key)
        if payload is None:
            raise EmptyResponseException(self.method, self.path)
        return TypeAdapter(response_type).validate_python(payload)

    def __repr__(self) -> str:
        return f"Request({self.method} {self.resource})"
