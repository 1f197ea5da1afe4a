from typing import Any

from .base import Resource


class CarrierAccount(Resource):
    type: str | None = None
    description: str | None = None
    reference: str | None = None
    readable: str | None = None
    credentials: dict[str, Any] | None = None
    test_credentials: dict[str, Any] | None = None
