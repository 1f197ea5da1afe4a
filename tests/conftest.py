"""Shared fixtures: a client wired to an in-memory fake of the API."""

import json
from typing import Any

import httpx
import pytest
from faker import Faker

from shiplink import ShipLinkClient

fake = Faker()

BASE_URL = "https://api.shiplink.test/v2"
DEFAULT_API_KEY = "sk_test_default"


class FakeAPI:
    """Records every request and answers with queued responses, in order."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._responses: list[httpx.Response] = []

    def queue(self, status_code: int = 200, body: Any = None) -> None:
        if body is None:
            self._responses.append(httpx.Response(status_code))
        elif isinstance(body, str):
            self._responses.append(httpx.Response(status_code, text=body))
        else:
            self._responses.append(httpx.Response(status_code, json=body))

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self._responses:
            raise AssertionError(f"Unexpected request: {request.method} {request.url}")
        return self._responses.pop(0)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        content = self.last_request.content
        return json.loads(content) if content else None


@pytest.fixture
def fake_api():
    return FakeAPI()


@pytest.fixture
def api_key():
    return DEFAULT_API_KEY


@pytest.fixture
def client_factory(fake_api):
    """Build clients talking to the fake API; keyword arguments go to ShipLinkClient."""
    clients: list[ShipLinkClient] = []

    def factory(api_key: str | None = DEFAULT_API_KEY, **kwargs: Any) -> ShipLinkClient:
        kwargs.setdefault("base_url", BASE_URL)
        kwargs.setdefault("transport", httpx.MockTransport(fake_api.handler))
        shiplink_client = ShipLinkClient(api_key, **kwargs)
        clients.append(shiplink_client)
        return shiplink_client

    yield factory
    for shiplink_client in clients:
        shiplink_client.close()


@pytest.fixture
def client(client_factory):
    """Client with a default key, talking to the fake API."""
    return client_factory()


@pytest.fixture
def address_payload():
    """Generate an address as the API returns it."""
    return {
        "id": "adr_9c2e5a1b",
        "object": "Address",
        "mode": "test",
        "name": fake.name(),
        "company": fake.company(),
        "street1": fake.street_address(),
        "street2": None,
        "city": fake.city(),
        "state": fake.state_abbr(),
        "zip": fake.zipcode(),
        "country": "US",
        "phone": "4155559999",
        "email": fake.email(),
        "residential": False,
        "created_at": "2024-01-15T10:30:00Z",
        "updated_at": "2024-01-15T10:30:00Z",
    }


@pytest.fixture
def pickup_payload(address_payload):
    """Generate a freshly created pickup as the API returns it."""
    return {
        "id": "pickup_7d3a1f0c",
        "object": "Pickup",
        "mode": "test",
        "created_at": "2024-01-15T10:30:00Z",
        "updated_at": "2024-01-15T10:30:00Z",
        "status": "unknown",
        "name": None,
        "reference": "my-first-pickup",
        "min_datetime": "2024-01-16T10:30:00Z",
        "max_datetime": "2024-01-16T15:30:00Z",
        "is_account_address": False,
        "instructions": "Ring the bell at the loading dock",
        "messages": [],
        "confirmation": None,
        "address": address_payload,
        "carrier_accounts": [{"id": "ca_1a2b3c", "object": "CarrierAccount", "type": "UpsAccount"}],
        "pickup_rates": [
            {
                "id": "pickuprate_4f5e",
                "object": "PickupRate",
                "mode": "test",
                "carrier": "UPS",
                "service": "Future-day Pickup",
                "rate": "0.00",
                "currency": "USD",
                "pickup_id": "pickup_7d3a1f0c",
            },
            {
                "id": "pickuprate_8a9b",
                "object": "PickupRate",
                "mode": "test",
                "carrier": "UPS",
                "service": "Same-day Pickup",
                "rate": "8.50",
                "currency": "USD",
                "pickup_id": "pickup_7d3a1f0c",
            },
        ],
        "unrecognized_field": "dropped on decode",
    }


@pytest.fixture
def shipment_payload(address_payload):
    """Generate a created shipment with three quoted rates."""
    return {
        "id": "shp_0e1d2c3b",
        "object": "Shipment",
        "mode": "test",
        "reference": "order-1001",
        "status": "unknown",
        "to_address": address_payload,
        "from_address": {**address_payload, "id": "adr_from"},
        "parcel": {"id": "prcl_1", "object": "Parcel", "length": 10.0, "width": 8.0, "height": 4.0, "weight": 15.4},
        "rates": [
            {"id": "rate_ground", "carrier": "USPS", "service": "GroundAdvantage", "rate": "6.40", "currency": "USD"},
            {"id": "rate_priority", "carrier": "USPS", "service": "Priority", "rate": "9.15", "currency": "USD"},
            {"id": "rate_ups", "carrier": "UPS", "service": "Ground", "rate": "11.02", "currency": "USD"},
        ],
        "selected_rate": None,
        "tracking_code": None,
        "messages": [],
        "created_at": "2024-01-15T10:30:00Z",
        "updated_at": "2024-01-15T10:30:00Z",
    }
