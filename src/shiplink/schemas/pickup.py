from pydantic import Field

from ..core.utils.datetime import RequestTimestamp, Timestamp
from .address import Address
from .base import RequestOptions, Resource
from .batch import Batch
from .carrier_account import CarrierAccount
from .rate import Rate
from .shipment import Shipment


class Pickup(Resource):
    """
    A scheduled carrier pickup.

    ``min_datetime`` and ``max_datetime`` bound the pickup window; their
    ordering is checked by the API, not locally. The embedded address is
    owned by the pickup; carrier accounts are references to existing
    accounts.
    """

    status: str | None = None
    name: str | None = None
    reference: str | None = None
    min_datetime: Timestamp = None
    max_datetime: Timestamp = None
    is_account_address: bool | None = None
    instructions: str | None = None
    messages: list[str] = Field(default_factory=list)
    confirmation: str | None = None
    address: Address | None = None
    carrier_accounts: list[CarrierAccount] = Field(default_factory=list)
    pickup_rates: list[Rate] = Field(default_factory=list)


class PickupCreate(RequestOptions):
    is_account_address: bool | None = None
    min_datetime: RequestTimestamp = None
    max_datetime: RequestTimestamp = None
    reference: str | None = None
    instructions: str | None = None
    carrier_accounts: list[CarrierAccount] | None = None
    address: Address | None = None
    shipment: Shipment | None = None
    batch: Batch | None = None


class PickupBuy(RequestOptions):
    carrier: str
    service: str
