from typing import Any

from pydantic import BaseModel, Field

from .address import Address
from .base import RequestOptions, Resource
from .carrier_account import CarrierAccount
from .rate import Rate


class Parcel(Resource):
    # Dimensions in inches, weight in ounces
    length: float | None = None
    width: float | None = None
    height: float | None = None
    weight: float | None = None
    predefined_package: str | None = None


class ShipmentBase(BaseModel):
    reference: str | None = None
    to_address: Address | None = None
    from_address: Address | None = None
    return_address: Address | None = None
    parcel: Parcel | None = None
    options: dict[str, Any] | None = None


class Shipment(ShipmentBase, Resource):
    status: str | None = None
    tracking_code: str | None = None
    batch_id: str | None = None
    rates: list[Rate] = Field(default_factory=list)
    selected_rate: Rate | None = None
    messages: list[Any] = Field(default_factory=list)

    def lowest_rate(self, carriers: list[str] | None = None, services: list[str] | None = None) -> Rate | None:
        """Cheapest quoted rate, optionally restricted to some carriers and services.

        Rates without a numeric amount are skipped.
        """
        candidates = [
            (amount, rate)
            for rate in self.rates
            if (amount := _rate_amount(rate)) is not None
            and (carriers is None or rate.carrier in carriers)
            and (services is None or rate.service in services)
        ]
        return min(candidates, key=lambda candidate: candidate[0], default=(None, None))[1]


class ShipmentCreate(ShipmentBase, RequestOptions):
    carrier_accounts: list[CarrierAccount] | None = None


def _rate_amount(rate: Rate) -> float | None:
    if rate.rate is None:
        return None
    try:
        return float(rate.rate)
    except ValueError:
        return None
