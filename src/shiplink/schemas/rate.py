from ..core.utils.datetime import Timestamp
from .base import Resource


class Rate(Resource):
    """A price quote. Amounts are kept as the decimal strings the API sends."""

    carrier: str | None = None
    service: str | None = None
    rate: str | None = None
    currency: str | None = None
    list_rate: str | None = None
    list_currency: str | None = None
    retail_rate: str | None = None
    retail_currency: str | None = None
    carrier_account_id: str | None = None
    shipment_id: str | None = None
    pickup_id: str | None = None
    delivery_days: int | None = None
    delivery_date: Timestamp = None
    delivery_date_guaranteed: bool | None = None
    est_delivery_days: int | None = None
