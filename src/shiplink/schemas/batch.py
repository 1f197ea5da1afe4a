from pydantic import Field

from .base import RequestOptions, Resource
from .shipment import Shipment


class Batch(Resource):
    reference: str | None = None
    state: str | None = None
    num_shipments: int | None = None
    shipments: list[Shipment] = Field(default_factory=list)
    # Shipment counts keyed by postage state, e.g. {"postage_purchased": 2}
    status: dict[str, int] | None = None
    label_url: str | None = None


class BatchCreate(RequestOptions):
    reference: str | None = None
    shipments: list[Shipment] | None = None
