"""Shipment service - quoting and buying postage."""

from ..core.request import Request
from ..schemas.rate import Rate
from ..schemas.shipment import Shipment, ShipmentCreate
from .base import ResourceService


class ShipmentService(ResourceService[Shipment, ShipmentCreate]):
    """
    Service for shipments.

    Creating a shipment returns its quoted ``rates``; buying one of them
    fixes ``selected_rate`` and issues the tracking code.
    """

    resource_model = Shipment
    options_model = ShipmentCreate
    collection_path = "shipments"
    root_key = "shipment"

    def buy(self, shipment: Shipment, rate: Rate | str, *, api_key: str | None = None) -> Shipment:
        """
        Buy postage for a created shipment.

        Args:
            shipment: A shipment with a server-assigned id.
            rate: One of the shipment's rates, or its id.
            api_key: Key for this call only.

        Returns:
            The same shipment with ``selected_rate`` and ``tracking_code`` set.
        """
        shipment_id = self.require_created(shipment, "buy")
        rate_id = rate if isinstance(rate, str) else self.require_created(rate, "buy with")

        request = Request("shipments/{id}/buy", "POST")
        request.add_url_segment("id", shipment_id)
        request.add_body([("rate", {"id": rate_id})])
        self.execute_and_merge(shipment, request, api_key)

        self.logger.info("Bought shipment %s with rate %s", shipment_id, rate_id)
        return shipment
