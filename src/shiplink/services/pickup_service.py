"""Pickup service - scheduling, purchasing and cancelling carrier pickups."""

from ..core.request import Request
from ..schemas.pickup import Pickup, PickupBuy, PickupCreate
from .base import ResourceService


class PickupService(ResourceService[Pickup, PickupCreate]):
    """
    Service for the pickup lifecycle.

    A pickup is created (the API quotes ``pickup_rates``), then bought with
    one carrier/service pair, and may be cancelled afterwards. Every
    mutating call merges the returned state into the caller's object.
    """

    resource_model = Pickup
    options_model = PickupCreate
    collection_path = "pickups"
    root_key = "pickup"

    def buy(self, pickup: Pickup, carrier: str, service: str, *, api_key: str | None = None) -> Pickup:
        """
        Purchase a created pickup.

        Args:
            pickup: A pickup with a server-assigned id.
            carrier: Carrier name, as quoted in ``pickup_rates``.
            service: Service name, as quoted in ``pickup_rates``.
            api_key: Key for this call only.

        Returns:
            The same pickup with its status and confirmation updated.
        """
        pickup_id = self.require_created(pickup, "buy")

        request = Request("pickups/{id}/buy", "POST")
        request.add_url_segment("id", pickup_id)
        request.add_body(PickupBuy(carrier=carrier, service=service).as_params())
        self.execute_and_merge(pickup, request, api_key)

        self.logger.info(
            "Bought pickup %s with %s %s (status: %s)",
            pickup_id,
            carrier,
            service,
            pickup.status,
        )
        return pickup

    def cancel(self, pickup: Pickup, *, api_key: str | None = None) -> Pickup:
        """
        Cancel a pickup.

        No local idempotence check is made; cancelling twice is whatever the
        API makes of it.

        Args:
            pickup: A pickup with a server-assigned id.
            api_key: Key for this call only.

        Returns:
            The same pickup with its cancelled status.
        """
        pickup_id = self.require_created(pickup, "cancel")

        request = Request("pickups/{id}/cancel", "POST")
        request.add_url_segment("id", pickup_id)
        self.execute_and_merge(pickup, request, api_key)

        self.logger.info("Cancelled pickup %s", pickup_id)
        return pickup
