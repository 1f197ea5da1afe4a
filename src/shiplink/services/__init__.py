"""
Services module - one service per API resource.

Each service wraps a ShipLinkClient and exposes the operations for its
resource, keeping request building separate from the resource schemas.
"""

from .address_service import AddressService
from .batch_service import BatchService
from .carrier_account_service import CarrierAccountService
from .pickup_service import PickupService
from .rate_service import RateService
from .shipment_service import ShipmentService

__all__ = [
    "AddressService",
    "BatchService",
    "CarrierAccountService",
    "PickupService",
    "RateService",
    "ShipmentService",
]
