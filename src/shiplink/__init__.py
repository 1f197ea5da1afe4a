"""Client library for a shipping API: pickups, addresses, carrier accounts, rates, shipments and batches."""

from .core.client import ShipLinkClient
from .core.config import ClientSettings
from .core.exceptions import (
    APIException,
    MissingAPIKeyException,
    NotFoundException,
    ResourceAlreadyCreated,
    ResourceNotCreated,
    ShipLinkException,
    TransportException,
    UnauthorizedException,
)
from .core.logger import configure_logging
from .schemas import (
    Address,
    AddressCreate,
    Batch,
    BatchCreate,
    CarrierAccount,
    Parcel,
    Pickup,
    PickupCreate,
    Rate,
    Shipment,
    ShipmentCreate,
)
from .services import (
    AddressService,
    BatchService,
    CarrierAccountService,
    PickupService,
    RateService,
    ShipmentService,
)
from .version import __version__

__all__ = [
    "APIException",
    "Address",
    "AddressCreate",
    "AddressService",
    "Batch",
    "BatchCreate",
    "BatchService",
    "CarrierAccount",
    "CarrierAccountService",
    "ClientSettings",
    "MissingAPIKeyException",
    "NotFoundException",
    "Parcel",
    "Pickup",
    "PickupCreate",
    "PickupService",
    "Rate",
    "RateService",
    "ResourceAlreadyCreated",
    "ResourceNotCreated",
    "ShipLinkClient",
    "ShipLinkException",
    "Shipment",
    "ShipmentCreate",
    "ShipmentService",
    "TransportException",
    "UnauthorizedException",
    "__version__",
    "configure_logging",
]
