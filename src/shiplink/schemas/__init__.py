from .address import Address, AddressCreate
from .base import RequestOptions, Resource
from .batch import Batch, BatchCreate
from .carrier_account import CarrierAccount
from .pickup import Pickup, PickupBuy, PickupCreate
from .rate import Rate
from .shipment import Parcel, Shipment, ShipmentCreate

__all__ = [
    "Address",
    "AddressCreate",
    "Batch",
    "BatchCreate",
    "CarrierAccount",
    "Parcel",
    "Pickup",
    "PickupBuy",
    "PickupCreate",
    "Rate",
    "RequestOptions",
    "Resource",
    "Shipment",
    "ShipmentCreate",
]
