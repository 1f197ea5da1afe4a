"""Address service."""

from ..schemas.address import Address, AddressCreate
from .base import ResourceService


class AddressService(ResourceService[Address, AddressCreate]):
    """Create and retrieve addresses. Verification options ride along in ``AddressCreate.verify``."""

    resource_model = Address
    options_model = AddressCreate
    collection_path = "addresses"
    root_key = "address"
