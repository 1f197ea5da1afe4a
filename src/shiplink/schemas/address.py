from pydantic import BaseModel

from .base import RequestOptions, Resource


class AddressBase(BaseModel):
    name: str | None = None
    company: str | None = None
    street1: str | None = None
    street2: str | None = None
    city: str | None = None
    state: str | None = None
    zip: str | None = None
    country: str | None = None
    phone: str | None = None
    email: str | None = None
    residential: bool | None = None
    carrier_facility: str | None = None
    federal_tax_id: str | None = None
    state_tax_id: str | None = None


class Address(AddressBase, Resource):
    pass


class AddressCreate(AddressBase, RequestOptions):
    # Verifications to run on create, e.g. ["delivery"]
    verify: list[str] | None = None
