from .api_exceptions import (
    APIException,
    BadRequestException,
    EmptyResponseException,
    ForbiddenException,
    MissingAPIKeyException,
    NotFoundException,
    RateLimitException,
    ServerErrorException,
    ShipLinkException,
    TransportException,
    UnauthorizedException,
    UnprocessableEntityException,
    exception_for_response,
)
from .resource_exceptions import ResourceAlreadyCreated, ResourceNotCreated

__all__ = [
    "APIException",
    "BadRequestException",
    "EmptyResponseException",
    "ForbiddenException",
    "MissingAPIKeyException",
    "NotFoundException",
    "RateLimitException",
    "ResourceAlreadyCreated",
    "ResourceNotCreated",
    "ServerErrorException",
    "ShipLinkException",
    "TransportException",
    "UnauthorizedException",
    "UnprocessableEntityException",
    "exception_for_response",
]
