"""Base service classes with common functionality."""

import logging
from abc import ABC
from collections.abc import Mapping
from typing import Any, ClassVar, Generic, TypeVar

from pydantic import BaseModel

from ..core.client import ShipLinkClient
from ..core.exceptions import ResourceAlreadyCreated, ResourceNotCreated
from ..core.request import Request
from ..schemas.base import RequestOptions, Resource

T = TypeVar("T")
ResourceT = TypeVar("ResourceT", bound=Resource)
OptionsT = TypeVar("OptionsT", bound=RequestOptions)


class BaseService(ABC):
    """
    Base service class providing common functionality for all services.

    Services turn resource operations into requests and send them
    through the client context they were built with.
    """

    def __init__(self, client: ShipLinkClient) -> None:
        """
        Initialize the service with a client.

        Args:
            client: Client context carrying the base URL and default API key.
        """
        self._client = client
        self._logger = logging.getLogger(f"{self.__class__.__module__}.{self.__class__.__name__}")

    @property
    def client(self) -> ShipLinkClient:
        """Get the client context."""
        return self._client

    @property
    def logger(self) -> logging.Logger:
        """Get the logger instance."""
        return self._logger

    def execute(self, request: Request, response_type: type[T], api_key: str | None = None) -> T:
        """Send ``request`` with this service's client and decode the payload."""
        return request.execute(self.client, response_type, api_key)

    def build_options(self, options_model: type[OptionsT], params: OptionsT | Mapping[str, Any] | None) -> OptionsT:
        """
        Coerce caller parameters into an options model.

        Plain mappings are validated into ``options_model``; keys it does not
        declare are dropped. Other models contribute the fields they had set.
        """
        if params is None:
            return options_model()
        if isinstance(params, options_model):
            return params
        if isinstance(params, BaseModel):
            params = params.model_dump(exclude_unset=True)

        dropped = [key for key in params if key not in options_model.model_fields]
        if dropped:
            self.logger.debug("Ignoring unrecognized parameters: %s", dropped)
        return options_model.model_validate(dict(params))


class RetrievableService(BaseService, Generic[ResourceT]):
    """Service for a resource that can be fetched by id."""

    resource_model: ClassVar[type[Resource]]
    collection_path: ClassVar[str]

    def retrieve(self, resource_id: str, *, api_key: str | None = None) -> ResourceT:
        """
        Retrieve one resource by id.

        Args:
            resource_id: Server-assigned identifier.
            api_key: Key for this call only.

        Returns:
            The fully populated resource.
        """
        request = Request(f"{self.collection_path}/{{id}}")
        request.add_url_segment("id", resource_id)
        return self.execute(request, self.resource_model, api_key)

    def require_created(self, resource: Resource, operation: str) -> str:
        """Return the resource id, or raise ResourceNotCreated if it has none."""
        if resource.id is None:
            raise ResourceNotCreated(type(resource).__name__, operation)
        return resource.id

    def execute_and_merge(self, resource: ResourceT, request: Request, api_key: str | None = None) -> ResourceT:
        """Send ``request`` and merge the returned state into ``resource``."""
        resource.merge(self.execute(request, type(resource), api_key))
        return resource


class ResourceService(RetrievableService[ResourceT], Generic[ResourceT, OptionsT]):
    """Service for a resource that can also be created."""

    options_model: ClassVar[type[RequestOptions]]
    root_key: ClassVar[str]

    def create(self, params: OptionsT | Mapping[str, Any] | None = None, *, api_key: str | None = None) -> ResourceT:
        """
        Create a new resource from parameters.

        Args:
            params: An options model, or a mapping whose unrecognized keys are ignored.
            api_key: Key for this call only.

        Returns:
            The new resource as returned by the API.
        """
        options = self.build_options(self.options_model, params)
        resource = self._send_create(options.as_params(), api_key)
        self.logger.info("Created %s %s", self.root_key, resource.id)
        return resource

    def create_from(self, resource: ResourceT, *, api_key: str | None = None) -> ResourceT:
        """
        Create ``resource`` on the server and merge the result into it in place.

        Args:
            resource: A local object with no id yet.
            api_key: Key for this call only.

        Returns:
            The same object, now carrying the server state.

        Raises:
            ResourceAlreadyCreated: The object already has an id. Nothing is sent.
        """
        if resource.id is not None:
            raise ResourceAlreadyCreated(resource.id)

        resource.merge(self._send_create(resource.as_params(), api_key))
        self.logger.info("Created %s %s", self.root_key, resource.id)
        return resource

    def _send_create(self, parameters: Mapping[str, Any], api_key: str | None) -> ResourceT:
        request = Request(self.collection_path, "POST")
        request.add_body(parameters, self.root_key)
        return self.execute(request, self.resource_model, api_key)
