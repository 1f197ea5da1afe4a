"""Local precondition errors, raised before any request is sent."""

from .api_exceptions import ShipLinkException


class ResourceAlreadyCreated(ShipLinkException):
    """Create was called on an object that already has a server-assigned id."""

    def __init__(self, resource_id: str) -> None:
        super().__init__(f"Resource {resource_id} has already been created.")
        self.resource_id = resource_id


class ResourceNotCreated(ShipLinkException):
    """An operation needing a server-assigned id was called on an unsaved object."""

    def __init__(self, resource_name: str, operation: str) -> None:
        super().__init__(f"Cannot {operation} a {resource_name} that has not been created yet.")
        self.resource_name = resource_name
        self.operation = operation
