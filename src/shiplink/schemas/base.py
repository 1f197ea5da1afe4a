from typing import Any, Self

from pydantic import BaseModel, ConfigDict

from ..core.utils.datetime import Timestamp


class Resource(BaseModel):
    """Client-side mirror of a server-side object. Unknown payload fields are ignored."""

    model_config = ConfigDict(extra="ignore")

    id: str | None = None
    object: str | None = None
    mode: str | None = None
    created_at: Timestamp = None
    updated_at: Timestamp = None

    @property
    def is_created(self) -> bool:
        return self.id is not None

    def merge(self, other: Self) -> None:
        """Overwrite every field with the value from ``other``, including unset ones."""
        for name in type(self).model_fields:
            setattr(self, name, getattr(other, name))
        object.__setattr__(self, "__pydantic_fields_set__", set(other.model_fields_set))

    def as_params(self) -> dict[str, Any]:
        """Current field values as a JSON-ready mapping, without None values."""
        return self.model_dump(mode="json", exclude_none=True)


class RequestOptions(BaseModel):
    """Accepted keys for one operation. Keys outside the model are dropped."""

    model_config = ConfigDict(extra="ignore")

    def as_params(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)
