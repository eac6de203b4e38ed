"""Base schema configuration."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BaseSchema(BaseModel):
    """Base schema with common configuration.

    Fields are exposed to the browser client in camelCase and accepted in
    either camelCase or snake_case.
    """

    model_config = ConfigDict(
        from_attributes=True,  # Enable ORM mode
        str_strip_whitespace=True,
        validate_assignment=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class IDMixin(BaseModel):
    """Mixin for UUID primary key."""

    id: UUID
