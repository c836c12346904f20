"""Shared schema configuration."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    """Base schema exchanging camelCase field names on the wire.

    Accepts both camelCase and snake_case on input.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    def to_record(self) -> dict:
        """Dump to a wire record, camelCase keys."""
        return self.model_dump(by_alias=True)

    def to_patch(self) -> dict:
        """Dump only explicitly provided, non-null fields, camelCase keys."""
        return self.model_dump(by_alias=True, exclude_unset=True, exclude_none=True)
