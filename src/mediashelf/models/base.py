"""Base model shared by the catalog record kinds."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CatalogModel(BaseModel):
    """Record serialized with camelCase keys, matching the stored document.

    Unknown keys already present in a stored record are kept, and numbers
    stored in text fields are read back as strings.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
        coerce_numbers_to_str=True,
    )

    def to_document(self) -> dict:
        """Dump the record in its stored (camelCase) form."""
        return self.model_dump(by_alias=True)
