# models/base.py

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class StoreModel(BaseModel):
    """
    Shape of a document as written to the store.

    Attributes are snake_case in Python and camelCase in the store
    (``unit_number`` ↔ ``unitNumber``). Both spellings are accepted on
    input; unknown fields are dropped.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def to_document(self, partial: bool = False) -> dict:
        """camelCase dict ready for the gateway. ``partial`` keeps only set fields."""
        return self.model_dump(by_alias=True, exclude_unset=partial, mode="json")
