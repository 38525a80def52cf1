from typing import Annotated, Any, Optional

from bson import ObjectId
from pydantic import BaseModel, BeforeValidator, ConfigDict, Field
from pydantic.alias_generators import to_camel

# ObjectIds leave the store as strings
PyObjectId = Annotated[str, BeforeValidator(str)]


def parse_object_id(value: Any) -> Optional[ObjectId]:
    """Return an ObjectId for a valid id string, None for anything else."""
    if isinstance(value, ObjectId):
        return value
    if value and isinstance(value, str) and ObjectId.is_valid(value):
        return ObjectId(value)
    return None


class Document(BaseModel):
    """Base for stored documents; field names are camelCase in the store."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    id: Optional[PyObjectId] = Field(default=None, alias="_id")

    @classmethod
    def from_doc(cls, doc: Optional[dict]):
        if not doc:
            return None
        return cls.model_validate(doc)

    def to_doc(self) -> dict:
        """Dict ready for insert/update; `_id` is left to the store."""
        return self.model_dump(by_alias=True, exclude={"id"})

    def to_json(self, exclude: Optional[set] = None) -> dict:
        return self.model_dump(by_alias=True, mode="json", exclude=exclude)
