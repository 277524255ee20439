"""Schema Base — shared Pydantic config for wire-format models.

Invariants:
    - Wire names are camelCase (createdAt, imageUrl); snake_case accepted on input
    - Unknown request keys are ignored, so clients cannot set id/createdAt
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    """Base for every request and response schema."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        extra="ignore",
    )


class MessageResponse(WireModel):
    """Confirmation envelope returned by deletes."""
    message: str
