"""
Shared pydantic configuration.

All schemas serialise with camelCase aliases (``matchedActivityId``,
``createdAt``) while accepting either spelling on input.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Base model with camelCase aliases."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
