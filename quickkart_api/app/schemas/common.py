"""Shared base model for the camelCase wire format."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model whose fields serialise under camelCase aliases.

    ``populate_by_name`` lets services build instances with the Python
    field names while documents read from MongoDB validate through the
    aliases.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class BoundsMixin(CamelModel):
    """Axis-aligned bounding box shared by aisles and checkout lanes."""

    x_start_val: int
    x_end_val: int
    y_start_val: int
    y_end_val: int
