"""Shared pydantic base for models crossing the JSON boundary."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Snake_case in Python, camelCase on the wire (isRestDay, restTime)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
