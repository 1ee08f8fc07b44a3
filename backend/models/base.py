from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Snake_case attributes in Python, camelCase keys on the wire and on disk."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
