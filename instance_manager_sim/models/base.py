"""
Shared base for request/response models
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_pascal


class ApiModel(BaseModel):
    """Snake-case fields, PascalCase aliases matching the service's wire shape"""

    model_config = ConfigDict(alias_generator=to_pascal, populate_by_name=True)
