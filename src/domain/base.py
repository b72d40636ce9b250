import uuid

from pydantic import BaseModel as PydanticBaseModel, ConfigDict


def generate_uuid() -> str:
    return str(uuid.uuid4())


class BaseModel(PydanticBaseModel):
    """Base for domain entities. Entities are immutable once built."""

    model_config = ConfigDict(frozen=True)
