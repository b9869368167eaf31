"""Request and response bodies exchanged over HTTP."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Ids are 32-bit signed integers on the wire
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

_CONFIG = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class EquipmentPayload(BaseModel):
    """Body of POST/PUT /equipment. ``id`` and ``parameters`` are ignored."""

    model_config = _CONFIG

    name: str
    description: str
    code: str


class ParameterPayload(BaseModel):
    """Body of POST/PUT /parameter. ``id`` is ignored."""

    model_config = _CONFIG

    name: str
    description: str
    equipment_code: str
    equipment_id: int = Field(default=0, ge=INT32_MIN, le=INT32_MAX)


class ParameterRead(BaseModel):
    model_config = _CONFIG

    id: int
    name: str
    description: str
    equipment_code: str
    equipment_id: int


class EquipmentRead(BaseModel):
    model_config = _CONFIG

    id: int
    name: str
    description: str
    code: str
    parameters: list[ParameterRead] = Field(default_factory=list)


__all__ = [
    "INT32_MAX",
    "INT32_MIN",
    "EquipmentPayload", "EquipmentRead", "ParameterPayload", "ParameterRead"]
