"""Database models and HTTP schemas."""

from .equipment import Equipment
from .parameter import Parameter
from .schemas import EquipmentPayload, EquipmentRead, ParameterPayload, ParameterRead

__all__ = [
    "Equipment",
    "Parameter",
    "EquipmentPayload",
    "EquipmentRead",
    "ParameterPayload",
    "ParameterRead",
]
