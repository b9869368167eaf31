"""Service-layer record operations."""

from .equipment import (
    create_equipment,
    delete_equipment,
    get_equipment,
    list_equipment,
    update_equipment,
)
from .parameters import (
    create_parameter,
    delete_parameter,
    get_parameter,
    list_parameters,
    parameters_by_equipment,
    update_parameter,
)

__all__ = [
    "list_equipment",
    "get_equipment",
    "create_equipment",
    "update_equipment",
    "delete_equipment",
    "list_parameters",
    "get_parameter",
    "parameters_by_equipment",
    "create_parameter",
    "update_parameter",
    "delete_parameter",
]
