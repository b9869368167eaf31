"""Record operations for parameters."""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Iterable, Sequence

from sqlmodel import Session, select

from equipment_api.models import Parameter, ParameterPayload, ParameterRead

logger = logging.getLogger(__name__)


def _to_read(record: Parameter) -> ParameterRead:
    return ParameterRead(
        id=record.id,
        name=record.name,
        description=record.description,
        equipment_code=record.equipment_code,
        equipment_id=record.equipment_id,
    )


def list_parameters(session: Session) -> list[ParameterRead]:
    """Return every parameter in creation order."""
    records = session.exec(select(Parameter).order_by(Parameter.id)).all()
    return [_to_read(record) for record in records]


def get_parameter(session: Session, parameter_id: int) -> ParameterRead | None:
    record = session.get(Parameter, parameter_id)
    if record is None:
        return None
    return _to_read(record)


def parameters_by_equipment(
    session: Session, equipment_ids: Iterable[int]
) -> dict[int, list[ParameterRead]]:
    """Group the parameters referencing each of ``equipment_ids``.

    Uses the index on ``parameter.equipment_id``; each group keeps creation
    order. Ids without parameters map to an empty list.
    """

    ids = list(equipment_ids)
    grouped: dict[int, list[ParameterRead]] = defaultdict(list)
    if not ids:
        return {}
    records: Sequence[Parameter] = session.exec(
        select(Parameter).where(Parameter.equipment_id.in_(ids)).order_by(Parameter.id)
    ).all()
    for record in records:
        grouped[record.equipment_id].append(_to_read(record))
    return {equipment_id: grouped.get(equipment_id, []) for equipment_id in ids}


def create_parameter(session: Session, payload: ParameterPayload) -> ParameterRead:
    record = Parameter(
        name=payload.name,
        description=payload.description,
        equipment_code=payload.equipment_code,
        equipment_id=payload.equipment_id,
    )
    session.add(record)
    session.commit()
    session.refresh(record)
    logger.info(
        "Parameter created",
        extra={"parameter_id": record.id, "equipment_id": record.equipment_id},
    )
    return _to_read(record)


def update_parameter(session: Session, parameter_id: int, payload: ParameterPayload) -> bool:
    """Overwrite name, description and equipment code. The equipment id is kept."""

    record = session.get(Parameter, parameter_id)
    if record is None:
        return False
    record.name = payload.name
    record.description = payload.description
    record.equipment_code = payload.equipment_code
    session.add(record)
    session.commit()
    logger.info("Parameter updated", extra={"parameter_id": parameter_id})
    return True


def delete_parameter(session: Session, parameter_id: int) -> bool:
    record = session.get(Parameter, parameter_id)
    if record is None:
        return False
    session.delete(record)
    session.commit()
    logger.info("Parameter deleted", extra={"parameter_id": parameter_id})
    return True


__all__ = [
    "list_parameters",
    "get_parameter",
    "parameters_by_equipment",
    "create_parameter",
    "update_parameter",
    "delete_parameter",
]
