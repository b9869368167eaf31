"""Record operations for equipment."""

from __future__ import annotations

import logging

from sqlmodel import Session, select

from equipment_api.models import Equipment, EquipmentPayload, EquipmentRead, ParameterRead
from equipment_api.services.parameters import parameters_by_equipment

logger = logging.getLogger(__name__)


def _to_read(record: Equipment, parameters: list[ParameterRead]) -> EquipmentRead:
    return EquipmentRead(
        id=record.id,
        name=record.name,
        description=record.description,
        code=record.code,
        parameters=parameters,
    )


def list_equipment(session: Session) -> list[EquipmentRead]:
    """Return all equipment in creation order, each with its parameters."""
    records = session.exec(select(Equipment).order_by(Equipment.id)).all()
    grouped = parameters_by_equipment(session, (record.id for record in records))
    return [_to_read(record, grouped[record.id]) for record in records]


def get_equipment(session: Session, equipment_id: int) -> EquipmentRead | None:
    record = session.get(Equipment, equipment_id)
    if record is None:
        return None
    grouped = parameters_by_equipment(session, [record.id])
    return _to_read(record, grouped[record.id])


def create_equipment(session: Session, payload: EquipmentPayload) -> EquipmentRead:
    record = Equipment(name=payload.name, description=payload.description, code=payload.code)
    session.add(record)
    session.commit()
    session.refresh(record)
    logger.info("Equipment created", extra={"equipment_id": record.id, "code": record.code})
    # Parameters may already reference an id before the equipment exists
    grouped = parameters_by_equipment(session, [record.id])
    return _to_read(record, grouped[record.id])


def update_equipment(session: Session, equipment_id: int, payload: EquipmentPayload) -> bool:
    record = session.get(Equipment, equipment_id)
    if record is None:
        return False
    record.name = payload.name
    record.description = payload.description
    record.code = payload.code
    session.add(record)
    session.commit()
    logger.info("Equipment updated", extra={"equipment_id": equipment_id})
    return True


def delete_equipment(session: Session, equipment_id: int) -> bool:
    """Remove an equipment row. Its parameters are left in place as orphans."""

    record = session.get(Equipment, equipment_id)
    if record is None:
        return False
    session.delete(record)
    session.commit()
    logger.info("Equipment deleted", extra={"equipment_id": equipment_id})
    return True


__all__ = [
    "list_equipment",
    "get_equipment",
    "create_equipment",
    "update_equipment",
    "delete_equipment",
]
