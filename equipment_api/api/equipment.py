"""Equipment CRUD endpoints."""

from __future__ import annotations

import logging
from typing import Any, List

from fastapi import APIRouter, Depends, Request, Response, status

from equipment_api.api.deps import RecordId, get_store
from equipment_api.db.store import Store
from equipment_api.models import EquipmentPayload, EquipmentRead
from equipment_api.services.equipment import (
    create_equipment,
    delete_equipment,
    get_equipment,
    list_equipment,
    update_equipment,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/equipment", tags=["equipment"])


def _not_found(equipment_id: int) -> Response:
    logger.warning("Equipment not found", extra={"equipment_id": equipment_id})
    return Response(status_code=status.HTTP_404_NOT_FOUND)


@router.get("", response_model=List[EquipmentRead])
def read_equipment_list(store: Store = Depends(get_store)) -> Any:
    with store.session() as session:
        return list_equipment(session)


@router.get(
    "/{equipment_id}",
    response_model=EquipmentRead,
    responses={404: {"description": "Equipment not found"}},
)
def read_equipment(equipment_id: RecordId, store: Store = Depends(get_store)) -> Any:
    with store.session() as session:
        record = get_equipment(session, equipment_id)
    if record is None:
        return _not_found(equipment_id)
    return record


@router.post("", response_model=EquipmentRead, status_code=status.HTTP_201_CREATED)
def create_equipment_endpoint(
    payload: EquipmentPayload,
    request: Request,
    response: Response,
    store: Store = Depends(get_store),
) -> Any:
    with store.session() as session:
        record = create_equipment(session, payload)
    response.headers["Location"] = str(
        request.app.url_path_for("read_equipment", equipment_id=str(record.id))
    )
    return record


@router.put(
    "/{equipment_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={404: {"description": "Equipment not found"}},
)
def update_equipment_endpoint(
    equipment_id: RecordId, payload: EquipmentPayload, store: Store = Depends(get_store)
) -> Response:
    with store.session() as session:
        updated = update_equipment(session, equipment_id, payload)
    if not updated:
        return _not_found(equipment_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{equipment_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={404: {"description": "Equipment not found"}},
)
def delete_equipment_endpoint(equipment_id: RecordId, store: Store = Depends(get_store)) -> Response:
    with store.session() as session:
        deleted = delete_equipment(session, equipment_id)
    if not deleted:
        return _not_found(equipment_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


__all__ = ["router"]
