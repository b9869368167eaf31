"""Parameter CRUD endpoints."""

from __future__ import annotations

import logging
from typing import Any, List

from fastapi import APIRouter, Depends, Request, Response, status

from equipment_api.api.deps import RecordId, get_store
from equipment_api.db.store import Store
from equipment_api.models import ParameterPayload, ParameterRead
from equipment_api.services.parameters import (
    create_parameter,
    delete_parameter,
    get_parameter,
    list_parameters,
    update_parameter,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/parameter", tags=["parameter"])


def _not_found(parameter_id: int) -> Response:
    logger.warning("Parameter not found", extra={"parameter_id": parameter_id})
    return Response(status_code=status.HTTP_404_NOT_FOUND)


@router.get("", response_model=List[ParameterRead])
def read_parameter_list(store: Store = Depends(get_store)) -> Any:
    with store.session() as session:
        return list_parameters(session)


@router.get(
    "/{parameter_id}",
    response_model=ParameterRead,
    responses={404: {"description": "Parameter not found"}},
)
def read_parameter(parameter_id: RecordId, store: Store = Depends(get_store)) -> Any:
    with store.session() as session:
        record = get_parameter(session, parameter_id)
    if record is None:
        return _not_found(parameter_id)
    return record


@router.post("", response_model=ParameterRead, status_code=status.HTTP_201_CREATED)
def create_parameter_endpoint(
    payload: ParameterPayload,
    request: Request,
    response: Response,
    store: Store = Depends(get_store),
) -> Any:
    with store.session() as session:
        record = create_parameter(session, payload)
    response.headers["Location"] = str(
        request.app.url_path_for("read_parameter", parameter_id=str(record.id))
    )
    return record


@router.put(
    "/{parameter_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={404: {"description": "Parameter not found"}},
)
def update_parameter_endpoint(
    parameter_id: RecordId, payload: ParameterPayload, store: Store = Depends(get_store)
) -> Response:
    """Replace name, description and equipment code. ``equipmentId`` in the body is ignored."""
    with store.session() as session:
        updated = update_parameter(session, parameter_id, payload)
    if not updated:
        return _not_found(parameter_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{parameter_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={404: {"description": "Parameter not found"}},
)
def delete_parameter_endpoint(parameter_id: RecordId, store: Store = Depends(get_store)) -> Response:
    with store.session() as session:
        deleted = delete_parameter(session, parameter_id)
    if not deleted:
        return _not_found(parameter_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


__all__ = ["router"]
