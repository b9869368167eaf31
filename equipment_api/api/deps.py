"""API dependencies."""

from __future__ import annotations

from typing import Annotated

from fastapi import Path, Request

from equipment_api.db.store import Store
from equipment_api.models.schemas import INT32_MAX, INT32_MIN

# Out-of-range ids are rejected before they reach the database
RecordId = Annotated[int, Path(ge=INT32_MIN, le=INT32_MAX)]


def get_store(request: Request) -> Store:
    """Return the store owned by the running application.

    Handlers open their own ``store.session()`` so the lock is taken and
    released on the same worker thread.
    """
    return request.app.state.store
