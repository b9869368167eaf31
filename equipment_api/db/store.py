"""In-memory SQLModel store shared by all requests."""

from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

logger = logging.getLogger(__name__)


class StoreClosedError(RuntimeError):
    """Raised when a session is requested from a store that is not open."""


class Store:
    """Owns the database engine and the lock serializing access to it.

    Every session handed out by :meth:`session` holds the store lock until it
    is closed, so reads and writes never interleave. Requests perform a single
    record operation each, which keeps the critical section short.
    """

    def __init__(self, database_url: str = "sqlite://") -> None:
        self.database_url = database_url
        self._engine: Optional[Engine] = None
        self._lock = threading.Lock()

    @property
    def is_open(self) -> bool:
        return self._engine is not None

    def open(self) -> None:
        if self._engine is not None:
            return
        # Importing the models registers their tables on SQLModel.metadata
        from equipment_api import models  # noqa: F401

        if self.database_url.startswith("sqlite"):
            # One shared connection keeps an in-memory database alive across sessions
            engine = create_engine(
                self.database_url,
                echo=False,
                connect_args={"check_same_thread": False},
                poolclass=StaticPool,
            )
        else:
            engine = create_engine(self.database_url, echo=False, pool_pre_ping=True)
        SQLModel.metadata.create_all(engine)
        self._engine = engine
        logger.info("Store opened", extra={"database_url": self.database_url})

    def close(self) -> None:
        with self._lock:
            if self._engine is None:
                return
            self._engine.dispose()
            self._engine = None
        logger.info("Store closed")

    @contextmanager
    def session(self) -> Iterator[Session]:
        """Yield a session holding the store lock for its whole lifetime."""
        with self._lock:
            if self._engine is None:
                raise StoreClosedError("store is not open")
            session = Session(self._engine)
            try:
                yield session
            finally:
                session.close()


__all__ = ["Store", "StoreClosedError"]
