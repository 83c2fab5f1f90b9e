"""
Base Store.

Base class for table stores with common operations. A store owns the
session lifecycle: each operation opens its own session and, for writes,
its own transaction, so every call is atomic on its own and nothing spans
calls. Writes are serialized through a lock and announced on the store's
ChangeNotifier once committed.
"""

import asyncio
from collections.abc import Awaitable, Callable
from typing import Any, Generic, TypeVar

from sqlalchemy import delete, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from notes_app.core.exceptions import StorageError
from notes_app.core.logging import get_logger, log_with_source
from notes_app.events.broadcast import ChangeNotifier
from notes_app.models.base import Base

logger = get_logger(__name__)

ModelType = TypeVar("ModelType", bound=Base)
T = TypeVar("T")


class BaseStore(Generic[ModelType]):
    """
    Base store with common operations.

    Subclasses should set the model class:

        class NoteStore(BaseStore[NoteEntity]):
            model = NoteEntity
    """

    model: type[ModelType]

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        notifier: ChangeNotifier | None = None,
    ) -> None:
        self._session_factory = session_factory
        self.notifier = notifier or ChangeNotifier(self.model.__tablename__)
        self._write_lock = asyncio.Lock()

    async def _read(
        self,
        operation: str,
        query: Callable[[AsyncSession], Awaitable[T]],
    ) -> T:
        """
        Run a read-only query in a fresh session.

        Raises:
            StorageError: If the database operation fails
        """
        try:
            async with self._session_factory() as session:
                return await query(session)
        except SQLAlchemyError as e:
            log_with_source(
                logger, "store", "error", "Database read failed",
                operation=operation, error=str(e),
            )
            raise StorageError(f"Database operation failed: {operation}", operation=operation) from e

    async def _write(
        self,
        operation: str,
        statement: Callable[[AsyncSession], Awaitable[T]],
    ) -> T:
        """
        Run a mutation in its own transaction, then notify observers.

        Raises:
            StorageError: If the database operation fails
        """
        async with self._write_lock:
            try:
                async with self._session_factory() as session:
                    async with session.begin():
                        result = await statement(session)
            except SQLAlchemyError as e:
                log_with_source(
                    logger, "store", "error", "Database write failed",
                    operation=operation, error=str(e),
                )
                raise StorageError(f"Database operation failed: {operation}", operation=operation) from e

        log_with_source(logger, "store", "debug", "Database write committed", operation=operation)
        self.notifier.notify()
        return result

    async def get_by_id(self, id: int) -> ModelType | None:
        """Get a single record by ID, returning None if not found."""

        async def query(session: AsyncSession) -> ModelType | None:
            return await session.get(self.model, id)

        return await self._read("get_by_id", query)

    async def count(self) -> int:
        """Get the number of records in the table."""

        async def query(session: AsyncSession) -> int:
            result = await session.execute(select(func.count()).select_from(self.model))
            return result.scalar_one()

        return await self._read("count", query)

    async def delete_all(self) -> None:
        """Remove every record in a single statement."""

        async def statement(session: AsyncSession) -> Any:
            await session.execute(delete(self.model))

        await self._write("delete_all", statement)
