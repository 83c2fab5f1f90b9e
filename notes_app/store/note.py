"""
Note Store.

Data access layer for the notes table. Handles all database operations
for the NoteEntity model and publishes the observable note list.
"""

from collections.abc import AsyncIterator

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from notes_app.models.note import NoteEntity
from notes_app.store.base import BaseStore


class NoteStore(BaseStore[NoteEntity]):
    """
    Store for the NoteEntity model.

    Inherits get_by_id, count and delete_all from BaseStore and adds the
    note-specific writes plus the live, recency-ordered listing.
    """

    model = NoteEntity

    async def get_all(self) -> list[NoteEntity]:
        """
        Get every note, newest first.

        Ties on timestamp fall back to the higher id first.
        """

        async def query(session: AsyncSession) -> list[NoteEntity]:
            result = await session.execute(
                select(NoteEntity).order_by(
                    NoteEntity.timestamp.desc(),
                    NoteEntity.id.desc(),
                )
            )
            return list(result.scalars().all())

        return await self._read("get_all", query)

    async def observe_all(self) -> AsyncIterator[list[NoteEntity]]:
        """
        Yield the full note list now and again after every committed write.

        The subscription is registered before the first read, so a write
        racing with subscription is never missed. Close the iterator (or
        cancel its consumer) to unsubscribe.
        """
        with self.notifier.subscribe() as subscription:
            while True:
                yield await self.get_all()
                await subscription.wait()

    async def insert(self, entity: NoteEntity) -> None:
        """
        Persist a note.

        A row without id gets a new one from SQLite. A row whose id already
        exists replaces the stored row.

        Raises:
            StorageError: If the database operation fails
        """

        async def statement(session: AsyncSession) -> None:
            if entity.id is None:
                session.add(entity)
            else:
                await session.merge(entity)

        await self._write("insert", statement)

    async def update(self, entity: NoteEntity) -> None:
        """
        Overwrite the row matching entity.id; no-op when it does not exist.

        Raises:
            StorageError: If the database operation fails
        """

        async def statement(session: AsyncSession) -> None:
            await session.execute(
                update(NoteEntity)
                .where(NoteEntity.id == entity.id)
                .values(
                    title=entity.title,
                    content=entity.content,
                    timestamp=entity.timestamp,
                )
            )

        await self._write("update", statement)

    async def delete(self, entity: NoteEntity) -> None:
        """
        Remove the row matching entity.id.

        Raises:
            StorageError: If the database operation fails
        """

        async def statement(session: AsyncSession) -> None:
            await session.execute(delete(NoteEntity).where(NoteEntity.id == entity.id))

        await self._write("delete", statement)
