from typing import Callable, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel.ext.asyncio.session import AsyncSession

from safemesh.app.services.clock import IClock
from safemesh.app.services.storage import IKeyValueStorage, StorageUnavailable
from safemesh.domain.entities import StorageSlot


class SqlKeyValueStorage(IKeyValueStorage):
    """Key-value slots stored as rows of the storage_slots table"""

    def __init__(self, session_factory: Callable[[], AsyncSession], clock: IClock):
        self.session_factory = session_factory
        self.clock = clock

    async def get(self, key: str) -> Optional[str]:
        try:
            async with self.session_factory() as session:
                slot = await session.get(StorageSlot, key)
                return slot.value if slot is not None else None
        except SQLAlchemyError as exc:
            raise StorageUnavailable(key, "read", str(exc)) from exc

    async def set(self, key: str, value: str) -> None:
        try:
            async with self.session_factory() as session:
                slot = await session.get(StorageSlot, key)
                if slot is None:
                    slot = StorageSlot(key=key, value=value, updated_at=self.clock.now())
                else:
                    slot.value = value
                    slot.updated_at = self.clock.now()
                session.add(slot)
                await session.commit()
        except SQLAlchemyError as exc:
            raise StorageUnavailable(key, "write", str(exc)) from exc

    async def delete(self, key: str) -> None:
        try:
            async with self.session_factory() as session:
                slot = await session.get(StorageSlot, key)
                if slot is not None:
                    await session.delete(slot)
                    await session.commit()
        except SQLAlchemyError as exc:
            raise StorageUnavailable(key, "delete", str(exc)) from exc
