"""Base factory for async SQLAlchemy models."""

from typing import Any, TypeVar, Generic

import factory
from sqlalchemy.ext.asyncio import AsyncSession


T = TypeVar("T")


class AsyncSQLAlchemyModelFactory(factory.Factory, Generic[T]):
    """Builds models with factory-boy and persists them through an AsyncSession.

    The API under test uses its own sessions, so pass ``commit=True`` (or
    commit the session) before exercising an endpoint with the created rows.
    """

    class Meta:
        abstract = True

    @classmethod
    async def create_async(
        cls, session: AsyncSession, commit: bool = False, **kwargs: Any
    ) -> T:
        instance = cls.build(**kwargs)
        session.add(instance)
        await cls._persist(session, commit)
        return instance

    @classmethod
    async def create_batch_async(
        cls, session: AsyncSession, size: int, commit: bool = False, **kwargs: Any
    ) -> list[T]:
        instances = cls.build_batch(size, **kwargs)
        session.add_all(instances)
        await cls._persist(session, commit)
        return instances

    @staticmethod
    async def _persist(session: AsyncSession, commit: bool) -> None:
        if commit:
            await session.commit()
        else:
            await session.flush()
