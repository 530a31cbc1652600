"""
Unit of Work - shares one database session between repositories

Architecture:
- UoW owns the session lifecycle
- UoW owns commit/rollback
- Repositories receive a session factory that hands back the shared session
- Use cases coordinate repositories through the UoW
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from src.service.parking.app.interface.i_unit_of_work import AbstractUnitOfWork


class SqlAlchemyUnitOfWork(AbstractUnitOfWork):
    """
    SQLAlchemy implementation of Unit of Work

    Usage in use case:
        async with uow:
            slot = await uow.slots.get_for_update(slot_id=slot_id)
            await uow.commit()
    """

    def __init__(self, session_maker: async_sessionmaker[AsyncSession]) -> None:
        self._session_maker = session_maker
        self.session: Optional[AsyncSession] = None

    @asynccontextmanager
    async def _shared_session(self) -> AsyncGenerator[AsyncSession, None]:
        assert self.session is not None, 'Unit of work used outside "async with"'
        yield self.session

    async def __aenter__(self) -> SqlAlchemyUnitOfWork:
        from src.service.parking.driven_adapter.repo.reservation_command_repo_impl import (
            ReservationCommandRepoImpl,
        )
        from src.service.parking.driven_adapter.repo.slot_command_repo_impl import (
            SlotCommandRepoImpl,
        )
        from src.service.parking.driven_adapter.repo.user_query_repo_impl import UserQueryRepoImpl
        from src.service.parking.driven_adapter.repo.vehicle_query_repo_impl import (
            VehicleQueryRepoImpl,
        )

        self.session = self._session_maker()

        # Create repositories with shared session
        self.slots = SlotCommandRepoImpl(session_factory=self._shared_session)
        self.reservations = ReservationCommandRepoImpl(session_factory=self._shared_session)
        self.users = UserQueryRepoImpl(session_factory=self._shared_session)
        self.vehicles = VehicleQueryRepoImpl(session_factory=self._shared_session)

        await super().__aenter__()
        return self

    async def __aexit__(self, *args) -> None:
        try:
            await super().__aexit__(*args)
        finally:
            if self.session is not None:
                await self.session.close()
                self.session = None

    async def _commit(self) -> None:
        assert self.session is not None
        await self.session.commit()

    async def rollback(self) -> None:
        if self.session is not None:
            await self.session.rollback()
