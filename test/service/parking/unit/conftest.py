from unittest.mock import AsyncMock

import pytest

from src.service.parking.app.interface.i_unit_of_work import AbstractUnitOfWork


class FakeUnitOfWork(AbstractUnitOfWork):
    """Unit of work whose repositories are AsyncMocks; records commit and rollback"""

    def __init__(self) -> None:
        self.slots = AsyncMock()
        self.reservations = AsyncMock()
        self.users = AsyncMock()
        self.vehicles = AsyncMock()
        self.committed = False
        self.rolled_back = False

    async def _commit(self) -> None:
        self.committed = True

    async def rollback(self) -> None:
        self.rolled_back = True


@pytest.fixture
def uow() -> FakeUnitOfWork:
    return FakeUnitOfWork()
