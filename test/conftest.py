"""
Test Configuration and Fixtures

This module provides:
- Early environment setup (log directory) before application modules import
- A fresh SQLite file database per test, shared by the async and sync fixtures
- An API client running the production app against that database
- Seed helpers for lots, slots, users and vehicles

Architecture:
- Unit tests (test/**/unit/): mock every driven adapter, no database
- Integration tests: real SQLite database through aiosqlite, created per test
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# The loguru config reads TEST_LOG_DIR when it is first imported
# =============================================================================
import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    """Set test environment variables before any module imports."""
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)

    # Keep the default database out of reach; every test points at its own file
    os.environ['DATABASE_URL'] = 'sqlite+aiosqlite:///:memory:'
    os.environ.setdefault('SQLITE_BUSY_TIMEOUT', '10')


# Call immediately to set env vars before any imports
_early_setup_test_environment()

from collections.abc import AsyncGenerator, Generator  # noqa: E402
from typing import Optional  # noqa: E402

from dependency_injector import providers  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
import pytest  # noqa: E402
from sqlalchemy import Engine, create_engine, func, select  # noqa: E402
from sqlalchemy.orm import Session  # noqa: E402

from src.platform.config.core_setting import Settings  # noqa: E402
from src.platform.config.di import container  # noqa: E402
from src.platform.database.orm_db_setting import (  # noqa: E402
    Base,
    Database,
    create_db_and_tables,
)
from src.service.parking.domain.enum.vehicle_type import VehicleType  # noqa: E402
from src.service.parking.driven_adapter.model import (  # noqa: E402
    LotModel,
    PaymentModel,
    ReservationModel,
    SlotModel,
    UserModel,
    VehicleModel,
)


# =============================================================================
# Seed Helpers
# =============================================================================
class ParkingSeeder:
    """Insert and inspect rows through a synchronous session on the test database"""

    def __init__(self, engine: Engine) -> None:
        self.engine = engine

    def _add(self, model):
        with Session(self.engine) as session:
            session.add(model)
            session.commit()
            session.refresh(model)
            return model

    def lot(self, *, name: str = 'Main Lot', owner: Optional[str] = 'public') -> int:
        return self._add(LotModel(name=name, owner=owner)).lot_id

    def slot(
        self,
        *,
        lot_id: int,
        slot_name: str,
        slot_type: str = 'car',
        status: str = 'available',
        fixed_for: Optional[str] = None,
    ) -> int:
        return self._add(
            SlotModel(
                lot_id=lot_id,
                slot_name=slot_name,
                slot_type=slot_type,
                status=status,
                fixed_for=fixed_for,
            )
        ).slot_id

    def user(self, *, name: str, role: str) -> int:
        return self._add(UserModel(name=name, role=role)).user_id

    def vehicle(self, *, user_id: int, reg_no: str, type: str = 'car') -> int:
        return self._add(
            VehicleModel(user_id=user_id, reg_no=reg_no, type=VehicleType.parse(type).code)
        ).vehicle_id

    def slot_status(self, slot_id: int) -> str:
        with Session(self.engine) as session:
            return session.execute(
                select(SlotModel.status).where(SlotModel.slot_id == slot_id)
            ).scalar_one()

    def reservation(self, res_id: int) -> Optional[ReservationModel]:
        with Session(self.engine) as session:
            return session.get(ReservationModel, res_id)

    def vehicle_code(self, vehicle_id: int) -> str:
        with Session(self.engine) as session:
            return session.execute(
                select(VehicleModel.type).where(VehicleModel.vehicle_id == vehicle_id)
            ).scalar_one()

    def payment(self, payment_id: int) -> Optional[PaymentModel]:
        with Session(self.engine) as session:
            return session.get(PaymentModel, payment_id)

    def count_reservations(self, *, slot_id: int, status: Optional[str] = None) -> int:
        stmt = select(func.count(ReservationModel.res_id)).where(
            ReservationModel.slot_id == slot_id
        )
        if status is not None:
            stmt = stmt.where(ReservationModel.status == status)
        with Session(self.engine) as session:
            return session.execute(stmt).scalar_one()

    def assert_slot_invariant(self) -> None:
        """Every slot is reserved exactly when one active reservation points at it"""
        with Session(self.engine) as session:
            for slot in session.execute(select(SlotModel)).scalars():
                active = session.execute(
                    select(func.count(ReservationModel.res_id)).where(
                        ReservationModel.slot_id == slot.slot_id,
                        ReservationModel.status == 'active',
                    )
                ).scalar_one()
                assert active <= 1, f'slot {slot.slot_id} has {active} active reservations'
                assert (slot.status == 'reserved') == (active == 1), (
                    f'slot {slot.slot_id} status={slot.status} active_reservations={active}'
                )


# =============================================================================
# Database Fixtures
# =============================================================================
@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    return tmp_path / 'parking_test.db'


@pytest.fixture
def test_settings(db_path: Path) -> Settings:
    return Settings(DATABASE_URL=f'sqlite+aiosqlite:///{db_path}')  # type: ignore[call-arg]


@pytest.fixture
async def database(test_settings: Settings) -> AsyncGenerator[Database, None]:
    """Async database for use-case and repository integration tests"""
    db = Database(config=test_settings)
    await create_db_and_tables(db)

    container.reset_singletons()
    container.database.override(providers.Object(db))

    yield db

    container.database.reset_override()
    container.reset_singletons()
    await db.dispose()


@pytest.fixture
def sync_engine(db_path: Path) -> Generator[Engine, None, None]:
    """
    Plain sqlite engine on the same file.

    API tests seed and inspect through it because the TestClient runs the app
    on its own event loop, which must own every aiosqlite connection.
    """
    engine = create_engine(f'sqlite:///{db_path}')
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def seeder(sync_engine: Engine) -> ParkingSeeder:
    return ParkingSeeder(sync_engine)


# =============================================================================
# API Client
# =============================================================================
@pytest.fixture
def client(test_settings: Settings, sync_engine: Engine) -> Generator[TestClient, None, None]:
    from src.main import app

    container.reset_singletons()
    container.database.override(providers.Singleton(Database, config=test_settings))

    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client

    container.database.reset_override()
    container.reset_singletons()
