"""
Slot listing strategies

RichSlotReader   - parking_lots table and parking_slots.fixed_for both exist:
                   join lot name/owner and include fixed_for
SimpleSlotReader - legacy schema: plain slot columns, lot fields and
                   fixed_for reported as None

select_slot_reader() inspects the schema once at startup; the chosen reader
is bound into the DI container and never re-evaluated per request.
"""

from typing import AsyncContextManager, Callable, List

from sqlalchemy import inspect, select, text
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.database.orm_db_setting import Database
from src.platform.logging.loguru_io import Logger
from src.service.parking.app.dto.slot_view import SlotView
from src.service.parking.app.interface.i_slot_reader import ISlotReader
from src.service.parking.driven_adapter.model.lot_model import LotModel
from src.service.parking.driven_adapter.model.slot_model import SlotModel


class RichSlotReader(ISlotReader):
    name = 'rich'

    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io(truncate_content=True)
    async def list_slots(self) -> List[SlotView]:
        async with self.session_factory() as session:
            stmt = (
                select(SlotModel, LotModel.name, LotModel.owner)
                .join(LotModel, SlotModel.lot_id == LotModel.lot_id)
                .order_by(SlotModel.lot_id, SlotModel.slot_name)
            )
            result = await session.execute(stmt)

            return [
                SlotView(
                    slot_id=slot.slot_id,
                    lot_id=slot.lot_id,
                    lot_name=lot_name,
                    lot_owner=lot_owner,
                    slot_name=slot.slot_name,
                    slot_type=slot.slot_type,
                    status=slot.status,
                    fixed_for=slot.fixed_for,
                )
                for slot, lot_name, lot_owner in result.all()
            ]


class SimpleSlotReader(ISlotReader):
    name = 'simple'

    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io(truncate_content=True)
    async def list_slots(self) -> List[SlotView]:
        async with self.session_factory() as session:
            # Raw SQL: the ORM model maps fixed_for, which a legacy table lacks
            result = await session.execute(
                text(
                    'SELECT slot_id, lot_id, slot_name, slot_type, status '
                    'FROM parking_slots ORDER BY slot_name'
                )
            )

            return [
                SlotView(
                    slot_id=row.slot_id,
                    lot_id=row.lot_id,
                    slot_name=row.slot_name,
                    slot_type=row.slot_type,
                    status=row.status,
                )
                for row in result
            ]


def _has_rich_slot_schema(sync_conn: Connection) -> bool:
    inspector = inspect(sync_conn)
    if not inspector.has_table(LotModel.__tablename__):
        return False
    if not inspector.has_table(SlotModel.__tablename__):
        return False
    columns = {column['name'] for column in inspector.get_columns(SlotModel.__tablename__)}
    return 'fixed_for' in columns


async def select_slot_reader(database: Database) -> ISlotReader:
    try:
        async with database.engine.connect() as conn:
            rich = await conn.run_sync(_has_rich_slot_schema)
    except Exception as e:
        Logger.base.warning(f'Schema detection failed, using simple slots query: {e}')
        return SimpleSlotReader(session_factory=database.session)

    if rich:
        Logger.base.info('Schema check: using rich slots join (includes lot info and fixed_for)')
        return RichSlotReader(session_factory=database.session)

    Logger.base.info('Schema check: parking_lots or fixed_for missing, using simple slots query')
    return SimpleSlotReader(session_factory=database.session)
