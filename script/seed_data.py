#!/usr/bin/env python3
"""
Database Seed Script
Populate demo data into the parking database

Features:
1. Create Lots and Slots - a staff lot and a student lot with mixed slot types
2. Create Users - one per known role
3. Register Vehicles - through the same use case the API calls

Notes:
- Tables are created if missing; existing rows are left alone
- Lots and slots have no API, so they go straight through the ORM
"""

import asyncio
from dataclasses import dataclass
from typing import Optional

from sqlalchemy import func, select

from src.platform.config.di import container
from src.platform.database.orm_db_setting import Database, create_db_and_tables
from src.service.parking.app.command.create_user_use_case import CreateUserUseCase
from src.service.parking.app.command.register_vehicle_use_case import RegisterVehicleUseCase
from src.service.parking.domain.enum.slot_status import SlotStatus
from src.service.parking.domain.enum.slot_type import SlotType
from src.service.parking.driven_adapter.model.lot_model import LotModel
from src.service.parking.driven_adapter.model.slot_model import SlotModel


@dataclass
class SlotConfig:
    """Slot seed configuration"""
    slot_name: str
    slot_type: SlotType
    fixed_for: Optional[str] = None


@dataclass
class LotConfig:
    """Lot seed configuration"""
    name: str
    owner: str
    slots: list[SlotConfig]


DEMO_LOTS = [
    LotConfig(
        name='Admin Block',
        owner='staff',
        slots=[
            SlotConfig('A1', SlotType.CAR, fixed_for='staff'),
            SlotConfig('A2', SlotType.CAR, fixed_for='staff'),
            SlotConfig('A3', SlotType.HANDICAP),
            SlotConfig('A4', SlotType.ELECTRIC, fixed_for='staff'),
        ],
    ),
    LotConfig(
        name='Hostel Gate',
        owner='student',
        slots=[
            SlotConfig('H1', SlotType.CAR),
            SlotConfig('H2', SlotType.CAR),
            SlotConfig('H3', SlotType.BIKE, fixed_for='student'),
            SlotConfig('H4', SlotType.BIKE),
            SlotConfig('H5', SlotType.ELECTRIC),
        ],
    ),
]

# (name, role, [(reg_no, type)])
DEMO_USERS = [
    ('Asha Rao', 'student', [('KA01AB1234', 'car'), ('KA01XY0001', 'bike')]),
    ('Vikram Shah', 'staff', [('KA02CD5678', 'ev')]),
    ('Meera Iyer', 'visitor', [('MH12EF9012', 'car')]),
    ('Ravi Kumar', 'security', [('KA03GH3456', 'bike')]),
]


async def create_lots_and_slots(database: Database) -> int:
    async with database.session() as session:
        existing = (await session.execute(select(func.count(LotModel.lot_id)))).scalar() or 0
        if existing:
            print(f'   ⏭️ {existing} lots already present, skipping lots and slots')
            return 0

        slot_count = 0
        for lot_config in DEMO_LOTS:
            lot = LotModel(name=lot_config.name, owner=lot_config.owner)
            session.add(lot)
            await session.flush()

            for slot_config in lot_config.slots:
                session.add(
                    SlotModel(
                        lot_id=lot.lot_id,
                        slot_name=slot_config.slot_name,
                        slot_type=slot_config.slot_type.value,
                        status=SlotStatus.AVAILABLE.value,
                        fixed_for=slot_config.fixed_for,
                    )
                )
                slot_count += 1

        await session.commit()
        print(f'   ✅ Created {len(DEMO_LOTS)} lots with {slot_count} slots')
        return slot_count


async def create_users_and_vehicles() -> None:
    create_user = CreateUserUseCase(user_command_repo=container.user_command_repo())
    register_vehicle = RegisterVehicleUseCase(
        user_query_repo=container.user_query_repo(),
        vehicle_command_repo=container.vehicle_command_repo(),
    )

    existing = await container.user_query_repo().list_all()
    if existing:
        print(f'   ⏭️ {len(existing)} users already present, skipping users and vehicles')
        return

    for name, role, vehicles in DEMO_USERS:
        user = await create_user.execute(name=name, role=role)
        print(f'   👤 user_id={user.id} {name} ({role})')
        for reg_no, vehicle_type in vehicles:
            vehicle = await register_vehicle.execute(
                user_id=user.id or 0, reg_no=reg_no, type=vehicle_type
            )
            print(f'      🚗 vehicle_id={vehicle.id} {reg_no} ({vehicle.type})')


async def main() -> None:
    print('🌱 Starting data seeding...')
    print('=' * 50)

    database = container.database()
    try:
        await create_db_and_tables(database)

        print('🅿️ Creating lots and slots...')
        await create_lots_and_slots(database)

        print('👥 Creating users and vehicles...')
        await create_users_and_vehicles()

        print('=' * 50)
        print('✅ Data seeding completed!')

    except Exception as e:
        print(f'❌ Seeding failed: {e}')
        raise SystemExit(1) from e
    finally:
        await database.dispose()


if __name__ == '__main__':
    asyncio.run(main())
