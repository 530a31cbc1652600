"""
Integration tests for the reservation engine on a real SQLite database

Test Coverage:
1. Concurrent reservations of one slot: exactly one wins, the rest conflict
2. Reserve -> Complete and Reserve -> Cancel round trips
3. Slot/reservation invariant after mixed sequences
4. Failed reservations leave no trace
"""

import asyncio

import pytest

from src.platform.database.orm_db_setting import Database
from src.platform.database.unit_of_work import SqlAlchemyUnitOfWork
from src.platform.exception.exceptions import ConflictError, ForbiddenError, NotFoundError
from src.service.parking.app.command.cancel_reservation_use_case import CancelReservationUseCase
from src.service.parking.app.command.complete_reservation_use_case import (
    CompleteReservationUseCase,
)
from src.service.parking.app.command.reserve_slot_use_case import ReserveSlotUseCase


def _reserve_use_case(database: Database) -> ReserveSlotUseCase:
    return ReserveSlotUseCase(uow=SqlAlchemyUnitOfWork(database.session_maker))


def _complete_use_case(database: Database) -> CompleteReservationUseCase:
    return CompleteReservationUseCase(uow=SqlAlchemyUnitOfWork(database.session_maker))


def _cancel_use_case(database: Database) -> CancelReservationUseCase:
    return CancelReservationUseCase(uow=SqlAlchemyUnitOfWork(database.session_maker))


@pytest.fixture
def parking(seeder):
    """One lot with a car slot, a bike slot and a staff-only car slot; one student with a car"""
    lot_id = seeder.lot(name='Hostel Gate', owner='student')
    student_id = seeder.user(name='Asha Rao', role='student')
    return {
        'car_slot': seeder.slot(lot_id=lot_id, slot_name='S1', slot_type='car'),
        'bike_slot': seeder.slot(lot_id=lot_id, slot_name='S2', slot_type='bike'),
        'staff_slot': seeder.slot(
            lot_id=lot_id, slot_name='S3', slot_type='car', fixed_for='staff'
        ),
        'student': student_id,
        'car': seeder.vehicle(user_id=student_id, reg_no='KA01AB1234', type='car'),
    }


class TestConcurrentReservation:
    async def test_only_one_of_many_concurrent_reservations_wins(self, database, seeder, parking):
        contenders = 5
        user_ids = [seeder.user(name=f'User {i}', role='visitor') for i in range(contenders)]
        vehicle_ids = [
            seeder.vehicle(user_id=user_id, reg_no=f'RACE{i:03d}', type='car')
            for i, user_id in enumerate(user_ids)
        ]

        results = await asyncio.gather(
            *[
                _reserve_use_case(database).execute(
                    user_id=user_id, vehicle_id=vehicle_id, slot_id=parking['car_slot']
                )
                for user_id, vehicle_id in zip(user_ids, vehicle_ids)
            ],
            return_exceptions=True,
        )

        winners = [r for r in results if not isinstance(r, BaseException)]
        losers = [r for r in results if isinstance(r, BaseException)]
        assert len(winners) == 1
        assert len(losers) == contenders - 1
        assert all(isinstance(e, ConflictError) for e in losers), losers

        assert seeder.slot_status(parking['car_slot']) == 'reserved'
        assert seeder.count_reservations(slot_id=parking['car_slot']) == 1
        seeder.assert_slot_invariant()


class TestReservationRoundTrips:
    async def test_reserve_then_complete(self, database, seeder, parking):
        reservation = await _reserve_use_case(database).execute(
            user_id=parking['student'], vehicle_id=parking['car'], slot_id=parking['car_slot']
        )
        assert seeder.slot_status(parking['car_slot']) == 'reserved'

        await _complete_use_case(database).execute(res_id=reservation.id)

        row = seeder.reservation(reservation.id)
        assert row.status == 'completed'
        assert row.end_time is not None
        assert seeder.slot_status(parking['car_slot']) == 'available'
        seeder.assert_slot_invariant()

    async def test_reserve_then_cancel(self, database, seeder, parking):
        reservation = await _reserve_use_case(database).execute(
            user_id=parking['student'], vehicle_id=parking['car'], slot_id=parking['car_slot']
        )

        res_id = await _cancel_use_case(database).execute(res_id=reservation.id)

        assert res_id == reservation.id
        assert seeder.reservation(reservation.id) is None
        assert seeder.slot_status(parking['car_slot']) == 'available'
        seeder.assert_slot_invariant()

    async def test_completing_twice_conflicts(self, database, seeder, parking):
        reservation = await _reserve_use_case(database).execute(
            user_id=parking['student'], vehicle_id=parking['car'], slot_id=parking['car_slot']
        )
        await _complete_use_case(database).execute(res_id=reservation.id)

        with pytest.raises(ConflictError):
            await _complete_use_case(database).execute(res_id=reservation.id)

    async def test_cancelling_a_completed_reservation_keeps_new_holder(
        self, database, seeder, parking
    ):
        first = await _reserve_use_case(database).execute(
            user_id=parking['student'], vehicle_id=parking['car'], slot_id=parking['car_slot']
        )
        await _complete_use_case(database).execute(res_id=first.id)

        visitor = seeder.user(name='Meera Iyer', role='visitor')
        visitor_car = seeder.vehicle(user_id=visitor, reg_no='MH12EF9012', type='car')
        second = await _reserve_use_case(database).execute(
            user_id=visitor, vehicle_id=visitor_car, slot_id=parking['car_slot']
        )

        await _cancel_use_case(database).execute(res_id=first.id)

        assert seeder.reservation(first.id) is None
        assert seeder.reservation(second.id).status == 'active'
        assert seeder.slot_status(parking['car_slot']) == 'reserved'
        seeder.assert_slot_invariant()

    async def test_slot_can_be_reserved_again_after_release(self, database, seeder, parking):
        for _ in range(3):
            reservation = await _reserve_use_case(database).execute(
                user_id=parking['student'],
                vehicle_id=parking['car'],
                slot_id=parking['car_slot'],
            )
            await _complete_use_case(database).execute(res_id=reservation.id)

        assert seeder.count_reservations(slot_id=parking['car_slot'], status='completed') == 3
        seeder.assert_slot_invariant()


class TestFailedReservationLeavesNoTrace:
    async def test_second_reservation_of_same_slot_conflicts(self, database, seeder, parking):
        await _reserve_use_case(database).execute(
            user_id=parking['student'], vehicle_id=parking['car'], slot_id=parking['car_slot']
        )

        with pytest.raises(ConflictError, match='Slot not available'):
            await _reserve_use_case(database).execute(
                user_id=parking['student'],
                vehicle_id=parking['car'],
                slot_id=parking['car_slot'],
            )

        assert seeder.count_reservations(slot_id=parking['car_slot']) == 1
        seeder.assert_slot_invariant()

    async def test_staff_slot_is_forbidden_for_student(self, database, seeder, parking):
        with pytest.raises(ForbiddenError, match='Slot reserved for staff only'):
            await _reserve_use_case(database).execute(
                user_id=parking['student'],
                vehicle_id=parking['car'],
                slot_id=parking['staff_slot'],
            )

        assert seeder.slot_status(parking['staff_slot']) == 'available'
        assert seeder.count_reservations(slot_id=parking['staff_slot']) == 0

    async def test_car_on_bike_slot_is_forbidden(self, database, seeder, parking):
        with pytest.raises(ForbiddenError):
            await _reserve_use_case(database).execute(
                user_id=parking['student'],
                vehicle_id=parking['car'],
                slot_id=parking['bike_slot'],
            )

        assert seeder.slot_status(parking['bike_slot']) == 'available'
        seeder.assert_slot_invariant()

    async def test_unknown_slot_is_not_found(self, database, seeder, parking):
        with pytest.raises(NotFoundError, match='Slot not found'):
            await _reserve_use_case(database).execute(
                user_id=parking['student'], vehicle_id=parking['car'], slot_id=9999
            )

    async def test_unknown_reservation_cannot_be_cancelled(self, database):
        with pytest.raises(NotFoundError, match='Reservation not found'):
            await _cancel_use_case(database).execute(res_id=9999)
