"""
Unit tests for parking domain entities

Test Coverage:
1. Slot access rules (fixed_for role restriction)
2. Slot availability
3. Vehicle/slot type compatibility, including the handicap exception
4. Reservation completion
5. User, vehicle and payment creation validation
"""

import pytest

from src.platform.exception.exceptions import ConflictError, DomainError, ForbiddenError
from src.service.parking.domain.entity.payment_entity import PaymentEntity
from src.service.parking.domain.entity.reservation_entity import ReservationEntity
from src.service.parking.domain.entity.slot_entity import SlotEntity
from src.service.parking.domain.entity.user_entity import UserEntity
from src.service.parking.domain.entity.vehicle_entity import VehicleEntity
from src.service.parking.domain.enum import (
    PaymentStatus,
    ReservationStatus,
    SlotStatus,
    SlotType,
    VehicleType,
)


pytestmark = pytest.mark.unit


def _slot(
    slot_type: SlotType = SlotType.CAR,
    status: SlotStatus = SlotStatus.AVAILABLE,
    fixed_for: str | None = None,
) -> SlotEntity:
    return SlotEntity(
        id=1,
        lot_id=1,
        slot_name='S1',
        slot_type=slot_type,
        status=status,
        fixed_for=fixed_for,
    )


def _vehicle(vehicle_type: VehicleType) -> VehicleEntity:
    return VehicleEntity(id=1, user_id=1, reg_no='KA01AB1234', type=vehicle_type)


class TestSlotRoleRestriction:
    def test_unrestricted_slot_allows_any_role(self):
        _slot().ensure_role_allowed(UserEntity(id=1, name='Meera', role='visitor'))

    def test_matching_role_is_allowed(self):
        _slot(fixed_for='staff').ensure_role_allowed(UserEntity(id=1, name='Vikram', role='staff'))

    def test_other_role_is_forbidden(self):
        with pytest.raises(ForbiddenError) as exc_info:
            _slot(fixed_for='staff').ensure_role_allowed(
                UserEntity(id=1, name='Asha', role='student')
            )

        assert exc_info.value.message == 'Slot reserved for staff only'


class TestSlotAvailability:
    def test_available_slot_passes(self):
        _slot().ensure_available()

    def test_reserved_slot_conflicts(self):
        with pytest.raises(ConflictError) as exc_info:
            _slot(status=SlotStatus.RESERVED).ensure_available()

        assert exc_info.value.status_code == 409


class TestSlotTypeCompatibility:
    @pytest.mark.parametrize(
        'vehicle_type, slot_type',
        [
            (VehicleType.CAR, SlotType.CAR),
            (VehicleType.BIKE, SlotType.BIKE),
            (VehicleType.ELECTRIC, SlotType.ELECTRIC),
            (VehicleType.CAR, SlotType.HANDICAP),
        ],
    )
    def test_compatible_pairs(self, vehicle_type, slot_type):
        _slot(slot_type=slot_type).ensure_fits(_vehicle(vehicle_type))

    @pytest.mark.parametrize(
        'vehicle_type, slot_type',
        [
            (VehicleType.BIKE, SlotType.CAR),
            (VehicleType.CAR, SlotType.BIKE),
            (VehicleType.ELECTRIC, SlotType.CAR),
            (VehicleType.BIKE, SlotType.HANDICAP),
            (VehicleType.ELECTRIC, SlotType.HANDICAP),
        ],
    )
    def test_incompatible_pairs_are_forbidden(self, vehicle_type, slot_type):
        with pytest.raises(ForbiddenError) as exc_info:
            _slot(slot_type=slot_type).ensure_fits(_vehicle(vehicle_type))

        assert 'does not match slot type' in exc_info.value.message


class TestReservationEntity:
    def test_start_is_active_without_end_time(self):
        reservation = ReservationEntity.start(user_id=1, vehicle_id=2, slot_id=3)

        assert reservation.status == ReservationStatus.ACTIVE
        assert reservation.is_active
        assert reservation.end_time is None
        assert reservation.start_time is not None

    def test_complete_sets_status_and_end_time(self):
        reservation = ReservationEntity.start(user_id=1, vehicle_id=2, slot_id=3)

        reservation.complete()

        assert reservation.status == ReservationStatus.COMPLETED
        assert reservation.end_time is not None
        assert reservation.end_time >= reservation.start_time

    def test_complete_twice_conflicts(self):
        reservation = ReservationEntity.start(user_id=1, vehicle_id=2, slot_id=3).complete()

        with pytest.raises(ConflictError, match='Reservation not active'):
            reservation.complete()


class TestCreation:
    @pytest.mark.parametrize('name, role', [('', 'student'), ('Asha', ''), ('  ', '  ')])
    def test_user_requires_name_and_role(self, name, role):
        with pytest.raises(DomainError, match='name and role required'):
            UserEntity.create(name=name, role=role)

    def test_user_accepts_unknown_role(self):
        user = UserEntity.create(name='Ravi', role='contractor')

        assert user.role == 'contractor'

    def test_vehicle_requires_reg_no(self):
        with pytest.raises(DomainError):
            VehicleEntity.create(user_id=1, reg_no=' ', type='car')

    def test_vehicle_normalizes_type(self):
        vehicle = VehicleEntity.create(user_id=1, reg_no='KA01', type='EV')

        assert vehicle.type is VehicleType.ELECTRIC

    @pytest.mark.parametrize('amount', [0, -5, None])
    def test_payment_rejects_non_positive_amount(self, amount):
        with pytest.raises(DomainError, match='Invalid amount.'):
            PaymentEntity.record(reservation_id=1, amount=amount, mode='cash')

    def test_payment_is_done_with_timestamp(self):
        payment = PaymentEntity.record(reservation_id=99, amount=20.0, mode='upi')

        assert payment.status == PaymentStatus.DONE
        assert payment.paid_at is not None
