"""
Value-type and error-taxonomy tests for the reservation model.
"""

from decimal import Decimal

import pytest

from src.domain.reservation import (
    DuplicateGuestInRequest,
    Guest,
    GuestAlreadyReserved,
    InvalidReservationRequest,
    Reservation,
    ReservationError,
    ReservationNotFound,
)


def test_guests_equal_on_name_and_age():
    assert Guest("Camilo Blanes", 30) == Guest("Camilo Blanes", 30)
    assert Guest("Camilo Blanes", 30) != Guest("Camilo Blanes", 31)
    assert Guest("Camilo Blanes", 30) != Guest("Lolita Flores", 30)


@pytest.mark.parametrize("name", ["", "   "])
def test_guest_name_required(name):
    with pytest.raises(ValueError):
        Guest(name, 30)


def test_guest_age_non_negative():
    assert Guest("Baby", 0).age == 0
    with pytest.raises(ValueError):
        Guest("Nobody", -1)


def test_guest_names_follow_guest_order():
    res = Reservation(
        reservation_id=1,
        hotel_name="Hotel Lina",
        guests=(Guest("Lolita Flores", 28), Guest("Camilo Blanes", 30)),
        stay_days=3,
        breakfast_included=True,
        price=Decimal("150.00"),
    )
    assert res.guest_names == ("Lolita Flores", "Camilo Blanes")


def test_business_errors_share_a_base():
    for exc in (
        DuplicateGuestInRequest(["A"]),
        GuestAlreadyReserved(["A", "B"]),
        ReservationNotFound(3),
    ):
        assert isinstance(exc, ReservationError)


def test_invalid_request_is_a_value_error_not_a_business_error():
    exc = InvalidReservationRequest("no guests")
    assert isinstance(exc, ValueError)
    assert not isinstance(exc, ReservationError)


def test_error_messages_carry_payload():
    assert "Julio Iglesias, Ana Torroja" in str(GuestAlreadyReserved(["Julio Iglesias", "Ana Torroja"]))
    assert "6" in str(ReservationNotFound(6))
