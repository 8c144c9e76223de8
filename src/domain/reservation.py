"""
Reservation model: guests, reservations and business rejections.

Reservations are frozen: once the ledger hands one out, nothing the
caller does to it can reach back into the ledger.
"""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class Guest:
    """A person staying on a reservation."""

    name: str
    age: int

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise ValueError("Guest name must not be empty")
        if self.age < 0:
            raise ValueError(f"Guest age must be non-negative, got {self.age}")


@dataclass(frozen=True)
class Reservation:
    """An active booking held by the ledger."""

    reservation_id: int
    hotel_name: str
    guests: tuple[Guest, ...]
    stay_days: int
    breakfast_included: bool
    price: Decimal

    @property
    def guest_names(self) -> tuple[str, ...]:
        return tuple(g.name for g in self.guests)


class ReservationError(Exception):
    """Base class for booking requests rejected by business rules."""


class DuplicateGuestInRequest(ReservationError):
    """The same guest name was listed more than once in one request."""

    def __init__(self, duplicate_names: list[str]):
        self.duplicate_names = list(duplicate_names)
        super().__init__(
            f"Guest listed more than once in the request: {', '.join(self.duplicate_names)}"
        )


class GuestAlreadyReserved(ReservationError):
    """One or more guests already hold an active reservation."""

    def __init__(self, duplicate_names: list[str]):
        self.duplicate_names = list(duplicate_names)
        super().__init__(
            f"Guest(s) already holding a reservation: {', '.join(self.duplicate_names)}"
        )


class ReservationNotFound(ReservationError):
    """No active reservation has the requested id."""

    def __init__(self, reservation_id: int):
        self.reservation_id = reservation_id
        super().__init__(f"Reservation {reservation_id} not found")


class InvalidReservationRequest(ValueError):
    """Structurally invalid request: no guests, or a non-positive stay."""
