"""
ReservationLedger port: the store of active reservations.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from src.domain.reservation import Guest, Reservation


class ReservationLedger(ABC):
    """
    Port: create, cancel and look up reservations.

    A guest name may appear in at most one active reservation.
    Ids are assigned by the ledger, start at 1 and are never reused,
    even after the reservation holding them is cancelled.
    """

    @abstractmethod
    def create_reservation(
        self,
        hotel_name: str,
        guests: Sequence[Guest],
        stay_days: int,
        breakfast_included: bool,
    ) -> Reservation:
        """
        Validate, price and store a new reservation.

        Raises DuplicateGuestInRequest, then GuestAlreadyReserved, then
        InvalidReservationRequest; the ledger is untouched when any of
        them is raised.
        """
        ...

    @abstractmethod
    def remove_reservation(self, reservation_id: int) -> Reservation:
        """
        Remove a reservation, free its guests and return what was removed.
        Raises ReservationNotFound.
        """
        ...

    def cancel_reservation(self, reservation_id: int) -> int:
        """Cancel a reservation and return its id. Raises ReservationNotFound."""
        return self.remove_reservation(reservation_id).reservation_id

    @abstractmethod
    def list_active(self) -> list[Reservation]:
        """Return every active reservation, ascending by id."""
        ...

    @abstractmethod
    def get(self, reservation_id: int) -> Reservation | None:
        """Return the reservation, or None if it is not active."""
        ...

    @abstractmethod
    def find_by_guest(self, guest_name: str) -> Reservation | None:
        """Return the active reservation holding this guest, if any."""
        ...

    @abstractmethod
    def __len__(self) -> int:
        ...
