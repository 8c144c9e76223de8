"""
In-memory ReservationLedger. State lives as long as the instance.

Two indexes over the same records:
    _by_id          reservation_id -> Reservation   (primary)
    _by_guest_name  guest name -> reservation_id    (derived)

Both are only ever written together, under the lock.
"""

import logging
import threading
from collections.abc import Sequence

from src.domain.ledger import ReservationLedger
from src.domain.pricing import PricingPolicy
from src.domain.reservation import (
    DuplicateGuestInRequest,
    Guest,
    GuestAlreadyReserved,
    InvalidReservationRequest,
    Reservation,
    ReservationNotFound,
)

log = logging.getLogger(__name__)


class InMemoryReservationLedger(ReservationLedger):

    def __init__(self, pricing: PricingPolicy | None = None):
        self._pricing = pricing or PricingPolicy()
        self._by_id: dict[int, Reservation] = {}
        self._by_guest_name: dict[str, int] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def create_reservation(
        self,
        hotel_name: str,
        guests: Sequence[Guest],
        stay_days: int,
        breakfast_included: bool,
    ) -> Reservation:
        guests = tuple(guests)
        log.debug(
            "create hotel=%s guests=%s days=%s breakfast=%s",
            hotel_name, [g.name for g in guests], stay_days, breakfast_included,
        )

        with self._lock:
            repeated = _repeated_names(guests)
            if repeated:
                log.info("rejected: duplicate guest(s) in request %s", repeated)
                raise DuplicateGuestInRequest(repeated)

            taken = [g.name for g in guests if g.name in self._by_guest_name]
            if taken:
                log.info("rejected: guest(s) already reserved %s", taken)
                raise GuestAlreadyReserved(taken)

            if not guests:
                raise InvalidReservationRequest("A reservation needs at least one guest")
            if not isinstance(stay_days, int) or isinstance(stay_days, bool) or stay_days < 1:
                raise InvalidReservationRequest(
                    f"stay_days must be a positive integer, got {stay_days!r}"
                )

            reservation = Reservation(
                reservation_id=self._next_id,
                hotel_name=hotel_name,
                guests=guests,
                stay_days=stay_days,
                breakfast_included=breakfast_included,
                price=self._pricing.price(len(guests), stay_days, breakfast_included),
            )
            self._by_id[reservation.reservation_id] = reservation
            for name in reservation.guest_names:
                self._by_guest_name[name] = reservation.reservation_id
            self._next_id += 1

        log.info(
            "res=%d created hotel=%s guests=%d days=%d price=%s",
            reservation.reservation_id, hotel_name, len(guests), stay_days, reservation.price,
        )
        return reservation

    def remove_reservation(self, reservation_id: int) -> Reservation:
        with self._lock:
            reservation = self._by_id.pop(reservation_id, None)
            if reservation is None:
                log.info("res=%s cancel: not found", reservation_id)
                raise ReservationNotFound(reservation_id)
            for name in reservation.guest_names:
                self._by_guest_name.pop(name, None)

        log.info("res=%d cancelled, freed %s", reservation_id, list(reservation.guest_names))
        return reservation

    def list_active(self) -> list[Reservation]:
        with self._lock:
            return sorted(self._by_id.values(), key=lambda r: r.reservation_id)

    def get(self, reservation_id: int) -> Reservation | None:
        with self._lock:
            return self._by_id.get(reservation_id)

    def find_by_guest(self, guest_name: str) -> Reservation | None:
        with self._lock:
            reservation_id = self._by_guest_name.get(guest_name)
            if reservation_id is None:
                return None
            return self._by_id[reservation_id]

    def __len__(self) -> int:
        with self._lock:
            return len(self._by_id)


def _repeated_names(guests: tuple[Guest, ...]) -> list[str]:
    """Names listed more than once, each reported once, in order of first repeat."""
    seen: set[str] = set()
    repeated: list[str] = []
    for guest in guests:
        if guest.name in seen:
            if guest.name not in repeated:
                repeated.append(guest.name)
        else:
            seen.add(guest.name)
    return repeated
