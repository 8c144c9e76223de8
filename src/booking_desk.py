"""
Booking desk: the front of the ledger.

Wires the ledger and the notifier together:
  1. Ledger: validate, price and store (or cancel) a reservation
  2. Code: turn business rejections into a BookingResult
  3. Notifier: tell the front desk what changed

The ledger is the source of truth. A notice that fails to go out is
logged and the booking stands.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Literal

from src.communication.ports import ReservationNotice, ReservationNotifier
from src.domain.ledger import ReservationLedger
from src.domain.reservation import (
    DuplicateGuestInRequest,
    Guest,
    GuestAlreadyReserved,
    Reservation,
    ReservationNotFound,
)

log = logging.getLogger(__name__)


@dataclass
class BookingDeskConfig:
    ledger: ReservationLedger
    notifier: ReservationNotifier


@dataclass
class BookingResult:
    action: Literal[
        "created",    # reservation stored, confirmation sent
        "rejected",   # duplicate guest, in the request or across reservations
        "cancelled",  # reservation removed, cancellation sent
        "not_found",  # no active reservation with that id
    ]
    details: str = ""
    reservation: Reservation | None = None
    reservation_id: int | None = None


class BookingDesk:
    """
    Call book() for each incoming request and cancel() to release one.

    Structural mistakes (no guests, zero days) are raised, not returned:
    they are caller bugs, not guests to turn away.
    """

    def __init__(self, config: BookingDeskConfig):
        self._cfg = config

    async def book(
        self,
        hotel_name: str,
        guests: Sequence[Guest],
        stay_days: int,
        breakfast_included: bool,
    ) -> BookingResult:
        try:
            reservation = self._cfg.ledger.create_reservation(
                hotel_name, guests, stay_days, breakfast_included,
            )
        except (DuplicateGuestInRequest, GuestAlreadyReserved) as exc:
            log.debug("booking at %s rejected: %s", hotel_name, exc)
            return BookingResult(
                action="rejected",
                details=", ".join(exc.duplicate_names),
            )

        await self._notify(_confirmation(reservation))
        return BookingResult(
            action="created",
            details=f"price={reservation.price}",
            reservation=reservation,
            reservation_id=reservation.reservation_id,
        )

    async def cancel(self, reservation_id: int) -> BookingResult:
        try:
            reservation = self._cfg.ledger.remove_reservation(reservation_id)
        except ReservationNotFound as exc:
            return BookingResult(
                action="not_found",
                details=str(exc),
                reservation_id=reservation_id,
            )

        await self._notify(_cancellation(reservation))
        return BookingResult(
            action="cancelled",
            reservation=reservation,
            reservation_id=reservation_id,
        )

    def list_active(self) -> list[Reservation]:
        return self._cfg.ledger.list_active()

    async def _notify(self, notice: ReservationNotice) -> None:
        try:
            tracking_id = await self._cfg.notifier.send_notice(notice)
            log.debug("res=%d %s sent: %s", notice.reservation_id, notice.kind, tracking_id)
        except Exception as exc:
            log.error("res=%d failed to send %s: %s", notice.reservation_id, notice.kind, exc)


def _confirmation(reservation: Reservation) -> ReservationNotice:
    guests = "\n".join(f"  - {g.name} ({g.age})" for g in reservation.guests)
    breakfast = "included" if reservation.breakfast_included else "not included"
    body = (
        f"Reservation #{reservation.reservation_id} at {reservation.hotel_name}\n"
        f"Guests:\n{guests}\n"
        f"Nights: {reservation.stay_days}\n"
        f"Breakfast: {breakfast}\n"
        f"Total: {reservation.price}"
    )
    return ReservationNotice(
        kind="confirmation",
        reservation_id=reservation.reservation_id,
        hotel_name=reservation.hotel_name,
        guest_names=list(reservation.guest_names),
        subject=f"Reservation #{reservation.reservation_id} confirmed",
        body=body,
    )


def _cancellation(reservation: Reservation) -> ReservationNotice:
    body = (
        f"Reservation #{reservation.reservation_id} at {reservation.hotel_name} "
        f"for {', '.join(reservation.guest_names)} has been cancelled."
    )
    return ReservationNotice(
        kind="cancellation",
        reservation_id=reservation.reservation_id,
        hotel_name=reservation.hotel_name,
        guest_names=list(reservation.guest_names),
        subject=f"Reservation #{reservation.reservation_id} cancelled",
        body=body,
    )
