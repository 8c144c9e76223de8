from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Literal


@dataclass
class ReservationNotice:
    """What we tell the front desk after a booking changes."""

    kind: Literal["confirmation", "cancellation"]
    reservation_id: int
    hotel_name: str
    guest_names: list[str]
    subject: str
    body: str  # Human-readable text


class ReservationNotifier(ABC):
    """
    Port: how booking notices leave the system.

    The booking desk depends ONLY on this interface.
    It doesn't know whether notices are printed, emailed, or dropped
    into a chat channel.
    """

    @abstractmethod
    async def send_notice(self, notice: ReservationNotice) -> str:
        """
        Deliver a notice.
        Returns a tracking ID (email Message-ID, console sequence, etc.)
        """
        ...
