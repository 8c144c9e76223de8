from .ports import ReservationNotice, ReservationNotifier


class ConsoleReservationNotifier(ReservationNotifier):
    """Adapter: print notices to the console and keep them in memory. For dev/testing."""

    def __init__(self):
        self.sent: list[ReservationNotice] = []

    async def send_notice(self, notice: ReservationNotice) -> str:
        self.sent.append(notice)
        tracking_id = f"console-{notice.kind}-{notice.reservation_id}-{len(self.sent)}"

        print(f"\n{'=' * 60}")
        print(f"  {notice.subject}")
        print(f"  HOTEL: {notice.hotel_name}")
        print(f"  GUESTS: {', '.join(notice.guest_names)}")
        print(f"{'=' * 60}")
        print(notice.body)
        print(f"{'=' * 60}\n")

        return tracking_id
