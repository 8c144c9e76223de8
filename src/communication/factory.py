"""
Notifier factory: RESERVATION_NOTICE_CHANNEL picks the adapter.

    console  (default) print notices, keep them in memory
    email    SMTP to FRONT_DESK_EMAIL; needs EMAIL_USER / EMAIL_PASSWORD,
             optional EMAIL_SMTP_HOST, EMAIL_SMTP_PORT, EMAIL_SMTP_SSL
"""

import os
from collections.abc import Callable

from .ports import ReservationNotifier


def _console() -> ReservationNotifier:
    from .console_notifier import ConsoleReservationNotifier

    return ConsoleReservationNotifier()


def _email() -> ReservationNotifier:
    from .email_notifier import EmailReservationNotifier

    use_ssl = os.environ.get("EMAIL_SMTP_SSL", "").strip().lower() in ("1", "true", "yes")
    default_port = "465" if use_ssl else "587"
    return EmailReservationNotifier(
        smtp_host=os.environ.get("EMAIL_SMTP_HOST", "smtp.gmail.com"),
        smtp_port=int(os.environ.get("EMAIL_SMTP_PORT", default_port)),
        smtp_user=os.environ["EMAIL_USER"],
        smtp_password=os.environ["EMAIL_PASSWORD"],
        front_desk_email=os.environ["FRONT_DESK_EMAIL"],
        use_ssl=use_ssl,
    )


_CHANNELS: dict[str, Callable[[], ReservationNotifier]] = {
    "console": _console,
    "email": _email,
}


def create_reservation_notifier(channel: str | None = None) -> ReservationNotifier:
    """Build the notifier for *channel*, or for the configured one when omitted."""
    name = (channel or os.environ.get("RESERVATION_NOTICE_CHANNEL") or "console").strip().lower()
    try:
        build = _CHANNELS[name]
    except KeyError:
        raise ValueError(
            f"Unknown notice channel: {name!r} (expected one of {sorted(_CHANNELS)})"
        ) from None
    return build()
