import email.utils
import smtplib
from email.message import EmailMessage

from .ports import ReservationNotice, ReservationNotifier


class EmailReservationNotifier(ReservationNotifier):
    """
    Adapter: email booking notices to the front desk.

    Port 587 style servers get STARTTLS after connecting; set
    use_ssl=True for servers that expect TLS from the first byte (465).
    """

    def __init__(
        self,
        smtp_host: str,
        smtp_port: int,
        smtp_user: str,
        smtp_password: str,
        front_desk_email: str,
        use_ssl: bool = False,
    ):
        self.smtp_host = smtp_host
        self.smtp_port = smtp_port
        self.smtp_user = smtp_user
        self.smtp_password = smtp_password
        self.front_desk_email = front_desk_email
        self.use_ssl = use_ssl

    def compose(self, notice: ReservationNotice) -> EmailMessage:
        """Build the message for a notice without sending it."""
        msg = EmailMessage()
        msg["Subject"] = f"[RES-{notice.reservation_id}] {notice.subject}"
        msg["From"] = self.smtp_user
        msg["To"] = self.front_desk_email
        msg["Date"] = email.utils.formatdate(localtime=True)
        msg["Message-ID"] = email.utils.make_msgid(domain="reservation-ledger")
        msg["X-Reservation-ID"] = str(notice.reservation_id)
        msg["X-Notice-Kind"] = notice.kind
        msg.set_content(notice.body)
        return msg

    async def send_notice(self, notice: ReservationNotice) -> str:
        msg = self.compose(notice)
        with self._connect() as server:
            server.login(self.smtp_user, self.smtp_password)
            server.send_message(msg)
        return msg["Message-ID"]

    def _connect(self) -> smtplib.SMTP:
        if self.use_ssl:
            return smtplib.SMTP_SSL(self.smtp_host, self.smtp_port)
        server = smtplib.SMTP(self.smtp_host, self.smtp_port)
        try:
            server.starttls()
        except Exception:
            server.close()
            raise
        return server
