# telemart/services/mail_service.py
import smtplib
from email.message import EmailMessage

from telemart.domain.errors import DependencyFailure
from telemart.utils.logging import get_logger
from telemart.utils import settings

logger = get_logger(__name__)


class Mailer:
    """Wysylka maila: odbiorca, temat, tresc. Blad wysylki -> DependencyFailure."""

    def send(self, to: str, subject: str, body: str) -> None:
        raise NotImplementedError


class ConsoleMailer(Mailer):
    """
    Do developmentu - tylko loguje wiadomosc.
    """

    def send(self, to: str, subject: str, body: str) -> None:
        logger.info(f"[MAIL] To: {to} | Subject: {subject}\n{body}")


class SmtpMailer(Mailer):
    def __init__(
        self,
        host: str = settings.SMTP_HOST,
        port: int = settings.SMTP_PORT,
        user: str = settings.SMTP_USER,
        password: str = settings.SMTP_PASSWORD,
        sender: str = settings.MAIL_FROM,
        use_tls: bool = settings.SMTP_USE_TLS,
        timeout: float = settings.SMTP_TIMEOUT,
    ):
        if not host:
            raise ValueError("SMTP_HOST must be set when MAIL_BACKEND=smtp")
        self.host = host
        self.port = port
        self.user = user
        self.password = password
        self.sender = sender
        self.use_tls = use_tls
        self.timeout = timeout

    def send(self, to: str, subject: str, body: str) -> None:
        msg = EmailMessage()
        msg["From"] = self.sender
        msg["To"] = to
        msg["Subject"] = subject
        msg.set_content(body)

        try:
            with smtplib.SMTP(self.host, self.port, timeout=self.timeout) as smtp:
                if self.use_tls:
                    smtp.starttls()
                if self.user and self.password:
                    smtp.login(self.user, self.password)
                smtp.send_message(msg)
        except (smtplib.SMTPException, OSError) as e:
            logger.error(f"Sending mail to {to} failed: {e}")
            raise DependencyFailure("Failed to send cart email") from e

        logger.info(f"Mail '{subject}' sent to {to}")


def build_mailer(backend: str = settings.MAIL_BACKEND) -> Mailer:
    if backend == "smtp":
        return SmtpMailer()
    return ConsoleMailer()
