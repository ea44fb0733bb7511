"""SMTP delivery of the rendered digest — one attempt, no retry."""

from __future__ import annotations

import logging
import smtplib
from datetime import datetime
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from email.utils import make_msgid
from typing import TYPE_CHECKING

from jobdigest.config.defaults import DEFAULT_TIMEZONE, DIGEST_SUBJECT
from jobdigest.core.renderer import format_date

if TYPE_CHECKING:
    from jobdigest.config.settings import Settings

logger = logging.getLogger(__name__)

SMTP_TIMEOUT_SECONDS = 30


class MailDeliveryError(Exception):
    """The SMTP transport refused or failed to deliver the digest."""


def build_subject(now: datetime | None = None, tz_name: str = DEFAULT_TIMEZONE) -> str:
    return DIGEST_SUBJECT.format(date=format_date(now, tz_name))


def send_digest(html: str, settings: Settings, *, now: datetime | None = None) -> str:
    """
    Send *html* as a single email to ``settings.to_email``.

    Returns the Message-ID. Raises MailDeliveryError on any transport
    failure; callers treat that as fatal.
    """
    msg = _build_message(
        from_email=settings.from_email,
        to_email=settings.to_email,
        subject=build_subject(now, settings.digest_timezone),
        html=html,
    )

    logger.info(
        "Sending digest to %s via %s:%d",
        settings.to_email,
        settings.smtp_host,
        settings.smtp_port,
    )
    try:
        _send_via_smtp(
            msg=msg,
            host=settings.smtp_host,
            port=settings.smtp_port,
            secure=settings.smtp_secure,
            user=settings.smtp_user,
            password=settings.smtp_pass,
        )
    except smtplib.SMTPAuthenticationError as exc:
        raise MailDeliveryError(f"Authentication failed: {exc}") from exc
    except (smtplib.SMTPException, OSError) as exc:
        raise MailDeliveryError(f"SMTP error: {exc}") from exc

    return msg["Message-ID"]


def _build_message(
    *,
    from_email: str,
    to_email: str,
    subject: str,
    html: str,
) -> MIMEMultipart:
    """Build an HTML MIME message with a fresh Message-ID."""
    domain = from_email.rpartition("@")[2] or None
    msg = MIMEMultipart("alternative")
    msg["From"] = from_email
    msg["To"] = to_email
    msg["Subject"] = subject
    msg["Message-ID"] = make_msgid(domain=domain)
    msg.attach(MIMEText(html, "html", "utf-8"))
    return msg


def _send_via_smtp(
    *,
    msg: MIMEMultipart,
    host: str,
    port: int,
    secure: bool,
    user: str,
    password: str,
) -> None:
    """Send over implicit TLS when *secure*, else STARTTLS if offered."""
    smtp_cls = smtplib.SMTP_SSL if secure else smtplib.SMTP
    with smtp_cls(host, port, timeout=SMTP_TIMEOUT_SECONDS) as server:
        server.ehlo()
        if not secure and server.has_extn("starttls"):
            server.starttls()
            server.ehlo()
        if user:
            server.login(user, password)
        server.send_message(msg)
