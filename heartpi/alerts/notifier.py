# -*- coding: utf-8 -*-
"""Caregiver alerts.

Builds the alert email from a user's stored heart-rate summary and delivers
it over SMTP. Credentials come from environment variables whose names are
configured in settings.
"""

from __future__ import annotations

import logging
import os
import smtplib
from datetime import datetime
from email.message import EmailMessage
from typing import List, Optional, Protocol, Tuple

from ..config import settings
from ..errors import AlertDeliveryError
from ..readings.models import HeartRateSummary
from .models import AlertMessage

logger = logging.getLogger(__name__)

DEFAULT_SUBJECT = "HeartPi Alert"


def heart_rate_risk_level(average_bpm: Optional[float]) -> str:
    """Risk level shown to caregivers, from the average stored heart rate."""
    if average_bpm is None:
        return "Unknown"
    if average_bpm < 80:
        return "Low"
    if average_bpm < 100:
        return "Moderate"
    return "High"


def compose_alert(user: str, recipient: str, summary: Optional[HeartRateSummary]) -> AlertMessage:
    risk = heart_rate_risk_level(summary.average_bpm if summary else None)
    if risk == "High":
        subject = f"HIGH RISK DETECTED, PLEASE CHECK UP ON {user}'s HEART HEALTH IMMEDIATELY!"
    else:
        subject = DEFAULT_SUBJECT

    lines = [
        "Hi there!",
        "",
        f"{user} trusted you with their HeartPi data. Here are their recent readings:",
        "",
    ]
    if summary is not None:
        last_reading = datetime.fromtimestamp(summary.latest_timestamp).strftime("%Y-%m-%d %H:%M:%S")
        lines += [
            f"Average Heart Rate: {summary.average_bpm:.1f} BPM",
            f"Latest Heart Rate: {summary.latest_bpm:.1f} BPM",
            f"Last Reading: {last_reading}",
            f"Risk Level: {risk}",
            "",
        ]
    else:
        lines += ["No heart rate data available.", ""]
    lines += [
        f"User {user} wanted to share this data with you because they trust you.",
        "",
        "Sent with ❤️ from HeartPi.",
    ]
    return AlertMessage(recipient=recipient, subject=subject, body="\n".join(lines), risk_level=risk)


class AlertSender(Protocol):
    def send(self, message: AlertMessage) -> None:
        ...


class RecordingAlertSender:
    """Keeps alerts in memory instead of sending them."""

    def __init__(self) -> None:
        self.sent: List[AlertMessage] = []

    def send(self, message: AlertMessage) -> None:
        self.sent.append(message)
        logger.info("Recorded alert for %s: %s", message.recipient, message.subject)


class SmtpAlertSender:
    def __init__(
        self,
        host: Optional[str] = None,
        port: Optional[int] = None,
        *,
        use_tls: Optional[bool] = None,
        timeout: Optional[float] = None,
        address_env: Optional[str] = None,
        password_env: Optional[str] = None,
    ) -> None:
        self.host = host or settings.smtp_host
        self.port = port or settings.smtp_port
        self.use_tls = settings.smtp_use_tls if use_tls is None else use_tls
        self.timeout = timeout or settings.smtp_timeout
        self.address_env = address_env or settings.smtp_address_env
        self.password_env = password_env or settings.smtp_password_env

    def _get_credentials(self) -> Tuple[str, str]:
        address = os.environ.get(self.address_env)
        password = os.environ.get(self.password_env)
        if not address or not password:
            raise AlertDeliveryError(
                f"Missing email credentials: set {self.address_env} and {self.password_env}"
            )
        return address, password

    def send(self, message: AlertMessage) -> None:
        address, password = self._get_credentials()

        email = EmailMessage()
        email["Subject"] = message.subject
        email["From"] = address
        email["To"] = message.recipient
        email.set_content(message.body)

        try:
            with smtplib.SMTP(self.host, self.port, timeout=self.timeout) as server:
                if self.use_tls:
                    server.starttls()
                server.login(address, password)
                server.send_message(email)
        except (smtplib.SMTPException, OSError) as exc:
            raise AlertDeliveryError(f"Failed to send alert to {message.recipient}: {exc}") from exc

        logger.info("Alert sent to %s: %s", message.recipient, message.subject)
