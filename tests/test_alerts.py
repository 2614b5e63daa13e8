# -*- coding: utf-8 -*-

from __future__ import annotations

import os
import smtplib
import unittest
from unittest.mock import MagicMock, patch

from heartpi.alerts.models import AlertMessage
from heartpi.alerts.notifier import (
    DEFAULT_SUBJECT,
    RecordingAlertSender,
    SmtpAlertSender,
    compose_alert,
    heart_rate_risk_level,
)
from heartpi.errors import AlertDeliveryError
from heartpi.readings.models import HeartRateSummary


def _summary(average: float, latest: float = 90.0) -> HeartRateSummary:
    return HeartRateSummary(count=20, average_bpm=average, latest_bpm=latest, latest_timestamp=1_700_000_000)


class TestComposeAlert(unittest.TestCase):
    def test_risk_levels_from_average(self) -> None:
        self.assertEqual(heart_rate_risk_level(None), "Unknown")
        self.assertEqual(heart_rate_risk_level(79.9), "Low")
        self.assertEqual(heart_rate_risk_level(80.0), "Moderate")
        self.assertEqual(heart_rate_risk_level(99.9), "Moderate")
        self.assertEqual(heart_rate_risk_level(100.0), "High")

    def test_high_average_gets_urgent_subject(self) -> None:
        message = compose_alert("alice", "carer@example.com", _summary(105.0, 110.0))
        self.assertEqual(message.risk_level, "High")
        self.assertEqual(
            message.subject,
            "HIGH RISK DETECTED, PLEASE CHECK UP ON alice's HEART HEALTH IMMEDIATELY!",
        )
        self.assertIn("Average Heart Rate: 105.0 BPM", message.body)
        self.assertIn("Latest Heart Rate: 110.0 BPM", message.body)
        self.assertIn("Risk Level: High", message.body)
        self.assertIn("Last Reading: ", message.body)

    def test_moderate_average_gets_default_subject(self) -> None:
        message = compose_alert("alice", "carer@example.com", _summary(85.0))
        self.assertEqual(message.subject, DEFAULT_SUBJECT)
        self.assertEqual(message.risk_level, "Moderate")

    def test_no_data(self) -> None:
        message = compose_alert("bob", "carer@example.com", None)
        self.assertEqual(message.subject, DEFAULT_SUBJECT)
        self.assertEqual(message.risk_level, "Unknown")
        self.assertIn("No heart rate data available.", message.body)
        self.assertIn("bob trusted you with their HeartPi data", message.body)


class TestSenders(unittest.TestCase):
    def setUp(self) -> None:
        self.message = AlertMessage(
            recipient="carer@example.com",
            subject=DEFAULT_SUBJECT,
            body="hello",
            risk_level="Low",
        )

    def test_recording_sender_keeps_messages(self) -> None:
        sender = RecordingAlertSender()
        sender.send(self.message)
        self.assertEqual(sender.sent, [self.message])

    def test_missing_credentials_raise(self) -> None:
        sender = SmtpAlertSender(address_env="HEARTPI_TEST_NO_ADDR", password_env="HEARTPI_TEST_NO_PASS")
        with patch.dict(os.environ, {}, clear=False):
            os.environ.pop("HEARTPI_TEST_NO_ADDR", None)
            os.environ.pop("HEARTPI_TEST_NO_PASS", None)
            with self.assertRaises(AlertDeliveryError):
                sender.send(self.message)

    def test_smtp_send(self) -> None:
        sender = SmtpAlertSender(
            "smtp.example.com",
            2525,
            use_tls=True,
            address_env="HEARTPI_TEST_ADDR",
            password_env="HEARTPI_TEST_PASS",
        )
        env = {"HEARTPI_TEST_ADDR": "heartpi@example.com", "HEARTPI_TEST_PASS": "pw"}
        with patch.dict(os.environ, env), patch("heartpi.alerts.notifier.smtplib.SMTP") as smtp_cls:
            server = MagicMock()
            smtp_cls.return_value.__enter__.return_value = server
            sender.send(self.message)

        smtp_cls.assert_called_once_with("smtp.example.com", 2525, timeout=sender.timeout)
        server.starttls.assert_called_once()
        server.login.assert_called_once_with("heartpi@example.com", "pw")
        sent = server.send_message.call_args.args[0]
        self.assertEqual(sent["To"], "carer@example.com")
        self.assertEqual(sent["From"], "heartpi@example.com")
        self.assertEqual(sent["Subject"], DEFAULT_SUBJECT)

    def test_smtp_failure_is_wrapped(self) -> None:
        sender = SmtpAlertSender(address_env="HEARTPI_TEST_ADDR", password_env="HEARTPI_TEST_PASS")
        env = {"HEARTPI_TEST_ADDR": "heartpi@example.com", "HEARTPI_TEST_PASS": "pw"}
        with patch.dict(os.environ, env), patch("heartpi.alerts.notifier.smtplib.SMTP") as smtp_cls:
            server = MagicMock()
            server.login.side_effect = smtplib.SMTPAuthenticationError(535, b"bad credentials")
            smtp_cls.return_value.__enter__.return_value = server
            with self.assertRaises(AlertDeliveryError):
                sender.send(self.message)

    def test_connection_failure_is_wrapped(self) -> None:
        sender = SmtpAlertSender(address_env="HEARTPI_TEST_ADDR", password_env="HEARTPI_TEST_PASS")
        env = {"HEARTPI_TEST_ADDR": "heartpi@example.com", "HEARTPI_TEST_PASS": "pw"}
        with patch.dict(os.environ, env), patch(
            "heartpi.alerts.notifier.smtplib.SMTP", side_effect=ConnectionRefusedError("refused")
        ):
            with self.assertRaises(AlertDeliveryError):
                sender.send(self.message)


if __name__ == "__main__":
    unittest.main()
