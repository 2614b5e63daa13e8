# -*- coding: utf-8 -*-
"""Caregiver alerts (composition and delivery)."""

from .models import AlertMessage
from .notifier import (
    AlertSender,
    RecordingAlertSender,
    SmtpAlertSender,
    compose_alert,
    heart_rate_risk_level,
)

__all__ = [
    'AlertMessage',
    'AlertSender',
    'RecordingAlertSender',
    'SmtpAlertSender',
    'compose_alert',
    'heart_rate_risk_level',
]
