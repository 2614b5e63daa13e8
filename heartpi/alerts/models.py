# -*- coding: utf-8 -*-
"""Alerts: Pydantic models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class AlertMessage(BaseModel):
    recipient: str
    subject: str
    body: str
    risk_level: str = Field("Unknown", description="Low | Moderate | High | Unknown")


class AlertRequest(BaseModel):
    recipient: str = Field(..., min_length=3, description="Caregiver email address")
    dry_run: bool = Field(False, description="Compose the alert without sending it")


class AlertResponse(BaseModel):
    status: str
    message: AlertMessage
