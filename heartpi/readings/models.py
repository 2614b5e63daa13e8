# -*- coding: utf-8 -*-
"""Readings: Pydantic models."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class HeartRateSample(BaseModel):
    user: str
    timestamp: int = Field(..., description="Unix epoch seconds")
    bpm: float = Field(..., ge=0)


class HeartRateSummary(BaseModel):
    count: int = Field(0, ge=0)
    average_bpm: float = Field(..., ge=0)
    latest_bpm: float = Field(..., ge=0)
    latest_timestamp: int = Field(..., description="Unix epoch seconds")


class HeartRateHistoryResponse(BaseModel):
    user: str
    samples: List[HeartRateSample]
    summary: Optional[HeartRateSummary] = None


class LivePoint(BaseModel):
    x: int = Field(..., ge=0, description="seconds since the feed started")
    bpm: float


class LiveFeedResponse(BaseModel):
    user: str
    replayed: int = Field(0, ge=0, description="points taken from stored history")
    points: List[LivePoint]
