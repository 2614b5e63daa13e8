# -*- coding: utf-8 -*-
"""Readings domain (sensor log and heart-rate history)."""

from .models import HeartRateSample, HeartRateSummary
from .storage import HeartRateHistory, ReadingLog

__all__ = [
    'HeartRateSample',
    'HeartRateSummary',
    'HeartRateHistory',
    'ReadingLog',
]
