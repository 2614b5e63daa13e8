# -*- coding: utf-8 -*-
"""
Risk scoring and vital-sign simulation
"""

from .engine import (
    RISK_MESSAGES,
    TIER_RANGES,
    RiskEngine,
    RiskTier,
    SimulatedReading,
    VitalRanges,
    assess,
    classify,
    compute_risk_score,
    score_breakdown,
)
from .advice import Tip, parse_tier, tips_for

__all__ = [
    'RISK_MESSAGES',
    'TIER_RANGES',
    'RiskEngine',
    'RiskTier',
    'SimulatedReading',
    'VitalRanges',
    'assess',
    'classify',
    'compute_risk_score',
    'score_breakdown',
    'Tip',
    'parse_tier',
    'tips_for',
]
