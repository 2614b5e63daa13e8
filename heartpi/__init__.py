# -*- coding: utf-8 -*-
"""
HeartPi

Questionnaire-driven heart risk scoring and simulated vital signs.
"""

from .risk.engine import RiskEngine, RiskTier, SimulatedReading, assess
from .simulation.sampler import UniformSampler
from .survey.models import HealthProfile

__all__ = [
    'HealthProfile',
    'RiskEngine',
    'RiskTier',
    'SimulatedReading',
    'UniformSampler',
    'assess',
]
