# -*- coding: utf-8 -*-
"""
Heart risk engine

Scores a HealthProfile, maps the score onto a risk tier and generates
tier-conditioned simulated sensor readings.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Dict, Optional, Tuple

from ..simulation.sampler import UniformSampler
from ..survey.models import DietType, FamilyDisease, HealthProfile

logger = logging.getLogger(__name__)

MODERATE_THRESHOLD = 10
HIGH_THRESHOLD = 18


class RiskTier(Enum):
    """Heart disease risk tier"""
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"

    @property
    def label(self) -> str:
        return self.name.capitalize()


# Matched verbatim by downstream consumers; do not reword.
RISK_MESSAGES: Dict[RiskTier, str] = {
    RiskTier.LOW: "Low risk of heart disease. You are healthy!",
    RiskTier.MODERATE: "Moderate risk of heart disease.",
    RiskTier.HIGH: "High risk of heart disease.",
}


@dataclass(frozen=True)
class VitalRanges:
    """Closed sampling intervals for one tier."""
    heart_rate: Tuple[float, float]
    systolic_bp: Tuple[float, float]
    diastolic_bp: Tuple[float, float]
    cholesterol: Tuple[float, float]
    ecg: Tuple[float, float]


TIER_RANGES: Dict[RiskTier, VitalRanges] = {
    RiskTier.LOW: VitalRanges(
        heart_rate=(60, 80),
        systolic_bp=(110, 120),
        diastolic_bp=(70, 80),
        cholesterol=(150, 200),
        ecg=(0.05, 0.15),
    ),
    RiskTier.MODERATE: VitalRanges(
        heart_rate=(80, 95),
        systolic_bp=(120, 135),
        diastolic_bp=(80, 90),
        cholesterol=(200, 240),
        ecg=(0.02, 0.18),
    ),
    RiskTier.HIGH: VitalRanges(
        heart_rate=(95, 120),
        systolic_bp=(135, 160),
        diastolic_bp=(90, 110),
        cholesterol=(240, 300),
        ecg=(-0.1, 0.3),
    ),
}

# Points per family-history entry.
FAMILY_DISEASE_POINTS: Dict[FamilyDisease, int] = {
    FamilyDisease.CORONARY_ARTERY_DISEASE: 2,
    FamilyDisease.TYPE_2_DIABETES: 1,
    FamilyDisease.HIGH_CHOLESTEROL: 2,
    FamilyDisease.HIGH_BLOOD_PRESSURE: 2,
}

DIET_POINTS: Dict[DietType, int] = {
    DietType.HIGH_PROTEIN: 1,
    DietType.LOW_CARB: 1,
    DietType.VEGETARIAN: 1,
    DietType.WESTERN: 3,
    DietType.VEGAN: 2,
    DietType.BALANCED: 1,
}


@dataclass
class SimulatedReading:
    """One assessment's synthetic sensor values."""
    heart_rate: float
    systolic_bp: float
    diastolic_bp: float
    cholesterol: float
    ecg: float
    risk_score: int
    risk_tier: RiskTier
    risk_message: str

    def to_dict(self) -> dict:
        data = asdict(self)
        data["risk_tier"] = self.risk_tier.value
        return data


def _age_points(age_group: int) -> int:
    if age_group in (1, 2):
        return 1
    if age_group in (3, 4):
        return 2
    if age_group in (5, 6):
        return 3
    return 0


def _sex_age_points(is_male: bool, age_group: int) -> int:
    # The two bands cover every integer, so out-of-domain ages still score here.
    if age_group <= 3:
        return 2 if is_male else 1
    return 3


def _sleep_points(sleep_hours: int) -> int:
    # Too little and too much sleep score the same.
    if sleep_hours in (1, 5):
        return 3
    if sleep_hours == 2:
        return 2
    if sleep_hours in (3, 4):
        return 1
    return 0


def _exercise_points(exercise_frequency: int) -> int:
    if exercise_frequency == 1:
        return 3
    if exercise_frequency == 2:
        return 2
    if exercise_frequency in (3, 4):
        return 1
    return 0


def _family_history_points(profile: HealthProfile) -> int:
    return sum(
        points
        for disease, points in FAMILY_DISEASE_POINTS.items()
        if profile.has_family_disease(disease.value)
    )


def _diet_points(profile: HealthProfile) -> int:
    diet = profile.diet
    return DIET_POINTS[diet] if diet is not None else 0


def score_breakdown(profile: HealthProfile) -> Dict[str, int]:
    """Per-factor contributions to the risk score."""
    return {
        "age": _age_points(profile.age_group),
        "sex_age": _sex_age_points(profile.is_male, profile.age_group),
        "sleep": _sleep_points(profile.sleep_hours),
        "exercise": _exercise_points(profile.exercise_frequency),
        "family_history": _family_history_points(profile),
        "diet": _diet_points(profile),
        "smoking": 3 if profile.is_smoker else 1,
    }


def compute_risk_score(profile: HealthProfile) -> int:
    return sum(score_breakdown(profile).values())


def classify(score: int) -> RiskTier:
    if score >= HIGH_THRESHOLD:
        return RiskTier.HIGH
    if score >= MODERATE_THRESHOLD:
        return RiskTier.MODERATE
    return RiskTier.LOW


class RiskEngine:
    """
    Risk engine

    Stateless: the sampler is supplied per call (or created per call), never
    kept on the engine.
    """

    def assess(
        self,
        profile: HealthProfile,
        sampler: Optional[UniformSampler] = None,
    ) -> SimulatedReading:
        """
        Score the profile and simulate one set of sensor readings.

        Args:
            profile: survey answers
            sampler: random source; a fresh one is created when omitted

        Returns:
            SimulatedReading: values drawn from the tier's ranges
        """
        sampler = sampler or UniformSampler()
        score = compute_risk_score(profile)
        tier = classify(score)
        ranges = TIER_RANGES[tier]
        logger.debug("Risk score: %s (%s)", score, tier.value)

        return SimulatedReading(
            heart_rate=sampler.sample(*ranges.heart_rate),
            systolic_bp=sampler.sample(*ranges.systolic_bp),
            diastolic_bp=sampler.sample(*ranges.diastolic_bp),
            cholesterol=sampler.sample(*ranges.cholesterol),
            ecg=sampler.sample(*ranges.ecg),
            risk_score=score,
            risk_tier=tier,
            risk_message=RISK_MESSAGES[tier],
        )

    @staticmethod
    def should_alert(reading: SimulatedReading) -> bool:
        return reading.risk_tier is RiskTier.HIGH


def assess(profile: HealthProfile, sampler: Optional[UniformSampler] = None) -> SimulatedReading:
    return RiskEngine().assess(profile, sampler)
