# -*- coding: utf-8 -*-
"""Survey domain (questionnaire answers)."""

from .models import (
    FAMILY_DISEASE_LABELS,
    AgeGroup,
    DietType,
    ExerciseFrequency,
    FamilyDisease,
    HealthProfile,
    SleepHours,
    SurveyAnswers,
)

__all__ = [
    'FAMILY_DISEASE_LABELS',
    'AgeGroup',
    'DietType',
    'ExerciseFrequency',
    'FamilyDisease',
    'HealthProfile',
    'SleepHours',
    'SurveyAnswers',
]
