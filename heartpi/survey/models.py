# -*- coding: utf-8 -*-
"""
Survey models

The questionnaire record scored by the risk engine, plus the request model
used by the HTTP layer.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import List, Optional, Sequence, Tuple, Type, TypeVar

from pydantic import BaseModel, Field


class AgeGroup(IntEnum):
    """Q1) What is your age?"""
    AGE_18_24 = 1
    AGE_25_34 = 2
    AGE_35_44 = 3
    AGE_45_54 = 4
    AGE_55_64 = 5
    AGE_65_PLUS = 6


class SleepHours(IntEnum):
    """Q3) How many hours a night do you sleep?"""
    UNDER_4 = 1
    FROM_4_TO_5 = 2
    FROM_6_TO_7 = 3
    FROM_7_TO_8 = 4
    OVER_8 = 5


class ExerciseFrequency(IntEnum):
    """Q4) How often do you exercise?"""
    NEVER = 1
    ONE_TO_TWO_WEEKLY = 2
    THREE_TO_FIVE_WEEKLY = 3
    SIX_TO_SEVEN_WEEKLY = 4


class DietType(IntEnum):
    """Q6) What does your average diet look like?"""
    HIGH_PROTEIN = 1
    LOW_CARB = 2
    VEGETARIAN = 3
    WESTERN = 4
    VEGAN = 5
    BALANCED = 6


class FamilyDisease(Enum):
    """Q5) What diseases run in your family? Values are the history indexes."""
    CORONARY_ARTERY_DISEASE = 0
    TYPE_2_DIABETES = 1
    HIGH_CHOLESTEROL = 2
    HIGH_BLOOD_PRESSURE = 3


# Co-indexed with HealthProfile.family_disease_history.
FAMILY_DISEASE_LABELS: Tuple[str, ...] = (
    "Heart attack or coronary artery disease",
    "Diabetes (Type 2)",
    "High cholesterol",
    "High blood pressure",
)

_E = TypeVar("_E", bound=IntEnum)


def _as_member(enum_cls: Type[_E], value: int) -> Optional[_E]:
    try:
        return enum_cls(value)
    except ValueError:
        return None


@dataclass
class HealthProfile:
    """Questionnaire answers for one survey submission.

    Ordinals are kept as plain ints in the survey's 1-based numbering so that
    malformed upstream values can still be held; 0 means "not answered yet".
    The ``*_band`` properties return the enum member, or None when the stored
    value is outside its domain.
    """
    age_group: int = 0
    is_male: bool = False  # sex assigned at birth
    sleep_hours: int = 0
    exercise_frequency: int = 0
    diet_type: int = 0
    is_smoker: bool = False
    family_disease_history: List[bool] = field(
        default_factory=lambda: [False] * len(FAMILY_DISEASE_LABELS)
    )

    def __post_init__(self) -> None:
        history = [bool(flag) for flag in self.family_disease_history]
        if len(history) != len(FAMILY_DISEASE_LABELS):
            raise ValueError(
                f"family_disease_history needs {len(FAMILY_DISEASE_LABELS)} entries, got {len(history)}"
            )
        self.family_disease_history = history

    @classmethod
    def from_answers(
        cls,
        *,
        age: int,
        gender: int,
        sleep: int,
        exercise: int,
        family_diseases: Sequence[int],
        diet: int,
        smoker: int,
    ) -> "HealthProfile":
        """Build a profile from raw questionnaire option numbers.

        ``gender`` is 1 for female and 2 for male; family diseases and smoking
        are answered 1 for yes and anything else for no.
        """
        flags = [answer == 1 for answer in family_diseases][: len(FAMILY_DISEASE_LABELS)]
        flags += [False] * (len(FAMILY_DISEASE_LABELS) - len(flags))
        return cls(
            age_group=int(age),
            is_male=(gender == 2),
            sleep_hours=int(sleep),
            exercise_frequency=int(exercise),
            diet_type=int(diet),
            is_smoker=(smoker == 1),
            family_disease_history=flags,
        )

    @property
    def age_band(self) -> Optional[AgeGroup]:
        return _as_member(AgeGroup, self.age_group)

    @property
    def sleep_band(self) -> Optional[SleepHours]:
        return _as_member(SleepHours, self.sleep_hours)

    @property
    def exercise_band(self) -> Optional[ExerciseFrequency]:
        return _as_member(ExerciseFrequency, self.exercise_frequency)

    @property
    def diet(self) -> Optional[DietType]:
        return _as_member(DietType, self.diet_type)

    @property
    def family_diseases(self) -> Tuple[str, ...]:
        return FAMILY_DISEASE_LABELS

    @property
    def family_history_count(self) -> int:
        return len(self.family_disease_history)

    def has_family_disease(self, index: int) -> bool:
        """Out-of-range indexes report the disease as absent."""
        if index < 0 or index >= self.family_history_count:
            return False
        return self.family_disease_history[index]

    def set_family_disease(self, index: int, present: bool) -> None:
        # Out-of-range writes are ignored.
        if 0 <= index < self.family_history_count:
            self.family_disease_history[index] = bool(present)

    def copy(self) -> "HealthProfile":
        return HealthProfile(
            age_group=self.age_group,
            is_male=self.is_male,
            sleep_hours=self.sleep_hours,
            exercise_frequency=self.exercise_frequency,
            diet_type=self.diet_type,
            is_smoker=self.is_smoker,
            family_disease_history=list(self.family_disease_history),
        )


class SurveyAnswers(BaseModel):
    """Raw questionnaire answers, numbered as on the survey form.

    Values are not range-checked here; the engine scores unknown options as 0.
    """
    age: int = Field(..., description="1: 18-24, 2: 25-34, 3: 35-44, 4: 45-54, 5: 55-64, 6: 65+")
    gender: int = Field(..., description="1: female, 2: male")
    sleep: int = Field(..., description="1: <4h, 2: 4-5h, 3: 6-7h, 4: 7-8h, 5: 8h+")
    exercise: int = Field(..., description="1: never, 2: 1-2/wk, 3: 3-5/wk, 4: 6-7/wk")
    family_diseases: List[int] = Field(
        default_factory=lambda: [0, 0, 0, 0],
        description="1/0 per disease: CAD, type-2 diabetes, high cholesterol, high blood pressure",
    )
    diet: int = Field(..., description="1: high protein, 2: low carb, 3: vegetarian, 4: western, 5: vegan, 6: balanced")
    smoker: int = Field(0, description="1: yes, 0: no")

    def to_profile(self) -> HealthProfile:
        return HealthProfile.from_answers(
            age=self.age,
            gender=self.gender,
            sleep=self.sleep,
            exercise=self.exercise,
            family_diseases=self.family_diseases,
            diet=self.diet,
            smoker=self.smoker,
        )
