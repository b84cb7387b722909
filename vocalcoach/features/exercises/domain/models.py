# File: vocalcoach/features/exercises/domain/models.py
from dataclasses import dataclass, field
from enum import Enum, unique
from typing import List


@unique
class ExerciseCategory(str, Enum):
    BREATH = "breath"
    PITCH = "pitch"
    RESONANCE = "resonance"
    AGILITY = "agility"
    REGISTER = "register"
    VOWEL = "vowel"
    ARTICULATION = "articulation"
    WARMUP = "warmup"


@dataclass(frozen=True)
class Exercise:
    """
    A library exercise as supplied by the caller.
    'name' is both the display label and the key recommendations are matched against.
    """
    template_id: str
    name: str
    category: str
    description: str = ""
    instruction: str = ""
    focus_area: str = ""
    keywords: List[str] = field(default_factory=list)
    difficulty: str = "beginner"
    duration_minutes: int = 5
