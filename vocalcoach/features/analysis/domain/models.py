# File: vocalcoach/features/analysis/domain/models.py
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, unique
from typing import Dict, List, Optional
from uuid import UUID


@dataclass(frozen=True)
class KeyMoment:
    """A timestamped note pointing at a spot in the recording (e.g. '1:04')."""
    timestamp: str
    text: str


@dataclass(frozen=True)
class AnalysisResult:
    """
    The decoded coaching assessment for one recording.
    Scores are on a 0.0-10.0 scale as authored by the model; they are not clamped.
    """
    overall: float
    pitch: float
    tone: float
    breath: float
    timing: float
    tldr: str
    key_moments: List[KeyMoment] = field(default_factory=list)
    recommended_exercise_names: List[str] = field(default_factory=list)

    @property
    def scores(self) -> Dict[str, float]:
        return {
            "overall": self.overall,
            "pitch": self.pitch,
            "tone": self.tone,
            "breath": self.breath,
            "timing": self.timing,
        }


@unique
class AnalysisStage(str, Enum):
    IDLE = "idle"
    RESOLVING_AUDIO = "resolving_audio"
    TRANSCRIBING = "transcribing"
    ANALYZING = "analyzing"
    DECODING = "decoding"
    DONE = "done"
    FAILED = "failed"


@dataclass(frozen=True)
class StoredAssessment:
    """An assessment as read back from the repository."""
    id: UUID
    audio_reference: str
    is_performance: bool
    result: AnalysisResult
    transcript: str
    matched_template_ids: List[str] = field(default_factory=list)
    created_at: Optional[datetime] = None
