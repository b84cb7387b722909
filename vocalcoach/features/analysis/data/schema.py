from typing import List
from pydantic import BaseModel, ConfigDict, Field

from ..domain.models import AnalysisResult, KeyMoment


class KeyMomentDocument(BaseModel):
    model_config = ConfigDict(strict=True, allow_inf_nan=False)

    timestamp: str
    text: str


class AnalysisDocument(BaseModel):
    """
    Wire shape of the analysis model's JSON answer.
    Strict: numbers must be finite JSON numbers, no string coercion.
    """
    model_config = ConfigDict(strict=True, allow_inf_nan=False, populate_by_name=True)

    overall: float
    pitch: float
    tone: float
    breath: float
    timing: float
    tldr: str
    key_moments: List[KeyMomentDocument] = Field(alias="keyMoments")
    recommended_exercise_names: List[str] = Field(alias="recommendedExerciseNames")

    def to_domain(self) -> AnalysisResult:
        return AnalysisResult(
            overall=self.overall,
            pitch=self.pitch,
            tone=self.tone,
            breath=self.breath,
            timing=self.timing,
            tldr=self.tldr,
            key_moments=[KeyMoment(timestamp=m.timestamp, text=m.text) for m in self.key_moments],
            recommended_exercise_names=list(self.recommended_exercise_names),
        )
