from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID
from .models import AnalysisResult, StoredAssessment


class IAssessmentRepository(ABC):
    @abstractmethod
    def save(
        self,
        audio_reference: str,
        is_performance: bool,
        result: AnalysisResult,
        transcript: str,
        matched_template_ids: List[str],
    ) -> UUID:
        """Persists one assessment. Returns its new ID."""
        pass

    @abstractmethod
    def get(self, assessment_id: UUID) -> Optional[StoredAssessment]:
        pass
