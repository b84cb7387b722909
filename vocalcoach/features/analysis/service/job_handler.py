import time
import logging
from typing import Any, Dict, Optional, Sequence

from vocalcoach.features.exercises.domain.models import Exercise
from ..data.repository import SqlAssessmentRepository
from ..domain.interfaces import IAssessmentRepository
from .orchestrator import AnalysisOrchestrator

logger = logging.getLogger(__name__)


class AnalysisHandler:
    """
    Job entry point: analyze a recording, pick exercises, store the assessment.
    Analysis errors propagate so the job runner can mark the job failed.
    """

    def __init__(self, orchestrator: AnalysisOrchestrator, repository: Optional[IAssessmentRepository] = None):
        self.orchestrator = orchestrator
        self.repository = repository or SqlAssessmentRepository()

    def handle(
        self,
        audio_reference: str,
        exercise_library: Sequence[Exercise],
        is_performance: bool = True,
    ) -> Dict[str, Any]:
        start_time_perf = time.time()

        result, transcript = self.orchestrator.analyze(audio_reference, is_performance, exercise_library)
        exercises = self.orchestrator.match_and_supplement(result, exercise_library)

        assessment_id = self.repository.save(
            audio_reference=audio_reference,
            is_performance=is_performance,
            result=result,
            transcript=transcript,
            matched_template_ids=[e.template_id for e in exercises],
        )
        logger.info(f"Stored assessment {assessment_id} for {audio_reference}")

        return {
            "status": "completed",
            "assessment_id": str(assessment_id),
            "exercises_matched": len(exercises),
            "processing_time": time.time() - start_time_perf
        }
