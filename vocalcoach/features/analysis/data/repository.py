import logging
from typing import List, Optional
from uuid import UUID

from vocalcoach.core.database.connection import SessionLocal
from ..domain.interfaces import IAssessmentRepository
from ..domain.models import AnalysisResult, KeyMoment, StoredAssessment
from .sql_models import AssessmentModel

logger = logging.getLogger(__name__)


class SqlAssessmentRepository(IAssessmentRepository):
    def __init__(self, session_factory=SessionLocal):
        self.session_factory = session_factory

    def save(
        self,
        audio_reference: str,
        is_performance: bool,
        result: AnalysisResult,
        transcript: str,
        matched_template_ids: List[str],
    ) -> UUID:
        with self.session_factory() as db:
            try:
                record = AssessmentModel(
                    audio_reference=audio_reference,
                    is_performance=is_performance,
                    overall=result.overall,
                    pitch=result.pitch,
                    tone=result.tone,
                    breath=result.breath,
                    timing=result.timing,
                    tldr=result.tldr,
                    key_moments=[{"timestamp": m.timestamp, "text": m.text} for m in result.key_moments],
                    recommended_exercise_names=list(result.recommended_exercise_names),
                    matched_template_ids=list(matched_template_ids),
                    transcript=transcript,
                )
                db.add(record)
                db.commit()
                return record.id
            except Exception as e:
                db.rollback()
                logger.error(f"Failed to save assessment for {audio_reference}: {e}")
                raise

    def get(self, assessment_id: UUID) -> Optional[StoredAssessment]:
        with self.session_factory() as db:
            record = db.get(AssessmentModel, assessment_id)
            if record is None:
                return None

            return StoredAssessment(
                id=record.id,
                audio_reference=record.audio_reference,
                is_performance=record.is_performance,
                result=AnalysisResult(
                    overall=record.overall,
                    pitch=record.pitch,
                    tone=record.tone,
                    breath=record.breath,
                    timing=record.timing,
                    tldr=record.tldr,
                    key_moments=[KeyMoment(**m) for m in (record.key_moments or [])],
                    recommended_exercise_names=list(record.recommended_exercise_names or []),
                ),
                transcript=record.transcript,
                matched_template_ids=list(record.matched_template_ids or []),
                created_at=record.created_at,
            )
