import uuid
from datetime import datetime, timezone
from sqlalchemy import Column, String, Text, Float, Boolean, DateTime, JSON, Uuid
from vocalcoach.core.database.base import Base


def utc_now():
    return datetime.now(timezone.utc)


class AssessmentModel(Base):
    __tablename__ = "assessments"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    audio_reference = Column(String, nullable=False, index=True)
    is_performance = Column(Boolean, nullable=False, default=True)

    overall = Column(Float, nullable=False)
    pitch = Column(Float, nullable=False)
    tone = Column(Float, nullable=False)
    breath = Column(Float, nullable=False)
    timing = Column(Float, nullable=False)

    tldr = Column(Text, nullable=False)
    key_moments = Column(JSON, default=list)  # [{"timestamp": "0:18", "text": "..."}]
    recommended_exercise_names = Column(JSON, default=list)
    matched_template_ids = Column(JSON, default=list)

    transcript = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utc_now)
