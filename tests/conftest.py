# File: tests/conftest.py

import os
import sys
import pytest
from pathlib import Path
from typing import List, Union

# 1. Test mode: never reach for the Postgres server
os.environ.setdefault("USE_SQLITE", "true")

# 2. Add project root to path
sys.path.append(os.getcwd())

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from vocalcoach.core.database.base import Base
from vocalcoach.features.audio_source.domain.interfaces import IAudioSource, AudioSourceNotFound
from vocalcoach.features.audio_source.domain.models import AudioPayload
from vocalcoach.features.exercises.domain.models import Exercise
from vocalcoach.features.generation.domain.interfaces import ITextGenerator


class QueuedTextGenerator(ITextGenerator):
    """
    Test double for a generation backend.
    Returns (or raises) pre-programmed results in order and counts calls.
    Raises if called more times than results were queued.
    """

    def __init__(self, *results: Union[str, Exception]):
        self._results: List[Union[str, Exception]] = list(results)
        self.call_count = 0
        self.audio_calls = []
        self.prompts = []

    def generate_from_audio(self, data: bytes, mime_type: str) -> str:
        self.audio_calls.append((data, mime_type))
        return self._dequeue()

    def generate_from_prompt(self, prompt: str) -> str:
        self.prompts.append(prompt)
        return self._dequeue()

    def _dequeue(self) -> str:
        if not self._results:
            raise RuntimeError("QueuedTextGenerator: no response queued")
        self.call_count += 1
        result = self._results.pop(0)
        if isinstance(result, Exception):
            raise result
        return result


class InMemoryAudioSource(IAudioSource):
    def __init__(self, files=None):
        self.files = dict(files or {})
        self.resolved = []

    def resolve(self, reference: str) -> AudioPayload:
        self.resolved.append(reference)
        if reference not in self.files:
            raise AudioSourceNotFound(reference)
        return AudioPayload(data=self.files[reference], mime_type="audio/mp4", path=Path(reference))


TRANSCRIPT = "[0:00]\nThis is a test vocal lesson recording.\n\n[1:30]\nNow we move to the chorus section."

ANALYSIS_JSON = """
{
  "overall": 6.5,
  "pitch": 6.5,
  "tone": 6.5,
  "breath": 7.5,
  "timing": 8.0,
  "tldr": "Tongue root tension is creating a bottleneck. Your breath support is your strongest asset.",
  "keyMoments": [
    {"timestamp": "0:18", "text": "Opening phrase sets the intonation pattern"},
    {"timestamp": "1:30", "text": "Chorus: pitch drifts on high notes"}
  ],
  "recommendedExerciseNames": ["Pitch Siren", "Lip Trill", "Breath Hiss"]
}
"""

RECORDING = "Lessons/test-recording.m4a"


@pytest.fixture
def audio_source():
    return InMemoryAudioSource({RECORDING: b"\x00" * 1024})


@pytest.fixture
def exercise_library():
    return [
        Exercise(template_id="ps", name="Pitch Siren", category="pitch", focus_area="Pitch"),
        Exercise(template_id="lt", name="Lip Trill", category="breath", focus_area="Breath"),
        Exercise(template_id="bh", name="Breath Hiss", category="breath", focus_area="Breath"),
        Exercise(template_id="rh", name="Resonance Hum", category="resonance", focus_area="Tone"),
        Exercise(template_id="ws", name="Warm-up Scales", category="warmup", focus_area="Warm-up"),
        Exercise(template_id="sc", name="Staccato Clap", category="agility", focus_area="Timing"),
    ]


@pytest.fixture
def session_factory():
    """
    In-memory SQLite shared across connections for the duration of one test.
    """
    import vocalcoach.features.analysis.data.sql_models  # noqa: F401 registers tables

    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)

    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)

    Base.metadata.drop_all(bind=engine)
    engine.dispose()
