# File: vocalcoach/features/analysis/service/orchestrator.py
import logging
from threading import Event
from typing import List, Optional, Sequence, Tuple

from vocalcoach.core.config.settings import settings
from vocalcoach.features.audio_source.domain.interfaces import IAudioSource, AudioSourceNotFound
from vocalcoach.features.audio_source.domain.models import AudioPayload
from vocalcoach.features.exercises.domain.models import Exercise
from vocalcoach.features.exercises.service import matcher
from vocalcoach.features.generation.domain.interfaces import ITextGenerator

from ..domain.errors import (
    AnalysisCancelled,
    AnalysisFailed,
    AudioFileNotFound,
    AudioFileTooLarge,
    InvalidResponse,
    TranscriptionFailed,
)
from ..domain.models import AnalysisResult, AnalysisStage
from .decoder import DecodeError, decode
from .prompts import build_analysis_prompt
from .sanitizer import sanitize

logger = logging.getLogger(__name__)

BYTES_PER_MB = 1024 * 1024


class AnalysisOrchestrator:
    """
    Recording -> transcript -> scored assessment.

    Two model calls, strictly in order. The analysis model is only called once a
    non-empty transcript exists, so a failed transcription never incurs the second,
    more expensive call.

    Holds no per-run state: concurrent analyze() calls are independent.
    """

    def __init__(
        self,
        audio_source: IAudioSource,
        transcriber: ITextGenerator,
        analyzer: ITextGenerator,
        max_audio_bytes: Optional[int] = settings.MAX_AUDIO_BYTES,
    ):
        self.audio_source = audio_source
        self.transcriber = transcriber
        self.analyzer = analyzer
        self.max_audio_bytes = max_audio_bytes

    def analyze(
        self,
        audio_reference: str,
        is_performance: bool,
        exercise_library: Sequence[Exercise],
        cancel_event: Optional[Event] = None,
    ) -> Tuple[AnalysisResult, str]:
        """
        Full pipeline for one recording.

        Args:
            audio_reference: Recording reference understood by the audio source.
            is_performance: True for a solo performance, False for a lesson with a teacher.
            exercise_library: Exercises offered to the model to recommend from.
            cancel_event: When set, the run stops before entering its next stage.

        Returns:
            (decoded result, raw transcript text)

        Raises:
            AudioFileNotFound, AudioFileTooLarge, TranscriptionFailed,
            AnalysisFailed, InvalidResponse, AnalysisCancelled
        """
        stage = AnalysisStage.IDLE
        try:
            stage = self._enter(AnalysisStage.RESOLVING_AUDIO, audio_reference, cancel_event)
            payload = self._resolve_audio(audio_reference)

            stage = self._enter(AnalysisStage.TRANSCRIBING, audio_reference, cancel_event)
            transcript = self._transcribe(payload)

            stage = self._enter(AnalysisStage.ANALYZING, audio_reference, cancel_event)
            raw = self._request_analysis(transcript, is_performance, exercise_library)

            stage = self._enter(AnalysisStage.DECODING, audio_reference, cancel_event)
            result = self._decode(raw)
        except AnalysisCancelled:
            logger.warning(f"Analysis of {audio_reference} cancelled after {stage.value}")
            raise
        except Exception as e:
            logger.error(f"Analysis of {audio_reference} {AnalysisStage.FAILED.value} during {stage.value}: {e}")
            raise

        logger.info(
            f"Analysis of {audio_reference} {AnalysisStage.DONE.value}: overall={result.overall} "
            f"moments={len(result.key_moments)} recommendations={len(result.recommended_exercise_names)}"
        )
        return result, transcript

    def match_exercises(self, names: Sequence[str], exercise_library: Sequence[Exercise]) -> List[Exercise]:
        return matcher.match_exercises(names, exercise_library)

    def match_and_supplement(
        self,
        result: AnalysisResult,
        exercise_library: Sequence[Exercise],
        minimum: int = 4,
        maximum: int = 6,
    ) -> List[Exercise]:
        return matcher.match_and_supplement(
            result.recommended_exercise_names, result, exercise_library, minimum, maximum
        )

    # --- Stages ---

    @staticmethod
    def _enter(stage: AnalysisStage, audio_reference: str, cancel_event: Optional[Event]) -> AnalysisStage:
        if cancel_event is not None and cancel_event.is_set():
            raise AnalysisCancelled(stage)
        logger.info(f"Analysis of {audio_reference}: {stage.value}")
        return stage

    def _resolve_audio(self, audio_reference: str) -> AudioPayload:
        try:
            payload = self.audio_source.resolve(audio_reference)
        except AudioSourceNotFound as e:
            raise AudioFileNotFound(audio_reference, e) from e

        if self.max_audio_bytes is not None and payload.size_bytes > self.max_audio_bytes:
            raise AudioFileTooLarge(
                size_mb=payload.size_bytes / BYTES_PER_MB,
                limit_mb=self.max_audio_bytes / BYTES_PER_MB,
            )
        return payload

    def _transcribe(self, payload: AudioPayload) -> str:
        try:
            transcript = self.transcriber.generate_from_audio(payload.data, payload.mime_type)
        except Exception as e:
            raise TranscriptionFailed(e) from e

        if not transcript or not transcript.strip():
            raise TranscriptionFailed(detail="Model returned empty transcript")
        return transcript

    def _request_analysis(self, transcript: str, is_performance: bool, exercise_library: Sequence[Exercise]) -> str:
        prompt = build_analysis_prompt(transcript, is_performance, exercise_library)
        try:
            return self.analyzer.generate_from_prompt(prompt)
        except Exception as e:
            raise AnalysisFailed(e) from e

    @staticmethod
    def _decode(raw: str) -> AnalysisResult:
        try:
            return decode(sanitize(raw))
        except DecodeError as e:
            raise InvalidResponse(e) from e
