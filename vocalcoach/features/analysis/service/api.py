from typing import Any, Dict, Optional, Sequence, Tuple

from vocalcoach.core.config.settings import settings
from vocalcoach.features.audio_source.data.local_fs import LocalAudioSource
from vocalcoach.features.exercises.domain.models import Exercise
from ..domain.interfaces import IAssessmentRepository
from ..domain.models import AnalysisResult
from .job_handler import AnalysisHandler
from .orchestrator import AnalysisOrchestrator
from .prompts import ANALYSIS_SYSTEM_PROMPT, TRANSCRIPTION_SYSTEM_PROMPT


def build_orchestrator(backend: Optional[str] = None) -> AnalysisOrchestrator:
    """
    Wires an orchestrator from settings.
    Backend libraries are imported here so that only the selected one must be installed and importable.
    """
    backend = backend or settings.GENERATION_BACKEND

    if backend == "gemini":
        from vocalcoach.features.generation.data.gemini_adapter import GeminiTextGenerator

        transcriber = GeminiTextGenerator(
            model_name=settings.GEMINI_TRANSCRIPTION_MODEL,
            system_instruction=TRANSCRIPTION_SYSTEM_PROMPT,
        )
        analyzer = GeminiTextGenerator(
            model_name=settings.GEMINI_ANALYSIS_MODEL,
            system_instruction=ANALYSIS_SYSTEM_PROMPT,
            response_mime_type="application/json",
        )
    elif backend == "local":
        from vocalcoach.features.generation.data.whisper_adapter import WhisperTextGenerator
        from vocalcoach.features.generation.data.qwen_adapter import QwenTextGenerator

        transcriber = WhisperTextGenerator(settings.WHISPER_MODEL_NAME)
        analyzer = QwenTextGenerator(settings.QWEN_MODEL_PATH, system_instruction=ANALYSIS_SYSTEM_PROMPT)
    else:
        raise ValueError(f"Unsupported generation backend: {backend}")

    return AnalysisOrchestrator(
        audio_source=LocalAudioSource(settings.RECORDINGS_DIR),
        transcriber=transcriber,
        analyzer=analyzer,
    )


def analyze_recording(
    audio_reference: str,
    is_performance: bool,
    exercise_library: Sequence[Exercise],
) -> Tuple[AnalysisResult, str]:
    """
    Standalone API for analysing one recording without the job system.
    Useful for scripts and manual checks.
    """
    return build_orchestrator().analyze(audio_reference, is_performance, exercise_library)


def analyze_and_store(
    audio_reference: str,
    exercise_library: Sequence[Exercise],
    is_performance: bool = True,
    backend: Optional[str] = None,
    repository: Optional[IAssessmentRepository] = None,
) -> Dict[str, Any]:
    """
    Analyses a recording, picks exercises and persists the assessment.
    Returns the job handler's status dict.
    """
    handler = AnalysisHandler(build_orchestrator(backend), repository)
    return handler.handle(audio_reference, exercise_library, is_performance=is_performance)
