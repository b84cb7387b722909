# File: vocalcoach/features/generation/data/whisper_adapter.py
import os
import tempfile
import logging
import whisper
from vocalcoach.core.config.settings import settings
from vocalcoach.core.model_lifecycle.orchestrator import ModelOrchestrator
from vocalcoach.core.model_lifecycle.types import ModelType
from ..domain.errors import GenerationError, UnsupportedCapabilityError
from ..domain.interfaces import ITextGenerator

logger = logging.getLogger(__name__)

MIME_EXTENSIONS = {
    "audio/mpeg": ".mp3",
    "audio/wav": ".wav",
    "audio/aac": ".aac",
    "audio/mp4": ".m4a",
}


def format_timestamp(seconds: float) -> str:
    """Converts 125.5 -> 2:05"""
    m, s = divmod(int(seconds), 60)
    return "{:d}:{:02d}".format(m, s)


class WhisperTextGenerator(ITextGenerator):
    """
    Local transcription backend.
    Produces one '[M:SS] text' line per Whisper segment.
    """

    def __init__(self, model_size: str = settings.WHISPER_MODEL_NAME):
        self.model_size = model_size
        self.orchestrator = ModelOrchestrator()
        self.device = settings.WHISPER_DEVICE

    def generate_from_audio(self, data: bytes, mime_type: str) -> str:
        logger.info(f"Requesting Whisper ({self.model_size}) for {len(data)} bytes of {mime_type}...")

        def loader():
            logger.debug(f"Loading Whisper {self.model_size}...")
            return whisper.load_model(self.model_size, device=self.device)

        model = self.orchestrator.request_model(ModelType.WHISPER, loader)

        # Whisper reads from disk via ffmpeg, so the bytes go through a temp file
        suffix = MIME_EXTENSIONS.get(mime_type, ".m4a")
        fd, tmp_path = tempfile.mkstemp(suffix=suffix)
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(data)
            result_raw = model.transcribe(tmp_path, fp16=(self.device == "cuda"))
        except Exception as e:
            raise GenerationError(f"Whisper transcription failed: {e}") from e
        finally:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)

        lines = []
        for seg in result_raw.get("segments", []):
            text = seg["text"].strip()
            if text:
                lines.append(f"[{format_timestamp(float(seg['start']))}] {text}")
        return "\n".join(lines)

    def generate_from_prompt(self, prompt: str) -> str:
        raise UnsupportedCapabilityError("Whisper backend only accepts audio input")
