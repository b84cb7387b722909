import logging
from pathlib import Path
from typing import Optional
from vocalcoach.core.config.settings import settings
from ..domain.interfaces import IAudioSource, AudioSourceNotFound
from ..domain.models import AudioPayload

logger = logging.getLogger(__name__)

# Older clients stored absolute paths; everything from this segment on is portable
LEGACY_ANCHOR = "Lessons/"

MIME_TYPES = {
    ".mp3": "audio/mpeg",
    ".wav": "audio/wav",
    ".aac": "audio/aac",
}
DEFAULT_MIME_TYPE = "audio/mp4"  # m4a, mp4


def mime_type_for(path: Path) -> str:
    return MIME_TYPES.get(path.suffix.lower(), DEFAULT_MIME_TYPE)


class LocalAudioSource(IAudioSource):
    def __init__(self, root: Optional[Path] = None):
        self.root = Path(root) if root is not None else settings.RECORDINGS_DIR

    def resolve_path(self, reference: str) -> Path:
        """
        Relative references live under the recordings root.
        Absolute or file:// references are re-rooted from 'Lessons/' when present,
        otherwise used as-is.
        """
        if reference.startswith("file://") or reference.startswith("/"):
            idx = reference.find(LEGACY_ANCHOR)
            if idx != -1:
                return self.root / reference[idx:]
            if reference.startswith("file://"):
                return Path(reference[len("file://"):])
            return Path(reference)
        return self.root / reference

    def resolve(self, reference: str) -> AudioPayload:
        path = self.resolve_path(reference)
        if not path.is_file():
            logger.warning(f"Audio reference '{reference}' resolved to missing file {path}")
            raise AudioSourceNotFound(f"Audio file not found: {path}")

        try:
            data = path.read_bytes()
        except OSError as e:
            raise AudioSourceNotFound(f"Audio file not readable: {path}") from e

        return AudioPayload(data=data, mime_type=mime_type_for(path), path=path)
