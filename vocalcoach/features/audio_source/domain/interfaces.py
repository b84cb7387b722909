from abc import ABC, abstractmethod
from .models import AudioPayload


class AudioSourceNotFound(FileNotFoundError):
    """No readable recording exists for the given reference."""


class IAudioSource(ABC):
    """
    Maps a logical recording reference (usually a path relative to the
    recordings root) to its bytes.
    """

    @abstractmethod
    def resolve(self, reference: str) -> AudioPayload:
        """
        Raises:
            AudioSourceNotFound: if nothing readable exists at the reference.
        """
        pass
