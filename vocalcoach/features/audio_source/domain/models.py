from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class AudioPayload:
    """
    A recording read from storage, ready to be sent inline to a model.
    """
    data: bytes
    mime_type: str
    path: Path

    @property
    def size_bytes(self) -> int:
        return len(self.data)
