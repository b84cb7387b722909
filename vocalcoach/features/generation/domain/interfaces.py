from abc import ABC, abstractmethod


class ITextGenerator(ABC):
    """
    Contract for a generative text backend.
    Two input shapes are supported: raw audio bytes, or a text prompt.
    A backend that only handles one shape raises UnsupportedCapabilityError for the other.
    """

    @abstractmethod
    def generate_from_audio(self, data: bytes, mime_type: str) -> str:
        """
        Sends audio bytes to the model and returns its text response.

        Args:
            data: Raw (encoded) audio file contents.
            mime_type: e.g. 'audio/mp4', 'audio/mpeg'.
        """
        pass

    @abstractmethod
    def generate_from_prompt(self, prompt: str) -> str:
        """Sends a text-only prompt and returns the model's text response."""
        pass
