class GenerationError(Exception):
    """Raised by a text generation backend when a call cannot produce text."""


class UnsupportedCapabilityError(GenerationError):
    """The backend does not implement the requested input shape (audio or prompt)."""


class EmptyResponseError(GenerationError):
    """The backend answered but the response carried no text."""
