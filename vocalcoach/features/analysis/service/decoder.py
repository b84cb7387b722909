from pydantic import ValidationError

from ..data.schema import AnalysisDocument
from ..domain.models import AnalysisResult


class DecodeError(ValueError):
    """The text is not a complete, well-typed analysis document."""


def decode(text: str) -> AnalysisResult:
    """
    Parses sanitized model output into an AnalysisResult.

    Raises:
        DecodeError: on invalid JSON, a missing required key, or a wrongly typed value.
    """
    try:
        document = AnalysisDocument.model_validate_json(text)
    except ValidationError as e:
        raise DecodeError(f"{e.error_count()} problem(s) in analysis document: {text[:300]}") from e
    return document.to_domain()
