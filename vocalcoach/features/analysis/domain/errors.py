from typing import Optional


class AnalysisError(Exception):
    """Base class for every way an analysis run can fail."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


class AudioFileNotFound(AnalysisError):
    def __init__(self, reference: str, cause: Optional[BaseException] = None):
        super().__init__(f"Audio file not found: {reference}", cause)
        self.reference = reference


class AudioFileTooLarge(AnalysisError):
    def __init__(self, size_mb: float, limit_mb: float):
        super().__init__(f"Audio file is {size_mb:.0f}MB, exceeds the {limit_mb:.0f}MB analysis limit")
        self.size_mb = size_mb
        self.limit_mb = limit_mb


class TranscriptionFailed(AnalysisError):
    def __init__(self, cause: Optional[BaseException] = None, detail: Optional[str] = None):
        super().__init__(f"Transcription failed: {detail or cause}", cause)


class AnalysisFailed(AnalysisError):
    def __init__(self, cause: Optional[BaseException] = None):
        super().__init__(f"Analysis failed: {cause}", cause)


class InvalidResponse(AnalysisError):
    def __init__(self, cause: Optional[BaseException] = None):
        super().__init__(f"Could not read AI response: {cause}", cause)


class AnalysisCancelled(AnalysisError):
    def __init__(self, stage):
        super().__init__(f"Analysis cancelled before {stage.value}")
        self.stage = stage
