"""Custom exceptions for the :mod:`pulseai` package."""


class PulseAIError(Exception):
    """Base class for all custom ``pulseai`` exceptions.

    Parameters
    ----------
    message:
        Short description of the failure.
    context:
        Optional additional information about where/why the error occurred.
    suggestion:
        Optional hint that may help recover from the error.
    """

    def __init__(
        self,
        message: str = "",
        *,
        context: str | None = None,
        suggestion: str | None = None,
    ) -> None:
        super().__init__(message)
        self.context = context
        self.suggestion = suggestion


class UploadValidationError(PulseAIError):
    """Raised when an uploaded capture is missing, too large or not a CSV."""


class AIAnalysisError(PulseAIError):
    """Raised when the remote AI analysis fails or times out."""


class AIConfigurationError(AIAnalysisError):
    """Raised when no AI backend credentials are configured."""
