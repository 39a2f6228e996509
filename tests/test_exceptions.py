"""Tests for custom exception hierarchy."""

import pytest

from pulseai.exceptions import (
    AIAnalysisError,
    AIConfigurationError,
    PulseAIError,
    UploadValidationError,
)


def test_exceptions_can_be_caught():
    """Each custom exception should be catchable via the base class."""
    with pytest.raises(PulseAIError):
        raise PulseAIError()
    for exc_cls in [UploadValidationError, AIAnalysisError, AIConfigurationError]:
        with pytest.raises(PulseAIError):
            raise exc_cls()


def test_configuration_error_is_analysis_error():
    """Missing credentials must trigger the same fallback as a failed call."""
    assert issubclass(AIConfigurationError, AIAnalysisError)


def test_context_and_suggestion():
    exc = PulseAIError("boom", context="ctx", suggestion="try again")
    assert str(exc) == "boom"
    assert exc.context == "ctx"
    assert exc.suggestion == "try again"
