"""LLM-based analysis of logic analyzer captures."""

from __future__ import annotations

import time
from typing import Optional

import openai

from .core.config import Settings, settings as default_settings
from .exceptions import AIAnalysisError, AIConfigurationError
from .logging import get_logger
from .parser import sample_lines

logger = get_logger(__name__)


def _message_content(response) -> str:
    """Return the stripped text of the first choice in ``response``."""
    choices = getattr(response, "choices", None)
    if not choices:
        raise AIAnalysisError("AI backend returned no choices")
    message = getattr(choices[0], "message", None)
    content = getattr(message, "content", None) if message is not None else None
    if not isinstance(content, str) or not content.strip():
        raise AIAnalysisError("Empty response from AI backend")
    return content.strip()


class LLMAnalyzer:
    """Ask an OpenAI-compatible chat model to describe a capture."""

    def __init__(
        self,
        client: Optional[openai.Client] = None,
        model: Optional[str] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        """Initialize the analyzer with an optional preconfigured client."""
        self.settings = settings or default_settings
        if client is None:
            client = openai.Client(
                api_key=self.settings.deepseek_api_key,
                base_url=self.settings.deepseek_base_url,
                max_retries=0,
            )
        self.client = client
        self.model = model or self.settings.deepseek_model

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "LLMAnalyzer":
        """Return an analyzer for the configured backend.

        Raises :class:`AIConfigurationError` when no API key is set.
        """
        cfg = settings or default_settings
        if not cfg.deepseek_api_key:
            raise AIConfigurationError(
                "No API key",
                suggestion="Set DEEPSEEK_API_KEY to enable AI analysis.",
            )
        return cls(settings=cfg)

    def build_prompt(self, content: str) -> str:
        sample, count, total = sample_lines(content, self.settings.ai_sample_lines)
        logger.info("Using %d lines out of %d total lines", count, total)
        return (
            "Analyze this logic analyzer CSV data briefly:\n\n"
            "PROTOCOL: \n"
            "DEVICES: \n"
            "PINS: \n"
            "TIMING: \n"
            "NOTES: \n\n"
            f"Data ({count} lines):\n"
            f"{sample}\n\n"
            "Provide concise analysis in bullet points."
        )

    def build_quick_prompt(self, content: str) -> str:
        sample, count, _ = sample_lines(content, self.settings.quick_sample_lines)
        return (
            f"Quick analysis of logic data ({count} lines):\n\n"
            "Data:\n"
            f"{sample}\n\n"
            "Respond in 3-4 bullet points about protocol and devices."
        )

    def analyze(self, prompt: str, *, timeout: Optional[float] = None) -> str:
        """Return the model's answer to ``prompt``.

        Rate limits, timeouts and API errors are retried with exponential
        backoff up to ``settings.ai_max_attempts`` times before
        :class:`AIAnalysisError` is raised.
        """
        timeout = self.settings.ai_timeout if timeout is None else timeout
        attempts = max(1, self.settings.ai_max_attempts)
        messages = [{"role": "user", "content": prompt}]

        for attempt in range(attempts):
            try:
                response = self.client.chat.completions.create(
                    model=self.model,
                    messages=messages,
                    temperature=self.settings.ai_temperature,
                    max_tokens=self.settings.ai_max_tokens,
                    stream=False,
                    timeout=timeout,
                )
                logger.debug("AI analysis request id=%s", response.id)
                return _message_content(response)
            except openai.APITimeoutError as exc:
                # A timed out request will not get faster on retry.
                raise AIAnalysisError(
                    f"API timeout ({timeout:g}s)", context=self.model
                ) from exc
            except (openai.RateLimitError, TimeoutError, openai.APIError) as exc:
                logger.warning("AI analysis attempt %d failed: %s", attempt + 1, exc)
                if attempt == attempts - 1:
                    raise AIAnalysisError(str(exc), context=self.model) from exc
                time.sleep(2 ** attempt)

        raise AIAnalysisError("Failed to generate analysis")
