from unittest.mock import Mock, patch

import httpx
import openai
import pytest

from pulseai.core.config import Settings
from pulseai.exceptions import AIAnalysisError, AIConfigurationError
from pulseai.llm_analyzer import LLMAnalyzer


def _settings(**overrides) -> Settings:
    return Settings(_env_file=None, deepseek_api_key="test", **overrides)


def _fake_response(content: str) -> Mock:
    response = Mock()
    response.id = "abc123"
    response.choices = [Mock(message=Mock(content=content))]
    return response


def _request() -> httpx.Request:
    return httpx.Request("POST", "https://api.deepseek.com/chat/completions")


def test_analyze_basic():
    client = openai.Client(api_key="test")
    analyzer = LLMAnalyzer(client=client, settings=_settings())

    with patch.object(client.chat.completions, "create", return_value=_fake_response(" the analysis ")) as mock_create:
        result = analyzer.analyze("prompt text")

    kwargs = mock_create.call_args.kwargs
    assert kwargs["messages"] == [{"role": "user", "content": "prompt text"}]
    assert kwargs["model"] == "deepseek-chat"
    assert kwargs["max_tokens"] == 1000
    assert kwargs["temperature"] == 0.1
    assert kwargs["timeout"] == 20.0
    assert result == "the analysis"


def test_build_prompt_samples_first_lines():
    analyzer = LLMAnalyzer(client=Mock(), settings=_settings())
    content = "\n".join(f"line{i}" for i in range(200))
    prompt = analyzer.build_prompt(content)
    assert "Data (50 lines):" in prompt
    assert "line49" in prompt
    assert "line50" not in prompt
    assert prompt.startswith("Analyze this logic analyzer CSV data briefly:")


def test_build_quick_prompt_samples_twenty_lines():
    analyzer = LLMAnalyzer(client=Mock(), settings=_settings())
    content = "\n".join(f"line{i}" for i in range(200))
    prompt = analyzer.build_quick_prompt(content)
    assert "line19" in prompt
    assert "line20" not in prompt


def test_retries_then_raises(monkeypatch):
    monkeypatch.setattr("pulseai.llm_analyzer.time.sleep", lambda _: None)
    client = Mock()
    client.chat.completions.create.side_effect = openai.APIConnectionError(request=_request())
    analyzer = LLMAnalyzer(client=client, settings=_settings(ai_max_attempts=3))

    with pytest.raises(AIAnalysisError):
        analyzer.analyze("prompt")
    assert client.chat.completions.create.call_count == 3


def test_retry_recovers(monkeypatch):
    monkeypatch.setattr("pulseai.llm_analyzer.time.sleep", lambda _: None)
    client = Mock()
    client.chat.completions.create.side_effect = [
        openai.APIConnectionError(request=_request()),
        _fake_response("ok"),
    ]
    analyzer = LLMAnalyzer(client=client, settings=_settings())
    assert analyzer.analyze("prompt") == "ok"


def test_timeout_is_not_retried():
    client = Mock()
    client.chat.completions.create.side_effect = openai.APITimeoutError(request=_request())
    analyzer = LLMAnalyzer(client=client, settings=_settings())

    with pytest.raises(AIAnalysisError, match="API timeout"):
        analyzer.analyze("prompt", timeout=5)
    assert client.chat.completions.create.call_count == 1


def test_empty_content_raises():
    client = Mock()
    client.chat.completions.create.return_value = _fake_response("")
    analyzer = LLMAnalyzer(client=client, settings=_settings())
    with pytest.raises(AIAnalysisError):
        analyzer.analyze("prompt")


def test_from_settings_requires_key():
    with pytest.raises(AIConfigurationError):
        LLMAnalyzer.from_settings(Settings(_env_file=None, deepseek_api_key=None))


def test_from_settings_builds_client():
    analyzer = LLMAnalyzer.from_settings(_settings(deepseek_base_url="https://example.invalid/v1"))
    assert isinstance(analyzer.client, openai.Client)
    assert str(analyzer.client.base_url).startswith("https://example.invalid/v1")
    assert analyzer.model == "deepseek-chat"


def test_response_without_choices_raises():
    client = Mock()
    response = _fake_response("unused")
    response.choices = []
    client.chat.completions.create.return_value = response
    analyzer = LLMAnalyzer(client=client, settings=_settings())
    with pytest.raises(AIAnalysisError, match="no choices"):
        analyzer.analyze("prompt")


def test_choice_without_message_raises():
    client = Mock()
    response = _fake_response("unused")
    response.choices = [Mock(message=None)]
    client.chat.completions.create.return_value = response
    analyzer = LLMAnalyzer(client=client, settings=_settings())
    with pytest.raises(AIAnalysisError):
        analyzer.analyze("prompt")
