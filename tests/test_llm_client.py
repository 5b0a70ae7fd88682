"""Tests for AnthropicTextClient with a mocked Anthropic SDK client."""

from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import anthropic
import httpx
import pytest

from src.prodsignal.config.settings import Settings
from src.prodsignal.core.exceptions import (
    ConfigurationError,
    RateLimitedError,
    UnclassifiedError,
    UpstreamOverloadedError,
)
from src.prodsignal.llm.anthropic import extract_text, extract_usage, translate_error
from src.prodsignal.llm.client import AnthropicTextClient


def _response(status: int) -> httpx.Response:
    request = httpx.Request("POST", "https://api.anthropic.com/v1/messages")
    return httpx.Response(status, request=request)


def _overloaded() -> anthropic.APIStatusError:
    return anthropic.InternalServerError(
        "Overloaded",
        response=_response(529),
        body={"type": "error", "error": {"type": "overloaded_error", "message": "Overloaded"}},
    )


def _rate_limited() -> anthropic.APIStatusError:
    return anthropic.RateLimitError(
        "Rate limited",
        response=_response(429),
        body={"type": "error", "error": {"type": "rate_limit_error", "message": "Rate limited"}},
    )


def _message(text: str = "PROBLEMS IDENTIFIED\nProblem: X") -> SimpleNamespace:
    return SimpleNamespace(
        content=[SimpleNamespace(type="text", text=text)],
        usage=SimpleNamespace(input_tokens=120, output_tokens=80),
    )


def _client(test_settings, sleep, *outcomes):
    sdk = MagicMock()
    sdk.messages.create.side_effect = list(outcomes)
    return AnthropicTextClient(test_settings, sdk_client=sdk, sleep=sleep), sdk


class TestGenerate:
    def test_sends_single_user_message(self, test_settings, sleep_recorder):
        client, sdk = _client(test_settings, sleep_recorder, _message("hello"))

        text = client.generate("the prompt")

        assert text == "hello"
        sdk.messages.create.assert_called_once_with(
            model="claude-test",
            max_tokens=4000,
            messages=[{"role": "user", "content": "the prompt"}],
        )
        assert sleep_recorder.calls == []

    def test_retries_overloaded_with_call_site_delay(self, test_settings, sleep_recorder):
        client, sdk = _client(
            test_settings, sleep_recorder, _overloaded(), _rate_limited(), _message("done")
        )

        assert client.generate("prompt") == "done"
        assert sdk.messages.create.call_count == 3
        assert sleep_recorder.calls == [1.5, 3.0]

    def test_exhausted_overload_surfaces_classified_error(self, test_settings, sleep_recorder):
        client, sdk = _client(
            test_settings, sleep_recorder, _overloaded(), _overloaded(), _overloaded()
        )

        with pytest.raises(UpstreamOverloadedError) as excinfo:
            client.generate("prompt")

        assert excinfo.value.status_code == 529
        assert isinstance(excinfo.value.__cause__, anthropic.InternalServerError)
        assert sdk.messages.create.call_count == 3

    def test_exhausted_rate_limit_surfaces_rate_limited(self, test_settings, sleep_recorder):
        client, _ = _client(
            test_settings, sleep_recorder, _rate_limited(), _rate_limited(), _rate_limited()
        )

        with pytest.raises(RateLimitedError):
            client.generate("prompt")

    def test_bad_request_is_not_retried(self, test_settings, sleep_recorder):
        error = anthropic.BadRequestError(
            "prompt is too long",
            response=_response(400),
            body={"type": "error", "error": {"type": "invalid_request_error"}},
        )
        client, sdk = _client(test_settings, sleep_recorder, error, _message())

        with pytest.raises(UnclassifiedError) as excinfo:
            client.generate("prompt")

        assert excinfo.value.status_code == 400
        assert sdk.messages.create.call_count == 1
        assert sleep_recorder.calls == []

    def test_rejected_key_is_configuration_error(self, test_settings, sleep_recorder):
        error = anthropic.AuthenticationError(
            "invalid x-api-key",
            response=_response(401),
            body={"type": "error", "error": {"type": "authentication_error"}},
        )
        client, sdk = _client(test_settings, sleep_recorder, error)

        with pytest.raises(ConfigurationError):
            client.generate("prompt")

        assert sdk.messages.create.call_count == 1

    def test_missing_api_key_fails_without_retry(self, sleep_recorder):
        settings = Settings(_env_file=None, anthropic_api_key="")
        client = AnthropicTextClient(settings, sleep=sleep_recorder)

        with patch("src.prodsignal.llm.env.Anthropic") as sdk_cls:
            with pytest.raises(ConfigurationError):
                client.generate("prompt")

        sdk_cls.assert_not_called()
        assert sleep_recorder.calls == []

    def test_sdk_client_built_lazily_from_settings(self, test_settings, sleep_recorder):
        client = AnthropicTextClient(test_settings, sleep=sleep_recorder)

        with patch("src.prodsignal.llm.env.Anthropic") as sdk_cls:
            sdk_cls.return_value.messages.create.return_value = _message("lazy")
            assert client.generate("prompt") == "lazy"
            assert client.generate("again") == "lazy"

        sdk_cls.assert_called_once_with(api_key="test-key")

    def test_sdk_client_uses_trimmed_base_url(self, sleep_recorder):
        settings = Settings(
            _env_file=None,
            anthropic_api_key="test-key",
            anthropic_base_url=" https://proxy.example.com/ ",
            anthropic_model="claude-test",
        )
        client = AnthropicTextClient(settings, sleep=sleep_recorder)

        with patch("src.prodsignal.llm.env.Anthropic") as sdk_cls:
            sdk_cls.return_value.messages.create.return_value = _message("proxied")
            assert client.generate("prompt") == "proxied"

        sdk_cls.assert_called_once_with(api_key="test-key", base_url="https://proxy.example.com")


class TestResponseHelpers:
    def test_non_text_first_block_yields_empty_text(self):
        message = SimpleNamespace(content=[SimpleNamespace(type="tool_use", name="x")])

        assert extract_text(message) == ""

    def test_empty_content_yields_empty_text(self):
        assert extract_text(SimpleNamespace(content=[])) == ""
        assert extract_text({"content": [{"type": "text", "text": "dict form"}]}) == "dict form"

    def test_usage_totals(self):
        assert extract_usage(_message()) == {
            "input_tokens": 120,
            "output_tokens": 80,
            "total_tokens": 200,
        }
        assert extract_usage(SimpleNamespace()) == {}

    def test_translate_leaves_foreign_errors_alone(self):
        error = KeyError("boom")

        assert translate_error(error) is error
