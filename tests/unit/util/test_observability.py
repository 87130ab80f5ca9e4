"""Tests for Logfire option building and request attribute masking."""

from types import SimpleNamespace

from homie.config import ObservabilitySettings, Settings
from homie.util.observability import (
    SERVICE_VERSION,
    logfire_options,
    map_request_attributes,
    should_send,
)


def _settings(**observability):
    return Settings().model_copy(
        update={"observability": ObservabilitySettings(**observability)}
    )


class TestShouldSend:
    def test_console_only_without_token(self):
        assert should_send(_settings()) is False

    def test_token_enables_sending(self):
        assert should_send(_settings(logfire_token="lf-token")) is True

    def test_explicit_setting_wins(self):
        settings = _settings(logfire_token="lf-token", send_to_logfire=False)

        assert should_send(settings) is False


class TestLogfireOptions:
    def test_token_passed_through(self):
        options = logfire_options(_settings(logfire_token="lf-token"))

        assert options["token"] == "lf-token"
        assert options["service_name"] == "homie-backend"

    def test_no_token_key_without_token(self):
        assert "token" not in logfire_options(_settings())

    def test_git_sha_used_as_version(self):
        settings = _settings().model_copy(update={"git_sha": "abc1234"})

        assert logfire_options(settings)["service_version"] == "abc1234"

    def test_default_version(self):
        settings = _settings().model_copy(update={"git_sha": "unknown"})

        assert logfire_options(settings)["service_version"] == SERVICE_VERSION


class TestMapRequestAttributes:
    def test_masks_credentials(self):
        request = SimpleNamespace(
            method="POST",
            url=SimpleNamespace(path="/compose"),
            client=SimpleNamespace(host="10.0.0.1"),
        )

        result = map_request_attributes(
            request, {"privateKey": "0xabc", "text": "gm"}
        )

        assert result == {
            "privateKey": "[REDACTED]",
            "text": "gm",
            "method": "POST",
            "path": "/compose",
            "client_host": "10.0.0.1",
        }

    def test_websocket_has_no_method(self):
        request = SimpleNamespace(url=SimpleNamespace(path="/ws"), client=None)

        assert map_request_attributes(request, {}) == {"path": "/ws"}
