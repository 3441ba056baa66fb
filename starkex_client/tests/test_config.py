"""Tests for settings loading."""

import pytest

from starkex_client.auth import RequestAuthenticator
from starkex_client.config import StarkexSettings
from starkex_client.exceptions import MissingCredentialError

SECRET = "dGVzdC1zZWNyZXQta2V5LTAxMjM0NTY3ODlhYmNkZWY="


@pytest.fixture
def env(monkeypatch, tmp_path):
    # Keep a stray .env in the working directory out of the picture
    monkeypatch.chdir(tmp_path)
    for name in ("API_KEY", "API_PASSPHRASE", "API_SECRET", "NETWORK_ID", "HEADER_PREFIX"):
        monkeypatch.delenv(f"STARKEX_{name}", raising=False)
    return monkeypatch


class TestStarkexSettings:
    """Environment-driven settings."""

    def test_defaults(self, env):
        settings = StarkexSettings()

        assert settings.network_id == 1
        assert settings.api_host == "https://api.dydx.exchange"
        assert settings.header_prefix == ""
        assert settings.api_secret is None
        assert not settings.enable_metrics

    def test_from_environment(self, env):
        env.setenv("STARKEX_API_KEY", "key-123")
        env.setenv("STARKEX_API_PASSPHRASE", "pass-phrase-456")
        env.setenv("STARKEX_API_SECRET", SECRET)
        env.setenv("STARKEX_NETWORK_ID", "5")
        env.setenv("STARKEX_HEADER_PREFIX", "DYDX-")

        settings = StarkexSettings()

        assert settings.api_key == "key-123"
        assert settings.network_id == 5
        assert settings.header_prefix == "DYDX-"

    def test_from_env_file(self, env, tmp_path):
        (tmp_path / ".env").write_text("STARKEX_API_KEY=from-file\n")
        assert StarkexSettings().api_key == "from-file"

    def test_repr_hides_secrets(self, env):
        settings = StarkexSettings(api_key="key-123", api_passphrase="pass-phrase-456", api_secret=SECRET)

        assert SECRET not in repr(settings)
        assert "pass-phrase-456" not in repr(settings)
        assert "key-123" in repr(settings)

    def test_invalid_metrics_port(self, env):
        with pytest.raises(ValueError):
            StarkexSettings(metrics_port=80)


class TestAuthenticatorFromSettings:
    """Authenticator construction from settings."""

    def test_builds(self, env):
        settings = StarkexSettings(api_key="key-123", api_passphrase="pass", api_secret=SECRET)
        authenticator = RequestAuthenticator.from_settings(settings)

        assert authenticator.api_key == "key-123"
        assert authenticator.sign("GET", "/v3/accounts?limit=10", "2021-01-01T00:00:00Z") == (
            "nv5dGMoz6DpVReon0_Hozr7t25-l3BegbtApOOwSajk="
        )

    def test_missing_secret(self, env):
        settings = StarkexSettings(api_key="key-123", api_passphrase="pass")

        with pytest.raises(MissingCredentialError) as exc_info:
            RequestAuthenticator.from_settings(settings)
        assert exc_info.value.field == "secret"
