"""
Tests for environment configuration.
"""

from emotibot_chat.config import Settings
from emotibot_chat.remote import CompletionClient


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("EMOTIBOT_API_KEY", raising=False)
        settings = Settings(_env_file=None)
        assert settings.api_key is None
        assert not CompletionClient.from_settings(settings).enabled
        assert settings.remote_timeout == 5.0
        assert not settings.is_prod

    async def test_key_from_environment(self, monkeypatch):
        monkeypatch.setenv("EMOTIBOT_API_KEY", "secret")
        monkeypatch.setenv("EMOTIBOT_REMOTE_TIMEOUT", "2.5")
        monkeypatch.setenv("EMOTIBOT_ENV", "PROD")
        settings = Settings(_env_file=None)
        assert settings.remote_timeout == 2.5
        assert settings.is_prod

        client = CompletionClient.from_settings(settings)
        assert client.enabled
        await client.aclose()

    def test_blank_key_is_absent(self, monkeypatch):
        monkeypatch.setenv("EMOTIBOT_API_KEY", "  ")
        assert not CompletionClient.from_settings(Settings(_env_file=None)).enabled
