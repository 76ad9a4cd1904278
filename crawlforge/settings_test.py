"""Unit tests for settings."""

from .settings import DEFAULT_CACHE_DIR, get_settings


def describe_get_settings():
    def it_has_defaults(monkeypatch):
        monkeypatch.delenv("CRAWLFORGE_FORGE", raising=False)
        monkeypatch.delenv("CRAWLFORGE_MAX_RETRIES", raising=False)
        monkeypatch.delenv("CRAWLFORGE_CACHE_DIR", raising=False)

        settings = get_settings()

        assert settings.forge == "github"
        assert settings.max_retries == 3
        assert settings.cache_dir == DEFAULT_CACHE_DIR
        assert settings.user_agent.startswith("crawlforge/")

    def it_reads_prefixed_environment_variables(monkeypatch):
        monkeypatch.setenv("CRAWLFORGE_FORGE", "opengrok")
        monkeypatch.setenv("CRAWLFORGE_REQUEST_TIMEOUT", "2.5")

        settings = get_settings()

        assert settings.forge == "opengrok"
        assert settings.request_timeout == 2.5
