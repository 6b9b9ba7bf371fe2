"""Tests for shared/config.py."""

import pytest
from pydantic import ValidationError

from shared.config import Settings, get_settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("JWT_SECRET", raising=False)
        settings = Settings(_env_file=None)
        assert settings.jwt_algorithm == "HS256"
        assert settings.jwt_expire_minutes == 60
        assert settings.password_hash_rounds == 10
        assert settings.port == 3000

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("JWT_SECRET", "from-env")
        monkeypatch.setenv("JWT_EXPIRE_MINUTES", "15")
        settings = Settings(_env_file=None)
        assert settings.jwt_secret == "from-env"
        assert settings.jwt_expire_minutes == 15

    def test_require_signing_secret(self):
        assert Settings(jwt_secret="abc").require_signing_secret() == "abc"

    def test_missing_signing_secret_is_fatal(self):
        """Startup refuses to run without a signing secret."""
        with pytest.raises(RuntimeError, match="JWT_SECRET"):
            Settings(jwt_secret="").require_signing_secret()

    @pytest.mark.parametrize("rounds", [3, 32])
    def test_hash_rounds_bounds(self, rounds):
        with pytest.raises(ValidationError):
            Settings(password_hash_rounds=rounds)

    def test_mail_configured(self):
        assert not Settings(mail_api_url="", mail_api_key="").mail_configured
        assert Settings(mail_api_url="https://mail", mail_api_key="k").mail_configured


class TestGetSettings:
    def test_cached(self):
        assert get_settings() is get_settings()
