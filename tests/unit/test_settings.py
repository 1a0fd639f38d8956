"""
Unit tests for backend/settings.py
"""

import pytest
from pydantic import ValidationError

from backend.settings import Settings, get_settings


# Environment variables that CI might set which we need to clear for default tests
CI_ENV_VARS = [
    "ENVIRONMENT",
    "SUPABASE_URL",
    "SUPABASE_SERVICE_ROLE_KEY",
    "SUPABASE_ANON_KEY",
    "MAX_LOGS_TABLE",
    "JWT_SECRET",
    "JWT_ISSUER",
    "JWT_AUDIENCE",
    "API_KEYS",
    "RECENT_RECORDS_DAYS",
    "STRONGEST_EXERCISES_LIMIT",
    "CORS_ALLOWED_ORIGINS",
    "SENTRY_DSN",
]


@pytest.fixture
def clean_env(monkeypatch):
    """Clear CI environment variables to test true defaults."""
    for var in CI_ENV_VARS:
        monkeypatch.delenv(var, raising=False)


@pytest.mark.unit
class TestSettingsDefaults:
    """Test that Settings applies correct defaults."""

    def test_environment_default(self, clean_env):
        """Default environment should be development."""
        settings = Settings(_env_file=None)
        assert settings.environment == "development"

    def test_supabase_fields_default_to_none(self, clean_env):
        """Supabase fields should default to None."""
        settings = Settings(_env_file=None)
        assert settings.supabase_url is None
        assert settings.supabase_service_role_key is None
        assert settings.supabase_anon_key is None

    def test_max_logs_table_default(self, clean_env):
        settings = Settings(_env_file=None)
        assert settings.max_logs_table == "max_logs"

    def test_jwt_defaults(self, clean_env):
        """JWT secret has a default; issuer and audience are unchecked."""
        settings = Settings(_env_file=None)
        assert settings.jwt_secret == "maxlog-jwt-secret-change-in-production"
        assert settings.jwt_issuer is None
        assert settings.jwt_audience is None

    def test_records_defaults(self, clean_env):
        settings = Settings(_env_file=None)
        assert settings.recent_records_days == 30
        assert settings.strongest_exercises_limit == 10

    def test_cors_defaults(self, clean_env):
        settings = Settings(_env_file=None)
        assert settings.cors_origins_list == [
            "http://localhost:3000",
            "http://localhost:5173",
        ]

    def test_sentry_dsn_default_to_none(self, clean_env):
        """Sentry DSN should default to None."""
        settings = Settings(_env_file=None)
        assert settings.sentry_dsn is None


@pytest.mark.unit
class TestSettingsValidation:
    """Test Settings validation behavior."""

    def test_valid_environments_accepted(self):
        """Valid environment values should be accepted."""
        for env in ["development", "staging", "production", "test"]:
            settings = Settings(environment=env)
            assert settings.environment == env

    def test_environment_case_insensitive(self):
        """Environment validation should be case-insensitive."""
        settings = Settings(environment="PRODUCTION")
        assert settings.environment == "production"

    def test_invalid_environment_raises_error(self):
        """Invalid environment should raise ValidationError."""
        with pytest.raises(ValidationError) as exc_info:
            Settings(environment="invalid")
        assert "Invalid environment" in str(exc_info.value)

    @pytest.mark.parametrize(
        "field", ["recent_records_days", "strongest_exercises_limit"]
    )
    def test_record_windows_must_be_positive(self, field):
        with pytest.raises(ValidationError):
            Settings(**{field: 0})


@pytest.mark.unit
class TestSettingsProperties:
    """Test Settings computed properties."""

    def test_supabase_key_prefers_service_role(self, clean_env):
        """supabase_key should prefer service role key over anon key."""
        settings = Settings(
            _env_file=None,
            supabase_service_role_key="service-key",
            supabase_anon_key="anon-key",
        )
        assert settings.supabase_key == "service-key"

    def test_supabase_key_falls_back_to_anon(self, clean_env):
        """supabase_key should fall back to anon key if no service role."""
        settings = Settings(
            _env_file=None,
            supabase_service_role_key=None,
            supabase_anon_key="anon-key",
        )
        assert settings.supabase_key == "anon-key"

    def test_supabase_key_returns_none_if_neither(self, clean_env):
        """supabase_key should return None if no keys set."""
        settings = Settings(_env_file=None)
        assert settings.supabase_key is None

    def test_api_keys_list_parses_comma_separated(self):
        """api_keys_list should parse comma-separated keys."""
        settings = Settings(api_keys="key1, key2, key3")
        assert settings.api_keys_list == ["key1", "key2", "key3"]

    def test_api_keys_list_handles_empty(self):
        """api_keys_list should handle empty string."""
        settings = Settings(api_keys="")
        assert settings.api_keys_list == []

    def test_cors_origins_list_strips_whitespace(self):
        settings = Settings(cors_allowed_origins=" https://a.example ,https://b.example, ")
        assert settings.cors_origins_list == ["https://a.example", "https://b.example"]

    def test_is_test_property(self):
        assert Settings(environment="test").is_test is True
        assert Settings(environment="development").is_test is False


@pytest.mark.unit
class TestGetSettings:
    """Test get_settings() function."""

    def test_get_settings_returns_settings_instance(self):
        """get_settings() should return a Settings instance."""
        get_settings.cache_clear()
        assert isinstance(get_settings(), Settings)

    def test_get_settings_is_cached(self):
        """get_settings() should return the same cached instance."""
        get_settings.cache_clear()
        assert get_settings() is get_settings()


@pytest.mark.unit
class TestSettingsFromEnv:
    """Test Settings loading from environment variables."""

    def test_settings_loads_from_env(self, monkeypatch):
        """Settings should load values from environment variables."""
        monkeypatch.setenv("ENVIRONMENT", "staging")
        monkeypatch.setenv("SUPABASE_URL", "https://test.supabase.co")
        monkeypatch.setenv("JWT_SECRET", "my-secret")
        monkeypatch.setenv("MAX_LOGS_TABLE", "lifts")

        settings = Settings()

        assert settings.environment == "staging"
        assert settings.supabase_url == "https://test.supabase.co"
        assert settings.jwt_secret == "my-secret"
        assert settings.max_logs_table == "lifts"

    def test_integer_env_vars(self, monkeypatch):
        monkeypatch.setenv("RECENT_RECORDS_DAYS", "14")
        monkeypatch.setenv("STRONGEST_EXERCISES_LIMIT", "5")

        settings = Settings()

        assert settings.recent_records_days == 14
        assert settings.strongest_exercises_limit == 5
