"""Unit tests for core configuration module.

Tests cover:
- Default values without environment variables
- Environment variable loading
- CORS origins parsing
- Log level normalization and validation
- Supabase credential requirement for the supabase backend
- Cached settings instance
"""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from taskhub.core.config import Settings, get_settings
from taskhub.core.enums import Environment


@pytest.mark.unit
class TestSettingsDefaults:
    def test_defaults_select_memory_backend(self):
        with patch.dict(os.environ, {}, clear=True):
            s = Settings()

        assert s.backend == "memory"
        assert s.uses_supabase is False
        assert s.environment == Environment.DEVELOPMENT
        assert s.is_development is True
        assert s.api_v1_prefix == "/api/v1"
        assert s.cors_origins == ["http://localhost:5173"]

    def test_policy_files_point_at_packaged_files(self):
        with patch.dict(os.environ, {}, clear=True):
            s = Settings()

        assert s.casbin_model_path.name == "model.conf"
        assert s.casbin_policy_path.name == "policy.csv"
        assert s.casbin_model_path.exists()
        assert s.casbin_policy_path.exists()


@pytest.mark.unit
class TestSettingsFromEnvironment:
    def test_environment_variables_are_loaded(self):
        env = {
            "ENVIRONMENT": "production",
            "APP_NAME": "TaskHub Test",
            "API_BASE_URL": "https://api.example.com/",
            "HTTP_TIMEOUT_SECONDS": "2.5",
        }
        with patch.dict(os.environ, env, clear=True):
            s = Settings()

        assert s.is_production is True
        assert s.app_name == "TaskHub Test"
        assert s.api_base_url == "https://api.example.com"
        assert s.http_timeout_seconds == 2.5

    def test_cors_origins_are_split_and_trimmed(self):
        env = {"CORS_ORIGINS": "http://a.test, http://b.test ,,"}
        with patch.dict(os.environ, env, clear=True):
            s = Settings()

        assert s.cors_origins == ["http://a.test", "http://b.test"]

    def test_log_level_is_upper_cased(self):
        with patch.dict(os.environ, {"LOG_LEVEL": "debug"}, clear=True):
            s = Settings()

        assert s.log_level == "DEBUG"

    def test_unknown_log_level_is_rejected(self):
        with patch.dict(os.environ, {"LOG_LEVEL": "verbose"}, clear=True):
            with pytest.raises(ValidationError):
                Settings()

    def test_non_positive_timeout_is_rejected(self):
        with patch.dict(os.environ, {"HTTP_TIMEOUT_SECONDS": "0"}, clear=True):
            with pytest.raises(ValidationError):
                Settings()


@pytest.mark.unit
class TestSupabaseBackend:
    def test_supabase_backend_requires_credentials(self):
        with patch.dict(os.environ, {"BACKEND": "supabase"}, clear=True):
            with pytest.raises(ValidationError, match="supabase_url"):
                Settings()

    def test_supabase_backend_with_credentials(self):
        env = {
            "BACKEND": "supabase",
            "SUPABASE_URL": "https://xyz.supabase.co/",
            "SUPABASE_ANON_KEY": "anon-key",
        }
        with patch.dict(os.environ, env, clear=True):
            s = Settings()

        assert s.uses_supabase is True
        assert s.supabase_url == "https://xyz.supabase.co"

    def test_unknown_backend_is_rejected(self):
        with patch.dict(os.environ, {"BACKEND": "sqlite"}, clear=True):
            with pytest.raises(ValidationError):
                Settings()


@pytest.mark.unit
class TestGetSettings:
    def test_get_settings_is_cached(self):
        get_settings.cache_clear()
        try:
            assert get_settings() is get_settings()
        finally:
            get_settings.cache_clear()
