"""
Unit tests for configuration management (flat Settings).

Tests cover:
- Environment detection and JSON log selection
- Validation (ports, log level/format, pool bounds, business rules, adapters)
- CORS parsing
- Default values
- Cached singleton behavior
"""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from src.core.config import Settings, get_settings
from src.core.enums import Environment


def make_settings(**overrides) -> Settings:
    """Build Settings from keyword arguments only (no .env file)."""
    return Settings(_env_file=None, **overrides)


class TestEnvironmentEnum:
    """Test Environment enum."""

    def test_environment_values(self):
        assert Environment.DEVELOPMENT == "development"
        assert Environment.TESTING == "testing"
        assert Environment.CI == "ci"
        assert Environment.PRODUCTION == "production"


class TestSettingsDefaults:
    def test_business_rule_defaults(self):
        settings = make_settings()

        assert settings.late_fee_per_day == Decimal("10.00")
        assert settings.maintenance_interval_days == 90
        assert settings.payment_provider == "mock"
        assert settings.notification_provider == "console"
        assert settings.payment_fail_all is False

    def test_api_defaults(self):
        settings = make_settings()

        assert settings.api_prefix == "/api"
        assert settings.app_name == "Equipment Rental API"


class TestSettingsValidation:
    """Test Settings field validation."""

    @pytest.mark.parametrize("port", [0, 65536])
    def test_port_out_of_range(self, port):
        with pytest.raises(ValidationError) as exc_info:
            make_settings(port=port)

        assert "port must be between 1 and 65535" in str(exc_info.value)

    def test_blank_database_url(self):
        with pytest.raises(ValidationError):
            make_settings(database_url="   ")

    def test_log_level_normalized(self):
        assert make_settings(log_level="debug").log_level == "DEBUG"

    def test_unknown_log_level(self):
        with pytest.raises(ValidationError) as exc_info:
            make_settings(log_level="VERBOSE")

        assert "log_level must be one of" in str(exc_info.value)

    def test_unknown_log_format(self):
        with pytest.raises(ValidationError):
            make_settings(log_format="xml")

    def test_pool_max_below_min(self):
        with pytest.raises(ValidationError) as exc_info:
            make_settings(db_pool_min=5, db_pool_max=2)

        assert "db_pool_max must be greater than or equal to db_pool_min" in str(
            exc_info.value
        )

    def test_pool_max_above_limit(self):
        with pytest.raises(ValidationError):
            make_settings(db_pool_max=101)

    def test_request_timeout_above_limit(self):
        with pytest.raises(ValidationError):
            make_settings(request_timeout_ms=300_001)

    def test_negative_late_fee(self):
        with pytest.raises(ValidationError):
            make_settings(late_fee_per_day=Decimal("-1"))

    def test_zero_maintenance_interval(self):
        with pytest.raises(ValidationError):
            make_settings(maintenance_interval_days=0)

    def test_unsupported_payment_provider(self):
        with pytest.raises(ValidationError) as exc_info:
            make_settings(payment_provider="stripe")

        assert "payment_provider must be 'mock'" in str(exc_info.value)

    def test_unsupported_notification_provider(self):
        with pytest.raises(ValidationError):
            make_settings(notification_provider="sms")

    def test_api_base_url_trailing_slash_removed(self):
        assert make_settings(api_base_url="https://rent.example.com/").api_base_url == (
            "https://rent.example.com"
        )


class TestCorsParsing:
    def test_comma_separated_origins(self):
        settings = make_settings(cors_origins="https://a.com, https://b.com,")

        assert settings.cors_origins == ["https://a.com", "https://b.com"]

    def test_list_origins(self):
        settings = make_settings(cors_origins=[" https://a.com ", ""])

        assert settings.cors_origins == ["https://a.com"]


class TestEnvironmentDetection:
    @pytest.mark.parametrize(
        ("environment", "json_logs"),
        [
            (Environment.DEVELOPMENT, False),
            (Environment.TESTING, True),
            (Environment.CI, True),
            (Environment.PRODUCTION, True),
        ],
    )
    def test_json_logs_by_environment(self, environment, json_logs):
        settings = make_settings(environment=environment, log_format="console")

        assert settings.use_json_logs is json_logs

    def test_explicit_json_format_in_development(self):
        settings = make_settings(environment=Environment.DEVELOPMENT, log_format="json")

        assert settings.use_json_logs is True

    def test_environment_flags(self):
        settings = make_settings(environment=Environment.PRODUCTION)

        assert settings.is_production
        assert not settings.is_development
        assert not settings.is_testing


class TestCachedSettings:
    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()

    def test_test_suite_runs_in_testing_environment(self):
        assert get_settings().environment == Environment.TESTING
