"""Tests for Settings validation."""

import pytest
from pydantic import ValidationError

from app.core.config import Settings


def test_defaults_with_secret() -> None:
    settings = Settings(secret_key="s3cret", _env_file=None)
    assert settings.dynamic_permissions_enabled is True
    assert settings.dashboard_url == "/dashboard"
    assert settings.algorithm == "HS256"


def test_missing_secret_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("SECRET_KEY", raising=False)
    with pytest.raises(ValidationError, match="SECRET_KEY is required"):
        Settings(_env_file=None)


def test_asymmetric_algorithm_rejected() -> None:
    with pytest.raises(ValidationError, match="algorithm"):
        Settings(secret_key="s3cret", algorithm="RS256", _env_file=None)


def test_relative_dashboard_url_rejected() -> None:
    with pytest.raises(ValidationError, match="dashboard_url"):
        Settings(secret_key="s3cret", dashboard_url="dashboard", _env_file=None)


def test_env_override(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DYNAMIC_PERMISSIONS_ENABLED", "false")
    settings = Settings(secret_key="s3cret", _env_file=None)
    assert settings.dynamic_permissions_enabled is False
