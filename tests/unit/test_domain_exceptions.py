"""Tests for domain exceptions (error_code, message, details, to_dict)."""

from app.domain.exceptions import (
    AuthenticationException,
    AuthorizationException,
    DashboardException,
    ValidationException,
)


def test_dashboard_exception_default_error_code() -> None:
    exc = DashboardException("Something failed")
    assert exc.message == "Something failed"
    assert exc.error_code == "DashboardException"
    assert exc.details == {}


def test_dashboard_exception_to_dict() -> None:
    exc = DashboardException("Oops", error_code="CUSTOM", details={"key": "value"})
    assert exc.to_dict() == {
        "error": "CUSTOM",
        "message": "Oops",
        "details": {"key": "value"},
    }


def test_validation_exception() -> None:
    exc = ValidationException("Invalid format", field="role")
    assert exc.error_code == "VALIDATION_ERROR"
    assert exc.details == {"field": "role"}


def test_authentication_exception_default_message() -> None:
    exc = AuthenticationException()
    assert exc.message == "Authentication failed"
    assert exc.error_code == "AUTHENTICATION_ERROR"


def test_authorization_exception_with_resource_and_action() -> None:
    exc = AuthorizationException(resource="inventory", action="create")
    assert exc.message == "Permission denied: create on inventory"
    assert exc.error_code == "PERMISSION_DENIED"
    assert exc.details == {"resource": "inventory", "action": "create"}


def test_authorization_exception_without_context() -> None:
    exc = AuthorizationException()
    assert exc.message == "Permission denied"
    assert exc.details == {}
