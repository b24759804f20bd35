"""
Tests for the Q&A domain layer.

Tests the failure taxonomy and entities in isolation.
No external dependencies or IO required.
"""

import pytest

from app.domain.qa import errors
from app.domain.qa.entities import Account
from app.domain.qa.errors import (
    DatabaseQueryError,
    ExternalClientError,
    ExternalFailure,
    ExternalServerError,
    ParseError,
    QAError,
)

ALL_KINDS = [
    errors.ParseError(ValueError("x")),
    errors.MissingParameters(),
    errors.WrongPassword(),
    errors.CannotDecryptToken(),
    errors.Unauthorized(),
    errors.CredentialHashingError(RuntimeError("x")),
    errors.QuestionNotFound(),
    errors.DatabaseQueryError(RuntimeError("x")),
    errors.MigrationError(RuntimeError("x")),
    errors.ExternalAPIError(RuntimeError("x")),
    errors.ExternalMiddlewareError(RuntimeError("x")),
    errors.ExternalClientError(ExternalFailure(400, "x")),
    errors.ExternalServerError(ExternalFailure(500, "x")),
]


class TestExternalFailure:
    """Tests for the ExternalFailure value object."""

    def test_rendering(self) -> None:
        failure = ExternalFailure(status=401, message="No API key found in request")
        assert str(failure) == "Status: 401, Message: No API key found in request"

    def test_is_immutable(self) -> None:
        failure = ExternalFailure(status=500, message="boom")
        with pytest.raises(AttributeError):
            failure.status = 200


class TestFailureKinds:
    """Tests for the failure taxonomy rendering."""

    @pytest.mark.parametrize("error", ALL_KINDS, ids=lambda e: type(e).__name__)
    def test_rendering_is_stable_and_non_empty(self, error: QAError) -> None:
        assert str(error)
        assert str(error) == str(error)
        assert str(error) == error.message

    @pytest.mark.parametrize("error", ALL_KINDS, ids=lambda e: type(e).__name__)
    def test_every_kind_is_a_qa_error(self, error: QAError) -> None:
        assert isinstance(error, QAError)
        assert error.diagnostic().startswith(error.message)

    def test_client_message_hides_embedded_error(self) -> None:
        error = DatabaseQueryError(RuntimeError("relation accounts does not exist"))
        assert "relation" not in str(error)
        assert "relation accounts does not exist" in error.diagnostic()

    def test_parse_error_keeps_source(self) -> None:
        source = ValueError("invalid literal for int() with base 10: 'ten'")
        error = ParseError(source)
        assert error.source is source
        assert str(error) == "Cannot parse parameter"

    def test_external_errors_carry_failure(self) -> None:
        failure = ExternalFailure(status=429, message="Too many requests")
        assert ExternalClientError(failure).failure is failure
        assert "Status: 429" in ExternalClientError(failure).diagnostic()
        assert "Status: 503" in ExternalServerError(ExternalFailure(503, "x")).diagnostic()


class TestAccountEntity:
    """Tests for the Account entity."""

    def test_password_not_in_repr(self) -> None:
        account = Account(email="a@b.c", password="hunter2")
        assert "hunter2" not in repr(account)
