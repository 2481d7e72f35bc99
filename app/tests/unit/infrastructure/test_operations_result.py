"""Unit tests for OperationResult."""

import pytest

from infrastructure.operations import OperationResult, OperationStatus


@pytest.mark.unit
class TestOperationResult:
    def test_success(self):
        result = OperationResult.success(data={"id": "U1"})

        assert result.is_success
        assert result.message == "ok"
        assert result.data_or_none() == {"id": "U1"}

    def test_transient_error(self):
        result = OperationResult.transient_error("slow down", "RATE_LIMITED", 30)

        assert result.status == OperationStatus.TRANSIENT_ERROR
        assert result.retry_after == 30
        assert not result.is_success

    def test_permanent_error(self):
        result = OperationResult.permanent_error("bad", error_code="BAD")

        assert result.status == OperationStatus.PERMANENT_ERROR
        assert result.error_code == "BAD"

    def test_not_found(self):
        result = OperationResult.not_found("missing")

        assert result.status == OperationStatus.NOT_FOUND
        assert result.error_code == "NOT_FOUND"

    def test_error_payload_is_hidden(self):
        result = OperationResult.error(
            OperationStatus.UNAUTHORIZED, "denied", data={"partial": True}
        )

        assert result.data == {"partial": True}
        assert result.data_or_none() is None

    def test_unauthorized(self):
        result = OperationResult.unauthorized(
            "revoked", error_code="SLACK_TOKEN_REVOKED"
        )

        assert result.status == OperationStatus.UNAUTHORIZED
        assert not result.is_transient
        assert result.data_or_none() is None

    def test_only_transient_errors_are_transient(self):
        assert OperationResult.transient_error("timeout").is_transient
        assert not OperationResult.permanent_error("bad").is_transient
        assert not OperationResult.not_found("missing").is_transient
        assert not OperationResult.success().is_transient
