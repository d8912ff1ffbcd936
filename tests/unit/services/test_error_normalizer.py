"""
Unit tests for the store error normalizer.
"""

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from jobdesk.application.services.error_normalizer import (
    GENERIC_FALLBACK_MESSAGE,
    STATUS_CODES,
    UNKNOWN_FALLBACK_MESSAGE,
    ErrorNormalizer,
    NormalizedError,
    normalized_store_errors,
)
from jobdesk.domain.exceptions.store_error import (
    RecordNotFoundError,
    StoreError,
    StoreFailureKind,
)


class FakeDriverError(Exception):
    """Driver exception carrying a SQLSTATE code."""

    def __init__(self, message, sqlstate=None):
        super().__init__(message)
        self.sqlstate = sqlstate


@pytest.fixture
def normalizer():
    return ErrorNormalizer()


def integrity_error(message, sqlstate=None):
    return IntegrityError("INSERT ...", {}, FakeDriverError(message, sqlstate))


class TestNormalize:
    """Kind to status and message mapping."""

    def test_every_kind_is_mapped(self, normalizer):
        for kind in StoreFailureKind:
            result = normalizer.normalize(kind, "customer")
            assert result.status_code == STATUS_CODES[kind]
            assert result.kind is kind

    def test_unique_constraint(self, normalizer):
        result = normalizer.normalize(
            StoreFailureKind.UNIQUE_CONSTRAINT_VIOLATION, "customer"
        )
        assert result.status_code == 409
        assert result.message == "A customer with the same details already exists."

    def test_foreign_key(self, normalizer):
        result = normalizer.normalize(StoreFailureKind.FOREIGN_KEY_VIOLATION, "question")
        assert result.status_code == 409
        assert (
            result.message
            == "Cannot delete the question as it is referenced by another record."
        )

    def test_record_not_found_on_delete(self, normalizer):
        result = normalizer.normalize(
            StoreFailureKind.RECORD_NOT_FOUND_ON_DELETE, "job answer"
        )
        assert result.status_code == 404
        assert result.message == "The job answer you are trying to delete does not exist."

    def test_generic_failure_uses_caller_message(self, normalizer):
        result = normalizer.normalize(
            StoreFailureKind.GENERIC_FAILURE, "job", "Failed to fetch jobs"
        )
        assert result.status_code == 500
        assert result.message == "Failed to fetch jobs"

    def test_generic_failure_fallback(self, normalizer):
        result = normalizer.normalize(StoreFailureKind.GENERIC_FAILURE, "job")
        assert result.message == GENERIC_FALLBACK_MESSAGE

    def test_unknown_failure_ignores_caller_message(self, normalizer):
        result = normalizer.normalize(
            StoreFailureKind.UNKNOWN_FAILURE, "job", "Failed to fetch jobs"
        )
        assert result.status_code == 500
        assert result.message == UNKNOWN_FALLBACK_MESSAGE


class TestClassify:
    """Store exception classification."""

    def test_postgres_unique_violation(self, normalizer):
        exc = integrity_error("duplicate key value", sqlstate="23505")
        assert normalizer.classify(exc) == (
            StoreFailureKind.UNIQUE_CONSTRAINT_VIOLATION,
            "23505",
        )

    def test_postgres_foreign_key_violation(self, normalizer):
        exc = integrity_error("violates foreign key", sqlstate="23503")
        assert normalizer.classify(exc) == (StoreFailureKind.FOREIGN_KEY_VIOLATION, "23503")

    def test_sqlite_messages(self, normalizer):
        unique = integrity_error("UNIQUE constraint failed: users.username")
        foreign = integrity_error("FOREIGN KEY constraint failed")

        assert normalizer.classify(unique)[0] is StoreFailureKind.UNIQUE_CONSTRAINT_VIOLATION
        assert normalizer.classify(foreign)[0] is StoreFailureKind.FOREIGN_KEY_VIOLATION

    def test_unrecognized_integrity_error(self, normalizer):
        exc = integrity_error("NOT NULL constraint failed: jobs.name")
        assert normalizer.classify(exc)[0] is StoreFailureKind.UNKNOWN_FAILURE

    def test_other_database_error_is_generic(self, normalizer):
        exc = OperationalError("SELECT 1", {}, FakeDriverError("connection refused"))
        assert normalizer.classify(exc)[0] is StoreFailureKind.GENERIC_FAILURE

    def test_store_error_keeps_its_kind(self, normalizer):
        exc = RecordNotFoundError("Customer", 3)
        assert normalizer.classify(exc) == (
            StoreFailureKind.RECORD_NOT_FOUND_ON_DELETE,
            None,
        )

    def test_anything_else_is_unknown(self, normalizer):
        assert normalizer.classify(RuntimeError("boom"))[0] is StoreFailureKind.UNKNOWN_FAILURE


class TestNormalizedStoreErrors:
    """Context manager used by the routes."""

    def test_store_error_is_normalized(self):
        with pytest.raises(NormalizedError) as exc_info:
            with normalized_store_errors("question"):
                raise StoreError(StoreFailureKind.FOREIGN_KEY_VIOLATION)

        assert exc_info.value.status_code == 409
        assert "question" in exc_info.value.message

    def test_internal_detail_is_not_exposed(self):
        with pytest.raises(NormalizedError) as exc_info:
            with normalized_store_errors("user", "Failed to create user"):
                raise integrity_error("secret detail", sqlstate="23505")

        assert "secret detail" not in exc_info.value.message
        assert isinstance(exc_info.value.__cause__, IntegrityError)

    def test_other_exceptions_pass_through(self):
        with pytest.raises(ValueError):
            with normalized_store_errors("job"):
                raise ValueError("not a store failure")
