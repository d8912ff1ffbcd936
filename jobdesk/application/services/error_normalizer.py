"""
Store error normalization.

Maps store-layer failures to a stable client message and HTTP status. The
full failure is logged here; only the reduced message leaves the service.
"""

from contextlib import contextmanager
from typing import Iterator, Optional, Tuple

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from jobdesk.config.logging import get_logger
from jobdesk.domain.exceptions.store_error import StoreError, StoreFailureKind

logger = get_logger(__name__)

GENERIC_FALLBACK_MESSAGE = "An unexpected error occurred. Please try again later."
UNKNOWN_FALLBACK_MESSAGE = (
    "An unknown error occurred. Please contact support if the problem persists."
)

STATUS_CODES = {
    StoreFailureKind.UNIQUE_CONSTRAINT_VIOLATION: 409,
    StoreFailureKind.FOREIGN_KEY_VIOLATION: 409,
    StoreFailureKind.RECORD_NOT_FOUND_ON_DELETE: 404,
    StoreFailureKind.GENERIC_FAILURE: 500,
    StoreFailureKind.UNKNOWN_FAILURE: 500,
}

MESSAGE_TEMPLATES = {
    StoreFailureKind.UNIQUE_CONSTRAINT_VIOLATION: (
        "A {subject} with the same details already exists."
    ),
    StoreFailureKind.FOREIGN_KEY_VIOLATION: (
        "Cannot delete the {subject} as it is referenced by another record."
    ),
    StoreFailureKind.RECORD_NOT_FOUND_ON_DELETE: (
        "The {subject} you are trying to delete does not exist."
    ),
}

# SQLSTATE codes reported by PostgreSQL drivers
SQLSTATE_KINDS = {
    "23505": StoreFailureKind.UNIQUE_CONSTRAINT_VIOLATION,
    "23503": StoreFailureKind.FOREIGN_KEY_VIOLATION,
}

# Message fragments reported by SQLite
MESSAGE_KINDS = (
    ("unique constraint", StoreFailureKind.UNIQUE_CONSTRAINT_VIOLATION),
    ("foreign key constraint", StoreFailureKind.FOREIGN_KEY_VIOLATION),
)


class NormalizedError(Exception):
    """A store failure reduced to what the client may see."""

    def __init__(self, status_code: int, message: str, kind: StoreFailureKind):
        self.status_code = status_code
        self.message = message
        self.kind = kind
        super().__init__(message)


def _native_code(exc: SQLAlchemyError) -> Optional[str]:
    orig = getattr(exc, "orig", None)
    for attribute in ("sqlstate", "pgcode"):
        code = getattr(orig, attribute, None)
        if code:
            return str(code)
    return None


class ErrorNormalizer:
    """Classify store failures and reduce them to client-facing errors."""

    def classify(self, exc: Exception) -> Tuple[StoreFailureKind, Optional[str]]:
        """Return the failure kind and the driver-native code, if any."""
        if isinstance(exc, StoreError):
            return exc.kind, exc.native_code

        if isinstance(exc, IntegrityError):
            code = _native_code(exc)
            if code in SQLSTATE_KINDS:
                return SQLSTATE_KINDS[code], code

            detail = str(exc.orig).lower()
            for fragment, kind in MESSAGE_KINDS:
                if fragment in detail:
                    return kind, code
            return StoreFailureKind.UNKNOWN_FAILURE, code

        if isinstance(exc, SQLAlchemyError):
            return StoreFailureKind.GENERIC_FAILURE, _native_code(exc)

        return StoreFailureKind.UNKNOWN_FAILURE, None

    def normalize(
        self,
        kind: StoreFailureKind,
        subject: str,
        message: Optional[str] = None,
    ) -> NormalizedError:
        """Map a failure kind to its status code and client message."""
        if kind not in STATUS_CODES:
            raise ValueError(f"Unhandled store failure kind: {kind}")

        if kind in MESSAGE_TEMPLATES:
            text = MESSAGE_TEMPLATES[kind].format(subject=subject or "record")
        elif kind == StoreFailureKind.GENERIC_FAILURE:
            text = message or GENERIC_FALLBACK_MESSAGE
        else:
            text = UNKNOWN_FALLBACK_MESSAGE

        return NormalizedError(STATUS_CODES[kind], text, kind)

    def normalize_exception(
        self,
        exc: Exception,
        subject: str,
        message: Optional[str] = None,
    ) -> NormalizedError:
        """Classify, log with full detail, and normalize an exception."""
        kind, native_code = self.classify(exc)
        normalized = self.normalize(kind, subject, message)

        logger.error(
            "Store operation failed",
            subject=subject,
            kind=kind.value,
            native_code=native_code,
            status_code=normalized.status_code,
            error_type=type(exc).__name__,
            error=str(exc),
            exc_info=exc,
        )
        return normalized


error_normalizer = ErrorNormalizer()


@contextmanager
def normalized_store_errors(
    subject: str, message: Optional[str] = None
) -> Iterator[None]:
    """Re-raise store failures inside the block as NormalizedError."""
    try:
        yield
    except (StoreError, SQLAlchemyError) as exc:
        raise error_normalizer.normalize_exception(exc, subject, message) from exc
