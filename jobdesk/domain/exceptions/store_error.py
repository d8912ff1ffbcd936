"""
Store-layer failures, abstracted from driver-native error codes.
"""

from enum import Enum
from typing import Optional


class StoreFailureKind(str, Enum):
    """Closed set of store failure kinds understood by the error normalizer."""

    UNIQUE_CONSTRAINT_VIOLATION = "unique_constraint_violation"
    FOREIGN_KEY_VIOLATION = "foreign_key_violation"
    RECORD_NOT_FOUND_ON_DELETE = "record_not_found_on_delete"
    GENERIC_FAILURE = "generic_failure"
    UNKNOWN_FAILURE = "unknown_failure"


class StoreError(Exception):
    """A store operation failed with a known failure kind."""

    def __init__(
        self,
        kind: StoreFailureKind,
        message: Optional[str] = None,
        native_code: Optional[str] = None,
    ):
        self.kind = kind
        self.native_code = native_code
        super().__init__(message or kind.value)


class RecordNotFoundError(StoreError):
    """Raised when deleting or updating a record that does not exist."""

    def __init__(self, model: str, record_id: int):
        self.model = model
        self.record_id = record_id
        super().__init__(
            StoreFailureKind.RECORD_NOT_FOUND_ON_DELETE,
            f"{model} {record_id} does not exist",
        )
