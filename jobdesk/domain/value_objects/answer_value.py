"""
Answer value normalization.
"""

from typing import Any, List

from jobdesk.domain.exceptions.validation_error import (
    InvalidFormatError,
    RequiredFieldError,
)

_SCALAR_TYPES = (str, int, float, bool)


def normalize_answer_values(value: Any) -> List[str]:
    """
    Normalize an answer payload to a list of strings.

    A scalar becomes a one-element list so free-text, single-choice and
    multi-choice answers share one storage shape.

    Raises:
        RequiredFieldError: if the value is missing or empty
        InvalidFormatError: if the value is not a scalar or a flat list of scalars
    """
    if value is None or value == "" or value == []:
        raise RequiredFieldError("answer")

    if isinstance(value, _SCALAR_TYPES):
        return [str(value)]

    if isinstance(value, (list, tuple)):
        if not all(isinstance(item, _SCALAR_TYPES) for item in value):
            raise InvalidFormatError("answer", "a string or a list of strings")
        return [str(item) for item in value]

    raise InvalidFormatError("answer", "a string or a list of strings")
