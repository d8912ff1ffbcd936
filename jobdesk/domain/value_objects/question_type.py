"""
Question type value object.
"""

from enum import Enum


class QuestionType(str, Enum):
    """Question template type enumeration."""

    TEXT = "text"
    RADIO = "radio"
    CHECKBOX = "checkbox"

    @property
    def display_name(self) -> str:
        """Get human-readable display name."""
        return {
            QuestionType.TEXT: "Free text",
            QuestionType.RADIO: "Single choice",
            QuestionType.CHECKBOX: "Multiple choice",
        }.get(self, self.value.title())

    @property
    def is_choice(self) -> bool:
        """Check if the question offers a list of options."""
        return self in [QuestionType.RADIO, QuestionType.CHECKBOX]

    @property
    def allows_multiple_answers(self) -> bool:
        """Check if more than one option may be selected."""
        return self == QuestionType.CHECKBOX
