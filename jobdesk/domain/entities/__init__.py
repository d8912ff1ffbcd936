"""
Domain entities package.
"""

from .job_question import JobQuestionView, OptionView

__all__ = [
    "JobQuestionView",
    "OptionView",
]
