"""
Not-found domain exceptions.
"""


class NotFoundError(Exception):
    """Raised when a requested record does not exist."""

    def __init__(self, subject: str, message: str = None):
        self.subject = subject
        super().__init__(message or f"{subject.capitalize()} not found")
