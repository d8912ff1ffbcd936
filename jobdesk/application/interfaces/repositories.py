"""
Repository interfaces for dependency inversion.
"""

from abc import ABC, abstractmethod
from typing import Any, List, Optional, Sequence

from jobdesk.domain.value_objects.question_type import QuestionType


class CustomerRepositoryInterface(ABC):
    """Customer repository interface."""

    @abstractmethod
    async def get_all(self) -> List[Any]:
        """Get all customers ordered by name."""
        pass

    @abstractmethod
    async def get_by_id(self, customer_id: int) -> Optional[Any]:
        """Get customer by ID."""
        pass

    @abstractmethod
    async def create(self, customer: Any) -> Any:
        """Create a new customer."""
        pass

    @abstractmethod
    async def update(self, customer_id: int, values: dict) -> Any:
        """Update an existing customer."""
        pass

    @abstractmethod
    async def delete(self, customer_id: int) -> None:
        """Delete a customer that no job references."""
        pass


class JobRepositoryInterface(ABC):
    """Job repository interface."""

    @abstractmethod
    async def get_by_id(self, job_id: int) -> Optional[Any]:
        """Get job by surrogate key."""
        pass

    @abstractmethod
    async def find_id_by_id(self, job_id: int) -> Optional[int]:
        """Return the key if a job with this surrogate key exists."""
        pass

    @abstractmethod
    async def find_id_by_uuid(self, job_uuid: str) -> Optional[int]:
        """Return the surrogate key of the job with this UUID."""
        pass

    @abstractmethod
    async def create(self, values: dict) -> Any:
        """Create a new job; its UUID is generated here."""
        pass

    @abstractmethod
    async def update(self, job_id: int, values: dict) -> Any:
        """Update an existing job."""
        pass

    @abstractmethod
    async def delete(self, job_id: int) -> None:
        """Delete a job and every row that depends on it."""
        pass


class QuestionRepositoryInterface(ABC):
    """Question template repository interface."""

    @abstractmethod
    async def get_by_id(self, question_id: int) -> Optional[Any]:
        """Get a question with its options."""
        pass

    @abstractmethod
    async def get_all(self) -> List[Any]:
        """Get all questions ordered by display order."""
        pass

    @abstractmethod
    async def get_all_ids(self) -> List[int]:
        """Get the ids of every question currently defined."""
        pass

    @abstractmethod
    async def next_display_order(self) -> int:
        """Display order for the next created question."""
        pass

    @abstractmethod
    async def create(
        self,
        question_type: QuestionType,
        text: str,
        options: Sequence[str],
        display_order: int,
    ) -> Any:
        """Create a question with its options."""
        pass

    @abstractmethod
    async def update(
        self,
        question_id: int,
        question_type: QuestionType,
        text: str,
        options: Sequence[str],
    ) -> Any:
        """Update a question, replacing its whole option set."""
        pass

    @abstractmethod
    async def count_references(self, question_id: int) -> int:
        """Count bindings and answers that reference the question."""
        pass

    @abstractmethod
    async def delete_references(self, question_id: int) -> None:
        """Remove bindings and answers that reference the question."""
        pass

    @abstractmethod
    async def delete(self, question_id: int) -> None:
        """Delete a question and its options."""
        pass


class JobQuestionRepositoryInterface(ABC):
    """Job-question binding repository interface."""

    @abstractmethod
    async def create_many(self, job_id: int, question_ids: Sequence[int]) -> int:
        """Bind questions to a job. Returns the number of rows created."""
        pass

    @abstractmethod
    async def get_question_ids(self, job_id: int) -> List[int]:
        """Ids of the questions bound to a job."""
        pass

    @abstractmethod
    async def get_for_job(self, job_id: int) -> List[Any]:
        """Bindings for a job with question and options loaded, by display order."""
        pass


class AnswerRepositoryInterface(ABC):
    """Job question answer repository interface."""

    @abstractmethod
    async def create(self, job_id: int, question_id: int, values: List[str]) -> Any:
        """Insert a new answer row."""
        pass

    @abstractmethod
    async def get_current(self, job_id: int, question_id: int) -> Optional[Any]:
        """The answer row with the highest id for the pair."""
        pass

    @abstractmethod
    async def update_values(self, answer: Any, values: List[str]) -> Any:
        """Overwrite the values of an answer row in place."""
        pass

    @abstractmethod
    async def delete(self, answer: Any) -> None:
        """Delete one answer row."""
        pass

    @abstractmethod
    async def get_for_job(self, job_id: int) -> List[Any]:
        """All answer rows for a job."""
        pass
