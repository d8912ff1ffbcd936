"""
Job identifier resolution.

Jobs are exposed to clients by UUID while joins use the integer surrogate
key; every job-scoped route accepts either form and resolves it here.
"""

import re
from typing import Optional, Tuple, Union

from jobdesk.application.interfaces.repositories import JobRepositoryInterface
from jobdesk.config.logging import get_logger
from jobdesk.domain.exceptions.not_found_error import NotFoundError
from jobdesk.domain.exceptions.validation_error import InvalidReferenceError

logger = get_logger(__name__)

UUID_V4_PATTERN = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}",
    re.IGNORECASE,
)
INTEGER_PATTERN = re.compile(r"[0-9]+")

# Largest value an INTEGER primary key can hold
MAX_SURROGATE_KEY = 2**31 - 1


class JobIdentifierResolver:
    """Resolve a job reference (surrogate id or UUID) to the job's internal key."""

    def __init__(self, job_repository: JobRepositoryInterface):
        self.job_repository = job_repository

    @staticmethod
    def parse(reference: str) -> Tuple[str, Union[int, str]]:
        """
        Classify a reference without touching the store.

        Returns:
            ("uuid", normalized_uuid) or ("id", surrogate_key)

        Raises:
            InvalidReferenceError: if the reference is neither a UUID v4
                nor a non-negative base-10 integer
        """
        if reference is None:
            raise InvalidReferenceError("")

        if UUID_V4_PATTERN.fullmatch(reference):
            return "uuid", reference.lower()

        if INTEGER_PATTERN.fullmatch(reference):
            return "id", int(reference)

        raise InvalidReferenceError(reference)

    async def resolve(self, reference: str) -> Optional[int]:
        """Return the job's surrogate key, or None if no such job exists."""
        kind, value = self.parse(reference)

        if kind == "uuid":
            return await self.job_repository.find_id_by_uuid(value)

        if value > MAX_SURROGATE_KEY:
            return None
        return await self.job_repository.find_id_by_id(value)

    async def require(self, reference: str) -> int:
        """Like resolve, but a missing job raises NotFoundError."""
        job_id = await self.resolve(reference)
        if job_id is None:
            logger.info("Job reference did not resolve", reference=reference)
            raise NotFoundError("job")
        return job_id
