"""
Unit tests for JobIdentifierResolver.
"""

import pytest

from jobdesk.application.services.identifier_resolver import (
    MAX_SURROGATE_KEY,
    JobIdentifierResolver,
)
from jobdesk.domain.exceptions.not_found_error import NotFoundError
from jobdesk.domain.exceptions.validation_error import (
    InvalidReferenceError,
    ValidationError,
)

JOB_UUID = "3f1c2b9e-8a4d-4c7e-9b21-6d5e4f3a2b10"


class TestParse:
    """Reference classification without store access."""

    @pytest.mark.parametrize(
        "reference",
        [JOB_UUID, JOB_UUID.upper(), "00000000-0000-4000-8000-000000000000"],
    )
    def test_uuid_v4(self, reference):
        assert JobIdentifierResolver.parse(reference) == ("uuid", reference.lower())

    @pytest.mark.parametrize("reference,expected", [("0", 0), ("42", 42), ("007", 7)])
    def test_non_negative_integer(self, reference, expected):
        assert JobIdentifierResolver.parse(reference) == ("id", expected)

    @pytest.mark.parametrize(
        "reference",
        [
            "abc-not-a-uuid-or-int",
            "",
            "-1",
            "1.5",
            " 12",
            "12abc",
            # Version 1 UUID
            "3f1c2b9e-8a4d-1c7e-9b21-6d5e4f3a2b10",
            # Wrong variant nibble
            "3f1c2b9e-8a4d-4c7e-7b21-6d5e4f3a2b10",
            JOB_UUID.replace("-", ""),
        ],
    )
    def test_invalid_reference(self, reference):
        with pytest.raises(InvalidReferenceError) as exc_info:
            JobIdentifierResolver.parse(reference)
        assert isinstance(exc_info.value, ValidationError)


class TestResolve:
    """Reference resolution against the job repository."""

    @pytest.mark.asyncio
    async def test_uuid_looks_up_by_uuid(self, mock_job_repository):
        mock_job_repository.find_id_by_uuid.return_value = 17
        resolver = JobIdentifierResolver(mock_job_repository)

        assert await resolver.resolve(JOB_UUID.upper()) == 17
        mock_job_repository.find_id_by_uuid.assert_awaited_once_with(JOB_UUID)
        mock_job_repository.find_id_by_id.assert_not_called()

    @pytest.mark.asyncio
    async def test_integer_looks_up_by_surrogate_key(self, mock_job_repository):
        mock_job_repository.find_id_by_id.return_value = 5
        resolver = JobIdentifierResolver(mock_job_repository)

        assert await resolver.resolve("5") == 5
        mock_job_repository.find_id_by_id.assert_awaited_once_with(5)
        mock_job_repository.find_id_by_uuid.assert_not_called()

    @pytest.mark.asyncio
    async def test_out_of_range_integer_resolves_to_none(self, mock_job_repository):
        resolver = JobIdentifierResolver(mock_job_repository)

        assert await resolver.resolve(str(MAX_SURROGATE_KEY + 1)) is None
        mock_job_repository.find_id_by_id.assert_not_called()

    @pytest.mark.asyncio
    async def test_invalid_reference_never_reaches_store(self, mock_job_repository):
        resolver = JobIdentifierResolver(mock_job_repository)

        with pytest.raises(InvalidReferenceError):
            await resolver.resolve("abc-not-a-uuid-or-int")
        mock_job_repository.find_id_by_id.assert_not_called()
        mock_job_repository.find_id_by_uuid.assert_not_called()

    @pytest.mark.asyncio
    async def test_require_missing_job(self, mock_job_repository):
        resolver = JobIdentifierResolver(mock_job_repository)

        with pytest.raises(NotFoundError) as exc_info:
            await resolver.require("99")
        assert str(exc_info.value) == "Job not found"
