"""
FastAPI dependency injection container.
"""

from typing import Annotated, Optional

from fastapi import Depends, Path, Query
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from jobdesk.application.services.auth_service import AuthService
from jobdesk.application.services.identifier_resolver import (
    MAX_SURROGATE_KEY,
    JobIdentifierResolver,
)
from jobdesk.application.use_cases.create_job import CreateJobUseCase
from jobdesk.application.use_cases.job_questions import (
    GetJobQuestionsUseCase,
    SyncJobQuestionsUseCase,
)
from jobdesk.application.use_cases.manage_answers import ManageAnswersUseCase
from jobdesk.application.use_cases.manage_questions import ManageQuestionsUseCase
from jobdesk.config.database import get_db_session
from jobdesk.config.logging import get_logger
from jobdesk.domain.exceptions.auth_error import (
    AuthenticationError,
    PermissionDeniedError,
)
from jobdesk.domain.value_objects.role import Role
from jobdesk.infrastructure.database.models.user import UserModel
from jobdesk.infrastructure.database.repositories.answer_repository import (
    AnswerRepository,
)
from jobdesk.infrastructure.database.repositories.customer_repository import (
    CustomerRepository,
)
from jobdesk.infrastructure.database.repositories.job_question_repository import (
    JobQuestionRepository,
)
from jobdesk.infrastructure.database.repositories.job_repository import JobRepository
from jobdesk.infrastructure.database.repositories.question_repository import (
    QuestionRepository,
)
from jobdesk.infrastructure.database.repositories.transaction_repository import (
    TransactionService,
)
from jobdesk.infrastructure.database.repositories.user_repository import (
    NotificationRepository,
    UserRepository,
)
from jobdesk.infrastructure.database.repositories.worker_repository import (
    WorkerAssignmentRepository,
    WorkerRepository,
)

logger = get_logger(__name__)

SessionDep = Annotated[AsyncSession, Depends(get_db_session)]

# Path ids outside the INTEGER key range are a 400, never a store round trip
RecordIdPath = Annotated[int, Path(ge=1, le=MAX_SURROGATE_KEY)]
PageQuery = Annotated[int, Query(ge=1, le=MAX_SURROGATE_KEY)]


# Database Dependencies
async def get_customer_repository(db: SessionDep) -> CustomerRepository:
    """Get customer repository instance."""
    return CustomerRepository(db)


async def get_job_repository(db: SessionDep) -> JobRepository:
    """Get job repository instance."""
    return JobRepository(db)


async def get_question_repository(db: SessionDep) -> QuestionRepository:
    """Get question repository instance."""
    return QuestionRepository(db)


async def get_job_question_repository(db: SessionDep) -> JobQuestionRepository:
    """Get job-question binding repository instance."""
    return JobQuestionRepository(db)


async def get_answer_repository(db: SessionDep) -> AnswerRepository:
    """Get answer repository instance."""
    return AnswerRepository(db)


async def get_worker_assignment_repository(
    db: SessionDep,
) -> WorkerAssignmentRepository:
    """Get worker assignment repository instance."""
    return WorkerAssignmentRepository(db)


async def get_worker_repository(db: SessionDep) -> WorkerRepository:
    """Get worker repository instance."""
    return WorkerRepository(db)


async def get_user_repository(db: SessionDep) -> UserRepository:
    """Get user repository instance."""
    return UserRepository(db)


async def get_notification_repository(db: SessionDep) -> NotificationRepository:
    """Get notification repository instance."""
    return NotificationRepository(db)


async def get_transaction_service(db: SessionDep) -> TransactionService:
    """Get transaction service instance."""
    return TransactionService(db)


CustomerRepositoryDep = Annotated[CustomerRepository, Depends(get_customer_repository)]
JobRepositoryDep = Annotated[JobRepository, Depends(get_job_repository)]
QuestionRepositoryDep = Annotated[QuestionRepository, Depends(get_question_repository)]
JobQuestionRepositoryDep = Annotated[
    JobQuestionRepository, Depends(get_job_question_repository)
]
AnswerRepositoryDep = Annotated[AnswerRepository, Depends(get_answer_repository)]
WorkerAssignmentRepositoryDep = Annotated[
    WorkerAssignmentRepository, Depends(get_worker_assignment_repository)
]
WorkerRepositoryDep = Annotated[WorkerRepository, Depends(get_worker_repository)]
UserRepositoryDep = Annotated[UserRepository, Depends(get_user_repository)]
NotificationRepositoryDep = Annotated[
    NotificationRepository, Depends(get_notification_repository)
]
TransactionServiceDep = Annotated[TransactionService, Depends(get_transaction_service)]


# Service Dependencies
async def get_job_resolver(job_repository: JobRepositoryDep) -> JobIdentifierResolver:
    """Get job identifier resolver instance."""
    return JobIdentifierResolver(job_repository)


async def get_auth_service(user_repository: UserRepositoryDep) -> AuthService:
    """Get auth service instance."""
    return AuthService(user_repository)


JobResolverDep = Annotated[JobIdentifierResolver, Depends(get_job_resolver)]
AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]


# Use Case Dependencies
async def get_create_job_use_case(
    job_repository: JobRepositoryDep,
    customer_repository: CustomerRepositoryDep,
    question_repository: QuestionRepositoryDep,
    job_question_repository: JobQuestionRepositoryDep,
    transaction_service: TransactionServiceDep,
) -> CreateJobUseCase:
    """Get create job use case instance."""
    return CreateJobUseCase(
        job_repo=job_repository,
        customer_repo=customer_repository,
        question_repo=question_repository,
        job_question_repo=job_question_repository,
        transaction_service=transaction_service,
    )


async def get_job_questions_use_case(
    job_question_repository: JobQuestionRepositoryDep,
) -> GetJobQuestionsUseCase:
    """Get job question projection use case instance."""
    return GetJobQuestionsUseCase(job_question_repository)


async def get_sync_job_questions_use_case(
    question_repository: QuestionRepositoryDep,
    job_question_repository: JobQuestionRepositoryDep,
    transaction_service: TransactionServiceDep,
) -> SyncJobQuestionsUseCase:
    """Get job question re-sync use case instance."""
    return SyncJobQuestionsUseCase(
        question_repo=question_repository,
        job_question_repo=job_question_repository,
        transaction_service=transaction_service,
    )


async def get_manage_questions_use_case(
    question_repository: QuestionRepositoryDep,
    transaction_service: TransactionServiceDep,
) -> ManageQuestionsUseCase:
    """Get question template use case instance."""
    return ManageQuestionsUseCase(question_repository, transaction_service)


async def get_manage_answers_use_case(
    answer_repository: AnswerRepositoryDep,
    question_repository: QuestionRepositoryDep,
    transaction_service: TransactionServiceDep,
) -> ManageAnswersUseCase:
    """Get answer use case instance."""
    return ManageAnswersUseCase(
        answer_repo=answer_repository,
        question_repo=question_repository,
        transaction_service=transaction_service,
    )


CreateJobUseCaseDep = Annotated[CreateJobUseCase, Depends(get_create_job_use_case)]
GetJobQuestionsUseCaseDep = Annotated[
    GetJobQuestionsUseCase, Depends(get_job_questions_use_case)
]
SyncJobQuestionsUseCaseDep = Annotated[
    SyncJobQuestionsUseCase, Depends(get_sync_job_questions_use_case)
]
ManageQuestionsUseCaseDep = Annotated[
    ManageQuestionsUseCase, Depends(get_manage_questions_use_case)
]
ManageAnswersUseCaseDep = Annotated[
    ManageAnswersUseCase, Depends(get_manage_answers_use_case)
]


# Authentication Dependencies
bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_user(
    auth_service: AuthServiceDep,
    credentials: Annotated[
        Optional[HTTPAuthorizationCredentials], Depends(bearer_scheme)
    ] = None,
) -> UserModel:
    """Resolve the authenticated principal from the bearer token."""
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise AuthenticationError("Not authenticated")
    return await auth_service.get_user_from_token(credentials.credentials)


CurrentUserDep = Annotated[UserModel, Depends(get_current_user)]


async def get_optional_current_user(
    auth_service: AuthServiceDep,
    credentials: Annotated[
        Optional[HTTPAuthorizationCredentials], Depends(bearer_scheme)
    ] = None,
) -> Optional[UserModel]:
    """Like get_current_user, but an anonymous caller yields None."""
    if credentials is None:
        return None
    return await get_current_user(auth_service, credentials)


OptionalUserDep = Annotated[Optional[UserModel], Depends(get_optional_current_user)]


def require_roles(*roles: Role):
    """Build a dependency that admits only principals holding one of the roles."""

    async def role_checker(current_user: CurrentUserDep) -> UserModel:
        if current_user.role not in roles:
            logger.info(
                "Role check failed",
                user_id=current_user.id,
                role=current_user.role.value,
                required=[role.value for role in roles],
            )
            raise PermissionDeniedError("Insufficient permissions")
        return current_user

    return role_checker


StaffUserDep = Annotated[
    UserModel, Depends(require_roles(Role.ADMIN, Role.MODERATOR))
]
