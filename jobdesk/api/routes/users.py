"""User and login API endpoints."""

from typing import List

from fastapi import APIRouter, Request, status

from jobdesk.api.dependencies import (
    AuthServiceDep,
    CurrentUserDep,
    OptionalUserDep,
    RecordIdPath,
    TransactionServiceDep,
    UserRepositoryDep,
)
from jobdesk.api.schemas.common import MessageResponse
from jobdesk.api.schemas.user import (
    LoginRequest,
    LoginResponse,
    UserCreateRequest,
    UserResponse,
    UserUpdateRequest,
)
from jobdesk.application.services.auth_service import hash_password
from jobdesk.application.services.error_normalizer import normalized_store_errors
from jobdesk.config.logging import get_logger
from jobdesk.domain.exceptions.auth_error import PermissionDeniedError
from jobdesk.domain.exceptions.not_found_error import NotFoundError
from jobdesk.domain.value_objects.role import Role
from jobdesk.infrastructure.database.models.user import UserModel

logger = get_logger(__name__)
router = APIRouter(tags=["users"])


def _ensure_self_or_admin(current_user: UserModel, user_id: int) -> None:
    if current_user.id != user_id and not current_user.role.can_manage_users:
        raise PermissionDeniedError("Only an admin can modify other users")


@router.post("/login", response_model=LoginResponse)
async def login(request: Request, credentials: LoginRequest, auth_service: AuthServiceDep):
    """Exchange a username and password for a bearer token."""
    user = await auth_service.authenticate(credentials.username, credentials.password)
    token = auth_service.create_access_token(user)
    request.session["user_id"] = user.id

    logger.info("User logged in", user_id=user.id, role=user.role.value)
    return LoginResponse(
        message="Login successful",
        user=UserResponse.model_validate(user),
        token=token,
    )


@router.post("/users", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    user_data: UserCreateRequest,
    current_user: OptionalUserDep,
    user_repository: UserRepositoryDep,
    transaction_service: TransactionServiceDep,
):
    """
    Register a user.

    Anyone may register as a plain user; any other role must be granted by an
    authenticated admin.
    """
    if user_data.role != Role.USER and not (
        current_user and current_user.role.can_manage_users
    ):
        raise PermissionDeniedError("Only an admin can register users with this role")

    user = UserModel(
        username=user_data.username,
        password=hash_password(user_data.password),
        role=user_data.role,
    )
    with normalized_store_errors("user", "Failed to create user"):
        user = await transaction_service.execute_in_transaction(
            lambda: user_repository.create(user)
        )

    logger.info("User created", user_id=user.id, role=user.role.value)
    return user


@router.get("/users", response_model=List[UserResponse])
async def list_users(current_user: CurrentUserDep, user_repository: UserRepositoryDep):
    """List users."""
    with normalized_store_errors("user", "Failed to fetch users"):
        return await user_repository.get_all()


@router.get("/users/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: RecordIdPath,
    current_user: CurrentUserDep,
    user_repository: UserRepositoryDep,
):
    """Get a user."""
    with normalized_store_errors("user", "Failed to fetch user"):
        user = await user_repository.get_by_id(user_id)
    if not user:
        raise NotFoundError("user")
    return user


@router.put("/users/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: RecordIdPath,
    user_data: UserUpdateRequest,
    current_user: CurrentUserDep,
    user_repository: UserRepositoryDep,
    transaction_service: TransactionServiceDep,
):
    """Update a user. Only an admin may edit other users or change roles."""
    _ensure_self_or_admin(current_user, user_id)

    values = {
        field: value
        for field, value in user_data.model_dump(exclude_unset=True).items()
        if value is not None
    }
    if "role" in values and not current_user.role.can_manage_users:
        raise PermissionDeniedError("Only an admin can change roles")
    if "password" in values:
        values["password"] = hash_password(values["password"])

    if not await user_repository.get_by_id(user_id):
        raise NotFoundError("user")

    with normalized_store_errors("user", "Failed to update user"):
        user = await transaction_service.execute_in_transaction(
            lambda: user_repository.update(user_id, values)
        )

    logger.info(
        "User updated",
        user_id=user_id,
        updated_by=current_user.id,
        fields=sorted(field for field in values if field != "password"),
    )
    return user


@router.delete("/users/{user_id}", response_model=MessageResponse)
async def delete_user(
    user_id: RecordIdPath,
    current_user: CurrentUserDep,
    user_repository: UserRepositoryDep,
    transaction_service: TransactionServiceDep,
):
    """Delete a user. Only an admin may delete other users."""
    _ensure_self_or_admin(current_user, user_id)

    with normalized_store_errors("user", "Failed to delete user"):
        await transaction_service.execute_in_transaction(
            lambda: user_repository.delete(user_id)
        )

    logger.info("User deleted", user_id=user_id, deleted_by=current_user.id)
    return MessageResponse(message="User deleted successfully")
