"""Customer API endpoints."""

from typing import List

from fastapi import APIRouter, status

from jobdesk.api.dependencies import (
    CustomerRepositoryDep,
    RecordIdPath,
    TransactionServiceDep,
)
from jobdesk.api.schemas.common import MessageResponse
from jobdesk.api.schemas.customer import CustomerRequest, CustomerResponse
from jobdesk.application.services.error_normalizer import normalized_store_errors
from jobdesk.config.logging import get_logger
from jobdesk.domain.exceptions.not_found_error import NotFoundError
from jobdesk.infrastructure.database.models.customer import CustomerModel

logger = get_logger(__name__)
router = APIRouter(prefix="/customers", tags=["customers"])


@router.get("", response_model=List[CustomerResponse])
async def list_customers(customer_repository: CustomerRepositoryDep):
    """List customers by name."""
    with normalized_store_errors("customer", "Failed to fetch customers"):
        return await customer_repository.get_all()


@router.post("", response_model=CustomerResponse, status_code=status.HTTP_201_CREATED)
async def create_customer(
    customer_data: CustomerRequest,
    customer_repository: CustomerRepositoryDep,
    transaction_service: TransactionServiceDep,
):
    """Create a customer."""
    with normalized_store_errors("customer", "Failed to create customer"):
        customer = await transaction_service.execute_in_transaction(
            lambda: customer_repository.create(
                CustomerModel(**customer_data.model_dump())
            )
        )

    logger.info("Customer created", customer_id=customer.id)
    return customer


@router.get("/{customer_id}", response_model=CustomerResponse)
async def get_customer(
    customer_id: RecordIdPath, customer_repository: CustomerRepositoryDep
):
    """Get a customer."""
    with normalized_store_errors("customer", "Failed to fetch customer"):
        customer = await customer_repository.get_by_id(customer_id)
    if not customer:
        raise NotFoundError("customer")
    return customer


@router.put("/{customer_id}", response_model=CustomerResponse)
async def update_customer(
    customer_id: RecordIdPath,
    customer_data: CustomerRequest,
    customer_repository: CustomerRepositoryDep,
    transaction_service: TransactionServiceDep,
):
    """Replace a customer's details."""
    if not await customer_repository.get_by_id(customer_id):
        raise NotFoundError("customer")

    with normalized_store_errors("customer", "Failed to update customer"):
        customer = await transaction_service.execute_in_transaction(
            lambda: customer_repository.update(customer_id, customer_data.model_dump())
        )

    logger.info("Customer updated", customer_id=customer_id)
    return customer


@router.delete("/{customer_id}", response_model=MessageResponse)
async def delete_customer(
    customer_id: RecordIdPath,
    customer_repository: CustomerRepositoryDep,
    transaction_service: TransactionServiceDep,
):
    """Delete a customer that no job references."""
    with normalized_store_errors("customer", "Failed to delete customer"):
        await transaction_service.execute_in_transaction(
            lambda: customer_repository.delete(customer_id)
        )

    logger.info("Customer deleted", customer_id=customer_id)
    return MessageResponse(message="Customer deleted successfully")
