"""
Customer repository implementation.
"""

from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from jobdesk.application.interfaces.repositories import CustomerRepositoryInterface
from jobdesk.domain.exceptions.store_error import RecordNotFoundError
from jobdesk.infrastructure.database.models.customer import CustomerModel

UPDATABLE_FIELDS = ("name", "phone", "email", "address", "contact_name")


class CustomerRepository(CustomerRepositoryInterface):
    """Customer repository implementation."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_all(self) -> List[CustomerModel]:
        """Get all customers ordered by name."""
        result = await self.session.execute(
            select(CustomerModel).order_by(CustomerModel.name, CustomerModel.id)
        )
        return list(result.scalars().all())

    async def get_by_id(self, customer_id: int) -> Optional[CustomerModel]:
        """Get customer by ID."""
        return await self.session.get(CustomerModel, customer_id)

    async def create(self, customer: CustomerModel) -> CustomerModel:
        """Create a new customer."""
        self.session.add(customer)
        await self.session.flush()
        await self.session.refresh(customer)
        return customer

    async def update(self, customer_id: int, values: dict) -> CustomerModel:
        """Update the supplied fields of a customer."""
        customer = await self.get_by_id(customer_id)
        if not customer:
            raise RecordNotFoundError("Customer", customer_id)

        for field in UPDATABLE_FIELDS:
            if field in values:
                setattr(customer, field, values[field])

        await self.session.flush()
        await self.session.refresh(customer)
        return customer

    async def delete(self, customer_id: int) -> None:
        """Delete a customer. Fails at the store if jobs still reference it."""
        result = await self.session.execute(
            delete(CustomerModel)
            .where(CustomerModel.id == customer_id)
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:
            raise RecordNotFoundError("Customer", customer_id)
