"""
Customer SQLAlchemy model.
"""

from sqlalchemy import Column, String, Text
from sqlalchemy.orm import relationship

from . import BaseModel


class CustomerModel(BaseModel):
    """Customer database model."""

    __tablename__ = "customers"

    name = Column(String(255), nullable=False, index=True)
    phone = Column(String(50))
    email = Column(String(255))
    address = Column(Text)
    contact_name = Column(String(255))

    # Relationships
    jobs = relationship("JobModel", back_populates="customer")

    def __repr__(self) -> str:
        return f"<Customer(id={self.id}, name={self.name})>"
