"""
Job SQLAlchemy model.
"""

from uuid import uuid4

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from . import BaseModel


def generate_job_uuid() -> str:
    """Generate the client-facing identifier for a new job."""
    return str(uuid4())


class JobModel(BaseModel):
    """Job database model."""

    __tablename__ = "jobs"

    # Assigned once at creation, never updated
    uuid = Column(
        String(36), nullable=False, unique=True, index=True, default=generate_job_uuid
    )
    name = Column(String(255), nullable=False)
    description = Column(Text)
    deadline = Column(DateTime(timezone=True))
    customer_id = Column(
        Integer,
        ForeignKey("customers.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )

    # Relationships
    customer = relationship("CustomerModel", back_populates="jobs")
    question_bindings = relationship(
        "JobQuestionModel", back_populates="job", passive_deletes=True
    )
    answers = relationship(
        "JobQuestionAnswerModel", back_populates="job", passive_deletes=True
    )
    worker_assignments = relationship(
        "WorkerAssignmentModel", back_populates="job", passive_deletes=True
    )

    def __repr__(self) -> str:
        return f"<Job(id={self.id}, uuid={self.uuid}, name={self.name})>"
