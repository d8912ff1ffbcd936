"""
Worker assignment and worker SQLAlchemy models.
"""

from sqlalchemy import Column, Date, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from . import BaseModel


class WorkerAssignmentModel(BaseModel):
    """A staffing request for a job: a position and a target headcount."""

    __tablename__ = "worker_assignments"

    job_id = Column(
        Integer, ForeignKey("jobs.id", ondelete="CASCADE"), nullable=False, index=True
    )
    position = Column(String(255), nullable=False)
    number_of_workers = Column(Integer, nullable=False, default=1)

    # Relationships
    job = relationship("JobModel", back_populates="worker_assignments")
    workers = relationship(
        "WorkerModel",
        back_populates="worker_assignment",
        order_by="WorkerModel.id",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<WorkerAssignment(id={self.id}, job_id={self.job_id}, position={self.position})>"


class WorkerModel(BaseModel):
    """Worker database model."""

    __tablename__ = "workers"

    worker_assignment_id = Column(
        Integer,
        ForeignKey("worker_assignments.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name = Column(String(255), nullable=False)
    email = Column(String(255))
    phone = Column(String(50))
    background_check_date = Column(Date)

    # Relationships
    worker_assignment = relationship("WorkerAssignmentModel", back_populates="workers")

    def __repr__(self) -> str:
        return f"<Worker(id={self.id}, name={self.name}, assignment_id={self.worker_assignment_id})>"
