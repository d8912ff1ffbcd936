"""
Job-question binding and answer SQLAlchemy models.
"""

from sqlalchemy import JSON, Column, ForeignKey, Index, Integer, UniqueConstraint
from sqlalchemy.orm import relationship

from . import BaseModel


class JobQuestionModel(BaseModel):
    """Binding of a question template to a job."""

    __tablename__ = "job_questions"

    job_id = Column(
        Integer, ForeignKey("jobs.id", ondelete="CASCADE"), nullable=False, index=True
    )
    question_id = Column(
        Integer,
        ForeignKey("questions.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )

    # Relationships
    job = relationship("JobModel", back_populates="question_bindings")
    question = relationship("QuestionModel", back_populates="bindings")

    __table_args__ = (
        UniqueConstraint("job_id", "question_id", name="uq_job_question"),
    )

    def __repr__(self) -> str:
        return f"<JobQuestion(job_id={self.job_id}, question_id={self.question_id})>"


class JobQuestionAnswerModel(BaseModel):
    """A job's answer to a question. The highest id per pair is current."""

    __tablename__ = "job_question_answers"

    job_id = Column(
        Integer, ForeignKey("jobs.id", ondelete="CASCADE"), nullable=False, index=True
    )
    question_id = Column(
        Integer,
        ForeignKey("questions.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    answer = Column(JSON, nullable=False)  # list of strings

    # Relationships
    job = relationship("JobModel", back_populates="answers")
    question = relationship("QuestionModel", back_populates="answers")

    __table_args__ = (
        Index("idx_job_question_answer_pair", "job_id", "question_id", "id"),
    )

    def __repr__(self) -> str:
        return (
            f"<JobQuestionAnswer(id={self.id}, job_id={self.job_id}, "
            f"question_id={self.question_id})>"
        )
