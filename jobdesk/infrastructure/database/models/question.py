"""
Question template SQLAlchemy models.
"""

from sqlalchemy import Column, Enum, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from jobdesk.domain.value_objects.question_type import QuestionType

from . import BaseModel


class QuestionModel(BaseModel):
    """Reusable question template."""

    __tablename__ = "questions"

    type = Column(
        Enum(
            QuestionType,
            name="question_type_enum",
            values_callable=lambda obj: [e.value for e in obj],
        ),
        nullable=False,
    )
    text = Column(Text, nullable=False)
    display_order = Column(Integer, nullable=False, index=True)

    # Relationships
    options = relationship(
        "QuestionOptionModel",
        back_populates="question",
        order_by="QuestionOptionModel.id",
        passive_deletes=True,
    )
    bindings = relationship(
        "JobQuestionModel", back_populates="question", passive_deletes=True
    )
    answers = relationship(
        "JobQuestionAnswerModel", back_populates="question", passive_deletes=True
    )

    def __repr__(self) -> str:
        return f"<Question(id={self.id}, type={self.type}, order={self.display_order})>"


class QuestionOptionModel(BaseModel):
    """Selectable option of a choice question."""

    __tablename__ = "question_options"

    question_id = Column(
        Integer,
        ForeignKey("questions.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    text = Column(String(255), nullable=False)

    # Relationships
    question = relationship("QuestionModel", back_populates="options")

    def __repr__(self) -> str:
        return f"<QuestionOption(id={self.id}, question_id={self.question_id})>"
