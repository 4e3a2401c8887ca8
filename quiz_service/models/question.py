from sqlalchemy import Column, Integer, String, Text
from sqlalchemy.sql import func
from sqlalchemy.types import JSON, DateTime

from quiz_service.core.database import Base


class Question(Base):
    __tablename__ = "question"

    id = Column(Integer, primary_key=True, index=True)
    question_text = Column(Text, nullable=False)
    options = Column(JSON, nullable=False)
    correct_answer = Column(Integer, nullable=False)
    difficulty = Column(String(10), nullable=False, default="medium")
    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)
