from sqlalchemy import Boolean, Column, Integer, String, Text, UniqueConstraint
from sqlalchemy.sql import func
from sqlalchemy.types import DateTime

from quiz_service.core.database import Base

# Every config row carries this key; the unique constraint keeps it a singleton
SINGLETON_KEY = 1


class QuizConfig(Base):
    __tablename__ = "quiz_config"

    id = Column(Integer, primary_key=True, index=True)
    singleton_key = Column(Integer, nullable=False, default=SINGLETON_KEY)
    question_limit = Column(Integer, nullable=False, default=10)
    pass_percentage = Column(Integer, nullable=False, default=60)
    is_active = Column(Boolean, nullable=False, default=True)
    whatsapp_number = Column(String(32), nullable=True)
    whatsapp_message = Column(Text, nullable=True)
    updated_at = Column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    __table_args__ = (
        UniqueConstraint("singleton_key", name="uq_quiz_config_singleton"),
    )
