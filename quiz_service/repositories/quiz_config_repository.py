from typing import Optional

from sqlalchemy.orm import Session

from quiz_service.models.quiz_config import SINGLETON_KEY, QuizConfig


class QuizConfigRepository:
    """Repository for the singleton QuizConfig row"""

    def __init__(self, db: Session):
        self.db = db

    def get_singleton(self) -> Optional[QuizConfig]:
        """Get the config row, or None before it has been created"""
        return (
            self.db.query(QuizConfig)
            .filter(QuizConfig.singleton_key == SINGLETON_KEY)
            .first()
        )

    def create(self, config_data: dict) -> QuizConfig:
        """
        Insert the config row. Raises IntegrityError if another caller
        inserted it first; the whole session must then be rolled back.
        """
        db_config = QuizConfig(singleton_key=SINGLETON_KEY, **config_data)
        self.db.add(db_config)
        self.db.commit()
        self.db.refresh(db_config)
        return db_config

    def update(self, config: QuizConfig, update_data: dict) -> QuizConfig:
        """Update the config row"""
        for field, value in update_data.items():
            setattr(config, field, value)
        self.db.commit()
        self.db.refresh(config)
        return config

    def rollback(self) -> None:
        self.db.rollback()
