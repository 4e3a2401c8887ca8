import logging
from datetime import datetime, timezone

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from quiz_service.core.config import settings
from quiz_service.core.errors import ValidationError
from quiz_service.models.quiz_config import QuizConfig
from quiz_service.repositories.quiz_config_repository import QuizConfigRepository
from quiz_service.schemas.config import (
    PublicQuizConfig,
    QuizConfigResponse,
    QuizConfigUpdate,
)

logger = logging.getLogger(__name__)

QUESTION_LIMIT_RANGE = (1, 100)
PASS_PERCENTAGE_RANGE = (0, 100)


class QuizConfigService:
    def __init__(self, db: Session):
        self.db = db
        self.repository = QuizConfigRepository(db)

    def _default_values(self) -> dict:
        return {
            "question_limit": settings.DEFAULT_QUESTION_LIMIT,
            "pass_percentage": settings.DEFAULT_PASS_PERCENTAGE,
            "is_active": True,
        }

    def get_or_create_default(self) -> QuizConfig:
        """
        Return the config row, creating it with defaults on first use.

        Concurrent first callers may both try to insert; the unique
        singleton_key lets exactly one succeed and the others re-read the
        winner's row.
        """
        config = self.repository.get_singleton()
        if config is not None:
            return config

        try:
            config = self.repository.create(self._default_values())
            logger.info("Created default quiz config")
            return config
        except IntegrityError:
            self.repository.rollback()
            logger.info("Quiz config created concurrently, re-reading")

        config = self.repository.get_singleton()
        if config is None:
            # The conflicting row vanished between insert and re-read
            return self.get_or_create_default()
        return config

    def get_config(self) -> QuizConfigResponse:
        return QuizConfigResponse.model_validate(self.get_or_create_default())

    def get_public_config(self) -> PublicQuizConfig:
        return PublicQuizConfig.model_validate(self.get_or_create_default())

    def _validate_update(self, update: QuizConfigUpdate) -> dict:
        changes = update.model_dump(exclude_unset=True)

        if not changes:
            raise ValidationError("No valid fields to update")

        if "question_limit" in changes:
            low, high = QUESTION_LIMIT_RANGE
            limit = changes["question_limit"]
            if limit is None or limit < low or limit > high:
                raise ValidationError(
                    f"Question limit must be between {low} and {high}"
                )

        if "pass_percentage" in changes:
            low, high = PASS_PERCENTAGE_RANGE
            percentage = changes["pass_percentage"]
            if percentage is None or percentage < low or percentage > high:
                raise ValidationError(
                    f"Pass percentage must be between {low} and {high}"
                )

        if "is_active" in changes and changes["is_active"] is None:
            raise ValidationError("isActive must be true or false")

        if changes.get("whatsapp_number") is not None:
            changes["whatsapp_number"] = changes["whatsapp_number"].strip()

        return changes

    def update_config(self, update: QuizConfigUpdate) -> QuizConfigResponse:
        """Apply a partial update; the last writer wins"""
        changes = self._validate_update(update)
        config = self.get_or_create_default()
        fields = sorted(changes)
        # Set explicitly; onupdate only fires when some column actually changed
        changes["updated_at"] = datetime.now(timezone.utc)
        config = self.repository.update(config, changes)
        logger.info(f"Quiz config updated: {fields}")
        return QuizConfigResponse.model_validate(config)
