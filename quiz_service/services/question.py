import logging
from typing import Any, List

from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.orm import Session

from quiz_service.core.errors import NotFound, ValidationError
from quiz_service.repositories.question_repository import QuestionRepository
from quiz_service.schemas.question import (
    QuestionCreate,
    QuestionImportResponse,
    QuestionResponse,
    QuestionUpdate,
)

logger = logging.getLogger(__name__)


class ImportValidationError(ValidationError):
    """One or more items of a bulk import are invalid; nothing was saved"""

    def __init__(self, details: List[str], valid_count: int):
        super().__init__("Validation failed")
        self.details = details
        self.valid_count = valid_count
        self.invalid_count = len(details)


def _describe_errors(error: PydanticValidationError, index: int) -> str:
    first = error.errors()[0]
    field = ".".join(str(part) for part in first["loc"])
    message = first["msg"].removeprefix("Value error, ")
    if field:
        return f"Question {index + 1}: '{field}' {message}"
    return f"Question {index + 1}: {message}"


class QuestionService:
    def __init__(self, db: Session):
        self.db = db
        self.repository = QuestionRepository(db)

    def _to_record(self, question: QuestionCreate) -> dict:
        return {
            "question_text": question.question_text,
            "options": question.options,
            "correct_answer": question.correct_answer,
            "difficulty": question.difficulty.value,
        }

    def list_questions(self) -> List[QuestionResponse]:
        """All questions with their correct answers, newest first"""
        return [
            QuestionResponse.model_validate(q)
            for q in self.repository.list_newest_first()
        ]

    def create_question(self, question: QuestionCreate) -> QuestionResponse:
        db_question = self.repository.create(self._to_record(question))
        logger.info(f"Question {db_question.id} created")
        return QuestionResponse.model_validate(db_question)

    def update_question(
        self, question_id: int, question: QuestionUpdate
    ) -> QuestionResponse:
        db_question = self.repository.get_by_id(question_id)
        if not db_question:
            raise NotFound("Question not found")
        db_question = self.repository.update(db_question, self._to_record(question))
        logger.info(f"Question {question_id} updated")
        return QuestionResponse.model_validate(db_question)

    def delete_question(self, question_id: int) -> None:
        db_question = self.repository.get_by_id(question_id)
        if not db_question:
            raise NotFound("Question not found")
        self.repository.delete(db_question)
        logger.info(f"Question {question_id} deleted")

    def import_questions(self, payload: Any) -> QuestionImportResponse:
        """
        Bulk import from a JSON array. Every item is validated first; a
        single invalid item rejects the whole batch.
        """
        if not isinstance(payload, list):
            raise ValidationError("Request body must be a JSON array of questions")
        if not payload:
            raise ValidationError("Array cannot be empty")

        errors = []
        valid = []
        for index, item in enumerate(payload):
            if not isinstance(item, dict):
                errors.append(f"Question {index + 1}: Must be an object")
                continue
            try:
                valid.append(QuestionCreate.model_validate(item))
            except PydanticValidationError as e:
                errors.append(_describe_errors(e, index))

        if errors:
            logger.warning(f"Question import rejected: {len(errors)} invalid items")
            raise ImportValidationError(errors, valid_count=len(valid))

        inserted = self.repository.create_bulk([self._to_record(q) for q in valid])
        logger.info(f"✅ Imported {len(inserted)} questions")
        return QuestionImportResponse(
            message=f"Successfully imported {len(inserted)} questions",
            count=len(inserted),
        )
