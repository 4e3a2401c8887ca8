import logging
import random
from typing import Optional

from sqlalchemy.orm import Session

from quiz_service.core.errors import NoQuestionsConfigured, QuizUnavailable
from quiz_service.domain.quiz_domain import QuizDomain
from quiz_service.repositories.question_repository import QuestionRepository
from quiz_service.schemas.quiz import QuizDisplayConfig, QuizResponse
from quiz_service.services.quiz_config import QuizConfigService

logger = logging.getLogger(__name__)


class QuizService:
    """Assembles a fresh, answer-free question set for each quiz session"""

    def __init__(self, db: Session, rng: Optional[random.Random] = None):
        self.db = db
        self.rng = rng
        self.question_repository = QuestionRepository(db)
        self.config_service = QuizConfigService(db)

    def assemble_quiz(self) -> QuizResponse:
        config = self.config_service.get_or_create_default()
        if not config.is_active:
            raise QuizUnavailable(
                "The quiz is temporarily disabled. Please try again later."
            )

        questions = self.question_repository.list_all()
        if not questions:
            raise NoQuestionsConfigured(
                "No questions available. Please contact the administrator."
            )

        selected = QuizDomain.select_questions(
            questions, config.question_limit, self.rng
        )
        if len(selected) < config.question_limit:
            logger.info(
                f"Serving {len(selected)} questions, fewer than the configured "
                f"limit of {config.question_limit}"
            )

        return QuizResponse(
            questions=[QuizDomain.to_quiz_question(q) for q in selected],
            total_questions=len(selected),
            config=QuizDisplayConfig(
                question_limit=config.question_limit,
                pass_percentage=config.pass_percentage,
            ),
        )
