import logging
import math
from typing import Optional

from sqlalchemy.orm import Session

from quiz_service.core.errors import InvalidQuestionIds
from quiz_service.domain.quiz_domain import QuizDomain
from quiz_service.repositories.question_repository import QuestionRepository
from quiz_service.repositories.submission_repository import SubmissionRepository
from quiz_service.schemas.quiz import QuizSubmission, SubmissionResult
from quiz_service.schemas.submission import (
    Pagination,
    RecentSubmission,
    StatsResponse,
    SubmissionFilterEnum,
    SubmissionListResponse,
    SubmissionResponse,
    SubmissionStats,
)
from quiz_service.services.quiz_config import QuizConfigService

logger = logging.getLogger(__name__)


class SubmissionService:
    def __init__(self, db: Session):
        self.db = db
        self.question_repository = QuestionRepository(db)
        self.submission_repository = SubmissionRepository(db)
        self.config_service = QuizConfigService(db)

    def grade_submission(self, submission: QuizSubmission) -> SubmissionResult:
        """
        Grade an attempt against the stored answers and record it.

        Correct answers are re-read by question id on every call; nothing the
        client sends about correctness or ordering is trusted.
        """
        candidate = QuizDomain.validate_submission(submission)
        question_ids = list(submission.question_ids)
        answers = list(submission.answers)

        rows = self.question_repository.find_by_ids(question_ids)
        if not rows:
            raise InvalidQuestionIds("Invalid question IDs")

        answer_key = dict(rows)
        unknown = [qid for qid in question_ids if qid not in answer_key]
        if unknown:
            logger.warning(
                f"Submission references {len(unknown)} unknown question IDs: {unknown}"
            )

        config = self.config_service.get_or_create_default()
        pass_percentage = config.pass_percentage
        result = QuizDomain.grade(question_ids, answers, answer_key, pass_percentage)

        saved = self.submission_repository.create(
            {
                "name": candidate.name,
                "email": candidate.email,
                "mobile": candidate.mobile,
                "answers": answers,
                "question_ids": question_ids,
                "score": result.score,
                "total_questions": result.total_questions,
                "passed": result.passed,
            }
        )
        logger.info(
            f"✅ Submission {saved.id} graded: {result.score}/{result.total_questions} "
            f"({'pass' if result.passed else 'fail'})"
        )

        return SubmissionResult(
            id=saved.id,
            score=result.score,
            total_questions=result.total_questions,
            percentage=result.percentage,
            passed=result.passed,
            pass_percentage=pass_percentage,
        )

    def list_submissions(
        self,
        result_filter: Optional[SubmissionFilterEnum] = None,
        page: int = 1,
        limit: int = 20,
    ) -> SubmissionListResponse:
        """Get one page of submissions, newest first"""
        passed = None
        if result_filter == SubmissionFilterEnum.PASSED:
            passed = True
        elif result_filter == SubmissionFilterEnum.FAILED:
            passed = False

        skip = (page - 1) * limit
        submissions = self.submission_repository.get_page(passed, skip, limit)
        total = self.submission_repository.count(passed)

        return SubmissionListResponse(
            submissions=[SubmissionResponse.model_validate(s) for s in submissions],
            pagination=Pagination(
                page=page,
                limit=limit,
                total=total,
                total_pages=math.ceil(total / limit),
            ),
        )

    def get_stats(self) -> StatsResponse:
        total = self.submission_repository.count()
        passed = self.submission_repository.count(passed=True)
        failed = self.submission_repository.count(passed=False)
        recent = self.submission_repository.get_recent(limit=5)

        pass_rate = (passed * 200 + total) // (total * 2) if total > 0 else 0

        return StatsResponse(
            stats=SubmissionStats(
                total=total, passed=passed, failed=failed, pass_rate=pass_rate
            ),
            recent_submissions=[RecentSubmission.model_validate(s) for s in recent],
        )
