import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from quiz_service.core.database import get_db
from quiz_service.core.errors import QuizError
from quiz_service.schemas.config import PublicQuizConfig
from quiz_service.schemas.quiz import QuizResponse, QuizSubmission, SubmissionResult
from quiz_service.services.quiz import QuizService
from quiz_service.services.quiz_config import QuizConfigService
from quiz_service.services.submission import SubmissionService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["quiz"], prefix="/quiz")


@router.get(
    "/questions",
    response_model=QuizResponse,
    status_code=status.HTTP_200_OK,
)
def get_quiz_questions(db: Session = Depends(get_db)):
    """
    Assemble a new quiz session

    Returns a shuffled selection of at most questionLimit questions without
    their correct answers. The client keeps the returned question ids and
    sends them back with the answers on submit.
    """
    try:
        service = QuizService(db)
        return service.assemble_quiz()
    except QuizError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception:
        logger.exception("Error assembling quiz")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch questions",
        )


@router.post(
    "/submit",
    response_model=SubmissionResult,
    status_code=status.HTTP_200_OK,
)
def submit_quiz(submission: QuizSubmission, db: Session = Depends(get_db)):
    """
    Grade a quiz attempt

    Answers are matched to correct answers by question id. Pass/fail uses the
    pass percentage configured at grading time.
    """
    try:
        service = SubmissionService(db)
        return service.grade_submission(submission)
    except QuizError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception:
        logger.exception("Error submitting quiz")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to submit quiz",
        )


@router.get("/config", response_model=PublicQuizConfig)
def get_public_config(db: Session = Depends(get_db)):
    """Contact details shown on the result page"""
    try:
        return QuizConfigService(db).get_public_config()
    except Exception:
        logger.exception("Error fetching public quiz config")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch configuration",
        )
