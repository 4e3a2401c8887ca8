import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from quiz_service.core.auth import AdminIdentity, require_admin
from quiz_service.core.database import get_db
from quiz_service.core.errors import QuizError
from quiz_service.schemas.question import (
    QuestionCreate,
    QuestionDeleteResponse,
    QuestionImportResponse,
    QuestionListResponse,
    QuestionMutationResponse,
    QuestionUpdate,
)
from quiz_service.services.question import ImportValidationError, QuestionService

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["admin-questions"],
    prefix="/admin/questions",
    dependencies=[Depends(require_admin)],
)


@router.get("", response_model=QuestionListResponse)
def list_questions(db: Session = Depends(get_db)):
    """List all questions including correct answers"""
    try:
        return QuestionListResponse(questions=QuestionService(db).list_questions())
    except Exception:
        logger.exception("Error fetching questions")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch questions",
        )


@router.post(
    "",
    response_model=QuestionMutationResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_question(question: QuestionCreate, db: Session = Depends(get_db)):
    try:
        return QuestionMutationResponse(
            question=QuestionService(db).create_question(question)
        )
    except Exception:
        logger.exception("Error creating question")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create question",
        )


@router.post(
    "/import",
    response_model=QuestionImportResponse,
    status_code=status.HTTP_201_CREATED,
)
def import_questions(payload: Any = Body(...), db: Session = Depends(get_db)):
    """
    Bulk import questions from a JSON array

    Every item needs questionText, four options and correctAnswer (0-3);
    difficulty is optional. If any item is invalid nothing is imported.
    """
    try:
        return QuestionService(db).import_questions(payload)
    except ImportValidationError as e:
        return JSONResponse(
            status_code=e.status_code,
            content={
                "detail": e.message,
                "details": e.details,
                "validCount": e.valid_count,
                "invalidCount": e.invalid_count,
            },
        )
    except QuizError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception:
        logger.exception("Error importing questions")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to import questions",
        )


@router.put("/{question_id}", response_model=QuestionMutationResponse)
def update_question(
    question_id: int, question: QuestionUpdate, db: Session = Depends(get_db)
):
    try:
        return QuestionMutationResponse(
            question=QuestionService(db).update_question(question_id, question)
        )
    except QuizError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception:
        logger.exception("Error updating question")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update question",
        )


@router.delete("/{question_id}", response_model=QuestionDeleteResponse)
def delete_question(question_id: int, db: Session = Depends(get_db)):
    try:
        QuestionService(db).delete_question(question_id)
        return QuestionDeleteResponse()
    except QuizError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception:
        logger.exception("Error deleting question")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete question",
        )
