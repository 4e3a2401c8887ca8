import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session

from quiz_service.core.auth import (
    AdminIdentity,
    remove_admin_cookie,
    require_admin,
    set_admin_cookie,
)
from quiz_service.core.database import get_db
from quiz_service.core.errors import QuizError
from quiz_service.schemas.admin import (
    AdminLogin,
    AdminLoginResponse,
    AdminSeedResponse,
    MessageResponse,
)
from quiz_service.schemas.config import QuizConfigEnvelope, QuizConfigUpdate
from quiz_service.schemas.submission import (
    StatsResponse,
    SubmissionFilterEnum,
    SubmissionListResponse,
)
from quiz_service.services.admin import AdminService
from quiz_service.services.quiz_config import QuizConfigService
from quiz_service.services.submission import SubmissionService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["admin"], prefix="/admin")


# =====================================================
# Authentication
# =====================================================
@router.post("/login", response_model=AdminLoginResponse)
def login(credentials: AdminLogin, response: Response, db: Session = Depends(get_db)):
    """Log in and receive the admin token as an httpOnly cookie"""
    try:
        admin, token = AdminService(db).login(credentials)
        set_admin_cookie(response, token)
        return AdminLoginResponse(admin=admin)
    except QuizError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception:
        logger.exception("Login error")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Login failed"
        )


@router.post("/logout", response_model=MessageResponse)
def logout(response: Response):
    remove_admin_cookie(response)
    return MessageResponse(message="Logged out successfully")


@router.post("/seed", response_model=AdminSeedResponse)
def seed_admin(db: Session = Depends(get_db)):
    """Create the default admin account once during setup"""
    try:
        admin, created = AdminService(db).seed_default_admin()
        message = "Admin created successfully" if created else "Admin already exists"
        return AdminSeedResponse(message=message, admin=admin)
    except Exception:
        logger.exception("Error seeding admin")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to seed admin",
        )


# =====================================================
# Quiz configuration
# =====================================================
@router.get("/config", response_model=QuizConfigEnvelope)
def get_config(
    db: Session = Depends(get_db), admin: AdminIdentity = Depends(require_admin)
):
    try:
        return QuizConfigEnvelope(config=QuizConfigService(db).get_config())
    except Exception:
        logger.exception("Error fetching quiz config")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch configuration",
        )


@router.put("/config", response_model=QuizConfigEnvelope)
def update_config(
    update: QuizConfigUpdate,
    db: Session = Depends(get_db),
    admin: AdminIdentity = Depends(require_admin),
):
    """
    Update quiz configuration

    Accepts any subset of questionLimit (1-100), passPercentage (0-100),
    isActive, whatsappNumber and whatsappMessage.
    """
    try:
        config = QuizConfigService(db).update_config(update)
        logger.info(f"Quiz config changed by {admin.email}")
        return QuizConfigEnvelope(config=config)
    except QuizError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception:
        logger.exception("Error updating quiz config")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update configuration",
        )


# =====================================================
# Reports
# =====================================================
@router.get("/submissions", response_model=SubmissionListResponse)
def list_submissions(
    result_filter: Optional[SubmissionFilterEnum] = Query(None, alias="filter"),
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=100),
    db: Session = Depends(get_db),
    admin: AdminIdentity = Depends(require_admin),
):
    try:
        return SubmissionService(db).list_submissions(result_filter, page, limit)
    except Exception:
        logger.exception("Error fetching submissions")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch submissions",
        )


@router.get("/stats", response_model=StatsResponse)
def get_stats(
    db: Session = Depends(get_db), admin: AdminIdentity = Depends(require_admin)
):
    try:
        return SubmissionService(db).get_stats()
    except Exception:
        logger.exception("Error fetching stats")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch stats",
        )
