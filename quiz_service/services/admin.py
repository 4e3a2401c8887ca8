import logging
from typing import Tuple

from sqlalchemy.orm import Session

from quiz_service.core.auth import create_token
from quiz_service.core.config import settings
from quiz_service.core.errors import Unauthorized, ValidationError
from quiz_service.repositories.admin_repository import AdminRepository
from quiz_service.schemas.admin import AdminLogin, AdminResponse

logger = logging.getLogger(__name__)


class AdminService:
    def __init__(self, db: Session):
        self.db = db
        self.repository = AdminRepository(db)

    def login(self, credentials: AdminLogin) -> Tuple[AdminResponse, str]:
        """Check credentials and issue a signed admin token"""
        email = (credentials.email or "").strip()
        if not email or not credentials.password:
            raise ValidationError("Email and password are required")

        admin = self.repository.get_by_email(email)
        if not admin or not admin.check_password(credentials.password):
            logger.warning(f"Failed admin login for {email}")
            raise Unauthorized("Invalid credentials")

        token = create_token(str(admin.id), admin.email)
        logger.info(f"Admin {admin.email} logged in")
        return AdminResponse.model_validate(admin), token

    def seed_default_admin(self) -> Tuple[AdminResponse, bool]:
        """Create the configured default admin if it does not exist yet"""
        existing = self.repository.get_by_email(settings.ADMIN_EMAIL)
        if existing:
            return AdminResponse.model_validate(existing), False

        admin = self.repository.create(settings.ADMIN_EMAIL, settings.ADMIN_PASSWORD)
        logger.info(f"Default admin {admin.email} created")
        return AdminResponse.model_validate(admin), True
