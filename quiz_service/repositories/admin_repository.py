from typing import Optional

from sqlalchemy.orm import Session

from quiz_service.models.admin import Admin


class AdminRepository:
    """Repository for Admin database operations"""

    def __init__(self, db: Session):
        self.db = db

    def get_by_email(self, email: str) -> Optional[Admin]:
        """Get an admin by (lower-cased) email"""
        return self.db.query(Admin).filter(Admin.email == email.lower()).first()

    def create(self, email: str, password: str) -> Admin:
        """Create a new admin with a hashed password"""
        db_admin = Admin(email=email.strip().lower())
        db_admin.set_password(password)
        self.db.add(db_admin)
        self.db.commit()
        self.db.refresh(db_admin)
        return db_admin
