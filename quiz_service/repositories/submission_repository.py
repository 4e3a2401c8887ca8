from typing import List, Optional

from sqlalchemy.orm import Session

from quiz_service.models.submission import Submission


class SubmissionRepository:
    """Repository for Submission database operations following DDD pattern"""

    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, submission_id: int) -> Optional[Submission]:
        """Get a submission by ID"""
        return self.db.query(Submission).filter(Submission.id == submission_id).first()

    def create(self, submission_data: dict) -> Submission:
        """Create a new submission"""
        db_submission = Submission(**submission_data)
        self.db.add(db_submission)
        self.db.commit()
        self.db.refresh(db_submission)
        return db_submission

    def _filtered(self, passed: Optional[bool]):
        query = self.db.query(Submission)
        if passed is not None:
            query = query.filter(Submission.passed == passed)
        return query

    def get_page(
        self, passed: Optional[bool] = None, skip: int = 0, limit: int = 20
    ) -> List[Submission]:
        """Get submissions newest first, optionally filtered by pass/fail"""
        return (
            self._filtered(passed)
            .order_by(Submission.created_at.desc(), Submission.id.desc())
            .offset(skip)
            .limit(limit)
            .all()
        )

    def count(self, passed: Optional[bool] = None) -> int:
        return self._filtered(passed).count()

    def get_recent(self, limit: int = 5) -> List[Submission]:
        return self.get_page(skip=0, limit=limit)
