from typing import Iterable, List, Optional, Tuple

from sqlalchemy.orm import Session

from quiz_service.models.question import Question


class QuestionRepository:
    """Repository for Question database operations following DDD pattern"""

    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, question_id: int) -> Optional[Question]:
        """Get a question by ID"""
        return self.db.query(Question).filter(Question.id == question_id).first()

    def list_all(self) -> List[Question]:
        """Get every question, oldest first"""
        return self.db.query(Question).order_by(Question.created_at.asc(), Question.id.asc()).all()

    def list_newest_first(self) -> List[Question]:
        """Get every question for the admin listing, newest first"""
        return self.db.query(Question).order_by(Question.created_at.desc(), Question.id.desc()).all()

    def find_by_ids(self, question_ids: Iterable[int]) -> List[Tuple[int, int]]:
        """
        Get (id, correct_answer) rows for the questions in question_ids.
        Only the columns grading needs are selected; unknown IDs are
        silently left out of the result.
        """
        ids = set(question_ids)
        if not ids:
            return []
        return (
            self.db.query(Question.id, Question.correct_answer)
            .filter(Question.id.in_(ids))
            .all()
        )

    def count(self) -> int:
        return self.db.query(Question).count()

    def create(self, question_data: dict) -> Question:
        """Create a new question"""
        db_question = Question(**question_data)
        self.db.add(db_question)
        self.db.commit()
        self.db.refresh(db_question)
        return db_question

    def create_bulk(self, question_data_list: List[dict]) -> List[Question]:
        """Create multiple questions in a single transaction"""
        db_question_list = [Question(**data) for data in question_data_list]
        self.db.add_all(db_question_list)
        self.db.commit()
        for question in db_question_list:
            self.db.refresh(question)
        return db_question_list

    def update(self, question: Question, update_data: dict) -> Question:
        """Update a question"""
        for field, value in update_data.items():
            setattr(question, field, value)
        self.db.commit()
        self.db.refresh(question)
        return question

    def delete(self, question: Question) -> bool:
        """Delete a question"""
        self.db.delete(question)
        self.db.commit()
        return True
