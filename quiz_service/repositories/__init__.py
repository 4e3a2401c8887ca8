from .admin_repository import AdminRepository
from .question_repository import QuestionRepository
from .quiz_config_repository import QuizConfigRepository
from .submission_repository import SubmissionRepository

__all__ = [
    "AdminRepository",
    "QuestionRepository",
    "QuizConfigRepository",
    "SubmissionRepository",
]
