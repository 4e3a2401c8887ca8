from .admin import AdminService
from .question import QuestionService
from .quiz import QuizService
from .quiz_config import QuizConfigService
from .submission import SubmissionService

__all__ = [
    "AdminService",
    "QuestionService",
    "QuizService",
    "QuizConfigService",
    "SubmissionService",
]
