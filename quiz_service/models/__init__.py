from .admin import Admin
from .question import Question
from .quiz_config import QuizConfig
from .submission import Submission

__all__ = ["Admin", "Question", "QuizConfig", "Submission"]
