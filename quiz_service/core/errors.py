"""
Error taxonomy shared by services and routers.

Services raise these; routers translate them into HTTP responses using
``status_code``. Anything that is not a ``QuizError`` is treated as an
internal failure and answered with a generic 500.
"""

from fastapi import status


class QuizError(Exception):
    """Base class for errors that carry a client-facing message"""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(QuizError):
    """Malformed or out-of-range input"""

    status_code = status.HTTP_400_BAD_REQUEST


class MismatchedAnswerSet(ValidationError):
    """answers and questionIds have different lengths"""


class InvalidQuestionIds(ValidationError):
    """None of the submitted question ids exist"""


class Unauthorized(QuizError):
    """Missing or invalid admin credentials"""

    status_code = status.HTTP_401_UNAUTHORIZED


class NotFound(QuizError):
    """Referenced entity is absent"""

    status_code = status.HTTP_404_NOT_FOUND


class NoQuestionsConfigured(NotFound):
    """The question bank is empty"""


class ServiceUnavailable(QuizError):
    """The quiz has been deliberately disabled"""

    status_code = status.HTTP_503_SERVICE_UNAVAILABLE


class QuizUnavailable(ServiceUnavailable):
    """Quiz config has is_active switched off"""
