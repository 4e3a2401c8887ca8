import random
import re
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, TypeVar

from quiz_service.core.errors import MismatchedAnswerSet, ValidationError
from quiz_service.models.question import Question
from quiz_service.schemas.quiz import QuizQuestion, QuizSubmission

T = TypeVar("T")

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
MOBILE_PATTERN = re.compile(r"^[0-9]{10}$")
MOBILE_SEPARATORS = re.compile(r"[\s-]")

_system_random = random.SystemRandom()


@dataclass
class CandidateDetails:
    """Candidate contact details after trimming and normalization"""

    name: str
    email: str
    mobile: str


@dataclass
class GradeResult:
    """Outcome of grading one attempt"""

    score: int
    total_questions: int
    passed: bool

    @property
    def percentage(self) -> int:
        """Score as a percentage, rounded half up like the client displays it"""
        return (self.score * 200 + self.total_questions) // (self.total_questions * 2)


class QuizDomain:
    """Domain logic for quiz assembly and grading"""

    @staticmethod
    def shuffle(items: Sequence[T], rng: Optional[random.Random] = None) -> List[T]:
        """
        Fisher-Yates shuffle of a copy of items. Every permutation is
        equally likely; the input sequence is left untouched.
        """
        rng = rng or _system_random
        shuffled = list(items)
        for i in range(len(shuffled) - 1, 0, -1):
            j = rng.randint(0, i)
            shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
        return shuffled

    @staticmethod
    def select_questions(
        questions: Sequence[Question],
        limit: int,
        rng: Optional[random.Random] = None,
    ) -> List[Question]:
        """Shuffle the bank and keep at most limit questions"""
        shuffled = QuizDomain.shuffle(questions, rng)
        return shuffled[: min(limit, len(shuffled))]

    @staticmethod
    def to_quiz_question(question: Question) -> QuizQuestion:
        return QuizQuestion(
            id=question.id,
            question_text=question.question_text,
            options=list(question.options),
        )

    @staticmethod
    def validate_submission(submission: QuizSubmission) -> CandidateDetails:
        """
        Check a submission before anything touches storage. The checks run in
        a fixed order so the first failing one decides the message.
        """
        name = (submission.name or "").strip()
        email = (submission.email or "").strip()
        mobile = (submission.mobile or "").strip()

        if not name or not email or not mobile:
            raise ValidationError("Name, email, and mobile are required")

        if not submission.answers or not submission.question_ids:
            raise ValidationError("Answers and question IDs are required")

        if len(submission.answers) != len(submission.question_ids):
            raise MismatchedAnswerSet(
                "Answers and question IDs must have the same length"
            )

        if not EMAIL_PATTERN.match(email):
            raise ValidationError("Invalid email format")

        if not MOBILE_PATTERN.match(MOBILE_SEPARATORS.sub("", mobile)):
            raise ValidationError("Invalid mobile number format (10 digits required)")

        return CandidateDetails(name=name, email=email.lower(), mobile=mobile)

    @staticmethod
    def grade(
        question_ids: Sequence[int],
        answers: Sequence[Optional[int]],
        answer_key: Dict[int, int],
        pass_percentage: int,
    ) -> GradeResult:
        """
        Grade answers against answer_key by question id, never by position.

        IDs missing from answer_key score nothing but still count toward the
        total, so forged or stale IDs can only lower the score. A repeated ID
        is scored on its first occurrence only.
        """
        score = 0
        seen = set()
        for question_id, answer in zip(question_ids, answers):
            if question_id in seen:
                continue
            seen.add(question_id)
            correct = answer_key.get(question_id)
            if correct is not None and answer is not None and answer == correct:
                score += 1

        total = len(question_ids)
        # score / total * 100 >= pass_percentage, kept in integers
        passed = score * 100 >= pass_percentage * total
        return GradeResult(score=score, total_questions=total, passed=passed)
