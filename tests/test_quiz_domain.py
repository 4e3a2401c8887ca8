#!/usr/bin/env python3
"""
Pytest tests for the pure quiz logic: shuffling, selection and grading
"""

import itertools
import random
from collections import Counter
from types import SimpleNamespace

import pytest

from quiz_service.core.errors import MismatchedAnswerSet, ValidationError
from quiz_service.domain.quiz_domain import GradeResult, QuizDomain
from quiz_service.schemas.quiz import QuizSubmission


def _question(qid, correct=0):
    return SimpleNamespace(
        id=qid,
        question_text=f"Question {qid}",
        options=["a", "b", "c", "d"],
        correct_answer=correct,
    )


def _submission(**overrides):
    data = {
        "name": "Jane Doe",
        "email": "jane@example.com",
        "mobile": "98765 43210",
        "answers": [0, 1],
        "questionIds": [1, 2],
    }
    data.update(overrides)
    return QuizSubmission.model_validate(data)


class TestShuffle:
    """Test the Fisher-Yates shuffle"""

    def test_shuffle_does_not_mutate_input(self):
        items = [1, 2, 3, 4, 5]
        shuffled = QuizDomain.shuffle(items, random.Random(7))

        assert items == [1, 2, 3, 4, 5]
        assert sorted(shuffled) == items

    def test_shuffle_handles_small_inputs(self):
        assert QuizDomain.shuffle([]) == []
        assert QuizDomain.shuffle(["only"]) == ["only"]

    def test_shuffle_is_roughly_uniform(self):
        """Every ordering of three items shows up about equally often"""
        rng = random.Random(1234)
        trials = 6000
        counts = Counter(
            tuple(QuizDomain.shuffle(["a", "b", "c"], rng)) for _ in range(trials)
        )

        assert set(counts) == set(itertools.permutations(["a", "b", "c"]))
        expected = trials / 6
        for ordering, count in counts.items():
            assert abs(count - expected) < 150, ordering


class TestSelectQuestions:
    """Test question selection against the configured limit"""

    @pytest.mark.parametrize("bank_size,limit", [(20, 10), (10, 10), (3, 10), (1, 1)])
    def test_selects_min_of_limit_and_bank(self, bank_size, limit):
        bank = [_question(i) for i in range(bank_size)]

        selected = QuizDomain.select_questions(bank, limit, random.Random(3))

        assert len(selected) == min(limit, bank_size)
        ids = [q.id for q in selected]
        assert len(set(ids)) == len(ids)
        assert set(ids) <= {q.id for q in bank}

    def test_redacted_question_has_no_answer(self):
        redacted = QuizDomain.to_quiz_question(_question(5, correct=2))
        dumped = redacted.model_dump(by_alias=True)

        assert dumped == {
            "id": 5,
            "questionText": "Question 5",
            "options": ["a", "b", "c", "d"],
        }


class TestGrade:
    """Test identifier-based grading"""

    def test_unknown_id_counts_toward_total_only(self):
        """5 ids, 1 unknown, the 4 known all correct -> 4/5 = 80%"""
        answer_key = {1: 0, 2: 1, 3: 2, 4: 3}
        result = QuizDomain.grade([1, 2, 99, 3, 4], [0, 1, 0, 2, 3], answer_key, 60)

        assert result.score == 4
        assert result.total_questions == 5
        assert result.percentage == 80
        assert result.passed is True

    def test_pass_threshold_is_inclusive(self):
        answer_key = {i: 0 for i in range(1, 6)}
        result = QuizDomain.grade([1, 2, 3, 4, 5], [0, 0, 0, 1, 1], answer_key, 60)

        assert result.percentage == 60
        assert result.passed is True

    def test_just_below_threshold_fails(self):
        answer_key = {i: 0 for i in range(1, 6)}
        result = QuizDomain.grade([1, 2, 3, 4, 5], [0, 0, 0, 1, 1], answer_key, 61)

        assert result.passed is False

    def test_permuted_pairs_score_the_same(self):
        answer_key = {10: 0, 20: 1, 30: 2, 40: 3}
        ids = [10, 20, 30, 40]
        answers = [0, 3, 2, 3]

        original = QuizDomain.grade(ids, answers, answer_key, 60)
        pairs = list(zip(ids, answers))
        pairs.reverse()
        permuted = QuizDomain.grade(
            [p[0] for p in pairs], [p[1] for p in pairs], answer_key, 60
        )

        assert original.score == permuted.score == 3

    def test_position_does_not_matter_only_identifier(self):
        """Answers that would be right by position but wrong by id score nothing"""
        answer_key = {1: 0, 2: 1}
        result = QuizDomain.grade([2, 1], [0, 1], answer_key, 60)

        assert result.score == 0

    def test_unanswered_never_matches(self):
        result = QuizDomain.grade([1, 2], [None, None], {1: 0, 2: 0}, 0)

        assert result.score == 0
        assert result.passed is True  # 0% >= 0%

    def test_repeated_id_scores_once(self):
        result = QuizDomain.grade([1, 1, 1], [0, 0, 0], {1: 0}, 60)

        assert result.score == 1
        assert result.total_questions == 3
        assert result.passed is False

    @pytest.mark.parametrize(
        "score,total,expected", [(2, 3, 67), (1, 3, 33), (1, 8, 13), (0, 4, 0), (4, 4, 100)]
    )
    def test_percentage_rounds_half_up(self, score, total, expected):
        assert GradeResult(score=score, total_questions=total, passed=False).percentage == expected


class TestValidateSubmission:
    """Test submission validation order and normalization"""

    def test_valid_submission_is_normalized(self):
        candidate = QuizDomain.validate_submission(
            _submission(name="  Jane  ", email=" Jane@Example.COM ")
        )

        assert candidate.name == "Jane"
        assert candidate.email == "jane@example.com"
        assert candidate.mobile == "98765 43210"

    @pytest.mark.parametrize("field", ["name", "email", "mobile"])
    def test_missing_contact_field(self, field):
        with pytest.raises(ValidationError, match="Name, email, and mobile are required"):
            QuizDomain.validate_submission(_submission(**{field: "   "}))

    def test_missing_answers(self):
        with pytest.raises(ValidationError, match="Answers and question IDs are required"):
            QuizDomain.validate_submission(_submission(answers=[], questionIds=[]))

    def test_mismatched_lengths(self):
        with pytest.raises(MismatchedAnswerSet):
            QuizDomain.validate_submission(
                _submission(answers=[0, 1, 2], questionIds=[1, 2, 3, 4])
            )

    def test_mismatch_is_reported_before_bad_email(self):
        with pytest.raises(MismatchedAnswerSet):
            QuizDomain.validate_submission(
                _submission(email="not-an-email", answers=[0], questionIds=[1, 2])
            )

    @pytest.mark.parametrize("email", ["plain", "a@b", "a b@c.de", "@x.io"])
    def test_invalid_email(self, email):
        with pytest.raises(ValidationError, match="Invalid email format"):
            QuizDomain.validate_submission(_submission(email=email))

    @pytest.mark.parametrize("mobile", ["12345", "98765432100", "98765-4321x"])
    def test_invalid_mobile(self, mobile):
        with pytest.raises(ValidationError, match="10 digits required"):
            QuizDomain.validate_submission(_submission(mobile=mobile))

    def test_mobile_with_hyphens_is_accepted(self):
        candidate = QuizDomain.validate_submission(_submission(mobile="987-654-3210"))

        assert candidate.mobile == "987-654-3210"
