from typing import List, Optional

from pydantic import BaseModel, Field, StrictInt


class QuizQuestion(BaseModel):
    """Redacted projection of a question: never carries the correct answer"""

    id: int
    question_text: str = Field(..., alias="questionText")
    options: List[str]

    class Config:
        populate_by_name = True


class QuizDisplayConfig(BaseModel):
    question_limit: int = Field(..., alias="questionLimit")
    pass_percentage: int = Field(..., alias="passPercentage")

    class Config:
        populate_by_name = True


class QuizResponse(BaseModel):
    questions: List[QuizQuestion]
    total_questions: int = Field(..., alias="totalQuestions")
    config: QuizDisplayConfig

    class Config:
        populate_by_name = True


class QuizSubmission(BaseModel):
    """
    Candidate attempt. Presence and format checks happen in the service so
    they run in a fixed order with field-specific messages.
    """

    name: Optional[str] = None
    email: Optional[str] = None
    mobile: Optional[str] = None
    answers: Optional[List[Optional[StrictInt]]] = Field(
        None, description="Chosen option index per question, null when unanswered"
    )
    question_ids: Optional[List[int]] = Field(
        None,
        alias="questionIds",
        description="Ids of the served questions, index-aligned with answers",
    )

    class Config:
        populate_by_name = True


class SubmissionResult(BaseModel):
    id: int
    score: int
    total_questions: int = Field(..., alias="totalQuestions")
    percentage: int
    passed: bool = Field(..., alias="pass")
    pass_percentage: int = Field(..., alias="passPercentage")

    class Config:
        populate_by_name = True
