from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, StrictInt, field_validator


class DifficultyEnum(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class QuestionBase(BaseModel):
    question_text: str = Field(
        ..., alias="questionText", description="The question shown to candidates"
    )
    options: List[str] = Field(..., description="Exactly four answer options")
    correct_answer: StrictInt = Field(
        ..., alias="correctAnswer", ge=0, le=3, description="Index into options"
    )
    difficulty: DifficultyEnum = DifficultyEnum.MEDIUM

    class Config:
        populate_by_name = True

    @field_validator("question_text")
    @classmethod
    def validate_question_text(cls, v):
        if not v or not v.strip():
            raise ValueError("Question text cannot be empty")
        return v.strip()

    @field_validator("options")
    @classmethod
    def validate_options(cls, v):
        if len(v) != 4:
            raise ValueError(f"Exactly 4 options are required, got {len(v)}")
        cleaned = []
        for i, option in enumerate(v):
            if not option or not option.strip():
                raise ValueError(f"Option {i + 1} must be a non-empty string")
            cleaned.append(option.strip())
        return cleaned


class QuestionCreate(QuestionBase):
    pass


class QuestionUpdate(QuestionBase):
    pass


class QuestionResponse(BaseModel):
    id: int
    question_text: str = Field(..., alias="questionText")
    options: List[str]
    correct_answer: int = Field(..., alias="correctAnswer")
    difficulty: DifficultyEnum
    created_at: Optional[datetime] = Field(None, alias="createdAt")

    class Config:
        from_attributes = True
        populate_by_name = True


class QuestionListResponse(BaseModel):
    questions: List[QuestionResponse]


class QuestionMutationResponse(BaseModel):
    success: bool = True
    question: QuestionResponse


class QuestionDeleteResponse(BaseModel):
    success: bool = True
    message: str = "Question deleted"


class QuestionImportResponse(BaseModel):
    success: bool = True
    message: str
    count: int
