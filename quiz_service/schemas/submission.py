from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class SubmissionFilterEnum(str, Enum):
    PASSED = "passed"
    FAILED = "failed"


class SubmissionResponse(BaseModel):
    id: int
    name: str
    email: str
    mobile: str
    answers: List[Optional[int]]
    question_ids: List[int] = Field(..., alias="questionIds")
    score: int
    total_questions: int = Field(..., alias="totalQuestions")
    passed: bool = Field(..., alias="pass")
    created_at: Optional[datetime] = Field(None, alias="createdAt")

    class Config:
        from_attributes = True
        populate_by_name = True


class Pagination(BaseModel):
    page: int
    limit: int
    total: int
    total_pages: int = Field(..., alias="totalPages")

    class Config:
        populate_by_name = True


class SubmissionListResponse(BaseModel):
    submissions: List[SubmissionResponse]
    pagination: Pagination


class SubmissionStats(BaseModel):
    total: int
    passed: int
    failed: int
    pass_rate: int = Field(..., alias="passRate")

    class Config:
        populate_by_name = True


class RecentSubmission(BaseModel):
    id: int
    name: str
    email: str
    score: int
    total_questions: int = Field(..., alias="totalQuestions")
    passed: bool = Field(..., alias="pass")
    created_at: Optional[datetime] = Field(None, alias="createdAt")

    class Config:
        from_attributes = True
        populate_by_name = True


class StatsResponse(BaseModel):
    stats: SubmissionStats
    recent_submissions: List[RecentSubmission] = Field(..., alias="recentSubmissions")

    class Config:
        populate_by_name = True
