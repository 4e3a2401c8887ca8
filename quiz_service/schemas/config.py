from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class QuizConfigResponse(BaseModel):
    question_limit: int = Field(..., alias="questionLimit")
    pass_percentage: int = Field(..., alias="passPercentage")
    is_active: bool = Field(..., alias="isActive")
    whatsapp_number: Optional[str] = Field(None, alias="whatsappNumber")
    whatsapp_message: Optional[str] = Field(None, alias="whatsappMessage")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")

    class Config:
        from_attributes = True
        populate_by_name = True


class QuizConfigEnvelope(BaseModel):
    success: bool = True
    config: QuizConfigResponse


class QuizConfigUpdate(BaseModel):
    """Partial patch; fields left out of the request body are not touched"""

    question_limit: Optional[int] = Field(None, alias="questionLimit")
    pass_percentage: Optional[int] = Field(None, alias="passPercentage")
    is_active: Optional[bool] = Field(None, alias="isActive")
    whatsapp_number: Optional[str] = Field(None, alias="whatsappNumber")
    whatsapp_message: Optional[str] = Field(None, alias="whatsappMessage")

    class Config:
        populate_by_name = True


class PublicQuizConfig(BaseModel):
    is_active: bool = Field(..., alias="isActive")
    whatsapp_number: Optional[str] = Field(None, alias="whatsappNumber")
    whatsapp_message: Optional[str] = Field(None, alias="whatsappMessage")

    class Config:
        from_attributes = True
        populate_by_name = True
