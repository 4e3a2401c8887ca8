from typing import Optional

from pydantic import BaseModel, Field


class AdminLogin(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


class AdminResponse(BaseModel):
    id: int
    email: str

    class Config:
        from_attributes = True


class AdminLoginResponse(BaseModel):
    success: bool = True
    admin: AdminResponse


class AdminSeedResponse(BaseModel):
    success: bool = True
    message: str
    admin: AdminResponse


class MessageResponse(BaseModel):
    success: bool = True
    message: str = Field(..., description="Human readable outcome")
