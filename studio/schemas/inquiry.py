"""Inquiry schemas."""
from pydantic import BaseModel, Field, ConfigDict, field_validator
from datetime import datetime
from typing import Optional


class InquiryCreate(BaseModel):
    """Contact form payload. `timestamp` is whatever the browser sent."""
    name: str = Field(..., max_length=255)
    email: str = Field(..., max_length=255)
    phone: Optional[str] = Field(None, max_length=50)
    type: str = Field(..., max_length=100)
    service: str = Field(..., max_length=100)
    message: str
    timestamp: Optional[str] = None

    @field_validator('name', 'email', 'type', 'service', 'message')
    @classmethod
    def validate_required(cls, v: str, info) -> str:
        v = v.strip()
        if not v:
            raise ValueError(f'{info.field_name} is required')
        return v


class InquiryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    phone: Optional[str] = None
    type: str
    service: str
    message: str
    timestamp: str
    read: bool
    created_at: datetime


class InquiryCreatedResponse(BaseModel):
    id: int
    message: str
