"""Image schemas."""
from pydantic import BaseModel, Field, ConfigDict
from datetime import datetime
from typing import Optional


class ImageResponse(BaseModel):
    """Image as shown in a gallery or a client review."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    album_id: int
    url: str
    caption: Optional[str] = None
    order_index: int
    feedback: Optional[str] = None
    is_selected: bool = False
    created_at: datetime


class ImageFeedbackUpdate(BaseModel):
    """Client feedback on a single image of a private album."""
    feedback: Optional[str] = Field(None, max_length=5000, description="Free-text client feedback")
    is_selected: bool = Field(False, description="Whether the client selected this image")


class ImageDeleteResponse(BaseModel):
    message: str
    file_removed: bool
