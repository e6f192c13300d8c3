"""Album schemas."""
from pydantic import BaseModel, Field, ConfigDict, field_validator, model_validator
from datetime import datetime
from typing import Optional

from .image import ImageResponse


def _strip_required(value: str, field_name: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError(f'{field_name} is required')
    return value


class AlbumCreate(BaseModel):
    """Schema for creating an album."""
    name: str = Field(..., max_length=255, description="Display name")
    category: str = Field(..., max_length=100, description="Free-text category tag")
    is_private: bool = Field(False, description="Deliver privately via token + passphrase")
    passphrase: Optional[str] = Field(None, max_length=255, description="Required when is_private is True")
    customer_id: Optional[int] = Field(None, description="Owning customer, if any")

    @field_validator('name')
    @classmethod
    def validate_name(cls, v: str) -> str:
        return _strip_required(v, 'name')

    @field_validator('category')
    @classmethod
    def validate_category(cls, v: str) -> str:
        return _strip_required(v, 'category')

    @model_validator(mode='after')
    def validate_privacy(self) -> 'AlbumCreate':
        """Private albums need a passphrase; public albums never keep one."""
        if self.is_private:
            if not self.passphrase or not self.passphrase.strip():
                raise ValueError('passphrase is required for private albums')
        else:
            self.passphrase = None
        return self


class AlbumUpdate(BaseModel):
    """Schema for a partial album update. Unset fields are left untouched."""
    name: Optional[str] = Field(None, max_length=255)
    category: Optional[str] = Field(None, max_length=100)
    is_private: Optional[bool] = None
    passphrase: Optional[str] = Field(None, max_length=255)
    customer_id: Optional[int] = None

    @field_validator('name')
    @classmethod
    def validate_name(cls, v: Optional[str]) -> Optional[str]:
        return None if v is None else _strip_required(v, 'name')

    @field_validator('category')
    @classmethod
    def validate_category(cls, v: Optional[str]) -> Optional[str]:
        return None if v is None else _strip_required(v, 'category')


class AlbumResponse(BaseModel):
    """Album as shown publicly. Passphrase and token are never included."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    category: str
    is_private: bool
    created_at: datetime

    # True when a private album is shown before its passphrase was verified
    locked: bool = False
    images: list[ImageResponse] = Field(default_factory=list)


class AlbumAdminResponse(AlbumResponse):
    """Album with its delivery credentials, for the admin panel."""
    passphrase: Optional[str] = None
    access_token: Optional[str] = None
    customer_id: Optional[int] = None
    updated_at: datetime


class AlbumPassphraseVerify(BaseModel):
    """Schema for unlocking a private album."""
    passphrase: str = Field(..., min_length=1, description="Album passphrase")


class AlbumShareResponse(BaseModel):
    """Response for private album sharing information."""
    album_id: int
    access_token: str
    share_url: str
    qr_code_url: str


class AlbumDeleteResponse(BaseModel):
    """Outcome of deleting an album and its files."""
    message: str
    album_id: int
    deleted_images: int
    failed_files: list[str] = Field(default_factory=list)
