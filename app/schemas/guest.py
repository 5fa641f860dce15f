from pydantic import Field, field_validator
from typing import List, Optional
from datetime import datetime
from ..models.enums import RSVPStatus
from ..utils.constants import AppConstants
from .common import CamelModel


class GuestBase(CamelModel):
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    phone: str = Field(..., min_length=1, max_length=50)
    email: Optional[str] = Field(None, max_length=254)
    address: Optional[str] = None
    notes: Optional[str] = None
    category_id: Optional[int] = None
    rsvp_status: RSVPStatus = RSVPStatus.PENDING
    guest_count: int = Field(
        AppConstants.MIN_GUEST_COUNT,
        ge=AppConstants.MIN_GUEST_COUNT,
        le=AppConstants.MAX_GUEST_COUNT,
    )
    dietary_restrictions: Optional[str] = None
    invitation_sent: bool = False
    invitation_sent_at: Optional[datetime] = None

    @field_validator("first_name", "last_name", "phone")
    @classmethod
    def not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v


class GuestCreate(GuestBase):
    pass


class GuestUpdate(CamelModel):
    first_name: Optional[str] = Field(None, min_length=1, max_length=100)
    last_name: Optional[str] = Field(None, min_length=1, max_length=100)
    phone: Optional[str] = Field(None, min_length=1, max_length=50)
    email: Optional[str] = Field(None, max_length=254)
    address: Optional[str] = None
    notes: Optional[str] = None
    category_id: Optional[int] = None
    rsvp_status: Optional[RSVPStatus] = None
    guest_count: Optional[int] = Field(
        None, ge=AppConstants.MIN_GUEST_COUNT, le=AppConstants.MAX_GUEST_COUNT
    )
    dietary_restrictions: Optional[str] = None
    invitation_sent: Optional[bool] = None
    invitation_sent_at: Optional[datetime] = None

    @field_validator("first_name", "last_name", "phone")
    @classmethod
    def not_blank(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v


class GuestResponse(GuestBase):
    id: int
    wedding_id: int
    rsvp_submitted_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class GuestUploadResponse(CamelModel):
    message: str
    guests: List[GuestResponse]
