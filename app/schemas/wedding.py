from pydantic import Field, field_validator, model_validator
from typing import Optional
from datetime import datetime
from ..models.enums import WeddingStatus
from .common import CamelModel

# Columns that may be left out of an update but never set to null
REQUIRED_WEDDING_FIELDS = ("bride_name", "groom_name", "wedding_date", "venue", "status")


class WeddingBase(CamelModel):
    bride_name: str = Field(..., min_length=1, max_length=100)
    groom_name: str = Field(..., min_length=1, max_length=100)
    wedding_date: datetime
    venue: str = Field(..., min_length=1, max_length=200)
    venue_address: Optional[str] = None
    description: Optional[str] = None
    status: WeddingStatus = WeddingStatus.ACTIVE


class WeddingCreate(WeddingBase):
    @field_validator("bride_name", "groom_name", "venue")
    @classmethod
    def not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v


class WeddingUpdate(CamelModel):
    bride_name: Optional[str] = Field(None, min_length=1, max_length=100)
    groom_name: Optional[str] = Field(None, min_length=1, max_length=100)
    wedding_date: Optional[datetime] = None
    venue: Optional[str] = Field(None, min_length=1, max_length=200)
    venue_address: Optional[str] = None
    description: Optional[str] = None
    status: Optional[WeddingStatus] = None

    @field_validator("bride_name", "groom_name", "venue")
    @classmethod
    def not_blank(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v

    @model_validator(mode="after")
    def required_fields_not_null(self):
        for name in REQUIRED_WEDDING_FIELDS:
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self


class WeddingResponse(WeddingBase):
    id: int
    user_id: int
    rsvp_code: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class WeddingPublicView(CamelModel):
    """Fields safe to show on the public RSVP page"""

    id: int
    bride_name: str
    groom_name: str
    wedding_date: datetime
    venue: str
    venue_address: Optional[str] = None
    description: Optional[str] = None


class WeddingStats(CamelModel):
    total_guests: int
    confirmed: int
    pending: int
    declined: int
    response_rate: int
