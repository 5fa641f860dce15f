from pydantic import Field
from typing import Optional
from datetime import datetime
from ..utils.constants import AppConstants
from .common import CamelModel

HEX_COLOR_PATTERN = r"^#[0-9A-Fa-f]{6}$"


class GuestCategoryBase(CamelModel):
    name: str = Field(..., min_length=1, max_length=100)
    color: str = Field(AppConstants.DEFAULT_CATEGORY_COLOR, pattern=HEX_COLOR_PATTERN)


class GuestCategoryCreate(GuestCategoryBase):
    pass


class GuestCategoryUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    color: Optional[str] = Field(None, pattern=HEX_COLOR_PATTERN)


class GuestCategoryResponse(GuestCategoryBase):
    id: int
    wedding_id: int
    created_at: Optional[datetime] = None
