from pydantic import Field
from typing import Optional
from ..models.enums import RSVPStatus
from ..utils.constants import AppConstants
from .common import CamelModel


class RSVPSubmission(CamelModel):
    guest_id: int
    rsvp_status: RSVPStatus
    guest_count: int = Field(
        AppConstants.MIN_GUEST_COUNT,
        ge=AppConstants.MIN_GUEST_COUNT,
        le=AppConstants.MAX_GUEST_COUNT,
        description="Number of people attending",
    )
    dietary_restrictions: Optional[str] = Field(None, max_length=500)
