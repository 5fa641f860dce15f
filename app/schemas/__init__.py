from .common import CamelModel
from .user import UserResponse, SupabaseConfigResponse
from .wedding import (
    WeddingCreate,
    WeddingUpdate,
    WeddingResponse,
    WeddingPublicView,
    WeddingStats,
)
from .guest_category import (
    GuestCategoryCreate,
    GuestCategoryUpdate,
    GuestCategoryResponse,
)
from .guest import GuestCreate, GuestUpdate, GuestResponse, GuestUploadResponse
from .rsvp import RSVPSubmission

__all__ = [
    "CamelModel",
    "UserResponse",
    "SupabaseConfigResponse",
    "WeddingCreate",
    "WeddingUpdate",
    "WeddingResponse",
    "WeddingPublicView",
    "WeddingStats",
    "GuestCategoryCreate",
    "GuestCategoryUpdate",
    "GuestCategoryResponse",
    "GuestCreate",
    "GuestUpdate",
    "GuestResponse",
    "GuestUploadResponse",
    "RSVPSubmission",
]
