from typing import Optional
from datetime import datetime
from .common import CamelModel


class UserResponse(CamelModel):
    id: int
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_image_url: Optional[str] = None
    created_at: Optional[datetime] = None


class SupabaseConfigResponse(CamelModel):
    url: Optional[str] = None
    anon_key: Optional[str] = None
