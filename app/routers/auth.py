from fastapi import APIRouter, Depends
from ..database import SUPABASE_URL, SUPABASE_ANON_KEY
from ..models.user import User
from ..schemas.user import UserResponse, SupabaseConfigResponse
from ..dependencies.permissions import get_current_user

router = APIRouter(tags=["authentication"])


@router.get("/supabase-config", response_model=SupabaseConfigResponse)
async def get_supabase_config():
    """Public Supabase settings the front-end needs to start its auth client"""
    return SupabaseConfigResponse(url=SUPABASE_URL, anon_key=SUPABASE_ANON_KEY)


@router.get("/auth/user", response_model=UserResponse)
async def get_current_user_info(current_user: User = Depends(get_current_user)):
    """Get the authenticated user's profile"""
    return current_user
