from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List
from ..database import get_db
from ..services.wedding_service import WeddingService
from ..schemas.wedding import (
    WeddingCreate,
    WeddingUpdate,
    WeddingResponse,
    WeddingStats,
)
from ..dependencies.permissions import get_current_user
from ..utils.router_helpers import handle_service_errors
from ..models.user import User

router = APIRouter(prefix="/weddings", tags=["weddings"])


@router.post("", response_model=WeddingResponse, status_code=status.HTTP_201_CREATED)
@handle_service_errors
async def create_wedding(
    wedding_data: WeddingCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Create a wedding and seed the default guest categories"""
    wedding_service = WeddingService(db)
    return wedding_service.create_wedding(wedding_data, user_id=current_user.id)


@router.get("", response_model=List[WeddingResponse])
@handle_service_errors
async def get_my_weddings(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """List the current user's weddings"""
    wedding_service = WeddingService(db)
    return wedding_service.get_user_weddings(current_user.id)


@router.get("/{wedding_id}", response_model=WeddingResponse)
@handle_service_errors
async def get_wedding(
    wedding_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    wedding_service = WeddingService(db)
    return wedding_service.get_wedding(wedding_id, current_user.id)


@router.patch("/{wedding_id}", response_model=WeddingResponse)
@handle_service_errors
async def update_wedding(
    wedding_id: int,
    wedding_update: WeddingUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Update wedding details (the RSVP code cannot be changed)"""
    wedding_service = WeddingService(db)
    return wedding_service.update_wedding(wedding_id, current_user.id, wedding_update)


@router.get("/{wedding_id}/stats", response_model=WeddingStats)
@handle_service_errors
async def get_wedding_stats(
    wedding_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """RSVP counts and response rate"""
    wedding_service = WeddingService(db)
    return wedding_service.get_wedding_stats(wedding_id, current_user.id)
