from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List
from ..database import get_db
from ..services.wedding_service import WeddingService
from ..schemas.guest_category import (
    GuestCategoryCreate,
    GuestCategoryUpdate,
    GuestCategoryResponse,
)
from ..dependencies.permissions import get_current_user
from ..utils.router_helpers import handle_service_errors
from ..models.user import User

router = APIRouter(tags=["categories"])


@router.get(
    "/weddings/{wedding_id}/categories", response_model=List[GuestCategoryResponse]
)
@handle_service_errors
async def get_wedding_categories(
    wedding_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    wedding_service = WeddingService(db)
    return wedding_service.get_categories(wedding_id, current_user.id)


@router.post(
    "/weddings/{wedding_id}/categories",
    response_model=GuestCategoryResponse,
    status_code=status.HTTP_201_CREATED,
)
@handle_service_errors
async def create_category(
    wedding_id: int,
    category_data: GuestCategoryCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    wedding_service = WeddingService(db)
    return wedding_service.create_category(wedding_id, current_user.id, category_data)


@router.patch("/categories/{category_id}", response_model=GuestCategoryResponse)
@handle_service_errors
async def update_category(
    category_id: int,
    category_update: GuestCategoryUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    wedding_service = WeddingService(db)
    return wedding_service.update_category(
        category_id, current_user.id, category_update
    )


@router.delete("/categories/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
@handle_service_errors
async def delete_category(
    category_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Delete a category; its guests are kept without a category"""
    wedding_service = WeddingService(db)
    wedding_service.delete_category(category_id, current_user.id)
