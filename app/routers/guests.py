from fastapi import APIRouter, Depends, HTTPException, status, UploadFile, File
from sqlalchemy.orm import Session
from typing import List, Optional
import os
from ..database import get_db
from ..services.guest_service import GuestService
from ..services.guest_import_service import GuestImportService
from ..schemas.guest import (
    GuestCreate,
    GuestUpdate,
    GuestResponse,
    GuestUploadResponse,
)
from ..dependencies.permissions import get_current_user, require_wedding_owner
from ..utils.router_helpers import handle_service_errors
from ..utils.constants import AppConstants, ResponseMessages
from ..models.user import User
from ..models.wedding import Wedding

router = APIRouter(tags=["guests"])


@router.get("/weddings/{wedding_id}/guests", response_model=List[GuestResponse])
@handle_service_errors
async def get_wedding_guests(
    wedding_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Guest list for a wedding, alphabetical by name"""
    guest_service = GuestService(db)
    return guest_service.get_wedding_guests(wedding_id, current_user.id)


@router.post(
    "/weddings/{wedding_id}/guests",
    response_model=GuestResponse,
    status_code=status.HTTP_201_CREATED,
)
@handle_service_errors
async def create_guest(
    wedding_id: int,
    guest_data: GuestCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    guest_service = GuestService(db)
    return guest_service.create_guest(wedding_id, current_user.id, guest_data)


@router.post(
    "/weddings/{wedding_id}/guests/upload",
    response_model=GuestUploadResponse,
    status_code=status.HTTP_201_CREATED,
)
@handle_service_errors
async def upload_guests(
    file: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
    user_wedding: tuple[User, Wedding] = Depends(require_wedding_owner),
):
    """Bulk import guests from a CSV file (multipart field 'file')"""
    current_user, wedding = user_wedding

    if file is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=ResponseMessages.NO_FILE_UPLOADED,
        )

    extension = os.path.splitext(file.filename or "")[1].lower()
    if extension not in AppConstants.ALLOWED_UPLOAD_EXTENSIONS:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Please upload a CSV file",
        )

    max_bytes = AppConstants.MAX_UPLOAD_SIZE_MB * 1024 * 1024
    content = await file.read(max_bytes + 1)
    if len(content) > max_bytes:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"File is larger than {AppConstants.MAX_UPLOAD_SIZE_MB} MB",
        )

    import_service = GuestImportService(db)
    result = import_service.ingest(wedding.id, content)

    return GuestUploadResponse(
        message=result.message,
        guests=[GuestResponse.model_validate(g) for g in result.created_guests],
    )


@router.get("/guests/{guest_id}", response_model=GuestResponse)
@handle_service_errors
async def get_guest(
    guest_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    guest_service = GuestService(db)
    return guest_service.get_guest(guest_id, current_user.id)


@router.patch("/guests/{guest_id}", response_model=GuestResponse)
@handle_service_errors
async def update_guest(
    guest_id: int,
    guest_update: GuestUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    guest_service = GuestService(db)
    return guest_service.update_guest(guest_id, current_user.id, guest_update)


@router.delete("/guests/{guest_id}", status_code=status.HTTP_204_NO_CONTENT)
@handle_service_errors
async def delete_guest(
    guest_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    guest_service = GuestService(db)
    guest_service.delete_guest(guest_id, current_user.id)
