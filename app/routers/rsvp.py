from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from ..database import get_db
from ..services.rsvp_service import RsvpService
from ..schemas.rsvp import RSVPSubmission
from ..schemas.wedding import WeddingPublicView
from ..schemas.guest import GuestResponse
from ..utils.router_helpers import handle_service_errors

# Public routes: no authentication
router = APIRouter(prefix="/rsvp", tags=["rsvp"])


@router.get("/{rsvp_code}", response_model=WeddingPublicView)
@handle_service_errors
async def get_rsvp_wedding(rsvp_code: str, db: Session = Depends(get_db)):
    """Public wedding details for the RSVP page"""
    rsvp_service = RsvpService(db)
    return rsvp_service.lookup(rsvp_code)


@router.post("/{rsvp_code}/submit", response_model=GuestResponse)
@handle_service_errors
async def submit_rsvp(
    rsvp_code: str,
    submission: RSVPSubmission,
    db: Session = Depends(get_db),
):
    """Record a guest's attendance answer"""
    rsvp_service = RsvpService(db)
    return rsvp_service.submit(rsvp_code, submission)
