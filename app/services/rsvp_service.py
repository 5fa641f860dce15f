from sqlalchemy.orm import Session
import logging
from ..models.guest import Guest
from ..models.wedding import Wedding
from ..schemas.rsvp import RSVPSubmission
from ..utils.constants import ResponseMessages
from .wedding_service import WeddingService
from .guest_service import GuestService, GuestNotFoundError

logger = logging.getLogger(__name__)


class RsvpService:
    """Public, unauthenticated RSVP flow keyed by a wedding's RSVP code"""

    def __init__(self, db: Session):
        self.db = db
        self.wedding_service = WeddingService(db)
        self.guest_service = GuestService(db)

    def lookup(self, rsvp_code: str) -> Wedding:
        return self.wedding_service.get_wedding_by_rsvp_code(rsvp_code)

    def submit(self, rsvp_code: str, submission: RSVPSubmission) -> Guest:
        """
        Record an RSVP for a guest of the wedding behind rsvp_code.

        The guest is identified only by the id the client sends. The only
        guard is that the guest must belong to this wedding.
        """
        wedding = self.wedding_service.get_wedding_by_rsvp_code(rsvp_code)

        guest = self.db.query(Guest).filter(Guest.id == submission.guest_id).first()
        if not guest or guest.wedding_id != wedding.id:
            raise GuestNotFoundError(ResponseMessages.GUEST_NOT_FOUND)

        guest = self.guest_service.update_guest_rsvp(
            guest,
            rsvp_status=submission.rsvp_status,
            guest_count=submission.guest_count,
            dietary_restrictions=submission.dietary_restrictions,
        )

        logger.info(
            f"RSVP '{guest.rsvp_status}' recorded for guest {guest.id} of wedding {wedding.id}"
        )
        return guest
