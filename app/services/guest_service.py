from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
from typing import Any, Dict, List, Optional
from datetime import datetime, timezone
import logging
from ..models.guest import Guest
from ..models.guest_category import GuestCategory
from ..schemas.guest import GuestCreate, GuestUpdate
from ..utils.constants import ResponseMessages
from .wedding_service import WeddingService, NotFoundError, StoreError

logger = logging.getLogger(__name__)

# Columns an update may not clear
REQUIRED_GUEST_FIELDS = {
    "first_name",
    "last_name",
    "phone",
    "rsvp_status",
    "guest_count",
    "invitation_sent",
}


class GuestServiceError(Exception):
    """Base exception for guest service errors"""

    pass


class GuestNotFoundError(NotFoundError):
    """Guest not found"""

    pass


class BusinessRuleViolationError(GuestServiceError):
    """Business rule violation"""

    pass


class GuestService:
    def __init__(self, db: Session):
        self.db = db
        self.wedding_service = WeddingService(db)

    def create_guest(
        self, wedding_id: int, user_id: int, guest_data: GuestCreate
    ) -> Guest:
        """Add a single guest to a wedding owned by the caller"""
        self.wedding_service.get_wedding(wedding_id, user_id)
        self._check_category(wedding_id, guest_data.category_id)

        guest = Guest(wedding_id=wedding_id, **guest_data.model_dump())
        self._stamp_invitation(guest)

        self.db.add(guest)
        self._commit(guest, "create guest")
        return guest

    def get_wedding_guests(self, wedding_id: int, user_id: int) -> List[Guest]:
        """Guest list ordered by first then last name"""
        self.wedding_service.get_wedding(wedding_id, user_id)

        return (
            self.db.query(Guest)
            .filter(Guest.wedding_id == wedding_id)
            .order_by(Guest.first_name.asc(), Guest.last_name.asc())
            .all()
        )

    def get_guest(self, guest_id: int, user_id: int) -> Guest:
        """Get a guest whose wedding belongs to the caller"""
        guest = self.db.query(Guest).filter(Guest.id == guest_id).first()
        if not guest or not guest.wedding.is_owned_by(user_id):
            raise GuestNotFoundError(ResponseMessages.GUEST_NOT_FOUND)
        return guest

    def update_guest(
        self, guest_id: int, user_id: int, guest_update: GuestUpdate
    ) -> Guest:
        guest = self.get_guest(guest_id, user_id)
        changes = guest_update.model_dump(exclude_unset=True)

        if "category_id" in changes:
            self._check_category(guest.wedding_id, changes["category_id"])

        for field, value in changes.items():
            if value is None and field in REQUIRED_GUEST_FIELDS:
                continue
            setattr(guest, field, value)
        self._stamp_invitation(guest)

        self._commit(guest, "update guest")
        return guest

    def delete_guest(self, guest_id: int, user_id: int) -> None:
        guest = self.get_guest(guest_id, user_id)

        self.db.delete(guest)
        self._commit(None, "delete guest")

    def create_many_guests(self, guests_data: List[Dict[str, Any]]) -> List[Guest]:
        """Insert already validated guest rows in one batch"""
        if not guests_data:
            return []

        guests = [Guest(**data) for data in guests_data]
        try:
            self.db.add_all(guests)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StoreError(f"Failed to import guests: {str(e)}")

        for guest in guests:
            self.db.refresh(guest)
        return guests

    def update_guest_rsvp(
        self,
        guest: Guest,
        rsvp_status: str,
        guest_count: int,
        dietary_restrictions: Optional[str],
    ) -> Guest:
        """Record a guest's own RSVP answer"""
        guest.rsvp_status = rsvp_status
        guest.guest_count = guest_count
        guest.dietary_restrictions = dietary_restrictions
        guest.rsvp_submitted_at = datetime.now(timezone.utc)

        self._commit(guest, "submit RSVP")
        return guest

    # Helpers

    def _check_category(self, wedding_id: int, category_id: Optional[int]) -> None:
        if category_id is None:
            return

        category = (
            self.db.query(GuestCategory).filter(GuestCategory.id == category_id).first()
        )
        if not category or category.wedding_id != wedding_id:
            raise BusinessRuleViolationError(
                "Category does not belong to this wedding"
            )

    @staticmethod
    def _stamp_invitation(guest: Guest) -> None:
        if guest.invitation_sent and not guest.invitation_sent_at:
            guest.invitation_sent_at = datetime.now(timezone.utc)

    def _commit(self, instance: Optional[Guest], action: str) -> None:
        try:
            self.db.commit()
            if instance is not None:
                self.db.refresh(instance)
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StoreError(f"Failed to {action}: {str(e)}")
