from sqlalchemy.orm import Session
from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from typing import List, Dict, Optional
from decimal import Decimal, ROUND_HALF_UP
import logging
import re
from ..models.wedding import Wedding
from ..models.guest import Guest
from ..models.guest_category import GuestCategory
from ..models.enums import RSVPStatus
from ..schemas.wedding import WeddingCreate, WeddingUpdate
from ..schemas.guest_category import GuestCategoryCreate, GuestCategoryUpdate
from ..utils.constants import AppConstants, ResponseMessages

logger = logging.getLogger(__name__)


# Custom Exceptions for better error handling
class WeddingServiceError(Exception):
    """Base exception for wedding service errors"""

    pass


class NotFoundError(WeddingServiceError):
    """Entity missing, or owned by another user"""

    pass


class WeddingNotFoundError(NotFoundError):
    """Wedding not found"""

    pass


class CategoryNotFoundError(NotFoundError):
    """Guest category not found"""

    pass


class StoreError(WeddingServiceError):
    """Unexpected persistence failure"""

    pass


def build_rsvp_code(bride_name: str, groom_name: str, year: int) -> str:
    """Lowercased names with whitespace removed, joined with the wedding year"""
    bride = re.sub(r"\s+", "", bride_name.lower())
    groom = re.sub(r"\s+", "", groom_name.lower())
    return f"{bride}-{groom}-{year}"


def response_rate(confirmed: int, pending: int, declined: int) -> int:
    """Percentage of guests who answered, rounded half up; 0 with no guests"""
    total = confirmed + pending + declined
    if total == 0:
        return 0
    rate = Decimal(confirmed + declined) * 100 / Decimal(total)
    return int(rate.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


class WeddingService:
    def __init__(self, db: Session):
        self.db = db

    def create_wedding(self, wedding_data: WeddingCreate, user_id: int) -> Wedding:
        """Create a wedding and seed its default guest categories in one transaction"""

        rsvp_code = self._generate_unique_rsvp_code(
            wedding_data.bride_name,
            wedding_data.groom_name,
            wedding_data.wedding_date.year,
        )

        try:
            wedding = Wedding(
                **wedding_data.model_dump(),
                user_id=user_id,
                rsvp_code=rsvp_code,
            )
            self.db.add(wedding)
            self.db.flush()  # Get ID without committing

            for category in AppConstants.DEFAULT_GUEST_CATEGORIES:
                self.db.add(
                    GuestCategory(
                        wedding_id=wedding.id,
                        name=category["name"],
                        color=category["color"],
                    )
                )

            self.db.commit()
            self.db.refresh(wedding)

        except SQLAlchemyError as e:
            self.db.rollback()
            raise StoreError(f"Failed to create wedding: {str(e)}")

        logger.info(f"Created wedding {wedding.id} ({wedding.rsvp_code}) for user {user_id}")
        return wedding

    def get_user_weddings(self, user_id: int) -> List[Wedding]:
        """List the caller's weddings, newest first"""
        return (
            self.db.query(Wedding)
            .filter(Wedding.user_id == user_id)
            .order_by(Wedding.created_at.desc(), Wedding.id.desc())
            .all()
        )

    def get_wedding(self, wedding_id: int, user_id: int) -> Wedding:
        """Get a wedding owned by the caller"""
        wedding = self.db.query(Wedding).filter(Wedding.id == wedding_id).first()

        # Someone else's wedding looks exactly like a missing one
        if not wedding or not wedding.is_owned_by(user_id):
            raise WeddingNotFoundError(ResponseMessages.WEDDING_NOT_FOUND)

        return wedding

    def get_wedding_by_rsvp_code(self, rsvp_code: str) -> Wedding:
        """Public lookup, not scoped to a user"""
        wedding = self.db.query(Wedding).filter(Wedding.rsvp_code == rsvp_code).first()
        if not wedding:
            raise WeddingNotFoundError(ResponseMessages.WEDDING_NOT_FOUND)
        return wedding

    def update_wedding(
        self, wedding_id: int, user_id: int, wedding_update: WeddingUpdate
    ) -> Wedding:
        """Partially update a wedding; the RSVP code is never touched"""
        wedding = self.get_wedding(wedding_id, user_id)

        for field, value in wedding_update.model_dump(exclude_unset=True).items():
            setattr(wedding, field, value)

        self._commit(wedding, "update wedding")
        return wedding

    def get_wedding_stats(self, wedding_id: int, user_id: int) -> Dict[str, int]:
        """Count guests by RSVP status"""
        self.get_wedding(wedding_id, user_id)

        rows = (
            self.db.query(Guest.rsvp_status, func.count(Guest.id))
            .filter(Guest.wedding_id == wedding_id)
            .group_by(Guest.rsvp_status)
            .all()
        )
        counts = {status: count for status, count in rows}

        confirmed = counts.get(RSVPStatus.CONFIRMED.value, 0)
        pending = counts.get(RSVPStatus.PENDING.value, 0)
        declined = counts.get(RSVPStatus.DECLINED.value, 0)

        return {
            "total_guests": confirmed + pending + declined,
            "confirmed": confirmed,
            "pending": pending,
            "declined": declined,
            "response_rate": response_rate(confirmed, pending, declined),
        }

    # Guest categories

    def get_categories(self, wedding_id: int, user_id: int) -> List[GuestCategory]:
        self.get_wedding(wedding_id, user_id)
        return (
            self.db.query(GuestCategory)
            .filter(GuestCategory.wedding_id == wedding_id)
            .order_by(GuestCategory.id.asc())
            .all()
        )

    def create_category(
        self, wedding_id: int, user_id: int, category_data: GuestCategoryCreate
    ) -> GuestCategory:
        self.get_wedding(wedding_id, user_id)

        category = GuestCategory(wedding_id=wedding_id, **category_data.model_dump())
        self.db.add(category)
        self._commit(category, "create category")
        return category

    def get_category(self, category_id: int, user_id: int) -> GuestCategory:
        category = (
            self.db.query(GuestCategory).filter(GuestCategory.id == category_id).first()
        )
        if not category or not category.wedding.is_owned_by(user_id):
            raise CategoryNotFoundError(ResponseMessages.CATEGORY_NOT_FOUND)
        return category

    def update_category(
        self, category_id: int, user_id: int, category_update: GuestCategoryUpdate
    ) -> GuestCategory:
        category = self.get_category(category_id, user_id)

        for field, value in category_update.model_dump(exclude_unset=True).items():
            if value is not None:
                setattr(category, field, value)

        self._commit(category, "update category")
        return category

    def delete_category(self, category_id: int, user_id: int) -> None:
        """Delete a category; its guests stay on the list without a category"""
        category = self.get_category(category_id, user_id)

        try:
            self.db.query(Guest).filter(Guest.category_id == category_id).update(
                {Guest.category_id: None}, synchronize_session=False
            )
            self.db.delete(category)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StoreError(f"Failed to delete category: {str(e)}")

    # Helpers

    def _generate_unique_rsvp_code(
        self, bride_name: str, groom_name: str, year: int
    ) -> str:
        """Base code, or the first free '-2', '-3', ... variant"""
        base_code = build_rsvp_code(bride_name, groom_name, year)

        taken = {
            code
            for (code,) in self.db.query(Wedding.rsvp_code)
            .filter(Wedding.rsvp_code.like(f"{base_code}%"))
            .all()
        }

        if base_code not in taken:
            return base_code

        suffix = 2
        while f"{base_code}-{suffix}" in taken:
            suffix += 1
        return f"{base_code}-{suffix}"

    def _commit(self, instance: Optional[object], action: str) -> None:
        try:
            self.db.commit()
            if instance is not None:
                self.db.refresh(instance)
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StoreError(f"Failed to {action}: {str(e)}")
