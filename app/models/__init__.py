from .user import User
from .wedding import Wedding
from .guest_category import GuestCategory
from .guest import Guest
from .communication_log import CommunicationLog


__all__ = [
    "User",
    "Wedding",
    "GuestCategory",
    "Guest",
    "CommunicationLog",
]
