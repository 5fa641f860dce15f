from .wedding_service import WeddingService
from .guest_service import GuestService
from .guest_import_service import GuestImportService
from .rsvp_service import RsvpService

__all__ = [
    "WeddingService",
    "GuestService",
    "GuestImportService",
    "RsvpService",
]
