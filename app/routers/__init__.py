# app/routers/__init__.py

# Import all router modules to make them available
from . import auth
from . import weddings
from . import guests
from . import categories
from . import rsvp

__all__ = [
    "auth",
    "weddings",
    "guests",
    "categories",
    "rsvp",
]
