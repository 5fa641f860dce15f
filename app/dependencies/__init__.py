# app/dependencies/__init__.py

from .permissions import (
    require_wedding_owner,
    get_current_user,
)

__all__ = [
    "require_wedding_owner",
    "get_current_user",
]
