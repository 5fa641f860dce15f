# app/utils/router_helpers.py

from fastapi import HTTPException, status
from typing import Callable
from functools import wraps
import logging

# Import all service exceptions
from ..services.wedding_service import (
    WeddingServiceError,
    NotFoundError,
    StoreError,
)
from ..services.guest_service import GuestServiceError
from ..services.guest_import_service import (
    GuestImportError,
    ParseError,
    ValidationError,
)
from .constants import ResponseMessages

logger = logging.getLogger(__name__)


def handle_service_errors(func: Callable) -> Callable:
    """Decorator to standardize service error handling in routers"""

    @wraps(func)
    async def wrapper(*args, **kwargs):
        try:
            return await func(*args, **kwargs)

        # Missing or not owned -> 404, never 403
        except NotFoundError as e:
            logger.warning(f"Resource not found: {str(e)}")
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

        # Bad CSV rows -> 400 Bad Request, with the offending row
        except ValidationError as e:
            logger.warning(f"Validation error: {str(e)}")
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail={
                    "message": "Failed to upload guests",
                    "error": str(e),
                    "row": e.row,
                    "rowNumber": e.row_number,
                },
            )

        except ParseError as e:
            logger.warning(f"CSV parse error: {str(e)}")
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail={"message": "Failed to upload guests", "error": str(e)},
            )

        # Persistence failures -> 500 Internal Server Error
        except StoreError as e:
            logger.error(f"Store error in {func.__name__}: {str(e)}")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=ResponseMessages.UNEXPECTED_ERROR,
            )

        # General Service Errors -> 400 Bad Request
        except (WeddingServiceError, GuestServiceError, GuestImportError) as e:
            logger.warning(f"Service error: {str(e)}")
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

        except HTTPException:
            raise

        # Unexpected errors -> 500 Internal Server Error
        except Exception as e:
            logger.error(
                f"Unexpected error in {func.__name__}: {str(e)}", exc_info=True
            )
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=ResponseMessages.UNEXPECTED_ERROR,
            )

    return wrapper
