from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from ..database import get_db, get_supabase
from ..models.user import User
from ..models.wedding import Wedding
from ..services.wedding_service import WeddingService, WeddingNotFoundError
from supabase import Client
import logging

security = HTTPBearer(auto_error=False)
logger = logging.getLogger(__name__)


# Auth Helper Functions
async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    db: Session = Depends(get_db),
    supabase: Client = Depends(get_supabase),
) -> User:
    """Get current authenticated user from Supabase token"""
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Unauthorized",
        headers={"WWW-Authenticate": "Bearer"},
    )

    if not credentials or not credentials.credentials:
        raise credentials_exception

    try:
        # Verify token with Supabase
        auth_response = supabase.auth.get_user(credentials.credentials)
    except Exception as e:
        logger.error(f"Authentication error: {e}")
        raise credentials_exception

    if not auth_response or not auth_response.user:
        raise credentials_exception

    # Find user in our database by Supabase ID, creating them on first sight
    try:
        return User.get_or_create_from_supabase(auth_response.user, db)
    except IntegrityError as e:
        logger.warning(f"Could not register Supabase user {auth_response.user.id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Account email is already registered",
        )


async def require_wedding_owner(
    wedding_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> tuple[User, Wedding]:
    """Ensure the wedding in the path belongs to the caller and return user + wedding"""
    try:
        wedding = WeddingService(db).get_wedding(wedding_id, current_user.id)
    except WeddingNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    return current_user, wedding
