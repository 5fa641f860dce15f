from sqlalchemy import create_engine, event, text
from sqlalchemy.ext.declarative import declarative_base
from sqlalchemy.orm import sessionmaker
from supabase import create_client, Client
from fastapi import HTTPException, Request, status
import os
from dotenv import load_dotenv
import logging

load_dotenv()

logger = logging.getLogger(__name__)

# Database URLs
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./wedding_planner.db")
SUPABASE_URL = os.getenv("SUPABASE_URL")
SUPABASE_ANON_KEY = os.getenv("SUPABASE_ANON_KEY")

# SQLAlchemy setup (for ORM approach)
engine = create_engine(
    DATABASE_URL,
    connect_args={"check_same_thread": False} if "sqlite" in DATABASE_URL else {},
    pool_pre_ping=True,  # Good for PostgreSQL connections
    pool_recycle=300,  # Recycle connections every 5 minutes
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


def enable_sqlite_foreign_keys(target_engine):
    """SQLite ignores ON DELETE CASCADE unless foreign keys are switched on"""

    @event.listens_for(target_engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


if DATABASE_URL.startswith("sqlite"):
    enable_sqlite_foreign_keys(engine)


# SQLAlchemy dependency
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


# Supabase client, built once at startup and stored on app.state
def create_supabase_client() -> Client | None:
    """Build the Supabase client from environment settings"""
    if not (SUPABASE_URL and SUPABASE_ANON_KEY):
        logger.warning(
            "SUPABASE_URL / SUPABASE_ANON_KEY not set; authenticated routes will be unavailable"
        )
        return None
    return create_client(SUPABASE_URL, SUPABASE_ANON_KEY)


def get_supabase(request: Request) -> Client:
    """Get the Supabase client created during application startup"""
    supabase = getattr(request.app.state, "supabase", None)
    if supabase is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Authentication is not configured",
        )
    return supabase


# Database initialization
def init_db():
    """Initialize database tables"""
    # Import models so Base.metadata has every table
    from . import models  # noqa: F401

    Base.metadata.create_all(bind=engine)


# Health check function
def check_db_connection() -> dict:
    """Check database connectivity"""
    status_info = {"sqlalchemy": False}

    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        status_info["sqlalchemy"] = True
    except Exception as e:
        logger.error(f"Database health check failed: {e}")

    return status_info
