from sqlalchemy import Column, Integer, String, DateTime, UniqueConstraint
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from ..database import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    supabase_id = Column(String, unique=True, index=True, nullable=False)
    email = Column(String, unique=True, index=True)

    # User profile
    first_name = Column(String)
    last_name = Column(String)
    profile_image_url = Column(String)

    # Timestamps
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # Constraints
    __table_args__ = (
        UniqueConstraint("supabase_id", name="uq_user_supabase_id"),
        UniqueConstraint("email", name="uq_user_email"),
    )

    weddings = relationship(
        "Wedding", back_populates="owner", cascade="all, delete-orphan"
    )

    @classmethod
    def create_from_supabase(cls, supabase_user, db_session):
        """Create new user from Supabase auth user"""
        user_metadata = supabase_user.user_metadata or {}

        full_name = user_metadata.get("full_name") or user_metadata.get("name") or ""
        first_name, _, last_name = full_name.partition(" ")

        user = cls(
            supabase_id=supabase_user.id,
            email=supabase_user.email,
            first_name=user_metadata.get("first_name") or first_name or None,
            last_name=user_metadata.get("last_name") or last_name or None,
            profile_image_url=user_metadata.get("avatar_url"),
        )

        db_session.add(user)
        try:
            db_session.commit()
        except IntegrityError:
            # Lost a race with a concurrent first request for the same account
            db_session.rollback()
            existing = cls.find_by_supabase_id(db_session, supabase_user.id)
            if existing is None:
                raise
            return existing

        db_session.refresh(user)
        return user

    @classmethod
    def get_or_create_from_supabase(cls, supabase_user, db_session):
        """Get existing user or create new one from Supabase"""
        user = cls.find_by_supabase_id(db_session, supabase_user.id)
        if user:
            return user
        return cls.create_from_supabase(supabase_user, db_session)

    @classmethod
    def find_by_supabase_id(cls, db_session, supabase_id: str):
        """Find user by Supabase ID"""
        return db_session.query(cls).filter(cls.supabase_id == supabase_id).first()
