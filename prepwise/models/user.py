from sqlalchemy import Column, String, DateTime, JSON
from datetime import datetime
from uuid import uuid4
from prepwise.core.database import Base


class User(Base):
    __tablename__ = "users"

    id = Column(String, primary_key=True, index=True, default=lambda: str(uuid4()))
    clerk_id = Column(String, unique=True, index=True, nullable=False)
    email = Column(String, unique=True, nullable=False)

    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)
    profile_image = Column(String, nullable=True)

    experience_level = Column(String, default="beginner")
    preferred_technologies = Column(JSON, default=list)

    created_at = Column(DateTime, default=datetime.utcnow, index=True)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
