from sqlalchemy import Column, String, Integer, Float, Boolean, DateTime, JSON
from datetime import datetime
from uuid import uuid4
from prepwise.core.database import Base


class Question(Base):
    __tablename__ = "questions"

    id = Column(String, primary_key=True, index=True, default=lambda: str(uuid4()))
    text = Column(String, nullable=False)

    category = Column(String, index=True, nullable=False)
    subcategory = Column(String, index=True, nullable=False)
    difficulty = Column(String, index=True, nullable=False)
    experience_level = Column(String, index=True, nullable=False)
    technologies = Column(JSON, default=list)
    type = Column(String, nullable=False)

    expected_answer = Column(String, nullable=True)
    sample_answers = Column(JSON, default=list)
    hints = Column(JSON, default=list)
    time_limit = Column(Integer, default=5)
    points = Column(Integer, default=10)
    tags = Column(JSON, default=list)

    is_active = Column(Boolean, default=True, index=True)
    usage_count = Column(Integer, default=0)
    average_rating = Column(Float, nullable=True)

    created_by = Column(String, default="ai")
    ai_generated = Column(Boolean, default=True)
    # "metadata" is reserved on declarative classes
    generation_metadata = Column("metadata", JSON, nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow, index=True)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
