from sqlalchemy import Column, String, Integer, Float, DateTime, JSON
from sqlalchemy.orm import relationship
from datetime import datetime
from uuid import uuid4
from prepwise.core.database import Base


class Interview(Base):
    __tablename__ = "interviews"

    id = Column(String, primary_key=True, index=True, default=lambda: str(uuid4()))
    user_id = Column(String, index=True, nullable=False)
    clerk_id = Column(String, index=True, nullable=False)

    title = Column(String, nullable=False)
    type = Column(String, nullable=False)  # technical | behavioral | mixed
    experience_level = Column(String, nullable=False)
    technologies = Column(JSON, default=list)

    status = Column(String, default="pending", index=True)  # pending | in-progress | completed | cancelled
    duration = Column(Integer, default=30)
    total_questions = Column(Integer, default=0)
    completed_questions = Column(Integer, default=0)
    score = Column(Float, nullable=True)

    # [{"speaker": "user" | "ai", "message": str, "timestamp": iso8601}]
    transcript = Column(JSON, default=list)

    # plain reference; feedback.interview_id holds the foreign key
    feedback_id = Column(String, nullable=True)
    feedback = relationship(
        "Feedback",
        primaryjoin="foreign(Interview.feedback_id) == Feedback.id",
        uselist=False,
        viewonly=True,
    )

    started_at = Column(DateTime, nullable=True)
    completed_at = Column(DateTime, nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow, index=True)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
