from sqlalchemy import Column, String, Float, DateTime, JSON, ForeignKey
from sqlalchemy.orm import relationship
from datetime import datetime
from uuid import uuid4
from prepwise.core.database import Base


class Feedback(Base):
    __tablename__ = "feedback"

    id = Column(String, primary_key=True, index=True, default=lambda: str(uuid4()))
    interview_id = Column(String, ForeignKey("interviews.id"), unique=True, index=True, nullable=False)
    user_id = Column(String, index=True, nullable=False)
    clerk_id = Column(String, index=True, nullable=False)

    overall_score = Column(Float, nullable=False)
    category_scores = Column(JSON, nullable=False)
    strengths = Column(JSON, default=list)
    areas_for_improvement = Column(JSON, default=list)
    detailed_feedback = Column(JSON, nullable=True)
    ai_recommendations = Column(JSON, nullable=True)

    interview = relationship("Interview", foreign_keys=[interview_id])

    generated_at = Column(DateTime, default=datetime.utcnow)
    created_at = Column(DateTime, default=datetime.utcnow, index=True)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
