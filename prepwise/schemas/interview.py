from datetime import datetime
from typing import Dict, List, Optional

from pydantic import Field, model_validator

from prepwise.schemas.common import CamelModel
from prepwise.utils.enums import (
    ExperienceLevel,
    InterviewStatus,
    InterviewType,
    Speaker,
)


class TranscriptEntry(CamelModel):
    speaker: Speaker
    message: str
    timestamp: datetime = Field(default_factory=datetime.utcnow)


class InterviewCreate(CamelModel):
    user_id: str
    clerk_id: str
    title: str
    type: InterviewType
    experience_level: ExperienceLevel
    technologies: List[str] = []
    status: InterviewStatus = InterviewStatus.PENDING
    duration: int = Field(30, ge=1)
    total_questions: int = Field(0, ge=0)
    completed_questions: int = Field(0, ge=0)
    score: Optional[float] = Field(None, ge=0, le=100)
    transcript: List[TranscriptEntry] = []
    started_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None

    @model_validator(mode="after")
    def score_requires_completion(self):
        if self.score is not None and self.status != InterviewStatus.COMPLETED:
            raise ValueError("score can only be set on a completed interview")
        return self


class FeedbackDigest(CamelModel):
    """Linked feedback as shown alongside an interview."""

    overall_score: float
    category_scores: Dict[str, float]
    strengths: List[str] = []
    areas_for_improvement: List[str] = []


class InterviewResponse(CamelModel):
    id: str
    user_id: str
    clerk_id: str
    title: str
    type: InterviewType
    experience_level: ExperienceLevel
    technologies: List[str] = []
    status: InterviewStatus
    duration: int
    total_questions: int
    completed_questions: int
    score: Optional[float] = None
    transcript: List[TranscriptEntry] = []
    feedback_id: Optional[str] = None
    feedback: Optional[FeedbackDigest] = None
    started_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    created_at: datetime
    updated_at: Optional[datetime] = None
