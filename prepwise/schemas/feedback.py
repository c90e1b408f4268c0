from datetime import datetime
from typing import Annotated, List, Optional

from pydantic import Field

from prepwise.schemas.common import CamelModel
from prepwise.utils.enums import (
    ExperienceLevel,
    InterviewStatus,
    InterviewType,
    ResourceType,
)

Score = Annotated[float, Field(ge=0, le=100)]


class CategoryScores(CamelModel):
    technical_knowledge: Score
    communication: Score
    problem_solving: Score
    confidence: Score
    time_management: Score


class CategoryDetail(CamelModel):
    score: Score
    comments: str
    suggestions: List[str] = []


class DetailedFeedback(CamelModel):
    technical_knowledge: CategoryDetail
    communication: CategoryDetail
    problem_solving: CategoryDetail
    confidence: CategoryDetail
    time_management: CategoryDetail


class LearningResource(CamelModel):
    title: str
    url: str
    type: ResourceType


class Recommendations(CamelModel):
    next_steps: List[str] = []
    resources: List[LearningResource] = []
    practice_areas: List[str] = []


class FeedbackCreate(CamelModel):
    interview_id: str
    user_id: str
    clerk_id: str
    overall_score: Score
    category_scores: CategoryScores
    strengths: List[str] = []
    areas_for_improvement: List[str] = []
    detailed_feedback: Optional[DetailedFeedback] = None
    ai_recommendations: Optional[Recommendations] = None


class InterviewDigest(CamelModel):
    """Linked interview as shown alongside a feedback entry."""

    title: str
    type: InterviewType
    experience_level: ExperienceLevel
    technologies: List[str] = []
    status: InterviewStatus
    score: Optional[float] = None


class FeedbackResponse(CamelModel):
    id: str
    interview_id: str
    user_id: str
    clerk_id: str
    overall_score: float
    category_scores: dict
    strengths: List[str] = []
    areas_for_improvement: List[str] = []
    detailed_feedback: Optional[dict] = None
    ai_recommendations: Optional[dict] = None
    interview: Optional[InterviewDigest] = None
    generated_at: Optional[datetime] = None
    created_at: datetime
    updated_at: Optional[datetime] = None
