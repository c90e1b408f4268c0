from datetime import datetime
from typing import List, Optional

from pydantic import Field

from prepwise.schemas.common import CamelModel
from prepwise.utils.enums import (
    CreatedBy,
    Difficulty,
    ExperienceLevel,
    QuestionCategory,
    QuestionType,
)


class GenerationMetadata(CamelModel):
    model: Optional[str] = None
    prompt: Optional[str] = None
    temperature: Optional[float] = None


class QuestionCreate(CamelModel):
    text: str
    category: QuestionCategory
    subcategory: str
    difficulty: Difficulty
    experience_level: ExperienceLevel
    technologies: List[str] = []
    type: QuestionType

    expected_answer: Optional[str] = None
    sample_answers: List[str] = []
    hints: List[str] = []
    time_limit: int = Field(5, ge=0)
    points: int = Field(10, ge=1, le=100)
    tags: List[str] = []
    created_by: CreatedBy = CreatedBy.AI
    ai_generated: bool = True
    generation_metadata: Optional[GenerationMetadata] = Field(None, alias="metadata")


class QuestionResponse(CamelModel):
    id: str
    text: str
    category: QuestionCategory
    subcategory: str
    difficulty: Difficulty
    experience_level: ExperienceLevel
    technologies: List[str] = []
    type: QuestionType

    expected_answer: Optional[str] = None
    sample_answers: List[str] = []
    hints: List[str] = []
    time_limit: Optional[int] = None
    points: int
    tags: List[str] = []

    is_active: bool
    usage_count: int
    average_rating: Optional[float] = None
    created_by: CreatedBy
    ai_generated: bool
    generation_metadata: Optional[GenerationMetadata] = Field(
        None,
        validation_alias="generation_metadata",
        serialization_alias="metadata",
    )

    created_at: datetime
    updated_at: Optional[datetime] = None
