from datetime import datetime
from typing import List, Optional

from pydantic import EmailStr

from prepwise.schemas.common import CamelModel
from prepwise.utils.enums import ExperienceLevel


class UserCreate(CamelModel):
    clerk_id: str
    email: EmailStr
    first_name: str
    last_name: str
    profile_image: Optional[str] = None
    experience_level: ExperienceLevel = ExperienceLevel.BEGINNER
    preferred_technologies: List[str] = []


class UserResponse(CamelModel):
    id: str
    clerk_id: str
    email: str
    first_name: str
    last_name: str
    profile_image: Optional[str] = None
    experience_level: ExperienceLevel
    preferred_technologies: List[str] = []
    created_at: datetime
    updated_at: Optional[datetime] = None
