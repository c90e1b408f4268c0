from enum import Enum


class ExperienceLevel(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class InterviewType(str, Enum):
    TECHNICAL = "technical"
    BEHAVIORAL = "behavioral"
    MIXED = "mixed"


class InterviewStatus(str, Enum):
    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class Speaker(str, Enum):
    USER = "user"
    AI = "ai"


class QuestionCategory(str, Enum):
    TECHNICAL = "technical"
    BEHAVIORAL = "behavioral"
    SYSTEM_DESIGN = "system-design"
    ALGORITHMS = "algorithms"
    FRONTEND = "frontend"
    BACKEND = "backend"
    DEVOPS = "devops"


class Difficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
    EXPERT = "expert"


class QuestionType(str, Enum):
    MULTIPLE_CHOICE = "multiple-choice"
    OPEN_ENDED = "open-ended"
    CODING = "coding"
    SCENARIO = "scenario"
    WHITEBOARD = "whiteboard"


class CreatedBy(str, Enum):
    AI = "ai"
    ADMIN = "admin"
    USER = "user"


class ResourceType(str, Enum):
    ARTICLE = "article"
    VIDEO = "video"
    COURSE = "course"
    PRACTICE = "practice"


class CacheType(str, Enum):
    PUBLIC = "public"
    PRIVATE = "private"
    NONE = "none"


class DataType(str, Enum):
    USERS = "users"
    INTERVIEWS = "interviews"
    QUESTIONS = "questions"
    FEEDBACK = "feedback"
    DASHBOARD = "dashboard"
