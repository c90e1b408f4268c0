"""Boundary checks applied to raw create payloads.

Each ``validate_*`` function first checks that the required keys are
present and non-empty (reported together, as a 400), then runs the payload
through its pydantic schema so enums, bounds and defaults are applied in
one place instead of relying on column defaults.
"""
from typing import Any, Sequence, Type, TypeVar

from pydantic import BaseModel, ValidationError

from prepwise.schemas.feedback import FeedbackCreate
from prepwise.schemas.interview import InterviewCreate
from prepwise.schemas.question import QuestionCreate
from prepwise.schemas.user import UserCreate
from prepwise.services.errors import InvalidFieldError, MissingFieldsError

SchemaT = TypeVar("SchemaT", bound=BaseModel)

USER_REQUIRED = ("clerkId", "email", "firstName", "lastName")
QUESTION_REQUIRED = ("text", "category", "subcategory", "difficulty", "experienceLevel", "type")
INTERVIEW_REQUIRED = ("userId", "clerkId", "title", "type", "experienceLevel")
FEEDBACK_REQUIRED = ("interviewId", "userId", "clerkId", "overallScore", "categoryScores")


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def require_fields(payload: Any, required: Sequence[str]) -> None:
    if not isinstance(payload, dict):
        raise InvalidFieldError("Request body must be a JSON object")

    missing = [field for field in required if _is_blank(payload.get(field))]
    if missing:
        raise MissingFieldsError(required, missing)


def _describe(exc: ValidationError) -> str:
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"])
        problems.append(f"{location}: {error['msg']}" if location else error["msg"])
    return "; ".join(problems)


def parse_payload(schema: Type[SchemaT], payload: dict) -> SchemaT:
    try:
        return schema.model_validate(payload)
    except ValidationError as e:
        raise InvalidFieldError(_describe(e)) from e


def validate_user_payload(payload: Any) -> UserCreate:
    require_fields(payload, USER_REQUIRED)
    return parse_payload(UserCreate, payload)


def validate_question_payload(payload: Any) -> QuestionCreate:
    require_fields(payload, QUESTION_REQUIRED)
    return parse_payload(QuestionCreate, payload)


def validate_interview_payload(payload: Any) -> InterviewCreate:
    require_fields(payload, INTERVIEW_REQUIRED)
    return parse_payload(InterviewCreate, payload)


def validate_feedback_payload(payload: Any) -> FeedbackCreate:
    require_fields(payload, FEEDBACK_REQUIRED)
    return parse_payload(FeedbackCreate, payload)
