import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from prepwise.core.database import check_connection, get_db
from prepwise.schemas.common import serialize
from prepwise.schemas.feedback import FeedbackResponse
from prepwise.schemas.interview import InterviewResponse
from prepwise.schemas.question import QuestionResponse
from prepwise.schemas.user import UserResponse
from prepwise.services.errors import (
    DataAccessError,
    DuplicateFeedbackError,
    DuplicateUserError,
    InvalidFieldError,
    MissingFieldsError,
    NotFoundError,
)
from prepwise.services.feedback_service import create_feedback
from prepwise.services.interview_service import create_interview
from prepwise.services.question_service import QuestionFilters, create_question, list_questions
from prepwise.services.user_service import create_user, list_users
from prepwise.services.validation import (
    validate_feedback_payload,
    validate_interview_payload,
    validate_question_payload,
    validate_user_payload,
)
from prepwise.utils.cache import CACHE_CONFIG
from prepwise.utils.responses import error_response, success_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/test")

LIST_SIZE = 10


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


def _invalid(e: ValueError) -> JSONResponse:
    if isinstance(e, MissingFieldsError):
        return error_response(400, str(e), ", ".join(e.missing))
    return error_response(400, "Invalid request body", str(e))


# Connectivity
@router.get("/connection")
def probe_connection(db: Session = Depends(get_db)):
    if check_connection(db):
        return JSONResponse({
            "success": True,
            "message": "Database connection successful",
            "timestamp": _timestamp(),
        })

    return JSONResponse(
        {
            "success": False,
            "message": "Database connection failed",
            "timestamp": _timestamp(),
        },
        status_code=500,
    )


# Users
@router.get("/users")
def list_test_users(db: Session = Depends(get_db)):
    try:
        users, _ = list_users(db, LIST_SIZE, 0)
    except DataAccessError as e:
        logger.exception("Error fetching users")
        return error_response(500, "Failed to fetch users", str(e))

    data = [serialize(UserResponse, user) for user in users]
    return success_response({"count": len(data), "users": data}, CACHE_CONFIG["PRIVATE"])


@router.post("/users")
def create_test_user(payload: dict, db: Session = Depends(get_db)):
    try:
        user = create_user(db, validate_user_payload(payload))
    except (MissingFieldsError, InvalidFieldError) as e:
        return _invalid(e)
    except DuplicateUserError as e:
        return error_response(409, str(e))
    except DataAccessError as e:
        logger.exception("Error creating user")
        return error_response(500, "Failed to create user", str(e))

    return success_response(
        {"message": "User created successfully", "user": serialize(UserResponse, user)},
        CACHE_CONFIG["NONE"],
        status_code=201,
    )


# Questions
@router.get("/questions")
def list_test_questions(db: Session = Depends(get_db)):
    try:
        questions, _ = list_questions(db, LIST_SIZE, 0, QuestionFilters())
    except DataAccessError as e:
        logger.exception("Error fetching questions")
        return error_response(500, "Failed to fetch questions", str(e))

    data = [serialize(QuestionResponse, question) for question in questions]
    return success_response({"count": len(data), "questions": data}, CACHE_CONFIG["QUESTIONS"])


@router.post("/questions")
def create_test_question(payload: dict, db: Session = Depends(get_db)):
    try:
        question = create_question(db, validate_question_payload(payload))
    except (MissingFieldsError, InvalidFieldError) as e:
        return _invalid(e)
    except DataAccessError as e:
        logger.exception("Error creating question")
        return error_response(500, "Failed to create question", str(e))

    return success_response(
        {"message": "Question created successfully", "question": serialize(QuestionResponse, question)},
        CACHE_CONFIG["NONE"],
        status_code=201,
    )


# Interviews and feedback
@router.post("/interviews")
def create_test_interview(payload: dict, db: Session = Depends(get_db)):
    try:
        interview = create_interview(db, validate_interview_payload(payload))
    except (MissingFieldsError, InvalidFieldError) as e:
        return _invalid(e)
    except DataAccessError as e:
        logger.exception("Error creating interview")
        return error_response(500, "Failed to create interview", str(e))

    return success_response(
        {"message": "Interview created successfully", "interview": serialize(InterviewResponse, interview)},
        CACHE_CONFIG["NONE"],
        status_code=201,
    )


@router.post("/feedback")
def create_test_feedback(payload: dict, db: Session = Depends(get_db)):
    try:
        feedback = create_feedback(db, validate_feedback_payload(payload))
    except (MissingFieldsError, InvalidFieldError) as e:
        return _invalid(e)
    except NotFoundError as e:
        return error_response(404, str(e))
    except DuplicateFeedbackError as e:
        return error_response(409, str(e))
    except DataAccessError as e:
        logger.exception("Error creating feedback")
        return error_response(500, "Failed to create feedback", str(e))

    return success_response(
        {"message": "Feedback created successfully", "feedback": serialize(FeedbackResponse, feedback)},
        CACHE_CONFIG["NONE"],
        status_code=201,
    )
