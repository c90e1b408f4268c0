from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from prepwise.models.feedback import Feedback
from prepwise.models.interview import Interview
from prepwise.models.question import Question
from prepwise.models.user import User
from prepwise.schemas.common import Pagination, serialize
from prepwise.schemas.feedback import FeedbackResponse
from prepwise.schemas.interview import InterviewResponse
from prepwise.schemas.question import QuestionResponse
from prepwise.schemas.user import UserResponse
from prepwise.services.errors import DataAccessError
from prepwise.services.feedback_service import list_feedback, recent_feedback
from prepwise.services.interview_service import (
    interview_statistics,
    list_interviews,
    recent_interviews,
)
from prepwise.services.question_service import (
    QuestionFilters,
    active_questions,
    list_questions,
)
from prepwise.services.user_service import find_user, list_users

# Projections for aggregate views, keyed by attribute name
DASHBOARD_INTERVIEW_FIELDS = {
    "id": True, "title": True, "type": True, "status": True, "score": True, "created_at": True,
    "feedback": {"overall_score"},
}
DASHBOARD_FEEDBACK_FIELDS = {
    "id": True, "overall_score": True, "category_scores": True, "strengths": True,
    "areas_for_improvement": True, "created_at": True,
    "interview": {"title", "type"},
}
SUMMARY_FIELDS = {
    "users": {"id", "first_name", "last_name", "email", "experience_level", "created_at"},
    "interviews": {"id", "title", "type", "status", "score", "created_at"},
    "questions": {"id", "text", "category", "difficulty", "experience_level", "created_at"},
    "feedback": {
        "id": True, "overall_score": True, "category_scores": True, "created_at": True,
        "interview": {"title"},
    },
}


def _page(schema, items, total: int, page: int, limit: int) -> dict:
    return {
        "data": [serialize(schema, item) for item in items],
        "pagination": Pagination.build(page, limit, total).model_dump(),
    }


def _skip(page: int, limit: int) -> int:
    return (page - 1) * limit


def get_users(db: Session, page: int, limit: int, user_id=None, clerk_id=None) -> dict:
    items, total = list_users(db, limit, _skip(page, limit), user_id, clerk_id)
    return _page(UserResponse, items, total, page, limit)


def get_interviews(db: Session, page: int, limit: int, user_id=None, clerk_id=None) -> dict:
    items, total = list_interviews(db, limit, _skip(page, limit), user_id, clerk_id)
    return _page(InterviewResponse, items, total, page, limit)


def get_questions(db: Session, page: int, limit: int, filters: QuestionFilters) -> dict:
    items, total = list_questions(db, limit, _skip(page, limit), filters)
    return _page(QuestionResponse, items, total, page, limit)


def get_feedback(db: Session, page: int, limit: int, user_id=None, clerk_id=None) -> dict:
    items, total = list_feedback(db, limit, _skip(page, limit), user_id, clerk_id)
    return _page(FeedbackResponse, items, total, page, limit)


def get_dashboard(db: Session, recent: int, user_id: Optional[str] = None, clerk_id: Optional[str] = None) -> dict:
    """Per-owner statistics plus the latest interviews and feedback.

    ``user`` is only resolved when an owner filter is given; without one
    the statistics cover every interview in the store.
    """
    try:
        user = find_user(db, user_id, clerk_id)
        data = {
            "user": serialize(UserResponse, user) if user else None,
            "statistics": interview_statistics(db, user_id, clerk_id),
            "recentInterviews": [
                serialize(InterviewResponse, item, DASHBOARD_INTERVIEW_FIELDS)
                for item in recent_interviews(db, recent, user_id, clerk_id)
            ],
            "recentFeedback": [
                serialize(FeedbackResponse, item, DASHBOARD_FEEDBACK_FIELDS)
                for item in recent_feedback(db, recent, user_id, clerk_id)
            ],
        }
    except SQLAlchemyError as e:
        raise DataAccessError(f"Failed to fetch dashboard data: {e}") from e

    return {"data": data}


def get_summary(db: Session, recent: int) -> dict:
    """Counts for every collection and the newest entries of each."""
    latest = {
        "users": db.query(User).order_by(User.created_at.desc()),
        "interviews": db.query(Interview).order_by(Interview.created_at.desc()),
        "questions": active_questions(db).order_by(Question.created_at.desc()),
        "feedback": (
            db.query(Feedback)
            .options(selectinload(Feedback.interview))
            .order_by(Feedback.created_at.desc())
        ),
    }
    schemas = {
        "users": UserResponse,
        "interviews": InterviewResponse,
        "questions": QuestionResponse,
        "feedback": FeedbackResponse,
    }

    try:
        summary = {
            "users": db.query(User).count(),
            "interviews": db.query(Interview).count(),
            "questions": active_questions(db).count(),
            "feedback": db.query(Feedback).count(),
        }
        recent_items = {
            key: [
                serialize(schemas[key], item, SUMMARY_FIELDS[key])
                for item in query.limit(recent).all()
            ]
            for key, query in latest.items()
        }
    except SQLAlchemyError as e:
        raise DataAccessError(f"Failed to fetch all data: {e}") from e

    return {"data": {"summary": summary, "recent": recent_items}}
