from typing import List, Optional, Tuple

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from prepwise.models.feedback import Feedback
from prepwise.models.interview import Interview
from prepwise.schemas.feedback import FeedbackCreate
from prepwise.services.errors import DataAccessError, DuplicateFeedbackError, NotFoundError
from prepwise.services.pagination import fetch_page


def owned_feedback(db: Session, user_id: Optional[str] = None, clerk_id: Optional[str] = None):
    query = db.query(Feedback)
    if user_id:
        query = query.filter(Feedback.user_id == user_id)
    if clerk_id:
        query = query.filter(Feedback.clerk_id == clerk_id)
    return query


def list_feedback(
    db: Session,
    limit: int,
    skip: int,
    user_id: Optional[str] = None,
    clerk_id: Optional[str] = None,
) -> Tuple[List[Feedback], int]:
    query = owned_feedback(db, user_id, clerk_id)
    try:
        return fetch_page(query, Feedback.created_at.desc(), limit, skip, selectinload(Feedback.interview))
    except SQLAlchemyError as e:
        raise DataAccessError(f"Failed to fetch feedback: {e}") from e


def recent_feedback(db: Session, limit: int, user_id: Optional[str] = None, clerk_id: Optional[str] = None):
    return (
        owned_feedback(db, user_id, clerk_id)
        .options(selectinload(Feedback.interview))
        .order_by(Feedback.created_at.desc())
        .limit(limit)
        .all()
    )


def create_feedback(db: Session, payload: FeedbackCreate) -> Feedback:
    try:
        interview = db.query(Interview).filter_by(id=payload.interview_id).first()
    except SQLAlchemyError as e:
        raise DataAccessError(f"Failed to create feedback: {e}") from e

    if not interview:
        raise NotFoundError("Interview not found")
    if interview.feedback_id:
        raise DuplicateFeedbackError("Feedback already exists for this interview")

    feedback = Feedback(
        interview_id=interview.id,
        user_id=payload.user_id,
        clerk_id=payload.clerk_id,
        overall_score=payload.overall_score,
        category_scores=payload.category_scores.model_dump(by_alias=True),
        strengths=payload.strengths,
        areas_for_improvement=payload.areas_for_improvement,
        detailed_feedback=(
            payload.detailed_feedback.model_dump(by_alias=True)
            if payload.detailed_feedback else None
        ),
        ai_recommendations=(
            payload.ai_recommendations.model_dump(by_alias=True, mode="json")
            if payload.ai_recommendations else None
        ),
    )

    try:
        db.add(feedback)
        db.flush()
        interview.feedback_id = feedback.id
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise DuplicateFeedbackError("Feedback already exists for this interview") from e
    except SQLAlchemyError as e:
        db.rollback()
        raise DataAccessError(f"Failed to create feedback: {e}") from e

    db.refresh(feedback)
    return feedback
