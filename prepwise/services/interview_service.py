from typing import List, Optional, Tuple

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from prepwise.models.interview import Interview
from prepwise.schemas.interview import InterviewCreate
from prepwise.services.errors import DataAccessError
from prepwise.services.pagination import fetch_page
from prepwise.utils.enums import InterviewStatus


def owned_interviews(db: Session, user_id: Optional[str] = None, clerk_id: Optional[str] = None):
    query = db.query(Interview)
    if user_id:
        query = query.filter(Interview.user_id == user_id)
    if clerk_id:
        query = query.filter(Interview.clerk_id == clerk_id)
    return query


def list_interviews(
    db: Session,
    limit: int,
    skip: int,
    user_id: Optional[str] = None,
    clerk_id: Optional[str] = None,
) -> Tuple[List[Interview], int]:
    query = owned_interviews(db, user_id, clerk_id)
    try:
        return fetch_page(query, Interview.created_at.desc(), limit, skip, selectinload(Interview.feedback))
    except SQLAlchemyError as e:
        raise DataAccessError(f"Failed to fetch interviews: {e}") from e


def interview_statistics(db: Session, user_id: Optional[str] = None, clerk_id: Optional[str] = None) -> dict:
    query = owned_interviews(db, user_id, clerk_id)
    completed = query.filter(Interview.status == InterviewStatus.COMPLETED.value)

    average = (
        completed.filter(Interview.score.isnot(None))
        .with_entities(func.avg(Interview.score))
        .scalar()
    )

    return {
        "totalInterviews": query.count(),
        "completedInterviews": completed.count(),
        "inProgressInterviews": query.filter(Interview.status == InterviewStatus.IN_PROGRESS.value).count(),
        "averageScore": float(average) if average is not None else 0,
    }


def recent_interviews(db: Session, limit: int, user_id: Optional[str] = None, clerk_id: Optional[str] = None):
    return (
        owned_interviews(db, user_id, clerk_id)
        .options(selectinload(Interview.feedback))
        .order_by(Interview.created_at.desc())
        .limit(limit)
        .all()
    )


def create_interview(db: Session, payload: InterviewCreate) -> Interview:
    interview = Interview(
        user_id=payload.user_id,
        clerk_id=payload.clerk_id,
        title=payload.title,
        type=payload.type.value,
        experience_level=payload.experience_level.value,
        technologies=payload.technologies,
        status=payload.status.value,
        duration=payload.duration,
        total_questions=payload.total_questions,
        completed_questions=payload.completed_questions,
        score=payload.score,
        transcript=[entry.model_dump(mode="json") for entry in payload.transcript],
        started_at=payload.started_at,
        completed_at=payload.completed_at,
    )

    try:
        db.add(interview)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        raise DataAccessError(f"Failed to create interview: {e}") from e

    db.refresh(interview)
    return interview
