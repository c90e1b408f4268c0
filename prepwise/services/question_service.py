import re
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from sqlalchemy import String, cast, false, func, or_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from prepwise.models.question import Question
from prepwise.schemas.question import QuestionCreate
from prepwise.services.errors import DataAccessError
from prepwise.services.pagination import fetch_page

SEARCH_TERM = re.compile(r"\w+")


@dataclass
class QuestionFilters:
    category: Optional[str] = None
    difficulty: Optional[str] = None
    experience_level: Optional[str] = None
    technologies: List[str] = field(default_factory=list)
    search: Optional[str] = None

    @classmethod
    def from_params(cls, category=None, difficulty=None, experience_level=None, technologies=None, search=None):
        techs = [t.strip() for t in (technologies or "").split(",") if t.strip()]
        return cls(
            category=category or None,
            difficulty=difficulty or None,
            experience_level=experience_level or None,
            technologies=techs,
            search=(search or "").strip() or None,
        )


def active_questions(db: Session):
    return db.query(Question).filter(Question.is_active.is_(True))


def apply_filters(query, filters: QuestionFilters):
    if filters.category:
        query = query.filter(Question.category == filters.category)
    if filters.difficulty:
        query = query.filter(Question.difficulty == filters.difficulty)
    if filters.experience_level:
        query = query.filter(Question.experience_level == filters.experience_level)

    if filters.technologies:
        # JSON arrays are matched on their serialized '"tech"' element
        technologies = cast(Question.technologies, String)
        query = query.filter(or_(*[
            technologies.contains(f'"{tech}"', autoescape=True)
            for tech in filters.technologies
        ]))

    if filters.search:
        # word terms only, so JSON punctuation in the tags never matches
        terms = SEARCH_TERM.findall(filters.search.lower())
        if not terms:
            return query.filter(false())

        text = func.lower(Question.text)
        tags = func.lower(cast(Question.tags, String))
        query = query.filter(or_(*[
            or_(text.contains(term, autoescape=True), tags.contains(term, autoescape=True))
            for term in terms
        ]))

    return query


def list_questions(db: Session, limit: int, skip: int, filters: QuestionFilters) -> Tuple[List[Question], int]:
    query = apply_filters(active_questions(db), filters)
    try:
        return fetch_page(query, Question.created_at.desc(), limit, skip)
    except SQLAlchemyError as e:
        raise DataAccessError(f"Failed to fetch questions: {e}") from e


def build_tags(payload: QuestionCreate) -> List[str]:
    tags = [
        payload.category.value,
        payload.subcategory,
        payload.difficulty.value,
        payload.experience_level.value,
        *payload.technologies,
        *payload.tags,
    ]
    # keep first occurrence order
    return list(dict.fromkeys(tags))


def create_question(db: Session, payload: QuestionCreate) -> Question:
    metadata = payload.generation_metadata
    question = Question(
        text=payload.text,
        category=payload.category.value,
        subcategory=payload.subcategory,
        difficulty=payload.difficulty.value,
        experience_level=payload.experience_level.value,
        technologies=payload.technologies,
        type=payload.type.value,
        expected_answer=payload.expected_answer,
        sample_answers=payload.sample_answers,
        hints=payload.hints,
        time_limit=payload.time_limit,
        points=payload.points,
        tags=build_tags(payload),
        is_active=True,
        usage_count=0,
        created_by=payload.created_by.value,
        ai_generated=payload.ai_generated,
        generation_metadata=metadata.model_dump(exclude_none=True) if metadata else None,
    )

    try:
        db.add(question)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        raise DataAccessError(f"Failed to create question: {e}") from e

    db.refresh(question)
    return question
