import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.orm import Session

from prepwise.core.config import settings
from prepwise.core.database import get_db
from prepwise.services.data_service import (
    get_dashboard,
    get_feedback,
    get_interviews,
    get_questions,
    get_summary,
    get_users,
)
from prepwise.services.errors import DataAccessError
from prepwise.services.question_service import QuestionFilters
from prepwise.utils.cache import CACHE_CONFIG, is_not_modified, not_modified_response
from prepwise.utils.enums import DataType
from prepwise.utils.responses import error_response, success_response

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/data")
def read_data(
    request: Request,
    type: Optional[str] = None,
    page: int = Query(1, ge=1),
    limit: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
    user_id: Optional[str] = Query(None, alias="userId"),
    clerk_id: Optional[str] = Query(None, alias="clerkId"),
    category: Optional[str] = None,
    difficulty: Optional[str] = None,
    experience_level: Optional[str] = Query(None, alias="experienceLevel"),
    technologies: Optional[str] = None,
    search: Optional[str] = None,
    db: Session = Depends(get_db),
):
    try:
        if type == DataType.USERS.value:
            payload = get_users(db, page, limit, user_id, clerk_id)
            policy = CACHE_CONFIG["PRIVATE"]
        elif type == DataType.INTERVIEWS.value:
            payload = get_interviews(db, page, limit, user_id, clerk_id)
            policy = CACHE_CONFIG["INTERVIEWS"]
        elif type == DataType.QUESTIONS.value:
            filters = QuestionFilters.from_params(category, difficulty, experience_level, technologies, search)
            payload = get_questions(db, page, limit, filters)
            policy = CACHE_CONFIG["QUESTIONS"]
        elif type == DataType.FEEDBACK.value:
            payload = get_feedback(db, page, limit, user_id, clerk_id)
            policy = CACHE_CONFIG["FEEDBACK"]
        elif type == DataType.DASHBOARD.value:
            payload = get_dashboard(db, settings.RECENT_ITEMS, user_id, clerk_id)
            policy = CACHE_CONFIG["DASHBOARD"]
        else:
            payload = get_summary(db, settings.RECENT_ITEMS)
            policy = CACHE_CONFIG["SUMMARY"]
    except DataAccessError as e:
        logger.exception("Data fetch failed")
        return error_response(500, "Failed to fetch data", str(e))

    response = success_response(payload, policy)
    etag = response.headers["ETag"]
    if is_not_modified(request.headers, etag):
        return not_modified_response(etag, policy)
    return response
