import os

# must be set before prepwise.core.config is imported
os.environ["DATABASE_URL"] = "sqlite://"

from datetime import datetime, timedelta
from itertools import count

import pytest
from fastapi.testclient import TestClient

from prepwise.core.database import Base, SessionLocal, engine, init_db
from prepwise.main import app
from prepwise.models.feedback import Feedback
from prepwise.models.interview import Interview
from prepwise.models.question import Question
from prepwise.models.user import User

_sequence = count(1)
BASE_TIME = datetime(2024, 1, 1, 12, 0, 0)


def _next_time():
    return BASE_TIME + timedelta(minutes=next(_sequence))


def _persist(obj):
    with SessionLocal() as session:
        session.add(obj)
        session.commit()
        session.refresh(obj)
        session.expunge(obj)
    return obj


@pytest.fixture(autouse=True)
def reset_schema():
    init_db()
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def make_user():
    def _make(**overrides):
        n = next(_sequence)
        fields = {
            "clerk_id": f"clerk_{n}",
            "email": f"user{n}@example.com",
            "first_name": "Ada",
            "last_name": "Lovelace",
            "experience_level": "intermediate",
            "preferred_technologies": ["python"],
            "created_at": _next_time(),
        }
        fields.update(overrides)
        return _persist(User(**fields))

    return _make


@pytest.fixture
def make_question():
    def _make(**overrides):
        fields = {
            "text": "Explain the event loop",
            "category": "technical",
            "subcategory": "javascript",
            "difficulty": "medium",
            "experience_level": "intermediate",
            "technologies": ["javascript"],
            "type": "open-ended",
            "tags": ["technical", "javascript"],
            "created_at": _next_time(),
        }
        fields.update(overrides)
        return _persist(Question(**fields))

    return _make


@pytest.fixture
def make_interview():
    def _make(**overrides):
        fields = {
            "user_id": "user-1",
            "clerk_id": "clerk-1",
            "title": "Frontend screen",
            "type": "technical",
            "experience_level": "intermediate",
            "technologies": ["react"],
            "status": "pending",
            "created_at": _next_time(),
        }
        fields.update(overrides)
        return _persist(Interview(**fields))

    return _make


@pytest.fixture
def make_feedback():
    def _make(interview, **overrides):
        fields = {
            "interview_id": interview.id,
            "user_id": interview.user_id,
            "clerk_id": interview.clerk_id,
            "overall_score": 80,
            "category_scores": {
                "technicalKnowledge": 85,
                "communication": 75,
                "problemSolving": 80,
                "confidence": 70,
                "timeManagement": 90,
            },
            "strengths": ["clear explanations"],
            "areas_for_improvement": ["edge cases"],
            "created_at": _next_time(),
        }
        fields.update(overrides)
        feedback = _persist(Feedback(**fields))

        with SessionLocal() as session:
            session.query(Interview).filter_by(id=interview.id).update({"feedback_id": feedback.id})
            session.commit()
        return feedback

    return _make


@pytest.fixture
def row_count():
    def _count(model) -> int:
        with SessionLocal() as session:
            return session.query(model).count()

    return _count
