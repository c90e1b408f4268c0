import json
import logging

from sqlalchemy import create_engine, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from prepwise.core.config import settings

logger = logging.getLogger(__name__)


def _engine_options(url: str) -> dict:
    if not url.startswith("sqlite"):
        return {"pool_pre_ping": True}

    options = {"connect_args": {"check_same_thread": False}}
    # in-memory sqlite must share one connection across sessions
    if url in ("sqlite://", "sqlite:///:memory:"):
        options["poolclass"] = StaticPool
    return options


def _json_serializer(value) -> str:
    # non-ASCII text is stored literally; question filters match on it
    return json.dumps(value, ensure_ascii=False)


engine = create_engine(
    settings.DATABASE_URL,
    future=True,
    json_serializer=_json_serializer,
    **_engine_options(settings.DATABASE_URL),
)

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine
)

Base = declarative_base()


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db() -> None:
    # model modules register their tables on Base when imported
    from prepwise.models import feedback, interview, question, user  # noqa: F401

    Base.metadata.create_all(bind=engine)


def check_connection(db: Session) -> bool:
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError:
        logger.exception("Database connection failed")
        return False
    logger.info("Database connected successfully")
    return True
