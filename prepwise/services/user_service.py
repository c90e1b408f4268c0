from typing import List, Optional, Tuple

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from prepwise.models.user import User
from prepwise.schemas.user import UserCreate
from prepwise.services.errors import DataAccessError, DuplicateUserError
from prepwise.services.pagination import fetch_page


def list_users(
    db: Session,
    limit: int,
    skip: int,
    user_id: Optional[str] = None,
    clerk_id: Optional[str] = None,
) -> Tuple[List[User], int]:
    query = db.query(User)
    if user_id:
        query = query.filter(User.id == user_id)
    if clerk_id:
        query = query.filter(User.clerk_id == clerk_id)

    try:
        return fetch_page(query, User.created_at.desc(), limit, skip)
    except SQLAlchemyError as e:
        raise DataAccessError(f"Failed to fetch users: {e}") from e


def find_user(db: Session, user_id: Optional[str] = None, clerk_id: Optional[str] = None) -> Optional[User]:
    if not user_id and not clerk_id:
        return None

    query = db.query(User)
    if user_id:
        query = query.filter(User.id == user_id)
    if clerk_id:
        query = query.filter(User.clerk_id == clerk_id)
    return query.first()


def create_user(db: Session, payload: UserCreate) -> User:
    try:
        if db.query(User).filter(User.clerk_id == payload.clerk_id).first():
            raise DuplicateUserError("User already exists with this Clerk ID")
        if db.query(User).filter(User.email == payload.email).first():
            raise DuplicateUserError("User already exists with this email")

        user = User(
            clerk_id=payload.clerk_id,
            email=payload.email,
            first_name=payload.first_name,
            last_name=payload.last_name,
            profile_image=payload.profile_image,
            experience_level=payload.experience_level.value,
            preferred_technologies=payload.preferred_technologies,
        )
        db.add(user)
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise DuplicateUserError("User already exists with this email or Clerk ID") from e
    except SQLAlchemyError as e:
        db.rollback()
        raise DataAccessError(f"Failed to create user: {e}") from e

    db.refresh(user)
    return user
