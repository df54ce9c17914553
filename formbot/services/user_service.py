"""
Credential store: user records keyed by unique email.
"""
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from formbot.exceptions import ConflictError
from formbot.logger import logger
from formbot.models.user import User


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(User.email == email).first()


def get_user_by_id(db: Session, user_id: int) -> Optional[User]:
    return db.query(User).filter(User.id == user_id).first()


def create_user(db: Session, username: str, email: str, password_hash: str) -> User:
    """
    Insert a new user.

    Args:
        db: Database session
        username: Display name
        email: Login email, must not already be registered
        password_hash: Output of the password hasher, never the plain password

    Returns:
        The stored user

    Raises:
        ConflictError: If the email is already registered
    """
    if get_user_by_email(db, email):
        raise ConflictError("Email already exists")

    user = User(username=username, email=email, password_hash=password_hash)
    db.add(user)
    try:
        db.commit()
    except IntegrityError as exc:
        # lost a race with a concurrent signup for the same email
        db.rollback()
        raise ConflictError("Email already exists") from exc
    db.refresh(user)

    logger.info(f"Created user {user.id}")
    return user
