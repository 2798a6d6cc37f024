"""
User service for sign-up and credential checks.
"""
import logging
from typing import Dict, List, Optional

from email_validator import EmailNotValidError, validate_email
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.exceptions import ValidationError
from app.core.security import get_password_hash, verify_password
from app.core.utils import BLANK, TAKEN, add_error, is_blank, normalize_email
from app.models.user import User
from app.schemas.user import UserCreate

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("first_name", "last_name", "email", "password")


def get_user_by_email(email: str, db: Session) -> Optional[User]:
    """Look up a user by email, ignoring case."""
    return db.query(User).filter(User.email == normalize_email(email)).first()


def register_user(user_data: UserCreate, db: Session, notifier) -> User:
    """
    Create a user and send the welcome notification.

    ``notifier.notify(user)`` is called exactly once, and only after the user
    has been committed.

    Raises:
        ValidationError: On blank fields, a mismatched password confirmation,
            a malformed email or a taken email
    """
    errors: Dict[str, List[str]] = {}
    for field in REQUIRED_FIELDS:
        if is_blank(getattr(user_data, field)):
            add_error(errors, field, BLANK)
    if (
        user_data.password_confirmation is not None
        and user_data.password_confirmation != user_data.password
    ):
        add_error(errors, "password_confirmation", "doesn't match Password")

    email = normalize_email(user_data.email)
    if "email" not in errors:
        try:
            validate_email(email, check_deliverability=False)
        except EmailNotValidError:
            add_error(errors, "email", "is invalid")
        else:
            if get_user_by_email(email, db):
                add_error(errors, "email", TAKEN)
    if errors:
        raise ValidationError(errors)

    user = User(
        first_name=user_data.first_name.strip(),
        last_name=user_data.last_name.strip(),
        email=email,
        hashed_password=get_password_hash(user_data.password),
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ValidationError({"email": [TAKEN]})
    db.refresh(user)
    logger.info("Registered user %s", user.id)

    notifier.notify(user)
    return user


def authenticate_user(email: str, password: str, db: Session) -> Optional[User]:
    """Return the user when the credentials match, otherwise None."""
    user = get_user_by_email(email, db)
    if not user or not verify_password(password, user.hashed_password):
        return None
    return user
