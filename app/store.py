"""Document store operations for users and their health logs.

Route handlers call these helpers instead of touching the session directly.
Every write either commits as a whole or rolls back, so a failed submission
never leaves a health log without its owner.
"""

from __future__ import annotations

from typing import Iterable, List, Mapping, Optional

from flask import current_app
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from app.errors import (
    DuplicateUsernameError,
    HealthLogAlreadyAttachedError,
    StoreError,
    UserNotFoundError,
    ValidationError,
)
from app.extensions import db
from healthlogs.models import HealthLog
from users.models import User

USER_FIELDS = ('firstname', 'lastname', 'username', 'password', 'email')


# ----------------------------------------------------------------------------------
# Users
# ----------------------------------------------------------------------------------

def create_user(fields: Mapping) -> User:
    """Insert a user. A taken ``username`` raises :class:`DuplicateUsernameError`."""
    data = {key: fields[key] for key in USER_FIELDS if fields.get(key) is not None}
    username = data.get('username')
    if not username:
        raise ValidationError('Username is required')

    if User.query.filter_by(username=username).first():
        raise DuplicateUsernameError(f'Username already exists: {username}')

    user = User(**data)
    db.session.add(user)
    try:
        db.session.commit()
    except IntegrityError as exc:
        db.session.rollback()
        raise DuplicateUsernameError(f'Username already exists: {username}') from exc
    return user


def find_users() -> List[User]:
    return User.query.order_by(User.id).all()


def find_user(user_id: int) -> User:
    user = db.session.get(User, user_id)
    if user is None:
        raise UserNotFoundError(f'User not found: {user_id}')
    return user


def find_populated_users() -> List[dict]:
    """Return every user with its health logs embedded."""
    return [user.to_dict(populate=True) for user in find_users()]


def seed_default_user(fields: Mapping) -> Optional[User]:
    """Create the startup user unless it already exists."""
    try:
        user = create_user(fields)
    except DuplicateUsernameError as exc:
        current_app.logger.info(exc.message)
        return None
    current_app.logger.info('Seeded user %s', user.username)
    return user


# ----------------------------------------------------------------------------------
# Health logs
# ----------------------------------------------------------------------------------

def find_health_logs(user_id: int) -> List[HealthLog]:
    return list(find_user(user_id).health_logs)


def create_health_log(fields: Mapping, commit: bool = True) -> HealthLog:
    """Insert a health log built from the schema fields of *fields*."""
    log = HealthLog.from_dict(fields)
    db.session.add(log)
    if commit:
        db.session.commit()
    else:
        db.session.flush()
    return log


def attach_health_log(user: User, log: HealthLog, commit: bool = True) -> User:
    """Push *log* onto the user's list; a log belongs to at most one user."""
    if log.user_id is not None and log.user_id != user.id:
        raise HealthLogAlreadyAttachedError(
            f'Health log {log.id} already belongs to user {log.user_id}'
        )
    if log not in user.health_logs:
        user.health_logs.append(log)
    if commit:
        db.session.commit()
    return user


def resolve_submit_target(user_id: Optional[int] = None) -> User:
    """Pick the user a submitted log is attached to.

    An explicit id wins. Without one the earliest-created user is used, which
    is the seeded account in a single-user deployment.
    """
    if user_id is not None:
        return find_user(user_id)

    user = User.query.order_by(User.id).first()
    if user is None:
        raise UserNotFoundError('No user to attach the health log to')
    current_app.logger.warning('No user_id given, attaching health log to user %s', user.id)
    return user


def submit_health_log(fields: Mapping, user_id: Optional[int] = None) -> User:
    """Create a health log and attach it to a user in one transaction."""
    try:
        user = resolve_submit_target(user_id)
        log = create_health_log(fields, commit=False)
        attach_health_log(user, log, commit=False)
        db.session.commit()
    except StoreError:
        db.session.rollback()
        raise
    except SQLAlchemyError as exc:
        db.session.rollback()
        current_app.logger.error(f'Error saving health log: {str(exc)}')
        raise StoreError('Failed to save health log') from exc
    return user


def health_log_dicts(logs: Iterable[HealthLog]) -> List[dict]:
    return [log.to_dict() for log in logs]
