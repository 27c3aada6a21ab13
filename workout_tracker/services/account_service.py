# workout_tracker/services/account_service.py
from datetime import datetime
from typing import Any, Dict, Optional

from flask import current_app
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from .. import db
from ..errors import AuthError, ConflictError, NotFoundError, StoreError, ValidationError
from ..models.user import User
from ..validators import normalize_email, optional_text, require_text


class AccountService:

    @staticmethod
    def register(username: Any, email: Any, password: Any, full_name: Any = None) -> int:
        username = require_text(username, "username", max_length=50)
        email = normalize_email(email)
        password = password if isinstance(password, str) else ""  # do NOT strip passwords
        full_name = optional_text(full_name, "fullName")

        if not password:
            raise ValidationError("password is required")
        min_length = current_app.config.get("PASSWORD_MIN_LENGTH", 6)
        if len(password) < min_length:
            raise ValidationError(f"password must be at least {min_length} characters")

        if User.query.filter_by(email=email).first():
            raise ConflictError("email already in use")
        if User.query.filter_by(username=username).first():
            raise ConflictError("username already in use")

        user = User(username=username, email=email, full_name=full_name)
        user.set_password(password)

        try:
            db.session.add(user)
            db.session.commit()
        except IntegrityError:
            # lost a race against a concurrent registration
            db.session.rollback()
            raise ConflictError()
        except SQLAlchemyError:
            db.session.rollback()
            current_app.logger.exception("[account] registration failed for %s", email)
            raise StoreError("Failed to register user")

        current_app.logger.info("[account] registered user_id=%s username=%s", user.id, user.username)
        return user.id

    @staticmethod
    def login(email: Any, password: Any) -> Dict[str, Any]:
        email = (email if isinstance(email, str) else "").strip().lower()
        password = password if isinstance(password, str) else ""
        if not email or not password:
            raise ValidationError("email and password are required")

        try:
            user = User.query.filter_by(email=email).first()
        except SQLAlchemyError:
            current_app.logger.exception("[account] login lookup failed")
            raise StoreError()

        if not user or not user.check_password(password):
            current_app.logger.info("[account] failed login for '%s'", email)
            raise AuthError()

        try:
            user.last_login = datetime.utcnow()
            db.session.commit()
        except SQLAlchemyError:
            db.session.rollback()
            current_app.logger.exception("[account] could not record last_login for user_id=%s", user.id)
            raise StoreError()

        return user.to_dict()

    @staticmethod
    def get_user(user_id: int) -> Dict[str, Any]:
        return AccountService._get_or_404(user_id).to_dict()

    @staticmethod
    def delete_user(user_id: int) -> None:
        """Delete an account; its workouts and goals go with it."""
        user = AccountService._get_or_404(user_id)
        try:
            db.session.delete(user)
            db.session.commit()
        except SQLAlchemyError:
            db.session.rollback()
            current_app.logger.exception("[account] failed to delete user_id=%s", user_id)
            raise StoreError("Failed to delete user")

        current_app.logger.info("[account] deleted user_id=%s", user_id)

    @staticmethod
    def _get_or_404(user_id: int) -> User:
        user: Optional[User] = db.session.get(User, user_id)
        if not user:
            raise NotFoundError("User not found")
        return user
