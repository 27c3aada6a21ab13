# workout_tracker/routes/_shared.py
from typing import Any, Dict

from flask import request
from flask_jwt_extended import get_jwt_identity

from ..errors import ForbiddenError, ValidationError
from ..validators import parse_int


def json_body() -> Dict[str, Any]:
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError("request body must be a JSON object")
    return data


def current_user_id() -> int:
    return int(get_jwt_identity())


def ensure_owner(user_id: Any) -> int:
    """Reject requests that address another user's data."""
    owner_id = parse_int(user_id, "userId")
    if owner_id != current_user_id():
        raise ForbiddenError()
    return owner_id


def pick(data: Dict[str, Any], *keys: str) -> Any:
    # front end sends camelCase, but accept snake_case too
    for key in keys:
        if key in data:
            return data[key]
    return None
