# workout_tracker/services/workout_service.py
from typing import Any, Dict, List, Mapping

from flask import current_app
from sqlalchemy import update
from sqlalchemy.exc import SQLAlchemyError

from .. import db
from ..errors import NotFoundError, StoreError, ValidationError
from ..models.user import User
from ..models.workout import DIFFICULTY_LEVELS, LoggedWorkout
from ..validators import (
    optional_text,
    parse_date,
    parse_float,
    parse_int,
    parse_time,
    require_text,
)

# fields an edit may touch; owner and created_at are fixed
MUTABLE_FIELDS = (
    "exercise_name",
    "sets",
    "reps",
    "weight",
    "duration",
    "difficulty",
    "workout_date",
    "workout_time",
    "notes",
)


def _parse_difficulty(value: Any):
    if value is None or value == "":
        return None
    difficulty = str(value).strip().lower()
    if difficulty not in DIFFICULTY_LEVELS:
        raise ValidationError(
            "difficulty must be one of: " + ", ".join(DIFFICULTY_LEVELS)
        )
    return difficulty


_PARSERS = {
    "exercise_name": lambda v: require_text(v, "exerciseName", max_length=100),
    "sets": lambda v: parse_int(v, "sets", minimum=1),
    "reps": lambda v: parse_int(v, "reps", minimum=1),
    "weight": lambda v: 0.0 if v is None or v == "" else parse_float(v, "weight", minimum=0),
    "duration": lambda v: parse_int(v, "duration", minimum=0),
    "difficulty": _parse_difficulty,
    "workout_date": lambda v: parse_date(v, "workoutDate"),
    "workout_time": lambda v: parse_time(v, "workoutTime"),
    "notes": lambda v: optional_text(v, "notes"),
}


def _clean_fields(fields: Mapping[str, Any], partial: bool = False) -> Dict[str, Any]:
    """Validate workout fields; with ``partial`` only the supplied keys are checked."""
    names = [n for n in MUTABLE_FIELDS if n in fields] if partial else MUTABLE_FIELDS
    return {name: _PARSERS[name](fields.get(name)) for name in names}


def _adjust_total_workouts(user_id: int, delta: int) -> None:
    # evaluated by the database so concurrent writers cannot lose an update
    db.session.execute(
        update(User)
        .where(User.id == user_id)
        .values(total_workouts=User.total_workouts + delta)
    )


class WorkoutService:

    @staticmethod
    def log_workout(user_id: int, fields: Mapping[str, Any]) -> int:
        """Insert an entry and bump the owner's counter in one transaction."""
        values = _clean_fields(fields)

        if not db.session.get(User, user_id):
            raise NotFoundError("User not found")

        workout = LoggedWorkout(user_id=user_id, **values)
        try:
            db.session.add(workout)
            db.session.flush()
            _adjust_total_workouts(user_id, +1)
            db.session.commit()
        except SQLAlchemyError:
            db.session.rollback()
            current_app.logger.exception("[workouts] failed to log workout for user_id=%s", user_id)
            raise StoreError("Failed to log workout")

        current_app.logger.info(
            "[workouts] user_id=%s logged workout_id=%s (%s)",
            user_id, workout.id, workout.exercise_name,
        )
        return workout.id

    @staticmethod
    def list_workouts(user_id: int) -> List[Dict[str, Any]]:
        rows = (
            LoggedWorkout.query.filter_by(user_id=user_id)
            .order_by(
                LoggedWorkout.workout_date.desc(),
                LoggedWorkout.created_at.desc(),
                LoggedWorkout.id.desc(),
            )
            .all()
        )
        return [w.to_dict() for w in rows]

    @staticmethod
    def get_workout(workout_id: int) -> LoggedWorkout:
        workout = db.session.get(LoggedWorkout, workout_id)
        if not workout:
            raise NotFoundError("Workout not found")
        return workout

    @staticmethod
    def update_workout(workout_id: int, fields: Mapping[str, Any]) -> Dict[str, Any]:
        workout = WorkoutService.get_workout(workout_id)
        values = _clean_fields(fields, partial=True)
        if not values:
            raise ValidationError("no workout fields to update")

        for name, value in values.items():
            setattr(workout, name, value)

        try:
            db.session.commit()
        except SQLAlchemyError:
            db.session.rollback()
            current_app.logger.exception("[workouts] failed to update workout_id=%s", workout_id)
            raise StoreError("Failed to update workout")

        return workout.to_dict()

    @staticmethod
    def delete_workout(workout_id: int) -> None:
        """Remove an entry and decrement the owner's counter in one transaction."""
        workout = WorkoutService.get_workout(workout_id)
        user_id = workout.user_id

        try:
            db.session.delete(workout)
            db.session.flush()
            _adjust_total_workouts(user_id, -1)
            db.session.commit()
        except SQLAlchemyError:
            db.session.rollback()
            current_app.logger.exception("[workouts] failed to delete workout_id=%s", workout_id)
            raise StoreError("Failed to delete workout")

        current_app.logger.info("[workouts] user_id=%s deleted workout_id=%s", user_id, workout_id)
