# workout_tracker/services/analytics_service.py
"""
Read-only aggregate queries over a user's workout log.

Nothing here writes to the database, so repeated calls without an
intervening mutation return identical results.
"""
from typing import Any, Dict, List, Optional

from flask import current_app
from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError

from .. import db
from ..errors import StoreError
from ..models.user import User
from ..models.workout import LoggedWorkout

BREAKDOWN_LIMIT = 10
RECENT_DATES_LIMIT = 5


def _num(value: Any, default: Optional[float] = 0) -> Optional[float]:
    if value is None:
        return default
    number = float(value)
    return int(number) if number.is_integer() else number


class AnalyticsService:

    @staticmethod
    def get_stats(user_id: int) -> Dict[str, Any]:
        """Totals over every entry; zero/None rather than an error for an empty log."""
        entry_reps = LoggedWorkout.sets * LoggedWorkout.reps
        try:
            row = (
                db.session.query(
                    func.count(LoggedWorkout.id),
                    func.sum(entry_reps),
                    func.sum(LoggedWorkout.weight),
                    func.sum(LoggedWorkout.duration),
                    func.avg(LoggedWorkout.duration),
                    func.max(LoggedWorkout.weight),
                )
                .filter(LoggedWorkout.user_id == user_id)
                .one()
            )
        except SQLAlchemyError:
            current_app.logger.exception("[stats] aggregate query failed for user_id=%s", user_id)
            raise StoreError()

        count, total_reps, total_weight, total_duration, avg_duration, max_weight = row
        return {
            "total_workouts": int(count or 0),
            "total_reps": int(total_reps or 0),
            "total_weight": _num(total_weight),
            "total_duration": int(total_duration or 0),
            "avg_duration": float(avg_duration) if avg_duration is not None else None,
            "max_weight": _num(max_weight, default=None),
        }

    @staticmethod
    def get_exercise_breakdown(user_id: int) -> List[Dict[str, Any]]:
        """
        Per-exercise totals, most frequent first, top ``BREAKDOWN_LIMIT``.

        Exercises with the same session count are ordered by name; callers
        should not rely on that order.
        """
        session_count = func.count(LoggedWorkout.id)
        try:
            rows = (
                db.session.query(
                    LoggedWorkout.exercise_name,
                    session_count,
                    func.sum(LoggedWorkout.sets * LoggedWorkout.reps),
                    func.avg(LoggedWorkout.weight),
                    func.max(LoggedWorkout.weight),
                )
                .filter(LoggedWorkout.user_id == user_id)
                .group_by(LoggedWorkout.exercise_name)
                .order_by(session_count.desc(), LoggedWorkout.exercise_name.asc())
                .limit(BREAKDOWN_LIMIT)
                .all()
            )
        except SQLAlchemyError:
            current_app.logger.exception("[stats] breakdown query failed for user_id=%s", user_id)
            raise StoreError()

        return [
            {
                "exercise_name": name,
                "session_count": int(count),
                "total_reps": int(total_reps or 0),
                "avg_weight": float(avg_weight) if avg_weight is not None else 0.0,
                "max_weight": _num(max_weight),
            }
            for name, count, total_reps, avg_weight, max_weight in rows
        ]

    @staticmethod
    def get_recent_workouts(user_id: int) -> List[Dict[str, Any]]:
        """Every entry on the user's ``RECENT_DATES_LIMIT`` most recent workout dates."""
        try:
            # MySQL rejects LIMIT inside an IN subquery, so resolve the dates first
            recent_dates = [
                d for (d,) in (
                    db.session.query(LoggedWorkout.workout_date)
                    .filter(LoggedWorkout.user_id == user_id)
                    .distinct()
                    .order_by(LoggedWorkout.workout_date.desc())
                    .limit(RECENT_DATES_LIMIT)
                    .all()
                )
            ]
            if not recent_dates:
                return []

            rows = (
                LoggedWorkout.query.filter(
                    LoggedWorkout.user_id == user_id,
                    LoggedWorkout.workout_date.in_(recent_dates),
                )
                .order_by(
                    LoggedWorkout.workout_date.desc(),
                    LoggedWorkout.created_at.desc(),
                    LoggedWorkout.id.desc(),
                )
                .all()
            )
        except SQLAlchemyError:
            current_app.logger.exception("[stats] recent workouts query failed for user_id=%s", user_id)
            raise StoreError()

        return [w.to_dict() for w in rows]

    @staticmethod
    def get_user_with_workouts(user_id: int) -> List[Dict[str, Any]]:
        """
        One row per owned entry with the owner's profile repeated on each.

        An empty list does not mean the user is missing; it only means
        there are no entries to join against.
        """
        try:
            rows = (
                db.session.query(User, LoggedWorkout)
                .join(LoggedWorkout, LoggedWorkout.user_id == User.id)
                .filter(User.id == user_id)
                .order_by(
                    LoggedWorkout.workout_date.desc(),
                    LoggedWorkout.created_at.desc(),
                    LoggedWorkout.id.desc(),
                )
                .all()
            )
        except SQLAlchemyError:
            current_app.logger.exception("[stats] user/workouts join failed for user_id=%s", user_id)
            raise StoreError()

        joined = []
        for user, workout in rows:
            row = {
                "username": user.username,
                "email": user.email,
                "full_name": user.full_name,
                "streak": user.streak or 0,
                "total_workouts": user.total_workouts or 0,
            }
            row.update(workout.to_dict())
            joined.append(row)
        return joined
