# workout_tracker/services/goal_service.py
from datetime import date
from typing import Any, Dict, List

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from .. import db
from ..errors import NotFoundError, StoreError
from ..models.goal import Goal
from ..models.user import User
from ..validators import parse_date, parse_int, require_text


class GoalService:

    @staticmethod
    def create_goal(user_id: int, name: Any, target: Any, deadline: Any = None) -> int:
        goal_name = require_text(name, "goalName", max_length=100)
        target_value = parse_int(target, "targetValue", minimum=1)
        deadline = parse_date(deadline, "deadline", required=False)

        if not db.session.get(User, user_id):
            raise NotFoundError("User not found")

        goal = Goal(
            user_id=user_id,
            goal_name=goal_name,
            target_value=target_value,
            current_progress=0,
            deadline=deadline,
            is_completed=False,
        )
        try:
            db.session.add(goal)
            db.session.commit()
        except SQLAlchemyError:
            db.session.rollback()
            current_app.logger.exception("[goals] failed to create goal for user_id=%s", user_id)
            raise StoreError("Failed to create goal")

        return goal.id

    @staticmethod
    def list_goals(user_id: int) -> List[Dict[str, Any]]:
        """Active goals first, then by deadline (undated last), newest first."""
        rows = (
            Goal.query.filter_by(user_id=user_id)
            .order_by(
                Goal.is_completed.asc(),
                Goal.deadline.is_(None).asc(),
                Goal.deadline.asc(),
                Goal.created_at.desc(),
                Goal.id.desc(),
            )
            .all()
        )
        return [g.to_dict() for g in rows]

    @staticmethod
    def get_goal(goal_id: int) -> Goal:
        goal = db.session.get(Goal, goal_id)
        if not goal:
            raise NotFoundError("Goal not found")
        return goal

    @staticmethod
    def update_progress(goal_id: int, progress: Any) -> bool:
        goal = GoalService.get_goal(goal_id)
        progress = parse_int(progress, "progress", minimum=0)

        was_completed = bool(goal.is_completed)
        is_completed = progress >= goal.target_value

        goal.current_progress = progress
        goal.is_completed = is_completed
        if is_completed and (not was_completed or goal.completed_date is None):
            goal.completed_date = date.today()
        elif not is_completed:
            goal.completed_date = None

        try:
            db.session.commit()
        except SQLAlchemyError:
            db.session.rollback()
            current_app.logger.exception("[goals] failed to update goal_id=%s", goal_id)
            raise StoreError("Failed to update goal")

        if is_completed and not was_completed:
            current_app.logger.info("[goals] goal_id=%s completed by user_id=%s", goal.id, goal.user_id)
        return is_completed

    @staticmethod
    def delete_goal(goal_id: int) -> None:
        goal = GoalService.get_goal(goal_id)
        try:
            db.session.delete(goal)
            db.session.commit()
        except SQLAlchemyError:
            db.session.rollback()
            current_app.logger.exception("[goals] failed to delete goal_id=%s", goal_id)
            raise StoreError("Failed to delete goal")
