# workout_tracker/routes/goal_routes.py

from flask import Blueprint, jsonify
from flask_jwt_extended import jwt_required

from ..errors import ForbiddenError
from ..services.goal_service import GoalService
from ._shared import current_user_id, ensure_owner, json_body, pick

goals_bp = Blueprint("goals", __name__)


def _owned_goal(goal_id: int):
    goal = GoalService.get_goal(goal_id)
    if goal.user_id != current_user_id():
        raise ForbiddenError()
    return goal


@goals_bp.route("", methods=["POST"])
@jwt_required()
def create_goal():
    """
    Body:
    {
      "userId": 1,
      "goalName": "500 Squats",
      "targetValue": 500,
      "deadline": "2025-12-01"   // optional
    }
    """
    data = json_body()
    user_id = ensure_owner(pick(data, "userId", "user_id"))

    goal_id = GoalService.create_goal(
        user_id,
        pick(data, "goalName", "goal_name"),
        pick(data, "targetValue", "target_value"),
        data.get("deadline"),
    )
    return jsonify({"message": "Goal created successfully", "goalId": goal_id}), 201


@goals_bp.route("/<int:user_id>", methods=["GET"])
@jwt_required()
def list_goals(user_id):
    ensure_owner(user_id)
    return jsonify(GoalService.list_goals(user_id)), 200


@goals_bp.route("/<int:goal_id>/progress", methods=["PUT"])
@jwt_required()
def update_goal_progress(goal_id):
    data = json_body()
    _owned_goal(goal_id)

    is_completed = GoalService.update_progress(goal_id, data.get("progress"))
    return jsonify({"message": "Goal updated successfully", "isCompleted": is_completed}), 200


@goals_bp.route("/<int:goal_id>", methods=["DELETE"])
@jwt_required()
def delete_goal(goal_id):
    _owned_goal(goal_id)

    GoalService.delete_goal(goal_id)
    return jsonify({"message": "Goal deleted successfully"}), 200
