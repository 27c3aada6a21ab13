# workout_tracker/routes/workout_routes.py

from typing import Any, Dict

from flask import Blueprint, jsonify
from flask_jwt_extended import jwt_required

from ..errors import ForbiddenError
from ..services.workout_service import WorkoutService
from ._shared import current_user_id, ensure_owner, json_body, pick

workouts_bp = Blueprint("workouts", __name__)

# request key(s) -> entry column
FIELD_ALIASES = {
    "exercise_name": ("exerciseName", "exercise_name"),
    "sets": ("sets",),
    "reps": ("reps",),
    "weight": ("weight",),
    "duration": ("duration",),
    "difficulty": ("difficulty",),
    "workout_date": ("workoutDate", "workout_date"),
    "workout_time": ("workoutTime", "workout_time"),
    "notes": ("notes",),
}


# ------------------------------
# Helpers
# ------------------------------
def _workout_fields(data: Dict[str, Any]) -> Dict[str, Any]:
    """Only the keys the caller actually sent, renamed to column names."""
    fields = {}
    for column, aliases in FIELD_ALIASES.items():
        for alias in aliases:
            if alias in data:
                fields[column] = data[alias]
                break
    return fields


def _owned_workout(workout_id: int):
    workout = WorkoutService.get_workout(workout_id)
    if workout.user_id != current_user_id():
        raise ForbiddenError()
    return workout


# ------------------------------
# POST /api/workouts
# ------------------------------
@workouts_bp.route("", methods=["POST"])
@jwt_required()
def log_workout():
    data = json_body()
    user_id = ensure_owner(pick(data, "userId", "user_id"))

    workout_id = WorkoutService.log_workout(user_id, _workout_fields(data))
    return jsonify({"message": "Workout logged successfully", "workoutId": workout_id}), 201


# ------------------------------
# GET /api/workouts/<user_id>
# ------------------------------
@workouts_bp.route("/<int:user_id>", methods=["GET"])
@jwt_required()
def list_workouts(user_id):
    ensure_owner(user_id)
    return jsonify(WorkoutService.list_workouts(user_id)), 200


# ------------------------------
# PUT /api/workouts/<workout_id>
# ------------------------------
@workouts_bp.route("/<int:workout_id>", methods=["PUT"])
@jwt_required()
def update_workout(workout_id):
    data = json_body()
    _owned_workout(workout_id)

    WorkoutService.update_workout(workout_id, _workout_fields(data))
    return jsonify({"message": "Workout updated successfully"}), 200


# ------------------------------
# DELETE /api/workouts/<workout_id>
# ------------------------------
@workouts_bp.route("/<int:workout_id>", methods=["DELETE"])
@jwt_required()
def delete_workout(workout_id):
    _owned_workout(workout_id)

    WorkoutService.delete_workout(workout_id)
    return jsonify({"message": "Workout deleted successfully"}), 200
