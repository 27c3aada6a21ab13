# workout_tracker/routes/stats_routes.py
from flask import Blueprint, jsonify
from flask_jwt_extended import jwt_required

from ..services.analytics_service import AnalyticsService
from ._shared import ensure_owner

# Blueprint for read-only statistics endpoints
stats_bp = Blueprint("stats", __name__)


# -------------------------
# TOTALS
# -------------------------
@stats_bp.route("/stats/<int:user_id>", methods=["GET"])
@jwt_required()
def stats(user_id):
    ensure_owner(user_id)
    return jsonify(AnalyticsService.get_stats(user_id)), 200


# -------------------------
# PER-EXERCISE BREAKDOWN
# -------------------------
@stats_bp.route("/exercise-breakdown/<int:user_id>", methods=["GET"])
@jwt_required()
def exercise_breakdown(user_id):
    ensure_owner(user_id)
    return jsonify(AnalyticsService.get_exercise_breakdown(user_id)), 200


# -------------------------
# RECENT WORKOUTS (last 5 workout days)
# -------------------------
@stats_bp.route("/recent-workouts/<int:user_id>", methods=["GET"])
@jwt_required()
def recent_workouts(user_id):
    ensure_owner(user_id)
    return jsonify(AnalyticsService.get_recent_workouts(user_id)), 200


# -------------------------
# USER PROFILE JOINED WITH WORKOUTS
# -------------------------
@stats_bp.route("/user-workouts/<int:user_id>", methods=["GET"])
@jwt_required()
def user_workouts(user_id):
    ensure_owner(user_id)
    return jsonify(AnalyticsService.get_user_with_workouts(user_id)), 200
