# workout_tracker/routes/auth_routes.py

from flask import Blueprint, jsonify
from flask_jwt_extended import create_access_token, jwt_required

from ..services.account_service import AccountService
from ._shared import ensure_owner, json_body, pick

auth_bp = Blueprint("auth", __name__)


# -----------------------------
# Routes
# -----------------------------
@auth_bp.route("/register", methods=["POST"])
def register():
    data = json_body()

    user_id = AccountService.register(
        username=data.get("username"),
        email=data.get("email"),
        password=data.get("password"),
        full_name=pick(data, "fullName", "full_name"),
    )
    return jsonify({"message": "User registered successfully", "userId": user_id}), 201


@auth_bp.route("/login", methods=["POST"])
def login():
    """
    Accepts ``{"email": "...", "password": "..."}``.

    Returns the public user projection plus a bearer token the front end
    sends on every later request.
    """
    data = json_body()

    user = AccountService.login(data.get("email"), data.get("password"))
    access_token = create_access_token(identity=str(user["userId"]))

    return jsonify({
        "message": "Login successful",
        "token": access_token,
        "user": user,
    }), 200


@auth_bp.route("/user/<int:user_id>", methods=["GET"])
@jwt_required()
def get_user(user_id):
    ensure_owner(user_id)
    return jsonify(AccountService.get_user(user_id)), 200


@auth_bp.route("/user/<int:user_id>", methods=["DELETE"])
@jwt_required()
def delete_user(user_id):
    ensure_owner(user_id)
    AccountService.delete_user(user_id)
    return jsonify({"message": "User deleted successfully"}), 200
