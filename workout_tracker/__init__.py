# workout_tracker/__init__.py

import logging

from flask import Flask, jsonify
from flask_cors import CORS
from flask_sqlalchemy import SQLAlchemy
from flask_jwt_extended import JWTManager
from sqlalchemy import event
from werkzeug.exceptions import HTTPException

from config import Config

db = SQLAlchemy()
jwt = JWTManager()


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite ignores FOREIGN KEY / ON DELETE CASCADE unless asked per connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_app(config_object=Config):
    app = Flask(__name__)
    app.config.from_object(config_object)
    app.logger.setLevel(getattr(logging, str(app.config.get("LOG_LEVEL", "INFO")).upper(), logging.INFO))

    # Init extensions
    db.init_app(app)
    jwt.init_app(app)

    # CORS: the browser front end calls /api/*
    CORS(app, resources={r"/api/*": {"origins": "*"}})

    # -----------------------------
    # JWT error handlers
    # -----------------------------
    @jwt.unauthorized_loader
    def unauthorized_callback(reason):
        return jsonify({"error": f"Missing or invalid auth token: {reason}"}), 401

    @jwt.invalid_token_loader
    def invalid_token_callback(reason):
        return jsonify({"error": f"Invalid auth token: {reason}"}), 422

    @jwt.expired_token_loader
    def expired_token_callback(jwt_header, jwt_payload):
        return jsonify({"error": "Token has expired"}), 401

    # -----------------------------
    # API error handlers
    # -----------------------------
    from .errors import FitnessAPIError

    @app.errorhandler(FitnessAPIError)
    def handle_api_error(error):
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        return jsonify({"error": error.description or error.name}), error.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        db.session.rollback()
        app.logger.exception(f"Unhandled error: {error}")
        return jsonify({"error": "Internal server error"}), 500

    # -----------------------------
    # IMPORT BLUEPRINTS (all routes)
    # -----------------------------
    from .routes.auth_routes import auth_bp
    from .routes.workout_routes import workouts_bp
    from .routes.goal_routes import goals_bp
    from .routes.stats_routes import stats_bp

    # -----------------------------
    # REGISTER BLUEPRINTS
    # -----------------------------
    app.register_blueprint(auth_bp, url_prefix="/api")
    app.register_blueprint(workouts_bp, url_prefix="/api/workouts")
    app.register_blueprint(goals_bp, url_prefix="/api/goals")
    app.register_blueprint(stats_bp, url_prefix="/api")

    @app.route("/api/health")
    def health():
        return {"status": "ok"}

    from .demo_data import seed_demo_command, seed_demo_data
    app.cli.add_command(seed_demo_command)

    # -----------------------------
    # DB init
    # -----------------------------
    with app.app_context():
        if db.engine.dialect.name == "sqlite":
            event.listen(db.engine, "connect", _enable_sqlite_foreign_keys)
        from . import models  # noqa: F401  (register tables before create_all)
        db.create_all()
        if app.config.get("SEED_DEMO_DATA"):
            seed_demo_data()

    return app
