# workout_tracker/demo_data.py
from datetime import date

import click
from flask import current_app
from flask.cli import with_appcontext
from sqlalchemy.exc import SQLAlchemyError

from . import db
from .errors import StoreError
from .models.goal import Goal
from .models.user import User
from .models.workout import LoggedWorkout

DEMO_EMAIL = "demo@workout.com"
DEMO_PASSWORD = "Demo123!"

# (exercise, sets, reps, weight, duration, difficulty, date, time, notes)
DEMO_WORKOUTS = [
    ("Push-ups", 3, 20, 0, 15, "moderate", "2025-11-10", "07:30", "Great morning workout!"),
    ("Squats", 4, 15, 135, 20, "hard", "2025-11-11", "18:00", "Legs are burning!"),
    ("Bench Press", 5, 10, 185, 30, "hard", "2025-11-12", "12:00", "New PR today!"),
    ("Pull-ups", 3, 12, 0, 18, "moderate", "2025-11-12", "12:30", "Added to chest day"),
    ("Deadlift", 4, 8, 225, 25, "extreme", "2025-11-13", "17:00", "Feeling strong!"),
]

# (name, target, progress, deadline, completed_date)
DEMO_GOALS = [
    ("1000 Push-ups", 1000, 1000, "2025-11-15", "2025-11-15"),
    ("500 Squats", 500, 350, "2025-12-01", None),
    ("100 Pull-ups", 100, 45, "2025-11-30", None),
]


def seed_demo_data() -> bool:
    """
    Create the demo account with a few workouts and goals.

    Runs as one transaction and does nothing if the demo user exists.
    Returns True when data was inserted.
    """
    if User.query.filter_by(email=DEMO_EMAIL).first():
        current_app.logger.info("[demo] demo user already exists, skipping")
        return False

    user = User(
        username="DemoUser",
        email=DEMO_EMAIL,
        full_name="Demo User",
        streak=7,
        total_workouts=len(DEMO_WORKOUTS),
    )
    user.set_password(DEMO_PASSWORD)

    for name, sets, reps, weight, duration, difficulty, day, time, notes in DEMO_WORKOUTS:
        user.workouts.append(
            LoggedWorkout(
                exercise_name=name,
                sets=sets,
                reps=reps,
                weight=weight,
                duration=duration,
                difficulty=difficulty,
                workout_date=date.fromisoformat(day),
                workout_time=time,
                notes=notes,
            )
        )

    for name, target, progress, deadline, completed_on in DEMO_GOALS:
        user.goals.append(
            Goal(
                goal_name=name,
                target_value=target,
                current_progress=progress,
                deadline=date.fromisoformat(deadline),
                is_completed=progress >= target,
                completed_date=date.fromisoformat(completed_on) if completed_on else None,
            )
        )

    try:
        db.session.add(user)
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        current_app.logger.exception("[demo] failed to populate demo data")
        raise StoreError("Failed to populate demo data")

    current_app.logger.info("[demo] demo data created, login with %s", DEMO_EMAIL)
    return True


@click.command("seed-demo")
@with_appcontext
def seed_demo_command():
    """Create the demo account (demo@workout.com / Demo123!)."""
    if seed_demo_data():
        click.echo(f"Demo data created. Login: {DEMO_EMAIL} / {DEMO_PASSWORD}")
    else:
        click.echo("Demo user already exists, nothing to do.")
