# workout_tracker/models/workout.py
from datetime import datetime
from .. import db

DIFFICULTY_LEVELS = ("easy", "moderate", "hard", "extreme")


class LoggedWorkout(db.Model):
    __tablename__ = "logged_workouts"
    __table_args__ = (
        db.CheckConstraint("sets > 0", name="ck_logged_workouts_sets_positive"),
        db.CheckConstraint("reps > 0", name="ck_logged_workouts_reps_positive"),
        db.CheckConstraint("weight >= 0", name="ck_logged_workouts_weight_non_negative"),
        db.CheckConstraint(
            "difficulty IN ('easy', 'moderate', 'hard', 'extreme')",
            name="ck_logged_workouts_difficulty",
        ),
        db.Index("ix_logged_workouts_user_date", "user_id", "workout_date"),
    )

    id = db.Column("workout_id", db.BigInteger().with_variant(db.Integer, "sqlite"), primary_key=True)
    user_id = db.Column(
        db.BigInteger().with_variant(db.Integer, "sqlite"),
        db.ForeignKey("users.user_id", ondelete="CASCADE"),
        nullable=False,
    )
    exercise_name = db.Column(db.String(100), nullable=False)
    sets = db.Column(db.Integer, nullable=False)
    reps = db.Column(db.Integer, nullable=False)
    weight = db.Column(db.Float, nullable=False, default=0)
    duration = db.Column(db.Integer, nullable=False)  # minutes
    difficulty = db.Column(db.String(20))
    workout_date = db.Column(db.Date, nullable=False)
    workout_time = db.Column(db.String(5))  # "HH:MM"
    notes = db.Column(db.Text)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    user = db.relationship("User", back_populates="workouts")

    def to_dict(self):
        return {
            "workout_id": self.id,
            "user_id": self.user_id,
            "exercise_name": self.exercise_name,
            "sets": self.sets,
            "reps": self.reps,
            "weight": float(self.weight or 0),
            "duration": self.duration,
            "difficulty": self.difficulty,
            "workout_date": self.workout_date.isoformat() if self.workout_date else None,
            "workout_time": self.workout_time,
            "notes": self.notes,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
