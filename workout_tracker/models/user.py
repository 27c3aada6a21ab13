# workout_tracker/models/user.py
from datetime import datetime
from werkzeug.security import generate_password_hash, check_password_hash
from .. import db

class User(db.Model):
    __tablename__ = "users"
    __table_args__ = (
        db.CheckConstraint("streak >= 0", name="ck_users_streak_non_negative"),
        db.CheckConstraint("total_workouts >= 0", name="ck_users_total_workouts_non_negative"),
    )

    id = db.Column("user_id", db.BigInteger().with_variant(db.Integer, "sqlite"), primary_key=True)
    username = db.Column(db.String(50), unique=True, nullable=False)
    email = db.Column(db.String(255), unique=True, nullable=False)
    password_hash = db.Column(db.String(255), nullable=False)
    full_name = db.Column(db.String(100))

    # denormalized counters, only ever changed with SQL-side +/- 1
    streak = db.Column(db.Integer, default=0, nullable=False)
    total_workouts = db.Column(db.Integer, default=0, nullable=False)

    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
    last_login = db.Column(db.DateTime)

    workouts = db.relationship(
        "LoggedWorkout",
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    goals = db.relationship(
        "Goal",
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def set_password(self, password: str) -> None:
        self.password_hash = generate_password_hash(password)

    def check_password(self, password: str) -> bool:
        return check_password_hash(self.password_hash, password)

    def to_dict(self):
        """Public projection; the password hash never leaves the model."""
        return {
            "userId": self.id,
            "username": self.username,
            "email": self.email,
            "fullName": self.full_name,
            "streak": self.streak or 0,
            "totalWorkouts": self.total_workouts or 0,
        }
