# workout_tracker/models/goal.py
from datetime import datetime
from .. import db


class Goal(db.Model):
    __tablename__ = "goals"
    __table_args__ = (
        db.CheckConstraint("target_value > 0", name="ck_goals_target_positive"),
        db.CheckConstraint("current_progress >= 0", name="ck_goals_progress_non_negative"),
    )

    id = db.Column("goal_id", db.BigInteger().with_variant(db.Integer, "sqlite"), primary_key=True)
    user_id = db.Column(
        db.BigInteger().with_variant(db.Integer, "sqlite"),
        db.ForeignKey("users.user_id", ondelete="CASCADE"),
        nullable=False,
    )
    goal_name = db.Column(db.String(100), nullable=False)
    target_value = db.Column(db.Integer, nullable=False)
    current_progress = db.Column(db.Integer, nullable=False, default=0)
    deadline = db.Column(db.Date)
    is_completed = db.Column(db.Boolean, nullable=False, default=False)
    completed_date = db.Column(db.Date)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    user = db.relationship("User", back_populates="goals")

    def to_dict(self):
        return {
            "goal_id": self.id,
            "user_id": self.user_id,
            "goal_name": self.goal_name,
            "target_value": self.target_value,
            "current_progress": self.current_progress or 0,
            "deadline": self.deadline.isoformat() if self.deadline else None,
            "is_completed": bool(self.is_completed),
            "completed_date": self.completed_date.isoformat() if self.completed_date else None,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
