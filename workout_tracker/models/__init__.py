# workout_tracker/models/__init__.py
from .user import User
from .workout import LoggedWorkout, DIFFICULTY_LEVELS
from .goal import Goal

__all__ = ["User", "LoggedWorkout", "Goal", "DIFFICULTY_LEVELS"]
