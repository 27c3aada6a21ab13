# workout_tracker/services/__init__.py
from .account_service import AccountService
from .analytics_service import AnalyticsService
from .goal_service import GoalService
from .workout_service import WorkoutService

__all__ = ["AccountService", "AnalyticsService", "GoalService", "WorkoutService"]
