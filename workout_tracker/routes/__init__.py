# workout_tracker/routes/__init__.py
