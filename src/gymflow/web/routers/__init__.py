"""API routers."""

from . import auth, exercises, ranking, users, workouts

__all__ = ["auth", "exercises", "ranking", "users", "workouts"]
