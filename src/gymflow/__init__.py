"""gymflow: workout plans, exercise logging and a points leaderboard."""

__version__ = "0.1.0"
