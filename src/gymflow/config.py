"""Configuration settings for the gymflow API."""

import logging
import os
from pathlib import Path

# Default data directory
DATA_DIR = Path(__file__).parent.parent.parent / "data"


def _env_flag(name: str, default: bool = False) -> bool:
    return os.getenv(name, str(default)).lower() in ("1", "true", "yes")


class Settings:
    """Application settings."""

    DATA_DIR: Path = DATA_DIR
    DB_PATH: Path = DATA_DIR / "gymflow.db"

    # Tokens issued by /login
    JWT_SECRET: str = "gymflow-dev-secret"
    JWT_ALGORITHM: str = "HS256"
    JWT_EXPIRES_DAYS: int = 14
    REQUIRE_AUTH: bool = False

    RANKING_LIMIT: int = 100
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: list[str] = ["*"]

    def __init__(self, **overrides):
        self.DATA_DIR = Path(os.getenv("GYMFLOW_DATA_DIR", str(DATA_DIR)))
        db_path = os.getenv("GYMFLOW_DB_PATH")
        self.DB_PATH = Path(db_path) if db_path else self.DATA_DIR / "gymflow.db"

        self.JWT_SECRET = os.getenv("GYMFLOW_JWT_SECRET", self.JWT_SECRET)
        self.JWT_EXPIRES_DAYS = int(os.getenv("GYMFLOW_JWT_EXPIRES_DAYS", self.JWT_EXPIRES_DAYS))
        self.REQUIRE_AUTH = _env_flag("GYMFLOW_REQUIRE_AUTH")

        self.RANKING_LIMIT = int(os.getenv("GYMFLOW_RANKING_LIMIT", self.RANKING_LIMIT))
        self.LOG_LEVEL = os.getenv("GYMFLOW_LOG_LEVEL", self.LOG_LEVEL).upper()

        origins = os.getenv("GYMFLOW_CORS_ORIGINS", "*")
        self.CORS_ORIGINS = [o.strip() for o in origins.split(",") if o.strip()]

        # Explicit values win over the environment (used by tests and the CLI)
        for key, value in overrides.items():
            attr = key.upper()
            if not hasattr(self, attr):
                raise AttributeError(f"Unknown setting: {key}")
            setattr(self, attr, value)

        self.DATA_DIR = Path(self.DATA_DIR)
        if "db_path" in overrides:
            self.DB_PATH = Path(self.DB_PATH)
        elif "data_dir" in overrides:
            self.DB_PATH = self.DATA_DIR / "gymflow.db"


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging once for the API and the CLI."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


settings = Settings()
