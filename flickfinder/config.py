"""
Configuration management for FlickFinder.

Loads configuration from environment variables and provides
a centralized Config dataclass for all settings.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from .validation import INT32_MAX


@dataclass
class Config:
    """Centralized configuration from environment variables."""

    # Database
    database_url: str = "sqlite:///flickfinder.db"
    pool_size: int = 5
    max_overflow: int = 10

    # Query bounds
    default_limit: int = 50
    default_min_votes: int = 1000
    max_year: int = 2100

    # API settings
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_debug: bool = False

    # Paths
    log_dir: Path = field(default_factory=lambda: Path.cwd() / "logs")

    # CORS settings
    allowed_origins: List[str] = field(default_factory=list)

    @classmethod
    def from_env(cls, env_path: Optional[str] = None) -> "Config":
        """
        Load configuration from environment variables.

        Args:
            env_path: Optional path to .env file. If not provided,
                     looks for .env in the project root, then current directory.

        Returns:
            Config instance with loaded values.

        Raises:
            ValueError: If a numeric setting is not an integer, or a query
                default is out of range.
        """
        if env_path:
            load_dotenv(env_path)
        else:
            root_env = Path(__file__).parent.parent / ".env"
            if root_env.exists():
                load_dotenv(root_env)
            else:
                load_dotenv()

        # Database config: an explicit URL wins, then MySQL settings, then SQLite
        database_url = os.getenv("DATABASE_URL", "")
        if not database_url:
            db_name = os.getenv("SQL_DB", "")
            if db_name:
                database_url = _mysql_url(
                    host=os.getenv("SQL_HOST", "localhost"),
                    port=_int_env("SQL_PORT", 3306),
                    user=os.getenv("SQL_USER", ""),
                    password=os.getenv("SQL_PASS", ""),
                    name=db_name,
                )
            else:
                database_url = "sqlite:///flickfinder.db"

        origins_str = os.getenv("ALLOWED_ORIGINS", "")
        allowed_origins = [o.strip() for o in origins_str.split(",") if o.strip()]

        # Query defaults must lie inside the ranges a request value is clamped to
        default_limit = _int_env("DEFAULT_LIMIT", 50)
        default_min_votes = _int_env("DEFAULT_MIN_VOTES", 1000)
        if not 1 <= default_limit < INT32_MAX:
            raise ValueError(
                f"DEFAULT_LIMIT must be between 1 and {INT32_MAX - 1}, got {default_limit}"
            )
        if not 0 <= default_min_votes < INT32_MAX:
            raise ValueError(
                f"DEFAULT_MIN_VOTES must be between 0 and {INT32_MAX - 1}, got {default_min_votes}"
            )

        return cls(
            database_url=database_url,
            pool_size=_int_env("DB_POOL_SIZE", 5),
            max_overflow=_int_env("DB_MAX_OVERFLOW", 10),
            default_limit=default_limit,
            default_min_votes=default_min_votes,
            max_year=_int_env("MAX_YEAR", 2100),
            api_host=os.getenv("API_HOST", "0.0.0.0"),
            api_port=_int_env("API_PORT", 8000),
            api_debug=os.getenv("API_DEBUG", "false").lower() == "true",
            log_dir=Path(os.getenv("LOG_DIR", str(Path.cwd() / "logs"))),
            allowed_origins=allowed_origins,
        )

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")


def _mysql_url(host: str, port: int, user: str, password: str, name: str) -> str:
    """Get SQLAlchemy URL for a MySQL database."""
    return f"mysql+pymysql://{user}:{password}@{host}:{port}/{name}"


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
