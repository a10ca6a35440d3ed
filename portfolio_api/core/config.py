"""
Application settings
"""

from pydantic_settings import BaseSettings
from typing import Optional
from datetime import timedelta
from pathlib import Path
import re
from dotenv import load_dotenv


"""env loading priority
1) OS environment variables
2) .env in the repository root
"""

# Preload .env without overriding the OS environment
_here = Path(__file__).resolve()
_repo_root_env = _here.parents[2] / ".env"
try:
    if _repo_root_env.exists():
        load_dotenv(dotenv_path=str(_repo_root_env), override=False)
except OSError:
    pass


DEFAULT_JWT_SECRET = "portfolio-dev-secret-change-this-in-production"

_DURATION_RE = re.compile(r"^\s*(\d+)\s*([smhd]?)\s*$")
_DURATION_UNITS = {"": 1, "s": 1, "m": 60, "h": 3600, "d": 86400}


class Settings(BaseSettings):
    """Application settings"""
    ENVIRONMENT: str = "development"
    DEBUG: bool = False

    # Storage
    DB_PATH: str = "./data/portfolio.db"
    UPLOAD_PATH: str = "./uploads"
    MAX_FILE_SIZE: int = 10 * 1024 * 1024

    # Seeded admin account
    ADMIN_USERNAME: str = "admin"
    ADMIN_PASSWORD: str = "change-me-admin"
    ADMIN_EMAIL: str = "admin@portfolio.local"

    # JWT
    JWT_SECRET: str = DEFAULT_JWT_SECRET
    JWT_ALGORITHM: str = "HS256"
    TOKEN_EXPIRY: str = "24h"

    # HTTP
    PORT: int = 3001
    FRONTEND_URL: Optional[str] = "http://localhost:8081"
    RATE_LIMIT_WINDOW: int = 15  # minutes
    RATE_LIMIT_MAX: int = 100

    class Config:
        env_file = ".env"
        env_file_encoding = 'utf-8'
        extra = 'ignore'

    @property
    def database_url(self) -> str:
        return f"sqlite+aiosqlite:///{self.DB_PATH}"

    @property
    def token_ttl(self) -> timedelta:
        return parse_duration(self.TOKEN_EXPIRY)


def parse_duration(value: str) -> timedelta:
    """Parse "24h", "30m", "7d", "45s" or a bare number of seconds."""
    match = _DURATION_RE.match(str(value))
    if not match:
        raise ValueError(f"Invalid duration: {value!r}")
    amount, unit = match.groups()
    return timedelta(seconds=int(amount) * _DURATION_UNITS[unit])


def validate_settings(cfg: Settings) -> bool:
    """Settings sanity checks"""
    if cfg.ENVIRONMENT == "production":
        if cfg.JWT_SECRET == DEFAULT_JWT_SECRET:
            raise ValueError("JWT_SECRET must be changed in production.")
    parse_duration(cfg.TOKEN_EXPIRY)
    return True


settings = Settings()
