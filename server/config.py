# server/config.py

import os
from dotenv import load_dotenv


load_dotenv()


# Database
DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./data/app.db")

# Session tokens
JWT_SECRET_KEY: str = os.getenv("JWT_SECRET_KEY", "")
JWT_ALGORITHM: str = os.getenv("JWT_ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE_MINUTES: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "120"))

# Hydration
WATER_GOAL_CUPS: int = int(os.getenv("WATER_GOAL_CUPS", "8"))

# HTTP
CORS_ORIGINS: list[str] = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
HOST: str = os.getenv("HOST", "0.0.0.0")
PORT: int = int(os.getenv("PORT", "4000"))

# Logging
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

APP_VERSION = "0.1.0"


def validate_config() -> None:
    """Validate required configuration"""
    if not JWT_SECRET_KEY:
        raise ValueError("JWT_SECRET_KEY is required")
    if not DATABASE_URL:
        raise ValueError("DATABASE_URL is required")
    if ACCESS_TOKEN_EXPIRE_MINUTES <= 0:
        raise ValueError("ACCESS_TOKEN_EXPIRE_MINUTES must be positive")
