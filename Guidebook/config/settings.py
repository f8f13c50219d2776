# config/settings.py
"""
Centralised application configuration using Pydantic Settings.
Values are loaded from the .env file.
"""

from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    """Application configuration"""

    # Database
    DATABASE_URL: str = "sqlite:///./guidebook.db"

    # JWT
    SECRET_KEY: str = "change-me"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 720
    ALGORITHM: str = "HS256"

    # CORS
    CORS_ALLOW_ORIGINS: List[str] = ["http://localhost:3000"]

    # Business calendar (checklists roll over at local midnight)
    APP_TIMEZONE: str = "Asia/Dubai"

    # Branches
    CENTRAL_KITCHEN_SLUG: str = "central-kitchen"

    # Logging
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
