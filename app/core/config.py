# app/core/config.py
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./delini.db"

    # JWT
    SECRET_KEY: str
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 180

    # Admin seed account
    ADMIN_USERNAME: str = "admin"
    ADMIN_PASSWORD: str

    # Login lockout
    LOGIN_MAX_ATTEMPTS: int = 5
    LOGIN_LOCKOUT_MINUTES: int = 5

    SEED_ON_STARTUP: bool = True
    DEFAULT_LANGUAGE: str = "ar"
    TIMEZONE: str = "Asia/Amman"
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"

settings = Settings()
