from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # Primary leaderboard database (empty = file storage only)
    database_url: str = "sqlite:///./codequest.db"

    # Fallback JSON file used when the database is unreachable
    leaderboard_file: str = "data/leaderboard.json"

    # Frontend URL for CORS
    frontend_url: str = "http://localhost:3000"

    log_level: str = "INFO"

    class Config:
        env_file = ".env"


@lru_cache
def get_settings() -> Settings:
    return Settings()
