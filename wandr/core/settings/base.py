from typing import List, Optional

from pydantic_settings import BaseSettings as PydanticBaseSettings


class BaseSettings(PydanticBaseSettings):
    # ===============================
    # APPLICATION SETTINGS
    # ===============================
    PROJECT_NAME: str = "Wandr API"
    VERSION: str = "1.0.0"
    DESCRIPTION: str = "Attraction visits, location progress and badge awards"

    # ===============================
    # API SETTINGS
    # ===============================
    API_V1_STR: str = "/api/v1"

    # ===============================
    # JWT ALGORITHM
    # ===============================
    ALGORITHM: str = "HS256"

    # ===============================
    # PAGINATION SETTINGS
    # ===============================
    DEFAULT_PAGE_SIZE: int = 20
    MAX_PAGE_SIZE: int = 100

    # ===============================
    # BADGE SETTINGS
    # ===============================
    BADGE_TIMELINE_DEFAULT_LIMIT: int = 20
    BADGE_TIMELINE_MAX_LIMIT: int = 100

    # ===============================
    # LEADERBOARD SETTINGS
    # ===============================
    LEADERBOARD_DEFAULT_LIMIT: int = 50
    LEADERBOARD_MAX_LIMIT: int = 100
    LEADERBOARD_TOP_LIMIT: int = 10

    # ===============================
    # LOGGING SETTINGS
    # ===============================
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None

    # ===============================
    # CORS SETTINGS
    # ===============================
    BACKEND_CORS_ORIGINS: List[str] = []

    # ===============================
    # COMPUTED PROPERTIES
    # ===============================
    @property
    def is_development(self) -> bool:
        return self.ENVIRONMENT == "development"

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"

    @property
    def is_testing(self) -> bool:
        return self.ENVIRONMENT == "testing"

    model_config = {
        "case_sensitive": True,
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }
