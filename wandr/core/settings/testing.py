from .base import BaseSettings


class TestingSettings(BaseSettings):
    ENVIRONMENT: str = "testing"
    DEBUG: bool = False

    PROJECT_NAME: str = "Wandr API - Testing"
    VERSION: str = "1.0.0-test"

    DATABASE_URL: str = "sqlite:///:memory:"
    DATABASE_ECHO: bool = False

    SECRET_KEY: str = "testing-secret-key-not-for-any-real-deployment-32-chars"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 30

    LOG_LEVEL: str = "WARNING"

    model_config = {
        "case_sensitive": True,
        "env_file": None,
        "extra": "ignore",
    }
