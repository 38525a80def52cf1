from pydantic_settings import BaseSettings
from typing import List, Optional

DEV_JWT_SECRET = "dev-secret-change-me"


class Settings(BaseSettings):
    # Application
    PROJECT_NAME: str = "Hackathon Admin"
    VERSION: str = "1.0.0"
    DEBUG: bool = False
    ENVIRONMENT: str = "development"  # "production" turns on secure cookies

    # Database
    MONGODB_URI: str = "mongodb://localhost:27017"
    MONGODB_DB: str = "hackathon"

    # Session
    JWT_SECRET: str = DEV_JWT_SECRET
    JWT_ALGORITHM: str = "HS256"
    SESSION_COOKIE_NAME: str = "auth-token"
    SESSION_MAX_AGE_SECONDS: int = 60 * 60 * 24 * 30  # 30 days
    SESSION_DEFAULT_EXPIRE_HOURS: int = 24

    # Passwords
    BCRYPT_ROUNDS: int = 10

    # Page gating
    PROTECTED_PREFIX: str = "/dashboard"
    AUTH_PREFIX: str = "/auth/"
    LOGIN_PATH: str = "/auth/v1/login"

    # CORS
    CORS_ORIGINS: List[str] = ["http://localhost:3000"]

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = "hackadmin.log"

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"

    def validate_secrets(self):
        """Refuse to run in production with the development JWT secret."""
        if self.is_production and (not self.JWT_SECRET or self.JWT_SECRET == DEV_JWT_SECRET):
            raise RuntimeError("JWT secret is not configured. Set JWT_SECRET in your environment.")


settings = Settings()
