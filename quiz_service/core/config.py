from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    ENVIRONMENT: str = "development"

    DATABASE_URL: str = "sqlite:///./quiz.db"
    PROJECT_NAME: str = "Quiz Delivery Service"
    LOG_LEVEL: str = "INFO"

    # Admin authentication
    JWT_SECRET: str = "default-secret-change-this"
    JWT_ALGORITHM: str = "HS256"
    ADMIN_TOKEN_TTL_DAYS: int = 7
    ADMIN_COOKIE_NAME: str = "admin_token"

    # Default admin created by /admin/seed
    ADMIN_EMAIL: str = "admin@quiz.com"
    ADMIN_PASSWORD: str = "admin123"

    # Quiz defaults used when no config row exists yet
    DEFAULT_QUESTION_LIMIT: int = 10
    DEFAULT_PASS_PERCENTAGE: int = 60

    CORS_ORIGINS: List[str] = ["http://localhost:3000"]

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"

    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"


settings = Settings()
