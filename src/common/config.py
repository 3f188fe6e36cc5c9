import os
from functools import lru_cache
from typing import Annotated, List
from dotenv import load_dotenv
from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, NoDecode

# Load environment variables from the correct .env file
env_file = ".env.production" if os.getenv("APP_ENV") == "production" else ".env"
load_dotenv(env_file)

class Settings(BaseSettings):
    APP_ENV: str = "development"
    HOST: str = "0.0.0.0"
    PORT: int = 5000
    ALLOWED_ORIGINS: Annotated[List[str], NoDecode] = ["*"]
    LOG_LEVEL: str = "info"

    # Email settings
    EMAIL_USER: str
    EMAIL_PASS: str
    EMAIL_SENDER_NAME: str = "Loksar Services"
    ADMIN_EMAIL: str
    SMTP_HOST: str = "smtp.gmail.com"  # Empty string switches the dispatcher to mock mode
    SMTP_PORT: int = 465
    SMTP_USE_TLS: bool = True

    # Uploads
    MAX_UPLOAD_SIZE: int = 5 * 1024 * 1024

    @field_validator("ALLOWED_ORIGINS", mode="before")
    def split_origins(cls, value):
        if isinstance(value, str):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value

    @model_validator(mode="after")
    def validate_production_secrets(self):
        """Ensure mail delivery is configured when running in production."""
        if self.APP_ENV == "production":
            missing = [key for key in ("EMAIL_USER", "EMAIL_PASS", "ADMIN_EMAIL", "SMTP_HOST") if not getattr(self, key)]
            if missing:
                raise ValueError(
                    f"Missing required settings for production: {', '.join(missing)}"
                )
        return self

@lru_cache
def get_settings() -> Settings:
    return Settings()
