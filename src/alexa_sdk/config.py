"""Application configuration via environment variables."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Hosting settings loaded from environment variables."""

    # Application
    environment: str = "development"
    debug: bool = False
    service_name: str = "alexa-skill"
    log_level: str = "INFO"

    # Reference skill
    skill_name: str = "Hello World"

    class Config:
        env_prefix = "ALEXA_SDK_"
        case_sensitive = False


settings = Settings()
