from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings with environment variable support"""

    # Server Configuration
    port: int = 8000
    debug: bool = False
    log_level: str = "INFO"

    # Recipe page fetching
    fetch_timeout: float = 15.0
    user_agent: str = "RecipeBox/0.1 (+recipe import)"

    # Telemetry
    logfire_enabled: bool = False

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False  # Allow PORT or port


# Create singleton instance
settings = Settings()
