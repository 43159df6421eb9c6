from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings"""

    # API Settings
    ALLOWED_HOSTS: List[str] = ["*"]
    LOG_LEVEL: str = "INFO"

    # Remote sentiment service
    API_URL: str = "http://localhost:8080"
    REQUEST_TIMEOUT: Optional[float] = None
    RAISE_FOR_STATUS: bool = False

    # UI behaviour
    DISCARD_STALE_RESPONSES: bool = False
    QUICK_STATS_SIZES: List[int] = [10, 50, 100]

    # Headline animation
    TYPEWRITER_ENABLED: bool = True
    TYPEWRITER_WORDS: List[str] = ["HackathonONE", "HackaOnes", "Alura Latam", "Oracle", "2025"]

    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=True,
        extra='ignore'
    )


# Initialize settings
settings = Settings()
