from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    database_url: str = "sqlite:///./stryd_activities.db"
    ollama_api_url: str = "http://localhost:11434"
    llm_timeout_seconds: float = 120.0
    preferences_path: Path = Path.home() / ".straid" / "preferences.json"
    api_host: str = "127.0.0.1"
    api_port: int = 8000

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
