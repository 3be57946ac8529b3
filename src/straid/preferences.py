"""
Dashboard preferences with JSON persistence on disk.

Preferences are an explicit object: load it once, pass it to whatever needs
it, save it back after a change. A missing or unreadable file yields the
defaults rather than an error.
"""
import json
import logging
from datetime import date
from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, ValidationError

logger = logging.getLogger(__name__)

Language = Literal["en", "fr"]
Theme = Literal["light", "dark"]
MapProvider = Literal["leaflet", "maplibre"]
AIModel = Literal["mistral", "llama3.1", "phi3", "gemma2", "qwen2.5"]
AIInstanceType = Literal["local", "remote"]
RemoteServerType = Literal["ollama", "lmstudio"]


class Preferences(BaseModel):
    language: Language = "en"
    theme: Theme = "light"
    map_provider: MapProvider = "leaflet"
    ai_model: AIModel = "mistral"
    ai_instance_type: AIInstanceType = "local"
    ai_remote_url: Optional[str] = None  # "host:port", no scheme
    remote_server_type: RemoteServerType = "ollama"
    remote_model_name: Optional[str] = None
    start_date: Optional[date] = None


def load_preferences(path: Path) -> Preferences:
    """Read preferences from `path`, falling back to defaults."""
    if not path.exists():
        return Preferences()
    try:
        return Preferences.model_validate(json.loads(path.read_text(encoding="utf-8")))
    except (OSError, ValueError, ValidationError) as exc:
        logger.warning("Ignoring unreadable preferences at %s: %s", path, exc)
        return Preferences()


def save_preferences(preferences: Preferences, path: Path) -> None:
    """Write preferences as JSON, creating the parent directory if needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(preferences.model_dump_json(indent=2), encoding="utf-8")
