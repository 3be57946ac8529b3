"""Preference read/write routes."""
from fastapi import APIRouter

from straid.config import get_settings
from straid.preferences import Preferences, load_preferences, save_preferences

router = APIRouter()


@router.get("/", response_model=Preferences)
def read_preferences():
    return load_preferences(get_settings().preferences_path)


@router.put("/", response_model=Preferences)
def write_preferences(preferences: Preferences):
    save_preferences(preferences, get_settings().preferences_path)
    return preferences
