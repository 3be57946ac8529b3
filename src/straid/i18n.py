"""
User-facing message catalogue for English and French.

Keys are members of MessageKey; each locale table maps a key to its text.
Lookups fall back to English, then to the key's own value.
"""
from enum import Enum
from typing import Dict, Mapping


class MessageKey(str, Enum):
    MONDAY = "calendar.monday"
    TUESDAY = "calendar.tuesday"
    WEDNESDAY = "calendar.wednesday"
    THURSDAY = "calendar.thursday"
    FRIDAY = "calendar.friday"
    SATURDAY = "calendar.saturday"
    SUNDAY = "calendar.sunday"
    WEEK_OF = "calendar.weekOf"

    LLM_NOT_RUNNING = "chat.llmNotRunning"
    MODEL_NEEDS_PULL = "chat.modelNeedsPull"
    LLM_TIMEOUT = "chat.timeout"
    LLM_FAILED = "chat.failed"
    MESSAGES_REQUIRED = "chat.messagesRequired"
    UNKNOWN_MODEL = "chat.unknownModel"
    DATA_UNAVAILABLE = "chat.dataUnavailable"

    STORE_UNAVAILABLE = "errors.storeUnavailable"
    ACTIVITY_NOT_FOUND = "errors.activityNotFound"


WEEKDAY_KEYS = [
    MessageKey.MONDAY,
    MessageKey.TUESDAY,
    MessageKey.WEDNESDAY,
    MessageKey.THURSDAY,
    MessageKey.FRIDAY,
    MessageKey.SATURDAY,
    MessageKey.SUNDAY,
]

DEFAULT_LANGUAGE = "en"

TRANSLATIONS: Dict[str, Dict[MessageKey, str]] = {
    "en": {
        MessageKey.MONDAY: "Monday",
        MessageKey.TUESDAY: "Tuesday",
        MessageKey.WEDNESDAY: "Wednesday",
        MessageKey.THURSDAY: "Thursday",
        MessageKey.FRIDAY: "Friday",
        MessageKey.SATURDAY: "Saturday",
        MessageKey.SUNDAY: "Sunday",
        MessageKey.WEEK_OF: "Week of",
        MessageKey.LLM_NOT_RUNNING: (
            "Cannot connect to the language model server. "
            "Please make sure Ollama is running (ollama serve)."
        ),
        MessageKey.MODEL_NEEDS_PULL: (
            "Model {model} needs to be downloaded. "
            "Please download it from Settings first."
        ),
        MessageKey.LLM_TIMEOUT: "The language model took too long to answer.",
        MessageKey.LLM_FAILED: "Failed to get a response from the language model: {detail}",
        MessageKey.MESSAGES_REQUIRED: "Messages array is required",
        MessageKey.UNKNOWN_MODEL: "Unknown model: {model}",
        MessageKey.DATA_UNAVAILABLE: (
            "You are StrAId, a running assistant. "
            "The training data is currently unavailable."
        ),
        MessageKey.STORE_UNAVAILABLE: "The activity database is unavailable.",
        MessageKey.ACTIVITY_NOT_FOUND: "Activity not found",
    },
    "fr": {
        MessageKey.MONDAY: "Lundi",
        MessageKey.TUESDAY: "Mardi",
        MessageKey.WEDNESDAY: "Mercredi",
        MessageKey.THURSDAY: "Jeudi",
        MessageKey.FRIDAY: "Vendredi",
        MessageKey.SATURDAY: "Samedi",
        MessageKey.SUNDAY: "Dimanche",
        MessageKey.WEEK_OF: "Semaine du",
        MessageKey.LLM_NOT_RUNNING: (
            "Impossible de se connecter au serveur de modèle. "
            "Veuillez démarrer Ollama d'abord (ollama serve)."
        ),
        MessageKey.MODEL_NEEDS_PULL: (
            "Le modèle {model} doit être téléchargé. "
            "Veuillez le télécharger depuis les paramètres d'abord."
        ),
        MessageKey.LLM_TIMEOUT: "Le modèle a mis trop de temps à répondre.",
        MessageKey.LLM_FAILED: "Échec de la réponse du modèle : {detail}",
        MessageKey.MESSAGES_REQUIRED: "La liste des messages est requise",
        MessageKey.UNKNOWN_MODEL: "Modèle inconnu : {model}",
        MessageKey.STORE_UNAVAILABLE: "La base d'activités est indisponible.",
        MessageKey.ACTIVITY_NOT_FOUND: "Activité introuvable",
    },
}


def translate(key: MessageKey, language: str = DEFAULT_LANGUAGE, **params: object) -> str:
    """
    Resolve `key` for `language`, formatting any `{name}` placeholders.

    Unknown languages and keys missing from a locale fall back to English.
    """
    table: Mapping[MessageKey, str] = TRANSLATIONS.get(language, {})
    text = table.get(key) or TRANSLATIONS[DEFAULT_LANGUAGE].get(key) or key.value
    return text.format(**params) if params else text
