"""
StrAId chat relay routes.

Every chat turn is prefixed with a system prompt summarising the training
data, then forwarded to the configured model server. Failures are mapped to
distinct status codes so the dashboard can show a specific remedy:

    503  server not running        ({"llm_not_running": true})
    404  model not downloaded      ({"needs_pull": true, "model": ...})
    504  server timed out
    502  any other server error
"""
import logging
from typing import List, Literal, Optional

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from sqlmodel import Session

from straid.ai.llm_client import (
    MODEL_MAP,
    LLMError,
    LLMTimeoutError,
    LLMUnreachableError,
    ModelNotFoundError,
    OllamaClient,
    build_chat_client,
    detect_remote_model,
    resolve_model,
)
from straid.config import get_settings
from straid.db.engine import StoreUnavailableError, get_engine
from straid.i18n import MessageKey, translate
from straid.preferences import Language, RemoteServerType, load_preferences
from straid.prompts.chat_context import build_training_context

logger = logging.getLogger(__name__)

router = APIRouter()


class ChatMessage(BaseModel):
    role: Literal["user", "assistant"]
    content: str


class ChatRequest(BaseModel):
    messages: List[ChatMessage] = []
    model: Optional[str] = None
    remote_url: Optional[str] = None
    remote_server_type: Optional[RemoteServerType] = None


class ChatResponse(BaseModel):
    message: str


class PullRequest(BaseModel):
    model: str


class RemoteModelRequest(BaseModel):
    remote_url: str
    remote_server_type: RemoteServerType = "ollama"


def get_training_context() -> str:
    """Dependency: the system prompt, or a fallback when the store is down."""
    try:
        engine = get_engine()
    except StoreUnavailableError as exc:
        logger.error("Error getting training context: %s", exc)
        return translate(MessageKey.DATA_UNAVAILABLE)
    with Session(engine) as session:
        return build_training_context(session)


def get_language() -> Language:
    """Dependency: UI language from the saved preferences."""
    return load_preferences(get_settings().preferences_path).language


def _model_for(request: ChatRequest) -> str:
    if request.model in MODEL_MAP or not request.remote_url:
        return resolve_model(request.model)
    # Remote servers may serve models outside the dashboard's list
    return request.model or resolve_model(None)


def _error(status_code: int, message: str, **extra) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message, **extra})


@router.post("/", response_model=ChatResponse)
async def chat(
    request: ChatRequest,
    system_prompt: str = Depends(get_training_context),
    language: Language = Depends(get_language),
):
    """Relay one conversation turn to the model server."""
    if not request.messages:
        return _error(400, translate(MessageKey.MESSAGES_REQUIRED, language))

    settings = get_settings()
    model = _model_for(request)
    client = build_chat_client(
        settings.ollama_api_url,
        settings.llm_timeout_seconds,
        remote_url=request.remote_url,
        remote_server_type=request.remote_server_type,
    )
    messages = [{"role": "system", "content": system_prompt}] + [
        m.model_dump() for m in request.messages
    ]

    try:
        reply = await client.chat(model, messages)
    except LLMUnreachableError as exc:
        logger.error("Chat relay: server unreachable: %s", exc)
        return _error(503, translate(MessageKey.LLM_NOT_RUNNING, language), llm_not_running=True)
    except ModelNotFoundError as exc:
        logger.error("Chat relay: %s", exc)
        return _error(
            404,
            translate(MessageKey.MODEL_NEEDS_PULL, language, model=exc.model),
            needs_pull=True,
            model=exc.model,
        )
    except LLMTimeoutError as exc:
        logger.error("Chat relay: %s", exc)
        return _error(504, translate(MessageKey.LLM_TIMEOUT, language))
    except LLMError as exc:
        logger.error("Chat relay: server error: %s", exc)
        return _error(502, translate(MessageKey.LLM_FAILED, language, detail=str(exc)))

    return ChatResponse(message=reply)


@router.get("/models")
async def installed_models():
    """Dashboard model keys whose Ollama tag is installed locally."""
    settings = get_settings()
    client = OllamaClient(settings.ollama_api_url, timeout=settings.llm_timeout_seconds)
    try:
        installed = await client.list_models()
    except LLMUnreachableError:
        return JSONResponse(status_code=503, content={"models": [], "llm_not_running": True})
    except LLMError as exc:
        logger.error("Failed to list models: %s", exc)
        return JSONResponse(status_code=502, content={"models": [], "error": str(exc)})
    available = [
        key for key, tag in MODEL_MAP.items() if any(name.startswith(tag) for name in installed)
    ]
    return {"models": available}


@router.post("/models/pull")
async def pull_model(request: PullRequest):
    """Download one of the dashboard's models into the local Ollama."""
    tag = MODEL_MAP.get(request.model)
    if tag is None:
        raise HTTPException(
            status_code=400, detail=translate(MessageKey.UNKNOWN_MODEL, model=request.model)
        )
    settings = get_settings()
    client = OllamaClient(settings.ollama_api_url, timeout=settings.llm_timeout_seconds)
    try:
        await client.pull(tag)
    except LLMUnreachableError:
        return _error(503, translate(MessageKey.LLM_NOT_RUNNING), llm_not_running=True)
    except LLMError as exc:
        logger.error("Pull model error: %s", exc)
        return _error(502, f"Failed to pull model: {exc}")
    return {"success": True, "model": tag}


@router.post("/remote-model")
async def remote_model(request: RemoteModelRequest):
    """Detect the model served by a remote Ollama or LM Studio host."""
    settings = get_settings()
    try:
        name = await detect_remote_model(
            request.remote_url, request.remote_server_type, timeout=settings.llm_timeout_seconds
        )
    except LLMError as exc:
        logger.error("Remote model detection error: %s", exc)
        return _error(502, "Failed to connect to remote server")
    if name is None:
        return {
            "model_name": None,
            "server_type": request.remote_server_type,
            "error": "No model available on the remote server",
        }
    return {"model_name": name, "server_type": request.remote_server_type}
