"""
Async clients for the language-model servers behind the chat assistant.

Two server flavours are supported:
  - Ollama, through its native HTTP API (/api/chat, /api/tags, /api/pull),
    called with httpx.
  - LM Studio (or any OpenAI-compatible server), through the OpenAI SDK
    pointed at the server's /v1 base URL.

Both raise the same exception family so callers can tell "server not
running" apart from "model not downloaded" and from a generic failure.
"""
import asyncio
import logging
from typing import Dict, List, Optional

import httpx
import openai

logger = logging.getLogger(__name__)

# Dashboard model keys -> Ollama model tags
MODEL_MAP: Dict[str, str] = {
    "mistral": "mistral:latest",
    "llama3.1": "llama3.1:latest",
    "phi3": "phi3:latest",
    "gemma2": "gemma2:latest",
    "qwen2.5": "qwen2.5:latest",
}
DEFAULT_OLLAMA_MODEL = MODEL_MAP["mistral"]

Message = Dict[str, str]  # {"role": "system"|"user"|"assistant", "content": "..."}


# ── Exceptions ────────────────────────────────────────────────────────────────

class LLMError(RuntimeError):
    """The model server answered with an error."""


class LLMUnreachableError(LLMError):
    """The model server could not be reached (not running, wrong host)."""


class LLMTimeoutError(LLMError):
    """The model server did not answer within the configured timeout."""


class ModelNotFoundError(LLMError):
    """The requested model is not installed on the server."""

    def __init__(self, model: str, detail: str = ""):
        super().__init__(f"Model not found: {model}" + (f" ({detail})" if detail else ""))
        self.model = model


def resolve_model(name: Optional[str]) -> str:
    """Map a dashboard model key to its Ollama tag, defaulting to mistral."""
    return MODEL_MAP.get(name or "", DEFAULT_OLLAMA_MODEL)


def base_url_for(host_or_url: str) -> str:
    """Accept "host:port" or a full URL; return a URL without trailing slash."""
    url = host_or_url.strip().rstrip("/")
    if not url.startswith(("http://", "https://")):
        url = f"http://{url}"
    return url


# ── Ollama ────────────────────────────────────────────────────────────────────

class OllamaClient:
    """Thin async wrapper over the Ollama HTTP API."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 120.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url_for(base_url)
        self.timeout = timeout
        self._transport = transport

    async def chat(self, model: str, messages: List[Message]) -> str:
        """
        Send a conversation and return the assistant's reply text.
        messages is a list of {"role": ..., "content": ...} dicts.
        """
        response = await self._request(
            "POST",
            "/api/chat",
            json={"model": model, "messages": messages, "stream": False},
        )
        if response.status_code == 404 or (
            response.is_error and "not found" in response.text
        ):
            raise ModelNotFoundError(model, response.text)
        if response.is_error:
            raise LLMError(response.text or f"HTTP {response.status_code}")

        message = response.json().get("message")
        if isinstance(message, str):
            return message
        return (message or {}).get("content") or "No response"

    async def list_models(self) -> List[str]:
        """Names of the models installed on the server, e.g. "mistral:latest"."""
        response = await self._request("GET", "/api/tags")
        if response.is_error:
            raise LLMError(f"Failed to list models: HTTP {response.status_code}")
        return [m["name"] for m in response.json().get("models", []) if "name" in m]

    async def pull(self, model: str) -> None:
        """Download a model. Blocks until the server reports completion."""
        response = await self._request(
            "POST",
            "/api/pull",
            json={"name": model, "stream": False},
            timeout=None,
        )
        if response.is_error:
            raise LLMError(f"Failed to pull {model}: {response.text}")
        logger.info("Pulled model %s", model)

    async def _request(self, method: str, path: str, **kwargs) -> httpx.Response:
        kwargs.setdefault("timeout", self.timeout)
        try:
            async with httpx.AsyncClient(
                base_url=self.base_url, transport=self._transport
            ) as client:
                return await client.request(method, path, **kwargs)
        except httpx.TimeoutException as exc:
            raise LLMTimeoutError(f"{self.base_url}{path} timed out") from exc
        except httpx.TransportError as exc:
            raise LLMUnreachableError(f"Cannot connect to {self.base_url}: {exc}") from exc


# ── OpenAI-compatible (LM Studio) ─────────────────────────────────────────────

class OpenAICompatibleClient:
    """Chat through an OpenAI-compatible server such as LM Studio."""

    def __init__(self, base_url: str, timeout: float = 120.0, api_key: str = "lm-studio"):
        self.base_url = base_url_for(base_url)
        self._client = openai.OpenAI(
            base_url=f"{self.base_url}/v1",
            api_key=api_key,
            timeout=timeout,
            max_retries=0,
        )

    async def chat(self, model: str, messages: List[Message]) -> str:
        """
        Send a conversation and return the reply text.
        Runs the sync SDK call in a thread pool executor.
        """
        loop = asyncio.get_event_loop()
        return await loop.run_in_executor(None, lambda: self._chat_sync(model, messages))

    async def list_models(self) -> List[str]:
        """Identifiers of the models currently loaded on the server."""
        loop = asyncio.get_event_loop()
        return await loop.run_in_executor(None, self._list_models_sync)

    def _chat_sync(self, model: str, messages: List[Message]) -> str:
        try:
            response = self._client.chat.completions.create(model=model, messages=messages)
        except openai.NotFoundError as exc:
            raise ModelNotFoundError(model, str(exc)) from exc
        except openai.APIError as exc:
            raise _translate_openai_error(exc, self.base_url) from exc
        return response.choices[0].message.content or "No response"

    def _list_models_sync(self) -> List[str]:
        try:
            return [m.id for m in self._client.models.list().data]
        except openai.APIError as exc:
            raise _translate_openai_error(exc, self.base_url) from exc


def _translate_openai_error(exc: openai.APIError, base_url: str) -> LLMError:
    if isinstance(exc, openai.APITimeoutError):
        return LLMTimeoutError(f"{base_url} timed out")
    if isinstance(exc, openai.APIConnectionError):
        return LLMUnreachableError(f"Cannot connect to {base_url}: {exc}")
    return LLMError(str(exc))


# ── Factories ─────────────────────────────────────────────────────────────────

def build_chat_client(
    local_url: str,
    timeout: float,
    remote_url: Optional[str] = None,
    remote_server_type: Optional[str] = None,
):
    """
    Pick the client for a chat turn: the remote server when a remote URL is
    given (LM Studio or Ollama), otherwise the local Ollama instance.
    """
    if remote_url:
        if remote_server_type == "lmstudio":
            return OpenAICompatibleClient(remote_url, timeout=timeout)
        return OllamaClient(remote_url, timeout=timeout)
    return OllamaClient(local_url, timeout=timeout)


async def detect_remote_model(
    remote_url: str, remote_server_type: Optional[str], timeout: float = 10.0
) -> Optional[str]:
    """Name of the first model served by a remote host, or None if it has none."""
    client = build_chat_client(remote_url, timeout, remote_url, remote_server_type)
    models = await client.list_models()
    return models[0] if models else None
