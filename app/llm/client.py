"""
llm/client.py — Optional rephrasing backend (Ollama-compatible /api/chat).

Only used when LLM_ENABLED=true. assistant.py treats every exception raised
here as "keep the rule-based answer", so nothing in this module retries.
"""
import httpx

from app.config import Settings, get_settings
from app.observability.logger import get_logger

logger = get_logger(__name__)

CHAT_PATH = "/api/chat"
REACHABILITY_TIMEOUT_SECONDS = 5.0


def _options(settings: Settings, temperature: float | None, max_tokens: int | None) -> dict:
    return {
        "temperature": settings.llm_temperature if temperature is None else temperature,
        "num_predict": settings.llm_max_tokens if max_tokens is None else max_tokens,
    }


def chat_completion(
    messages: list[dict],
    temperature: float | None = None,
    max_tokens: int | None = None,
) -> str:
    """
    Rephrase through the configured model; returns the reply text.

    Raises httpx.HTTPError on transport/status failures and ValueError when
    the body carries no message content.
    """
    settings = get_settings()
    body = {
        "model": settings.ollama_llm_model,
        "messages": messages,
        "stream": False,
        "options": _options(settings, temperature, max_tokens),
    }

    with httpx.Client(base_url=settings.ollama_base_url, timeout=settings.llm_timeout_seconds) as client:
        response = client.post(CHAT_PATH, json=body)
        response.raise_for_status()
        data = response.json()

    content = (data.get("message") or {}).get("content")
    if not isinstance(content, str):
        raise ValueError("chat response has no message content")

    logger.info("llm_rephrased", extra={
        "model": settings.ollama_llm_model,
        "messages": len(messages),
        "eval_count": data.get("eval_count"),
    })
    return content


def check_llm_reachable() -> bool:
    """True when the model server answers its root URL with 200."""
    settings = get_settings()
    try:
        with httpx.Client(timeout=REACHABILITY_TIMEOUT_SECONDS) as client:
            return client.get(settings.ollama_base_url).status_code == 200
    except httpx.HTTPError as e:
        logger.warning("llm_unreachable", extra={"url": settings.ollama_base_url, "error": str(e)})
        return False
