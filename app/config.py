"""
config.py — All application settings loaded from environment variables.

Using pydantic-settings means:
- Every setting is type-validated at startup
- Defaults are documented alongside the setting
- Pointing the service at a different profile document = one env var
"""
from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # ── Profile document ──────────────────────────────────────────────────────
    profile_path: str = "./data/profile.json"

    # ── Response cache ────────────────────────────────────────────────────────
    cache_ttl_seconds: float = 300.0   # 5 minutes
    cache_max_entries: int = 50

    # ── Conversation state ────────────────────────────────────────────────────
    context_max_topics: int = 10
    history_max_messages: int = 12

    # ── Response selection ────────────────────────────────────────────────────
    max_fragments: int = 5            # top-N extracted sections per answer
    max_question_chars: int = 2000

    # ── Optional hosted LLM (Ollama-compatible) ───────────────────────────────
    llm_enabled: bool = False
    ollama_base_url: str = "http://localhost:11434"
    ollama_llm_model: str = "llama3.2:3b"
    llm_max_tokens: int = 400
    llm_temperature: float = 0.7      # conversational, not analytical
    llm_timeout_seconds: float = 60.0

    # ── App ───────────────────────────────────────────────────────────────────
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Cached settings instance — reads .env once at startup.
    Use get_settings() everywhere instead of instantiating Settings() directly.
    """
    return Settings()
