from typing import Literal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    openai_api_key: str = ""
    openai_model: str = "gpt-4o"
    embedding_model: str = "text-embedding-3-small"

    # Retrieval
    embedding_dim: int = 384
    embedding_timeout: float = 10.0  # seconds, per embedding call
    llm_timeout: float = 30.0
    chunk_max_words: int = 500
    retrieval_top_k: int = 2

    # Prompt context caps (characters of joined chunk text)
    question_context_chars: int = 2000
    feedback_context_chars: int = 1000

    max_upload_bytes: int = 2 * 1024 * 1024

    document_store: Literal["memory", "redis"] = "memory"
    redis_url: str = "redis://localhost:6379/0"
    document_ttl: int | None = None

    log_level: str = "INFO"

    model_config = {"env_prefix": "PREP_"}


settings = Settings()
