"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

INFERENCE_BACKENDS = frozenset({"local", "hosted"})


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    inference_backend: str = "local"
    text_model: str = "typeform/distilbert-base-uncased-mnli"
    image_model: str = "google/vit-base-patch16-224"
    image_top_k: int = 5
    hf_api_token: str | None = None
    hf_inference_url: str = "https://router.huggingface.co/hf-inference/models"
    inference_timeout_seconds: float = 30
    debug: bool = False
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_backend(raw: str | None) -> str:
    """Normalize the inference backend name."""
    cleaned = (raw or "").strip().lower()
    if not cleaned:
        return "local"
    if cleaned not in INFERENCE_BACKENDS:
        raise ValueError(f"Unknown inference backend: {raw}")
    return cleaned
