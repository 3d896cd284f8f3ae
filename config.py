"""Configuration via pydantic-settings. Reads from .env or environment."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # ===== PROVIDER SELECTION =====
    # Choose which provider to use for each capability
    llm_provider: str = "gemini"  # gemini | openai_compat
    image_provider: str = "gemini"  # gemini
    speech_provider: str = "gemini"  # gemini

    # ===== GEMINI (Cloud text, image, speech) =====
    google_api_key: str = ""
    gemini_base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    metadata_model: str = "gemini-3-flash-preview"
    image_model: str = "gemini-2.5-flash-image"
    speech_model: str = "gemini-2.5-flash-preview-tts"
    speech_voice: str = "Kore"

    # ===== OPENAI-COMPATIBLE (vLLM, LM Studio, etc.) =====
    openai_compat_base_url: str = "http://localhost:8000/v1"
    openai_compat_model: str = "qwen2.5-14b"
    openai_compat_api_key: str = ""  # Optional, if server requires auth

    request_timeout: float = 60.0  # seconds, per remote call

    # ===== DASHBOARD =====
    default_topic: str = "Quantum Computing for Beginners"
    log_capacity: int = 10
    autopilot_interval: float = 7.0  # seconds between synthetic status entries

    # ===== SYSTEM =====
    log_level: str = "INFO"
    port: int = 8001


settings = Settings()
