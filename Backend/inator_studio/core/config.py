# inator_studio/core/config.py
"""
Application configuration - single source of truth for all settings.

Settings are built once at process start via load_settings() and handed
to the components that need them. Nothing here is a module-level singleton.
"""
import os
from pathlib import Path
from dataclasses import dataclass, field
from typing import List, Optional
from dotenv import load_dotenv


BACKEND_DIR = Path(__file__).parent.parent.parent
PROJECT_ROOT = BACKEND_DIR.parent


def _optional_float(name: str) -> Optional[float]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    return float(raw)


def _split_origins(raw: str) -> List[str]:
    if raw.strip() == "*":
        return ["*"]
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


@dataclass
class LLMSettings:
    """Generation provider configuration."""
    provider: str = "gemini"
    gemini_api_key: Optional[str] = field(default_factory=lambda: os.getenv("GEMINI_API_KEY") or None)
    default_model: str = field(default_factory=lambda: os.getenv("DEFAULT_LLM_MODEL", "gemini-3-flash-preview"))
    api_base: str = field(default_factory=lambda: os.getenv(
        "GEMINI_API_BASE",
        "https://generativelanguage.googleapis.com/v1beta/models",
    ))
    temperature: float = field(default_factory=lambda: float(os.getenv("LLM_TEMPERATURE", "0.9")))
    max_tokens: int = field(default_factory=lambda: int(os.getenv("LLM_MAX_TOKENS", "256")))
    # None = wait as long as the provider takes
    timeout_seconds: Optional[float] = field(default_factory=lambda: _optional_float("LLM_TIMEOUT_SECONDS"))

    @property
    def configured(self) -> bool:
        return bool(self.gemini_api_key)


@dataclass
class StorageSettings:
    """Record store configuration."""
    # Point STORAGE_DIR at a mounted volume on hosts with ephemeral disks
    storage_dir: Path = field(default_factory=lambda: Path(
        os.getenv("STORAGE_DIR") or str(PROJECT_ROOT / "storage")
    ))


@dataclass
class PathSettings:
    """Path configuration."""
    frontend_index: Path = field(default_factory=lambda: Path(os.getenv(
        "FRONTEND_INDEX_PATH",
        str(PROJECT_ROOT / "Frontend" / "index.html")
    )))


@dataclass
class Settings:
    """Main application settings."""
    llm: LLMSettings = field(default_factory=LLMSettings)
    storage: StorageSettings = field(default_factory=StorageSettings)
    paths: PathSettings = field(default_factory=PathSettings)
    port: int = field(default_factory=lambda: int(os.getenv("PORT", 3000)))
    debug: bool = field(default_factory=lambda: os.getenv("DEBUG", "false").lower() == "true")
    # Comma-separated list in CORS_ORIGINS; "*" allows any origin
    cors_origins: List[str] = field(default_factory=lambda: _split_origins(os.getenv("CORS_ORIGINS", "*")))


def load_settings(env_file: Optional[str] = None) -> Settings:
    """Load .env (if present) and build a fresh Settings object."""
    load_dotenv(env_file)
    return Settings()
