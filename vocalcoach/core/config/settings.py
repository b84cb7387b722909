# File: vocalcoach/core/config/settings.py

import os
from pathlib import Path


class Settings:
    # --- Paths ---
    # vocalcoach/core/config/settings.py -> config -> core -> vocalcoach -> ROOT
    BASE_DIR: Path = Path(__file__).resolve().parent.parent.parent.parent
    DATA_DIR: Path = BASE_DIR / "data"
    RECORDINGS_DIR: Path = Path(os.getenv("RECORDINGS_DIR", str(DATA_DIR / "recordings")))

    # --- Audio ---
    # Inline audio payloads above this size are rejected before any model call
    MAX_AUDIO_BYTES: int = int(os.getenv("MAX_AUDIO_BYTES", str(19 * 1024 * 1024)))

    # --- Database ---
    POSTGRES_USER: str = os.getenv("POSTGRES_USER", "postgres")
    POSTGRES_PASSWORD: str = os.getenv("POSTGRES_PASSWORD", "password")
    POSTGRES_SERVER: str = os.getenv("POSTGRES_SERVER", "localhost")
    POSTGRES_PORT: str = os.getenv("POSTGRES_PORT", "5432")
    POSTGRES_DB: str = os.getenv("POSTGRES_DB", "vocalcoach_db")

    @property
    def DATABASE_URL(self) -> str:
        if os.getenv("USE_SQLITE", "false").lower() == "true":
            return "sqlite:///./vocalcoach.db"

        return f"postgresql://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}@{self.POSTGRES_SERVER}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"

    # --- Generation Backend ---
    # "gemini" (hosted) or "local" (Whisper + Qwen on this machine)
    GENERATION_BACKEND: str = os.getenv("GENERATION_BACKEND", "gemini")

    GEMINI_API_KEY: str = os.getenv("GEMINI_API_KEY", "")
    GEMINI_TRANSCRIPTION_MODEL: str = os.getenv("GEMINI_TRANSCRIPTION_MODEL", "gemini-2.0-flash")
    GEMINI_ANALYSIS_MODEL: str = os.getenv("GEMINI_ANALYSIS_MODEL", "gemini-2.5-pro")

    # --- Local Model Configuration ---
    WHISPER_MODEL_NAME: str = os.getenv("WHISPER_MODEL_NAME", "large-v3")
    WHISPER_DEVICE: str = "cuda" if os.getenv("USE_CUDA", "true").lower() == "true" else "cpu"
    QWEN_MODEL_PATH: str = os.getenv("QWEN_MODEL_PATH", "Qwen/Qwen2.5-7B-Instruct")

    def ensure_dirs(self):
        """Creates necessary data directories if they don't exist."""
        self.DATA_DIR.mkdir(parents=True, exist_ok=True)
        self.RECORDINGS_DIR.mkdir(parents=True, exist_ok=True)


settings = Settings()
