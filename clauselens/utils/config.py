from __future__ import annotations
import os
from dataclasses import dataclass
from typing import Optional
from dotenv import load_dotenv

@dataclass(frozen=True)
class AppConfig:
    google_api_key: Optional[str] = None
    model_name: str = "gemini-1.5-flash"
    analysis_temperature: float = 0.2
    analysis_max_tokens: int = 2048
    chat_temperature: float = 0.3
    chat_max_tokens: int = 512
    max_upload_mb: int = 10
    log_level: str = "INFO"

    @property
    def has_api_key(self) -> bool:
        return bool(self.google_api_key and self.google_api_key.strip())

    @classmethod
    def from_env(cls) -> "AppConfig":
        load_dotenv()
        return cls(
            google_api_key=os.getenv("GOOGLE_API_KEY") or None,
            model_name=os.getenv("GEMINI_MODEL", "gemini-1.5-flash"),
            analysis_temperature=float(os.getenv("ANALYSIS_TEMPERATURE", "0.2")),
            analysis_max_tokens=int(os.getenv("ANALYSIS_MAX_TOKENS", "2048")),
            chat_temperature=float(os.getenv("CHAT_TEMPERATURE", "0.3")),
            chat_max_tokens=int(os.getenv("CHAT_MAX_TOKENS", "512")),
            max_upload_mb=int(os.getenv("MAX_UPLOAD_MB", "10")),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )
