"""Application configuration"""
import os
from dataclasses import dataclass


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes")


@dataclass
class AppConfig:
    """Application configuration - Single Source of Truth"""
    api_base_url: str = "http://127.0.0.1:8000"
    media_cache_dir: str = "data/media_cache"
    search_top_k: int = 3
    include_frame: bool = True
    duration_tolerance: float = 0.75  # seconds of container/encoder rounding
    request_timeout: float = 30.0
    ui_language: str = "en"
    
    @classmethod
    def from_env(cls) -> "AppConfig":
        """Builds the configuration from environment variables"""
        return cls(
            api_base_url=os.getenv("API_BASE_URL", "http://127.0.0.1:8000"),
            media_cache_dir=os.getenv("MEDIA_CACHE_DIR", "data/media_cache"),
            search_top_k=int(os.getenv("SEARCH_TOP_K", "3")),
            include_frame=_env_bool("INCLUDE_FRAME", "true"),
            duration_tolerance=float(os.getenv("DURATION_TOLERANCE", "0.75")),
            request_timeout=float(os.getenv("REQUEST_TIMEOUT", "30")),
            ui_language=os.getenv("UI_LANGUAGE", "en"),
        )


# Default configuration
default_config = AppConfig.from_env()
