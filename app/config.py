"""
Application configuration using Pydantic Settings.
Loads from environment variables or .env file.
"""

from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from msnet_router.config import DispatcherConfig

# Project root directory (where this repo is cloned)
_PROJECT_ROOT = Path(__file__).parent.parent


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        protected_namespaces=(),
    )

    # API Settings
    api_title: str = "MSNet Inference Service"
    api_version: str = "1.0.0"
    api_description: str = "Image classification with router-guided expert refinement"
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    debug: bool = False
    log_level: str = "INFO"

    # Models
    router_model_path: str = str(_PROJECT_ROOT / "models" / "router.pt")
    expert_model_dir: str = str(_PROJECT_ROOT / "models" / "experts")
    model_extension: str = ".pt"
    top_k: int = 2
    num_classes: Optional[int] = None
    fallback_on_expert_error: bool = True

    # Input tensor
    input_channels: int = 3
    input_height: int = 32
    input_width: int = 32

    # Device Settings
    use_cuda: bool = False
    device_id: int = 0
    num_threads: int = 1

    # Request Settings
    request_timeout_seconds: int = 30
    max_concurrent_requests: int = 1

    def to_dispatcher_config(self) -> DispatcherConfig:
        return DispatcherConfig(
            router_model_path=Path(self.router_model_path),
            expert_model_dir=Path(self.expert_model_dir),
            top_k=self.top_k,
            use_cuda=self.use_cuda,
            device_id=self.device_id,
            num_threads=self.num_threads,
            input_channels=self.input_channels,
            input_height=self.input_height,
            input_width=self.input_width,
            num_classes=self.num_classes,
            model_extension=self.model_extension,
            fallback_on_expert_error=self.fallback_on_expert_error,
        )


# Global settings instance
settings = Settings()
