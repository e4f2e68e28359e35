"""
Configuration management for PivotKarir.

Uses Pydantic Settings for type-safe configuration with environment variable support.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class MLSettings(BaseSettings):
    """Embedding model configuration."""

    model_config = SettingsConfigDict(env_prefix="ML_")

    # Embedding model
    embedding_model: str = "sentence-transformers/all-MiniLM-L6-v2"
    embedding_dimension: int = 384

    # Pooling/normalization requested from the model on every embed call
    pooling: Literal["mean"] = "mean"
    normalize: bool = True

    # Device settings
    device: Literal["cpu", "cuda", "mps", "auto"] = "auto"

    # Model cache
    cache_directory: Path | None = None

    @field_validator("device")
    @classmethod
    def validate_device(cls, v: str) -> str:
        """Auto-detect device if set to auto."""
        if v == "auto":
            try:
                import torch

                if torch.cuda.is_available():
                    return "cuda"
                elif torch.backends.mps.is_available():
                    return "mps"
            except ImportError:
                pass
            return "cpu"
        return v

    @field_validator("normalize")
    @classmethod
    def validate_normalize(cls, v: bool) -> bool:
        """Similarity scores assume unit-length embeddings."""
        if not v:
            raise ValueError("ML_NORMALIZE must stay enabled")
        return v


class MatchingSettings(BaseSettings):
    """Match level thresholds, in integer percent."""

    model_config = SettingsConfigDict(env_prefix="MATCH_")

    high_threshold: int = Field(default=70, ge=0, le=100)
    medium_threshold: int = Field(default=50, ge=0, le=100)

    @field_validator("medium_threshold")
    @classmethod
    def validate_order(cls, v: int, info: ValidationInfo) -> int:
        high = info.data.get("high_threshold")
        if high is not None and v > high:
            raise ValueError("medium_threshold cannot exceed high_threshold")
        return v


class ProfileSettings(BaseSettings):
    """Profile document loading limits."""

    model_config = SettingsConfigDict(env_prefix="PROFILE_")

    max_file_size_bytes: int = 1024 * 1024  # 1MB
    supported_formats: tuple[str, ...] = (".json",)


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(env_prefix="LOG_")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: str = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}"
    file_path: Path = Path("logs") / "pivotkarir.log"
    rotation: str = "10 MB"
    retention: str = "30 days"
    console_output: bool = True
    file_output: bool = True


class AppSettings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="APP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application metadata
    name: str = "PivotKarir"
    version: str = "0.1.0"
    description: str = "Semantic candidate-to-recruiter matching"
    debug: bool = False

    # Environment
    environment: Literal["development", "production", "testing"] = "development"

    # Nested settings
    ml: MLSettings = Field(default_factory=MLSettings)
    matching: MatchingSettings = Field(default_factory=MatchingSettings)
    profiles: ProfileSettings = Field(default_factory=ProfileSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


# Global settings instance (singleton pattern)
_settings: AppSettings | None = None


def get_settings() -> AppSettings:
    """Get or create the global settings instance."""
    global _settings
    if _settings is None:
        _settings = AppSettings()
    return _settings


def reload_settings() -> AppSettings:
    """Force reload settings from environment."""
    global _settings
    _settings = AppSettings()
    return _settings
