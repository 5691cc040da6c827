from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import Field, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class OperationMode(str, Enum):
    DEVELOPMENT = "development"
    PRODUCTION = "production"


class ScoringConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="PS_SCORING_")

    min_score: float = Field(default=0.0)
    max_score: float = Field(default=10.0)

    kpi_blend: float = Field(default=0.7, ge=0.0, le=1.0)
    attendance_blend: float = Field(default=0.2, ge=0.0, le=1.0)
    feedback_blend: float = Field(default=0.1, ge=0.0, le=1.0)

    @field_validator("max_score")
    @classmethod
    def max_gte_min(cls, v: float, info: ValidationInfo) -> float:
        min_val = info.data.get("min_score", 0.0)
        if v < min_val:
            msg = "max_score must be >= min_score"
            raise ValueError(msg)
        return v


class ApiConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="PS_API_")

    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000, ge=1, le=65535)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="PS_",
        env_file=".env",
        env_file_encoding="utf-8",
    )

    mode: OperationMode = Field(default=OperationMode.DEVELOPMENT)
    output_dir: Path = Field(default=Path("outputs"))
    log_level: str = Field(default="INFO")

    scoring: ScoringConfig = Field(default_factory=ScoringConfig)
    api: ApiConfig = Field(default_factory=ApiConfig)

    def ensure_dirs(self) -> None:
        self.output_dir.mkdir(parents=True, exist_ok=True)
