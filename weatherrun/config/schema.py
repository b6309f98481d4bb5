"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field

from weatherrun.config.defaults import (
    DEFAULT_RUN_HOUR,
    DEFAULT_RUN_MINUTE,
    VISUAL_CROSSING_BASE_URL,
)


class ProviderConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = VISUAL_CROSSING_BASE_URL
    api_key: str = ""
    timeout_seconds: float = Field(default=30.0, gt=0.0)


class PlannerConfig(BaseModel):
    model_config = {"extra": "forbid"}

    ideal_feelslike_f: float = 55.0
    precip_weight: float = Field(default=0.5, ge=0.0)
    window_days: int = Field(default=5, ge=1, le=15)


class RunTimeConfig(BaseModel):
    model_config = {"extra": "forbid"}

    hour: int = Field(default=DEFAULT_RUN_HOUR, ge=0, le=23)
    minute: int = Field(default=DEFAULT_RUN_MINUTE, ge=0, le=59)
    location: str = ""


class AppConfig(BaseModel):
    model_config = {"extra": "forbid"}

    provider: ProviderConfig = ProviderConfig()
    planner: PlannerConfig = PlannerConfig()
    defaults: RunTimeConfig = RunTimeConfig()
