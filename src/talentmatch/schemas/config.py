"""Pydantic configuration schema for CLI YAML input."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from ..core.scoring import get_preset


class EngineConfig(BaseModel):
    preset: Literal["profile", "requirement"] = "profile"
    weights: dict[str, float] | None = None
    default_importance: int | None = Field(default=None, ge=1, le=4)
    relevance_cutoff: float | None = None

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def check_weight_components(self) -> EngineConfig:
        if self.weights:
            unknown = sorted(set(self.weights) - get_preset(self.preset).components)
            if unknown:
                raise ValueError(
                    f"weights for preset {self.preset!r} cannot include {unknown}"
                )
        return self


class MatcherConfig(BaseModel):
    skills: dict[str, Any] | None = None
    interests: dict[str, Any] | None = None
    location: dict[str, Any] | None = None
    experience: dict[str, Any] | None = None

    model_config = ConfigDict(extra="forbid")


class RecommendConfig(BaseModel):
    limit: int | None = Field(default=None, ge=0)

    model_config = ConfigDict(extra="forbid")


class AppConfig(BaseModel):
    engine: EngineConfig = Field(default_factory=EngineConfig)
    matchers: MatcherConfig = Field(default_factory=MatcherConfig)
    recommend: RecommendConfig = Field(default_factory=RecommendConfig)

    model_config = ConfigDict(extra="forbid")

    def to_settings(self) -> dict[str, Any]:
        settings: dict[str, Any] = {"engine": self.engine.model_dump(exclude_none=True)}
        matcher_settings = self.matchers.model_dump(exclude_none=True)
        if matcher_settings:
            settings["matchers"] = matcher_settings
        recommend_settings = self.recommend.model_dump(exclude_none=True)
        if recommend_settings:
            settings["recommend"] = recommend_settings
        return settings


def load_config(raw: Any) -> AppConfig:
    if not isinstance(raw, dict):
        raise ValidationError.from_exception_data(
            "AppConfig",
            [{"type": "dict_type", "loc": ("config",), "input": raw}],
        )
    return AppConfig.model_validate(raw)
