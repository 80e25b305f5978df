"""Dependency injection container for the matching engine."""

from __future__ import annotations

from dataclasses import replace

from dependency_injector import containers, providers

from .core import (
    ExperienceMatchConfig,
    ExperienceMatcher,
    InterestMatchConfig,
    InterestMatcher,
    LocationMatchConfig,
    LocationMatcher,
    MatchAnalytics,
    MatchingEngine,
    PROFILE_WEIGHTED,
    Recommender,
    SkillMatchConfig,
    SkillMatcher,
    get_preset,
)
from .pipeline import MatchingPipeline, RecordLoader


class MatchingContainer(containers.DeclarativeContainer):
    """Dependency-injector container definition."""

    config = providers.Configuration()

    preset = providers.Object(PROFILE_WEIGHTED)

    # None lets the engine derive skill and interest matchers from the preset.
    skill_matcher = providers.Object(None)
    interest_matcher = providers.Object(None)
    location_matcher = providers.Singleton(LocationMatcher)
    experience_matcher = providers.Singleton(ExperienceMatcher)

    engine = providers.Factory(
        MatchingEngine,
        preset=preset,
        weights=config.engine.weights,
        skill_matcher=skill_matcher,
        interest_matcher=interest_matcher,
        location_matcher=location_matcher,
        experience_matcher=experience_matcher,
    )

    recommender = providers.Factory(
        Recommender,
        engine=engine,
        default_limit=config.recommend.limit,
    )

    analytics = providers.Factory(MatchAnalytics, engine=engine)

    record_loader = providers.Singleton(RecordLoader)

    pipeline = providers.Factory(
        MatchingPipeline,
        recommender=recommender,
        analytics=analytics,
        loader=record_loader,
    )


def create_container(*, settings: dict | None = None) -> MatchingContainer:
    """Instantiate container with optional overrides."""

    container = MatchingContainer()

    if not settings:
        return container

    container.config.from_dict(settings)

    engine_settings = settings.get("engine", {}) if isinstance(settings, dict) else {}
    preset = get_preset(engine_settings.get("preset", PROFILE_WEIGHTED.name))
    if engine_settings.get("default_importance") is not None:
        preset = replace(preset, default_importance=engine_settings["default_importance"])
    if "relevance_cutoff" in engine_settings:
        preset = replace(preset, relevance_cutoff=engine_settings["relevance_cutoff"])
    container.preset.override(providers.Object(preset))

    matcher_settings = settings.get("matchers", {}) if isinstance(settings, dict) else {}

    if "skills" in matcher_settings:
        skill_config = SkillMatchConfig(
            **{"mode": preset.skill_match_mode, **matcher_settings["skills"]}
        )
        container.skill_matcher.override(providers.Singleton(SkillMatcher, config=skill_config))

    if "interests" in matcher_settings:
        interest_config = InterestMatchConfig(
            **{"default_importance": preset.default_importance, **matcher_settings["interests"]}
        )
        container.interest_matcher.override(
            providers.Singleton(InterestMatcher, config=interest_config)
        )

    if "location" in matcher_settings:
        location_config = LocationMatchConfig(**matcher_settings["location"])
        container.location_matcher.override(
            providers.Singleton(LocationMatcher, config=location_config)
        )

    if "experience" in matcher_settings:
        experience_config = ExperienceMatchConfig(**matcher_settings["experience"])
        container.experience_matcher.override(
            providers.Singleton(ExperienceMatcher, config=experience_config)
        )

    return container
