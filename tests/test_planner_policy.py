"""일정 엔진 정책 설정 테스트."""

from app.core.config import Settings
from app.core.planner_policy import PlannerPolicyConfig, build_planner_policy, resolve_planner_policy


def test_build_planner_policy_reads_settings() -> None:
    settings = Settings(
        PLANNER_MIN_CONFIDENCE=0.3,
        PLANNER_MAX_HOURS_PER_DAY=8,
        PLANNER_DELAY_DROP_MINUTES=90,
        PLANNER_LOW_CONFIDENCE_THRESHOLD=0.6,
    )

    policy = build_planner_policy(settings)

    assert policy.min_confidence == 0.3
    assert policy.max_hours_per_day == 8.0
    assert policy.delay_drop_minutes == 90
    assert policy.low_confidence_threshold == 0.6


def test_settings_clamp_out_of_range_thresholds() -> None:
    settings = Settings(
        PLANNER_MIN_CONFIDENCE=1.7,
        PLANNER_LOW_CONFIDENCE_THRESHOLD="not-a-number",
        PLANNER_MAX_HOURS_PER_DAY=0,
    )

    assert settings.PLANNER_MIN_CONFIDENCE == 1.0
    assert settings.PLANNER_LOW_CONFIDENCE_THRESHOLD == 0.5
    assert settings.PLANNER_MAX_HOURS_PER_DAY == 1.0


def test_resolve_planner_policy_prefers_explicit_config() -> None:
    explicit = PlannerPolicyConfig(max_hours_per_day=5.0)

    assert resolve_planner_policy(explicit) is explicit
