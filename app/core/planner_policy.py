"""일정 계획/수정 엔진이 공유하는 정책 값 모듈."""

from __future__ import annotations

from dataclasses import dataclass

from app.core.config import Settings, get_settings

_DEFAULT_MIN_CONFIDENCE = 0.4
_DEFAULT_MAX_HOURS_PER_DAY = 7.0
_DEFAULT_ACTIVITY_HOURS = 2
_DEFAULT_DELAY_DROP_MINUTES = 120
_DEFAULT_DELAY_MIN_STOPS = 2
_DEFAULT_LOW_CONFIDENCE_THRESHOLD = 0.5
_DEFAULT_PARTIAL_CONTENT_MAX_RESULTS = 1
_DEFAULT_LIKED_CATEGORY_MULTIPLIER = 1.15
_DEFAULT_VISITED_BOOST = 0.25


@dataclass(frozen=True, slots=True)
class PlannerPolicyConfig:
    """일정 엔진 정책 설정.

    Fields:
        min_confidence: 스케줄링 후보가 되기 위한 최소 신뢰도
        max_hours_per_day: 하루 일정에 허용되는 총 활동 시간
        default_activity_hours: 소요 시간을 해석할 수 없을 때의 기본값
        delay_drop_minutes: 이 값을 초과하는 지연이면 마지막 장소를 제외
        delay_min_stops: 지연 처리 시 장소 수가 이 값보다 많아야 제외
        low_confidence_threshold: 최상위 결과가 이 값 미만이면 LOW_CONFIDENCE
        partial_content_max_results: 결과 수가 이 값 이하이면 PARTIAL_CONTENT
        liked_category_multiplier: 선호 카테고리 신뢰도 가중치
        visited_boost: 이전 방문/직접 추가 장소 신뢰도 가산점
    """

    min_confidence: float = _DEFAULT_MIN_CONFIDENCE
    max_hours_per_day: float = _DEFAULT_MAX_HOURS_PER_DAY
    default_activity_hours: int = _DEFAULT_ACTIVITY_HOURS
    delay_drop_minutes: int = _DEFAULT_DELAY_DROP_MINUTES
    delay_min_stops: int = _DEFAULT_DELAY_MIN_STOPS
    low_confidence_threshold: float = _DEFAULT_LOW_CONFIDENCE_THRESHOLD
    partial_content_max_results: int = _DEFAULT_PARTIAL_CONTENT_MAX_RESULTS
    liked_category_multiplier: float = _DEFAULT_LIKED_CATEGORY_MULTIPLIER
    visited_boost: float = _DEFAULT_VISITED_BOOST


def build_planner_policy(settings: Settings | None = None) -> PlannerPolicyConfig:
    """설정값으로 일정 엔진 정책 구성을 만듭니다."""
    resolved_settings = settings or get_settings()
    return PlannerPolicyConfig(
        min_confidence=float(resolved_settings.PLANNER_MIN_CONFIDENCE),
        max_hours_per_day=float(resolved_settings.PLANNER_MAX_HOURS_PER_DAY),
        default_activity_hours=max(1, int(resolved_settings.PLANNER_DEFAULT_ACTIVITY_HOURS)),
        delay_drop_minutes=max(0, int(resolved_settings.PLANNER_DELAY_DROP_MINUTES)),
        delay_min_stops=max(0, int(resolved_settings.PLANNER_DELAY_MIN_STOPS)),
        low_confidence_threshold=float(resolved_settings.PLANNER_LOW_CONFIDENCE_THRESHOLD),
        partial_content_max_results=max(0, int(resolved_settings.PLANNER_PARTIAL_CONTENT_MAX_RESULTS)),
        liked_category_multiplier=max(0.0, float(resolved_settings.PLANNER_LIKED_CATEGORY_MULTIPLIER)),
        visited_boost=max(0.0, float(resolved_settings.PLANNER_VISITED_BOOST)),
    )


def resolve_planner_policy(config: PlannerPolicyConfig | None) -> PlannerPolicyConfig:
    """명시된 구성이 없으면 설정 기반 구성을 반환합니다."""
    return config if config is not None else build_planner_policy()
