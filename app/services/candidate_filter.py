"""스케줄링 후보 장소 정제 서비스.

검색 결과 후보 중 좌표와 신뢰도 조건을 만족하는 장소만 남기고,
자유 텍스트 소요 시간을 시간 단위로 해석합니다.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable

from app.core.logger import get_logger
from app.core.planner_policy import PlannerPolicyConfig, resolve_planner_policy
from app.schemas.trip import TripDestination, UserPreferenceProfile

logger = get_logger(__name__)

_HALF_DAY_HOURS = 4
_FULL_DAY_HOURS = 8
_FIRST_INTEGER = re.compile(r"\d+")


@dataclass(slots=True)
class CandidateEntry:
    """스케줄링 호출 한 번 동안만 쓰는 후보 상태."""

    destination: TripDestination
    hours: int
    score: float
    index: int
    assigned: bool = False


def parse_duration_hours(duration: str | None, default_hours: int = 2) -> int:
    """소요 시간 텍스트를 시간 단위로 변환합니다.

    "half"가 포함되면 4시간, "full"이 포함되면 8시간, 그 외에는 처음 등장하는 정수를 사용하고
    정수가 없으면 `default_hours`를 반환합니다.
    """
    text = str(duration or "").lower()
    if "half" in text:
        return _HALF_DAY_HOURS
    if "full" in text:
        return _FULL_DAY_HOURS

    match = _FIRST_INTEGER.search(text)
    if match:
        return int(match.group())
    return default_hours


def effective_score(
    destination: TripDestination,
    profile: UserPreferenceProfile | None = None,
    config: PlannerPolicyConfig | None = None,
) -> float:
    """개인화 가중치를 반영한 신뢰도 점수를 반환합니다."""
    score = destination.confidence
    if profile is None:
        return score

    resolved_config = resolve_planner_policy(config)
    if destination.metadata.category in profile.liked_categories:
        score *= resolved_config.liked_category_multiplier
    if destination.id in profile.previously_visited_ids:
        score += resolved_config.visited_boost
    return score


def is_eligible(
    destination: TripDestination,
    config: PlannerPolicyConfig | None = None,
    profile: UserPreferenceProfile | None = None,
) -> bool:
    """좌표가 있고 신뢰도가 최소 기준 이상인지 반환합니다."""
    resolved_config = resolve_planner_policy(config)
    if destination.coordinates is None:
        return False
    return effective_score(destination, profile, resolved_config) >= resolved_config.min_confidence


def build_candidate_pool(
    destinations: Iterable[TripDestination],
    config: PlannerPolicyConfig | None = None,
    profile: UserPreferenceProfile | None = None,
) -> dict[str, CandidateEntry]:
    """스케줄링 가능한 후보를 신뢰도 내림차순(동점은 입력 순서)으로 담은 표를 만듭니다."""
    resolved_config = resolve_planner_policy(config)
    entries: list[CandidateEntry] = []
    seen_ids: set[str] = set()

    for index, destination in enumerate(destinations):
        if not is_eligible(destination, resolved_config, profile):
            logger.debug(
                "스케줄링 후보에서 제외: %s (coordinates=%s, confidence=%.2f)",
                destination.place_name,
                destination.coordinates is not None,
                destination.confidence,
            )
            continue

        if destination.id in seen_ids:
            logger.warning("중복된 장소 ID를 제외합니다: %s", destination.id)
            continue
        seen_ids.add(destination.id)

        entries.append(
            CandidateEntry(
                destination=destination,
                hours=parse_duration_hours(destination.metadata.duration, resolved_config.default_activity_hours),
                score=effective_score(destination, profile, resolved_config),
                index=index,
            )
        )

    entries.sort(key=lambda entry: (-entry.score, entry.index))
    return {entry.destination.id: entry for entry in entries}
