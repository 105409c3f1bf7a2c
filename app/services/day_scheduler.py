"""다일차 일정 배정 서비스.

신뢰도가 가장 높은 미배정 장소를 하루의 기준점으로 삼고, 하루 활동 시간 한도 안에서
직전에 추가한 장소와 가장 가까운 장소를 차례로 붙이는 탐욕적 군집화를 수행합니다.
"""

from __future__ import annotations

from typing import Iterable

from app.core.geo import coordinates_distance
from app.core.logger import get_logger
from app.core.planner_policy import PlannerPolicyConfig, resolve_planner_policy
from app.schemas.enums import ExplanationKind
from app.schemas.trip import DayPlan, TripDestination, UserPreferenceProfile
from app.services.candidate_filter import CandidateEntry, build_candidate_pool
from app.services.explanation import RandomSource, explain

logger = get_logger(__name__)


def _next_anchor(pool: dict[str, CandidateEntry]) -> CandidateEntry | None:
    for entry in pool.values():
        if not entry.assigned:
            return entry
    return None


def _nearest_fitting(
    pool: dict[str, CandidateEntry],
    last: CandidateEntry,
    remaining_hours: float,
) -> CandidateEntry | None:
    """직전 장소에서 가장 가깝고 남은 시간 안에 들어가는 후보를 찾습니다."""
    best: CandidateEntry | None = None
    best_distance = float("inf")

    for entry in pool.values():
        if entry.assigned or entry.hours > remaining_hours:
            continue
        distance = coordinates_distance(last.destination.coordinates, entry.destination.coordinates)
        if distance < best_distance:
            best = entry
            best_distance = distance

    return best


def schedule_days(
    destinations: Iterable[TripDestination],
    number_of_days: int,
    *,
    profile: UserPreferenceProfile | None = None,
    config: PlannerPolicyConfig | None = None,
    rng: RandomSource | None = None,
) -> list[DayPlan]:
    """후보 장소를 최대 `number_of_days`일의 일정으로 나눕니다.

    후보가 모자라면 요청보다 짧은 목록을, 후보가 없으면 빈 목록을 반환합니다.

    Raises:
        ValueError: `number_of_days`가 1보다 작을 때.
    """
    if number_of_days < 1:
        raise ValueError("number_of_days must be at least 1.")

    resolved_config = resolve_planner_policy(config)
    max_hours = resolved_config.max_hours_per_day
    pool = build_candidate_pool(destinations, resolved_config, profile)
    days: list[DayPlan] = []

    for day_number in range(1, number_of_days + 1):
        anchor = _next_anchor(pool)
        if anchor is None:
            break

        anchor.assigned = True
        day_entries = [anchor]
        day_hours = float(anchor.hours)

        while day_hours < max_hours:
            candidate = _nearest_fitting(pool, day_entries[-1], max_hours - day_hours)
            if candidate is None:
                break
            candidate.assigned = True
            day_entries.append(candidate)
            day_hours += candidate.hours

        day_destinations = [entry.destination for entry in day_entries]
        grouping_reason = explain(ExplanationKind.DAY_GROUPING, rng=rng) if len(day_destinations) > 1 else None
        days.append(
            DayPlan(
                day_number=day_number,
                destinations=day_destinations,
                total_hours=day_hours,
                grouping_reason=grouping_reason,
            )
        )
        logger.debug(
            "%d일차 배정 완료: %s (%.1f시간)",
            day_number,
            [destination.place_name for destination in day_destinations],
            day_hours,
        )

    unassigned = sum(1 for entry in pool.values() if not entry.assigned)
    logger.info(
        "일정 배정 완료: 요청 %d일, 생성 %d일, 후보 %d개 중 미배정 %d개",
        number_of_days,
        len(days),
        len(pool),
        unassigned,
    )
    return days
