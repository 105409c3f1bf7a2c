"""단일 일정 수정 연산 모음 (재정렬 / 지연 / 추가 / 삭제).

모든 연산은 입력 일정을 변경하지 않고 새 `TripPlan`을 만들어 반환하며,
구조가 바뀌면 `order`를 1부터 다시 매깁니다.
"""

from __future__ import annotations

from typing import Sequence

from app.core.exceptions import ItineraryIndexError, ItineraryMutationError
from app.core.geo import destination_distance
from app.core.logger import get_logger
from app.core.planner_policy import PlannerPolicyConfig, resolve_planner_policy
from app.schemas.enums import ExplanationKind
from app.schemas.trip import AdjustmentResult, TripDestination, TripPlan
from app.services.candidate_filter import parse_duration_hours
from app.services.explanation import RandomSource, explain

logger = get_logger(__name__)

_MORNING_SLOTS = (0, 1)
_LATE_VISIT_KEYWORDS = ("night", "evening")


def renumber(destinations: Sequence[TripDestination]) -> list[TripDestination]:
    """배열 위치에 맞춰 order를 1부터 순차 재부여한 새 목록을 반환합니다."""
    return [
        destination if destination.order == index else destination.model_copy(update={"order": index})
        for index, destination in enumerate(destinations, start=1)
    ]


def _with_destinations(plan: TripPlan, destinations: Sequence[TripDestination]) -> TripPlan:
    return plan.model_copy(update={"destinations": renumber(destinations)})


def _copy_plan(plan: TripPlan) -> TripPlan:
    return plan.model_copy(update={"destinations": list(plan.destinations)})


def _check_index(index: int, size: int, field: str) -> None:
    if not 0 <= index < size:
        raise ItineraryIndexError(index, size, field=field)


def reorder_activity(
    plan: TripPlan,
    from_index: int,
    to_index: int,
    *,
    rng: RandomSource | None = None,
) -> AdjustmentResult:
    """`from_index`의 장소를 `to_index`로 옮깁니다(0-based, splice 방식).

    Raises:
        ItineraryIndexError: 인덱스가 `[0, len(destinations))` 범위를 벗어날 때.
    """
    size = len(plan.destinations)
    _check_index(from_index, size, "from_index")
    _check_index(to_index, size, "to_index")

    destinations = list(plan.destinations)
    moved = destinations.pop(from_index)
    destinations.insert(to_index, moved)

    warnings: list[str] = []
    best_time = (moved.metadata.best_time_to_visit or "").lower()
    if to_index in _MORNING_SLOTS and any(keyword in best_time for keyword in _LATE_VISIT_KEYWORDS):
        warnings.append(f"Note: {moved.place_name} is usually best visited in the {best_time}.")

    explanation = f"Moved {moved.place_name} to position #{to_index + 1}. {explain(ExplanationKind.REORDER, rng=rng)}"
    return AdjustmentResult(
        updated_plan=_with_destinations(plan, destinations),
        explanation=explanation,
        warnings=warnings,
    )


def apply_delay(
    plan: TripPlan,
    delay_minutes: int,
    *,
    config: PlannerPolicyConfig | None = None,
    rng: RandomSource | None = None,
) -> AdjustmentResult:
    """지연 시간이 길면 마지막 장소를 제외해 일정을 맞춥니다.

    Raises:
        ValueError: 지연 시간이 음수일 때.
    """
    if delay_minutes < 0:
        raise ValueError("delay_minutes must not be negative.")

    resolved_config = resolve_planner_policy(config)
    destinations = list(plan.destinations)
    warnings: list[str] = []
    explanation = f"Adjusted itinerary for a {delay_minutes} min delay."

    if delay_minutes > resolved_config.delay_drop_minutes and len(destinations) > resolved_config.delay_min_stops:
        dropped = destinations.pop()
        warnings.append(f"Due to the {delay_minutes} min delay, we removed {dropped.place_name}.")
        explanation = f"{explanation} {explain(ExplanationKind.DELAY_DROP, dropped.place_name, rng=rng)}"
        logger.info("지연 %d분으로 마지막 장소 제외: %s", delay_minutes, dropped.place_name)

    return AdjustmentResult(
        updated_plan=_with_destinations(plan, destinations),
        explanation=explanation,
        warnings=warnings,
    )


def _insertion_cost(
    previous: TripDestination | None,
    new_activity: TripDestination,
    following: TripDestination | None,
) -> float:
    """틈에 새 장소를 넣을 때 늘어나는 이동 거리(km). 양쪽 모두 좌표가 없으면 inf."""
    to_new = destination_distance(previous, new_activity) if previous is not None else None
    from_new = destination_distance(new_activity, following) if following is not None else None

    if to_new is not None and from_new is not None:
        return to_new + from_new - destination_distance(previous, following)
    if from_new is not None:
        return from_new
    if to_new is not None:
        return to_new
    return float("inf")


def find_cheapest_insertion(destinations: Sequence[TripDestination], new_activity: TripDestination) -> int:
    """추가 이동 거리가 가장 작은 삽입 위치(0..N)를 반환합니다. 동점이면 앞쪽 위치가 우선입니다."""
    if new_activity.coordinates is None:
        return len(destinations)

    best_index = len(destinations)
    best_cost = float("inf")
    for index in range(len(destinations) + 1):
        previous = destinations[index - 1] if index > 0 else None
        following = destinations[index] if index < len(destinations) else None
        cost = _insertion_cost(previous, new_activity, following)
        if cost < best_cost:
            best_index = index
            best_cost = cost
    return best_index


def add_activity(
    plan: TripPlan,
    new_activity: TripDestination,
    *,
    config: PlannerPolicyConfig | None = None,
) -> AdjustmentResult:
    """하루 활동 시간 한도 안이면 이동 거리가 가장 적게 늘어나는 위치에 장소를 추가합니다.

    Raises:
        ItineraryMutationError: 같은 ID의 장소가 이미 일정에 있을 때.
    """
    resolved_config = resolve_planner_policy(config)
    if any(destination.id == new_activity.id for destination in plan.destinations):
        raise ItineraryMutationError(f"Destination '{new_activity.id}' is already in the itinerary.")

    default_hours = resolved_config.default_activity_hours
    total_hours = sum(parse_duration_hours(d.metadata.duration, default_hours) for d in plan.destinations)
    total_hours += parse_duration_hours(new_activity.metadata.duration, default_hours)
    max_hours = resolved_config.max_hours_per_day

    if total_hours > max_hours:
        logger.info("일일 한도 초과로 장소 추가 거절: %s (%d시간)", new_activity.place_name, total_hours)
        return AdjustmentResult(
            updated_plan=_copy_plan(plan),
            explanation=(
                f"Could not add {new_activity.place_name}: the day would total {total_hours} hours, "
                f"more than the {max_hours:g}-hour limit."
            ),
            warnings=[f"Adding {new_activity.place_name} exceeds the {max_hours:g}-hour daily limit."],
        )

    insert_at = find_cheapest_insertion(plan.destinations, new_activity)
    destinations = list(plan.destinations)
    destinations.insert(insert_at, new_activity)

    return AdjustmentResult(
        updated_plan=_with_destinations(plan, destinations),
        explanation=f"Added {new_activity.place_name} as stop #{insert_at + 1} to minimize travel time.",
        warnings=[],
    )


def remove_activity(plan: TripPlan, destination_id: str) -> AdjustmentResult:
    """ID가 일치하는 장소를 제외합니다. 없는 ID면 일정을 그대로 반환합니다."""
    removed = [d for d in plan.destinations if d.id == destination_id]
    if not removed:
        logger.debug("삭제할 장소가 일정에 없습니다: %s", destination_id)
        return AdjustmentResult(
            updated_plan=_copy_plan(plan),
            explanation=f"No stop with id '{destination_id}' was found; the itinerary is unchanged.",
            warnings=[],
        )

    remaining = [d for d in plan.destinations if d.id != destination_id]
    names = ", ".join(d.place_name for d in removed)
    return AdjustmentResult(
        updated_plan=_with_destinations(plan, remaining),
        explanation=f"Removed {names} from the itinerary.",
        warnings=[],
    )
