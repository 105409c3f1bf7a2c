"""일정 생성/수정 요청 처리 서비스."""

from __future__ import annotations

from app.core.logger import get_logger
from app.schemas.enums import ChangeType, ResponseQualityStatus
from app.schemas.planner import ScheduleRequest, ScheduleResponse, TripUpdateRequest, TripUpdateResponse
from app.schemas.trip import AdjustmentResult
from app.services.day_scheduler import schedule_days
from app.services.explanation import RandomSource, generate_state_message
from app.services.itinerary_mutator import add_activity, apply_delay, remove_activity, reorder_activity
from app.services.response_quality import analyze_response_quality, validate_input

logger = get_logger(__name__)


def plan_trip(request: ScheduleRequest, *, rng: RandomSource | None = None) -> ScheduleResponse:
    """검색어 검증과 품질 분석을 거쳐 다일차 일정을 생성합니다.

    검색어가 유효하지 않거나 후보가 비어 있으면 일정 배정 없이 안내 메시지만 반환합니다.
    """
    if request.query is not None:
        input_error = validate_input(request.query)
        if input_error:
            logger.info("검색어 검증 실패: %s", input_error)
            return ScheduleResponse(input_error=input_error)

    ranked = sorted(request.destinations, key=lambda destination: -destination.confidence)
    quality = analyze_response_quality(ranked)
    if quality.status == ResponseQualityStatus.EMPTY:
        return ScheduleResponse(quality=quality)

    days = schedule_days(
        request.destinations,
        request.number_of_days,
        profile=request.preferences,
        rng=rng,
    )
    return ScheduleResponse(quality=quality, days=days)


def _apply_change(request: TripUpdateRequest, rng: RandomSource | None) -> tuple[AdjustmentResult, str]:
    change = request.change
    plan = request.current_plan

    if change.type == ChangeType.REORDER:
        result = reorder_activity(plan, change.from_index, change.to_index, rng=rng)
        moved = result.updated_plan.destinations[change.to_index]
        return result, moved.place_name

    if change.type == ChangeType.DELAY:
        result = apply_delay(plan, change.value, rng=rng)
        return result, f"Running {change.value} min late."

    if change.type == ChangeType.ADD_PLACE:
        result = add_activity(plan, change.destination)
        return result, result.explanation

    result = remove_activity(plan, change.destination_id)
    removed = [d.place_name for d in plan.destinations if d.id == change.destination_id]
    return result, ", ".join(removed)


def run_trip_update(request: TripUpdateRequest, *, rng: RandomSource | None = None) -> TripUpdateResponse:
    """변경 요청 유형에 맞는 수정 연산을 실행합니다.

    Raises:
        ItineraryMutationError: 인덱스 범위 초과 등 구조적 전제조건 위반 시.
    """
    logger.info("일정 수정 요청: trip_id=%s, type=%s", request.trip_id, request.change.type)
    result, details = _apply_change(request, rng)
    if details:
        state_message = generate_state_message(request.change.type, details)
    else:
        state_message = "No changes needed. Your itinerary is unchanged."

    return TripUpdateResponse(
        trip_id=request.trip_id,
        updated_plan=result.updated_plan,
        explanation=result.explanation,
        warnings=result.warnings,
        state_message=state_message,
    )
