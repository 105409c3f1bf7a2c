"""일정 계획/수정 API."""

from fastapi import APIRouter, Depends, HTTPException, status

from app.api.dependencies import require_service_secret
from app.core.exceptions import ItineraryMutationError
from app.core.logger import get_logger
from app.schemas.planner import (
    QueryValidationRequest,
    QueryValidationResponse,
    ScheduleRequest,
    ScheduleResponse,
    TripUpdateRequest,
    TripUpdateResponse,
)
from app.services.planner_service import plan_trip, run_trip_update
from app.services.response_quality import validate_input

router = APIRouter(
    prefix="/api/v1/planner",
    tags=["planner"],
    dependencies=[Depends(require_service_secret)],
)
logger = get_logger(__name__)


@router.post("/schedule", response_model=ScheduleResponse, status_code=status.HTTP_200_OK)
def schedule_trip(request: ScheduleRequest) -> ScheduleResponse:
    """후보 장소를 일차별 일정으로 배정한다."""
    logger.info(
        "Schedule request received: %d candidates, %d days",
        len(request.destinations),
        request.number_of_days,
    )
    return plan_trip(request)


@router.post("/update", response_model=TripUpdateResponse, status_code=status.HTTP_200_OK)
def update_trip(request: TripUpdateRequest) -> TripUpdateResponse:
    """일정 수정 요청을 처리하고 결과를 반환한다."""
    try:
        return run_trip_update(request)
    except ItineraryMutationError as exc:
        logger.warning("일정 수정 요청 거절: %s", exc)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc


@router.post("/validate-query", response_model=QueryValidationResponse, status_code=status.HTTP_200_OK)
def validate_query(request: QueryValidationRequest) -> QueryValidationResponse:
    """검색어가 일정 검색에 사용할 수 있는지 검증한다."""
    message = validate_input(request.query)
    return QueryValidationResponse(valid=message is None, message=message)
