"""일정 수정 엔진 예외 정의.

"더 나은 후보가 없음" 같은 정상적인 결과는 예외가 아니라 warnings로 전달하고,
호출자가 지켜야 할 구조적 전제조건 위반만 예외로 표현합니다.
"""


class ItineraryMutationError(ValueError):
    """일정 수정 요청이 구조적 전제조건을 위반했을 때 발생하는 예외."""


class ItineraryIndexError(ItineraryMutationError):
    """재정렬 인덱스가 일정 범위를 벗어났을 때 발생하는 예외."""

    def __init__(self, index: int, size: int, *, field: str = "index") -> None:
        self.index = index
        self.size = size
        self.field = field
        super().__init__(f"{field}={index} is out of range for an itinerary with {size} stops.")
