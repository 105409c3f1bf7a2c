"""일정 결정에 대한 짧은 설명 문구 생성기."""

from __future__ import annotations

import random
from types import MappingProxyType
from typing import Protocol, Sequence, TypeVar

from app.schemas.enums import ChangeType, ExplanationKind

_T = TypeVar("_T")


class RandomSource(Protocol):
    """`random.Random`과 호환되는 난수 공급자."""

    def choice(self, seq: Sequence[_T]) -> _T: ...


_TEMPLATES = MappingProxyType(
    {
        ExplanationKind.REORDER: (
            "Route optimized to reduce travel time.",
            "Re-sequenced stops to avoid backtracking.",
            "Smoother flow: less driving, more doing.",
        ),
        ExplanationKind.DELAY_DROP: (
            "Dropped {place} to keep you on schedule.",
            "Skipped {place} so you don't feel rushed.",
            "Removed {place} to respect the day limit.",
        ),
        ExplanationKind.DAY_GROUPING: (
            "Clustered nearby spots to save travel time.",
            "Grouped by location for an efficient path.",
            "These spots are close, perfect for one day.",
        ),
        ExplanationKind.PREFERENCE_MATCH: (
            "Chosen because you prefer {category}.",
            "Top pick based on your interest in {category}.",
            "Prioritized this spot for your {category} focus.",
        ),
    }
)


def explain(
    kind: ExplanationKind | str,
    place_name: str | None = None,
    *,
    rng: RandomSource | None = None,
) -> str:
    """설명 템플릿 하나를 무작위로 골라 반환합니다.

    Args:
        kind: 템플릿 종류.
        place_name: `{place}` 자리에 넣을 장소 이름. PREFERENCE_MATCH에서는 카테고리 이름.
        rng: 테스트에서 고정할 수 있는 난수 공급자. 없으면 모듈 `random`을 사용합니다.

    Returns:
        사람이 읽을 수 있는 한 줄 설명.
    """
    resolved_kind = ExplanationKind(kind)
    template = (rng or random).choice(_TEMPLATES[resolved_kind])

    if not place_name:
        return template
    if resolved_kind == ExplanationKind.PREFERENCE_MATCH:
        return template.replace("{category}", place_name.lower())
    return template.replace("{place}", place_name)


def generate_state_message(change_type: ChangeType | str, details: str) -> str:
    """일정 수정 진행 상태 문구를 반환합니다."""
    try:
        resolved = ChangeType(change_type)
    except ValueError:
        return "Updating itinerary..."

    if resolved == ChangeType.REORDER:
        return f"Updating route... Re-sequenced trip for {details}."
    if resolved == ChangeType.DELAY:
        return f"Delay detected. {details} We've adjusted your stops."
    if resolved == ChangeType.ADD_PLACE:
        return f"Adding stop... {details}"
    return f"Optimizing schedule... Removed {details}."
