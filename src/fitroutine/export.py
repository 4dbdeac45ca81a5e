"""
Plain-text rendering of routines.
"""

from pathlib import Path
from typing import List, Optional, Sequence, Union

from .generator import GenerationRequest, RoutinePlan


EXPORT_HEADER = "My personalized routine:"

PlanLike = Union[RoutinePlan, Sequence[Sequence[str]]]


def _day_lists(plan: PlanLike) -> List[List[str]]:
    if isinstance(plan, RoutinePlan):
        return plan.as_text()
    return [[str(e) for e in day] for day in plan]


def format_days(plan: PlanLike) -> str:
    """
    Day-by-day listing.

    Example:
        Day 1:
        - Squats 3x12
        - Crunches 3x15

        Day 2:
        - ...
    """
    return "\n\n".join(
        f"Day {i}:\n- " + "\n- ".join(day)
        for i, day in enumerate(_day_lists(plan), 1)
    )


def export_text(plan: PlanLike) -> str:
    """Text used for sharing and for the downloadable file."""
    return f"{EXPORT_HEADER}\n\n{format_days(plan)}"


def write_export(plan: PlanLike, path: Union[str, Path]) -> Path:
    path = Path(path)
    path.write_text(export_text(plan), encoding='utf-8')
    return path


def format_plan_text(plan: RoutinePlan, request: Optional[GenerationRequest] = None) -> str:
    """
    Format a routine for the terminal.

    Args:
        plan: Generated routine
        request: Request it came from, shown in the header when given

    Returns:
        Formatted text string
    """
    lines = []

    lines.append("=" * 60)
    lines.append("YOUR ROUTINE")
    lines.append("=" * 60)

    if request is not None:
        info = request.to_dict()
        lines.append(f"Level: {str(info['level']).replace('_', ' ').title()}")
        lines.append(f"Goal: {str(info['goal']).replace('_', ' ').title()}")
        lines.append(f"Days per week: {info['days']}")
        if info.get('age') is not None:
            lines.append(f"Age: {info['age']}")
        if info.get('feedback', {}).get('difficulty'):
            lines.append(f"Adjusted for last session: {info['feedback']['difficulty']}")
        if info.get('nutrition'):
            n = info['nutrition']
            lines.append(f"Nutrition: {n.get('goal') or 'n/a'} @ {n.get('calories')} kcal")

    for i, day in enumerate(plan.as_text(), 1):
        lines.append(f"\n{'─' * 60}")
        lines.append(f"DAY {i}")
        lines.append('─' * 60)
        for j, exercise in enumerate(day, 1):
            lines.append(f"  {j}. {exercise}")

    lines.append(f"\n{'=' * 60}")

    return '\n'.join(lines)
