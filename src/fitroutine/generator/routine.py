"""
Routine Generator

Turns a GenerationRequest into a multi-day RoutinePlan:
validate, pick the base list, run the adjustment passes, then spread the
result across the requested days with a rotation.
"""

import logging
from typing import Any, Optional, Sequence, Tuple, TypeVar

from ..catalog import ExerciseCatalog, default_catalog
from ..errors import InvalidSelectionError
from .adjustments import apply_age, apply_feedback, apply_nutrition
from .request import GenerationRequest, RoutinePlan


logger = logging.getLogger(__name__)

MIN_DAYS = 1
MAX_DAYS = 7
ROTATION_STEP = 2

T = TypeVar('T')


def rotate(items: Sequence[T], offset: int) -> Tuple[T, ...]:
    """Rotate left by ``offset`` positions (wrapping)."""
    if not items:
        return tuple()
    offset %= len(items)
    return tuple(items[offset:]) + tuple(items[:offset])


def distribute(exercises: Sequence[T], days: int) -> Tuple[Tuple[T, ...], ...]:
    """
    Spread one exercise list over ``days`` days.

    Day i starts two exercises further along than day i-1, so consecutive
    days open with different movements.
    """
    return tuple(rotate(exercises, i * ROTATION_STEP) for i in range(days))


def validate_days(days: Any) -> int:
    """Raises InvalidSelectionError unless days is an int in 1..7."""
    if isinstance(days, bool) or not isinstance(days, int):
        raise InvalidSelectionError('days', days)
    if not MIN_DAYS <= days <= MAX_DAYS:
        raise InvalidSelectionError(
            'days', days,
            message=f"Invalid days: {days}. Choose between {MIN_DAYS} and {MAX_DAYS} days per week."
        )
    return days


class RoutineGenerator:
    """
    Generates personalized routines from a catalog.

    Stateless apart from the catalog it reads, so one instance can serve
    any number of callers.
    """

    def __init__(self, catalog: Optional[ExerciseCatalog] = None):
        self.catalog = catalog if catalog is not None else default_catalog()

    def generate(self, request: GenerationRequest) -> RoutinePlan:
        """
        Generate a routine.

        Args:
            request: Level, goal, days and optional age/feedback/nutrition

        Returns:
            RoutinePlan with one entry per day

        Raises:
            InvalidSelectionError: Unknown level or goal, or days outside 1-7
        """
        base = self.catalog.lookup(request.level, request.goal)
        days = validate_days(request.days)

        exercises = apply_feedback(base, request.feedback)
        exercises = apply_nutrition(exercises, request.nutrition)
        exercises = apply_age(exercises, request.age)

        plan = RoutinePlan(days=distribute(exercises, days))
        logger.debug(
            "Generated %d-day routine for %s/%s (age=%s)",
            len(plan), request.level, request.goal, request.age
        )
        return plan


def generate_routine(request: Optional[GenerationRequest] = None, **fields) -> RoutinePlan:
    """
    Generate a routine with the packaged catalog.

    Accepts either a GenerationRequest or its fields as keyword arguments:

        generate_routine(age=25, level="beginner", goal="lose_weight", days=3)
    """
    if request is None:
        request = GenerationRequest.from_dict(fields)
    elif fields:
        raise TypeError("Pass either a GenerationRequest or keyword fields, not both")
    return RoutineGenerator().generate(request)
