"""
Routine generation: request types, adjustment passes and the generator.
"""

from .request import (
    Difficulty,
    Feedback,
    Nutrition,
    GenerationRequest,
    RoutinePlan,
    parse_difficulty,
)
from .adjustments import AdjustmentRules, apply_feedback, apply_nutrition, apply_age
from .routine import RoutineGenerator, generate_routine, distribute, rotate

__all__ = [
    'Difficulty',
    'Feedback',
    'Nutrition',
    'GenerationRequest',
    'RoutinePlan',
    'parse_difficulty',
    'AdjustmentRules',
    'apply_feedback',
    'apply_nutrition',
    'apply_age',
    'RoutineGenerator',
    'generate_routine',
    'distribute',
    'rotate',
]
