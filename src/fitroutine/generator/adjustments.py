"""
Intensity adjustment passes.

Each pass takes a tuple of descriptors and returns a new tuple. Passes
run in a fixed order (feedback, nutrition, age) and each one sees the
output of the previous one.
"""

import logging
from typing import Any, Optional, Tuple

from ..catalog import FitnessGoal
from ..descriptors import ExerciseDescriptor
from .request import Difficulty, Feedback, Nutrition, parse_difficulty


logger = logging.getLogger(__name__)

Exercises = Tuple[ExerciseDescriptor, ...]


class AdjustmentRules:
    """Scaling factors and floors for every pass."""

    FEEDBACK = {
        Difficulty.EASY: {
            "reps": (1.2, None),
            "minutes": (1.1, None),
            "seconds": (1.2, None),
        },
        Difficulty.HARD: {
            "reps": (0.8, 1),
            "minutes": (0.9, 5),
            "seconds": (0.8, 10),
        },
    }

    LOW_CALORIE_LIMIT = 1800
    LOW_CALORIE_REPS = (0.85, 1)
    HIGH_CALORIE_LIMIT = 2500
    HIGH_CALORIE_REPS = (1.1, None)

    SENIOR_AGE = 50
    SENIOR_HIGH_IMPACT_REPS = (0.7, 1)
    SENIOR_STRETCH_MINUTES = (1.3, None)
    YOUTH_AGE = 25
    YOUTH_REPS = (1.05, None)


def _to_number(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _to_goal(value: Any) -> Optional[FitnessGoal]:
    if isinstance(value, FitnessGoal):
        return value
    try:
        return FitnessGoal(value)
    except (TypeError, ValueError):
        return None


def apply_feedback(exercises: Exercises, feedback: Optional[Feedback]) -> Exercises:
    """Raise volume after an easy session, lower it after a hard one."""
    if feedback is None:
        return exercises

    difficulty = parse_difficulty(feedback.difficulty)
    rules = AdjustmentRules.FEEDBACK.get(difficulty)
    if rules is None:
        return exercises

    logger.debug("Feedback pass: %s", difficulty.value)
    reps_factor, reps_min = rules["reps"]
    minutes_factor, minutes_min = rules["minutes"]
    seconds_factor, seconds_min = rules["seconds"]

    return tuple(
        e.scale_reps(reps_factor, reps_min)
         .scale_minutes(minutes_factor, minutes_min)
         .scale_seconds(seconds_factor, seconds_min)
        for e in exercises
    )


def apply_nutrition(exercises: Exercises, nutrition: Optional[Nutrition]) -> Exercises:
    """Ease off on a calorie deficit, push harder on a muscle-building surplus."""
    if nutrition is None:
        return exercises

    calories = _to_number(nutrition.calories)
    if calories is None:
        return exercises

    goal = _to_goal(nutrition.goal)

    if goal is FitnessGoal.LOSE_WEIGHT and calories < AdjustmentRules.LOW_CALORIE_LIMIT:
        factor, minimum = AdjustmentRules.LOW_CALORIE_REPS
    elif goal is FitnessGoal.GAIN_MUSCLE and calories > AdjustmentRules.HIGH_CALORIE_LIMIT:
        factor, minimum = AdjustmentRules.HIGH_CALORIE_REPS
    else:
        return exercises

    logger.debug("Nutrition pass: goal=%s calories=%s", nutrition.goal, calories)
    return tuple(e.scale_reps(factor, minimum) for e in exercises)


def apply_age(exercises: Exercises, age: Any) -> Exercises:
    """
    Age-based tweaks.

    Over 50: fewer reps on high-impact moves, longer stretching.
    Under 25: slightly more reps on everything except stretching.
    """
    age = _to_number(age)
    if age is None:
        return exercises

    if age > AdjustmentRules.SENIOR_AGE:
        logger.debug("Age pass: senior (%s)", age)
        reps_factor, reps_min = AdjustmentRules.SENIOR_HIGH_IMPACT_REPS
        minutes_factor, minutes_min = AdjustmentRules.SENIOR_STRETCH_MINUTES
        adjusted = []
        for e in exercises:
            if e.is_high_impact:
                e = e.scale_reps(reps_factor, reps_min)
            elif e.is_stretching:
                e = e.scale_minutes(minutes_factor, minutes_min)
            adjusted.append(e)
        return tuple(adjusted)

    if age < AdjustmentRules.YOUTH_AGE:
        logger.debug("Age pass: youth (%s)", age)
        factor, minimum = AdjustmentRules.YOUTH_REPS
        return tuple(e if e.is_stretching else e.scale_reps(factor, minimum) for e in exercises)

    return exercises
