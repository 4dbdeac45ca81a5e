"""
fitroutine: personalized workout routine generator.

Picks a base exercise list by experience level and goal, adjusts its
intensity from previous feedback, nutrition and age, and rotates it
across the training days of the week.
"""

from .catalog import ExerciseCatalog, ExperienceLevel, FitnessGoal, default_catalog
from .descriptors import DescriptorKind, ExerciseDescriptor, parse_descriptor
from .errors import AppError, ErrorType, InvalidSelectionError, StorageError, ValidationError
from .generator import (
    Feedback,
    GenerationRequest,
    Nutrition,
    RoutineGenerator,
    RoutinePlan,
    generate_routine,
)

__version__ = "0.1.0"

__all__ = [
    'ExerciseCatalog',
    'ExperienceLevel',
    'FitnessGoal',
    'default_catalog',
    'DescriptorKind',
    'ExerciseDescriptor',
    'parse_descriptor',
    'AppError',
    'ErrorType',
    'InvalidSelectionError',
    'StorageError',
    'ValidationError',
    'Feedback',
    'GenerationRequest',
    'Nutrition',
    'RoutineGenerator',
    'RoutinePlan',
    'generate_routine',
]
