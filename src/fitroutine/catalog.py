"""
Exercise catalog.

Maps (experience level, goal) to the ordered base list of exercises.
The table is read from a YAML file once and never mutated afterwards.
"""

import logging
from enum import Enum
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional, Tuple, Union

import yaml

from .descriptors import ExerciseDescriptor, parse_descriptor
from .errors import InvalidSelectionError


logger = logging.getLogger(__name__)

DEFAULT_CATALOG_PATH = Path(__file__).parent / "data" / "catalog.yaml"


class ExperienceLevel(Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class FitnessGoal(Enum):
    LOSE_WEIGHT = "lose_weight"
    GAIN_MUSCLE = "gain_muscle"
    STAY_FIT = "stay_fit"


def resolve_level(value: Union[ExperienceLevel, str, None]) -> ExperienceLevel:
    """Resolve an enum member or its string value. Raises InvalidSelectionError."""
    if isinstance(value, ExperienceLevel):
        return value
    try:
        return ExperienceLevel(value)
    except ValueError:
        raise InvalidSelectionError('level', value) from None


def resolve_goal(value: Union[FitnessGoal, str, None]) -> FitnessGoal:
    """Resolve an enum member or its string value. Raises InvalidSelectionError."""
    if isinstance(value, FitnessGoal):
        return value
    try:
        return FitnessGoal(value)
    except ValueError:
        raise InvalidSelectionError('goal', value) from None


CatalogKey = Tuple[ExperienceLevel, FitnessGoal]


class ExerciseCatalog:
    """
    Read-only table of base exercise lists.

    Entries are stored as tuples behind a MappingProxyType, so lookups can
    be shared freely between callers.
    """

    def __init__(self, entries: Mapping[CatalogKey, Tuple[ExerciseDescriptor, ...]]):
        self._entries = MappingProxyType({key: tuple(value) for key, value in entries.items()})

    @classmethod
    def from_dict(cls, raw: Dict) -> 'ExerciseCatalog':
        """
        Build a catalog from ``{level: {goal: [descriptor text, ...]}}``.

        Raises:
            ValueError: If a level or goal key is unknown or a list is empty
        """
        entries = {}
        for level_key, goals in (raw or {}).items():
            level = ExperienceLevel(level_key)
            for goal_key, exercises in (goals or {}).items():
                goal = FitnessGoal(goal_key)
                if not exercises:
                    raise ValueError(f"Catalog entry {level_key}/{goal_key} is empty")
                entries[(level, goal)] = tuple(parse_descriptor(str(e)) for e in exercises)
        return cls(entries)

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> 'ExerciseCatalog':
        """Load a catalog file."""
        with open(path, encoding='utf-8') as f:
            raw = yaml.safe_load(f)
        catalog = cls.from_dict(raw)
        logger.debug("Loaded %d catalog entries from %s", len(catalog), path)
        return catalog

    def lookup(
        self,
        level: Union[ExperienceLevel, str, None],
        goal: Union[FitnessGoal, str, None]
    ) -> Tuple[ExerciseDescriptor, ...]:
        """
        Get the base list for a level/goal pair.

        Raises:
            InvalidSelectionError: If level or goal is unrecognized or the
                pair has no entry
        """
        level = resolve_level(level)
        goal = resolve_goal(goal)
        try:
            return self._entries[(level, goal)]
        except KeyError:
            raise InvalidSelectionError(
                'goal', goal.value,
                message=f"No routine for level {level.value!r} and goal {goal.value!r}."
            ) from None

    def levels(self) -> Tuple[ExperienceLevel, ...]:
        return tuple(level for level in ExperienceLevel if any(k[0] is level for k in self._entries))

    def goals(self) -> Tuple[FitnessGoal, ...]:
        return tuple(goal for goal in FitnessGoal if any(k[1] is goal for k in self._entries))

    def __iter__(self) -> Iterator[Tuple[ExperienceLevel, FitnessGoal, Tuple[ExerciseDescriptor, ...]]]:
        for (level, goal), base in self._entries.items():
            yield level, goal, base

    def __len__(self) -> int:
        return len(self._entries)


@lru_cache(maxsize=None)
def load_catalog(path: Optional[str] = None) -> ExerciseCatalog:
    """Load and cache a catalog. ``None`` means the packaged table."""
    return ExerciseCatalog.from_yaml(path or DEFAULT_CATALOG_PATH)


def default_catalog() -> ExerciseCatalog:
    return load_catalog(None)
