"""
Request and plan types for routine generation.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional, Tuple, Union

from ..catalog import ExperienceLevel, FitnessGoal
from ..descriptors import ExerciseDescriptor


class Difficulty(Enum):
    """How the previous workout felt."""
    EASY = "easy"
    NORMAL = "normal"
    HARD = "hard"


# Labels written by the older Spanish front end
DIFFICULTY_ALIASES = {
    "fácil": Difficulty.EASY,
    "facil": Difficulty.EASY,
    "difícil": Difficulty.HARD,
    "dificil": Difficulty.HARD,
}


def parse_difficulty(value: Any) -> Optional[Difficulty]:
    """Resolve a difficulty label. Unknown labels give None."""
    if isinstance(value, Difficulty):
        return value
    if not isinstance(value, str):
        return None
    label = value.strip().lower()
    if label in DIFFICULTY_ALIASES:
        return DIFFICULTY_ALIASES[label]
    try:
        return Difficulty(label)
    except ValueError:
        return None


@dataclass(frozen=True)
class Feedback:
    difficulty: Optional[Union[Difficulty, str]] = None

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> Optional['Feedback']:
        if not data:
            return None
        return cls(difficulty=data.get('difficulty'))


@dataclass(frozen=True)
class Nutrition:
    goal: Optional[Union[FitnessGoal, str]] = None
    calories: Optional[Any] = None

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> Optional['Nutrition']:
        if not data:
            return None
        return cls(goal=data.get('goal'), calories=data.get('calories'))


@dataclass(frozen=True)
class GenerationRequest:
    """Everything the generator needs for one plan."""
    level: Union[ExperienceLevel, str, None]
    goal: Union[FitnessGoal, str, None]
    days: Any
    age: Optional[Any] = None
    feedback: Optional[Feedback] = None
    nutrition: Optional[Nutrition] = None

    def __post_init__(self):
        # Plain dicts (stored progress, keyword calls) become typed values;
        # anything else unusable is dropped so the pass is skipped.
        feedback = self.feedback
        if isinstance(feedback, dict):
            feedback = Feedback.from_dict(feedback)
        elif not isinstance(feedback, Feedback):
            feedback = None

        nutrition = self.nutrition
        if isinstance(nutrition, dict):
            nutrition = Nutrition.from_dict(nutrition)
        elif not isinstance(nutrition, Nutrition):
            nutrition = None

        object.__setattr__(self, 'feedback', feedback)
        object.__setattr__(self, 'nutrition', nutrition)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'GenerationRequest':
        """Build a request from plain form/progress values."""
        return cls(
            level=data.get('level'),
            goal=data.get('goal'),
            days=data.get('days'),
            age=data.get('age'),
            feedback=data.get('feedback'),
            nutrition=data.get('nutrition'),
        )

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly form, used when recording history."""
        def _value(v):
            return v.value if isinstance(v, Enum) else v

        out = {
            'age': self.age,
            'level': _value(self.level),
            'goal': _value(self.goal),
            'days': self.days,
        }
        if self.feedback is not None:
            out['feedback'] = {'difficulty': _value(self.feedback.difficulty)}
        if self.nutrition is not None:
            out['nutrition'] = {'goal': _value(self.nutrition.goal), 'calories': self.nutrition.calories}
        return out


DayPlan = Tuple[ExerciseDescriptor, ...]


@dataclass(frozen=True)
class RoutinePlan:
    """Ordered day plans. ``days[i]`` is the exercise list for day i+1."""
    days: Tuple[DayPlan, ...]

    def __len__(self) -> int:
        return len(self.days)

    def __iter__(self) -> Iterator[DayPlan]:
        return iter(self.days)

    def __getitem__(self, index: int) -> DayPlan:
        return self.days[index]

    def as_text(self) -> List[List[str]]:
        """Day plans as lists of descriptor strings."""
        return [[str(exercise) for exercise in day] for day in self.days]
