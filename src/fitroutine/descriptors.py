"""
Exercise descriptor parsing and rendering.

Catalog entries are written the way a coach would jot them down
("Squats 3x12", "Plank 3x20s", "Brisk walk 20 min"). They are parsed once
into ExerciseDescriptor values so every adjustment works on numbers, and
rendered back to text only for display and storage.
"""

import math
import re
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional


class DescriptorKind(Enum):
    """Shape of the quantity embedded in a descriptor."""
    REPS = "reps"              # 3x12
    TIMED_SETS = "timed_sets"  # 3x20s
    DURATION = "duration"      # 20 min
    PLAIN = "plain"            # no quantity


# Order matters: timed sets must be tried before plain sets x reps
TIMED_SETS_PATTERN = re.compile(r'^(?P<name>.+?)\s+(?P<sets>\d+)\s*[x×]\s*(?P<seconds>\d+)\s*s$', re.IGNORECASE)
REPS_PATTERN = re.compile(r'^(?P<name>.+?)\s+(?P<sets>\d+)\s*[x×]\s*(?P<reps>\d+)$', re.IGNORECASE)
DURATION_PATTERN = re.compile(r'^(?P<name>.+?)\s+(?P<minutes>\d+)\s*min$', re.IGNORECASE)

HIGH_IMPACT_KEYWORDS = ('burpee', 'jump', 'salto')
STRETCHING_KEYWORDS = ('stretch', 'estiramiento')


@dataclass(frozen=True)
class ExerciseDescriptor:
    """One exercise entry: a name plus its target volume."""
    name: str
    kind: DescriptorKind
    sets: Optional[int] = None
    reps: Optional[int] = None
    seconds: Optional[int] = None
    minutes: Optional[int] = None

    def __str__(self) -> str:
        return format_descriptor(self)

    @property
    def is_high_impact(self) -> bool:
        lowered = self.name.lower()
        return any(k in lowered for k in HIGH_IMPACT_KEYWORDS)

    @property
    def is_stretching(self) -> bool:
        lowered = self.name.lower()
        return any(k in lowered for k in STRETCHING_KEYWORDS)

    def scale_reps(self, factor: float, minimum: Optional[int] = None) -> 'ExerciseDescriptor':
        """Scale the rep count of a sets x reps entry. Other kinds pass through."""
        if self.kind is not DescriptorKind.REPS:
            return self
        return replace(self, reps=scale_value(self.reps, factor, minimum))

    def scale_seconds(self, factor: float, minimum: Optional[int] = None) -> 'ExerciseDescriptor':
        """Scale the hold time of a sets x seconds entry."""
        if self.kind is not DescriptorKind.TIMED_SETS:
            return self
        return replace(self, seconds=scale_value(self.seconds, factor, minimum))

    def scale_minutes(self, factor: float, minimum: Optional[int] = None) -> 'ExerciseDescriptor':
        """Scale the duration of a timed entry."""
        if self.kind is not DescriptorKind.DURATION:
            return self
        return replace(self, minutes=scale_value(self.minutes, factor, minimum))


def scale_value(value: int, factor: float, minimum: Optional[int] = None) -> int:
    """
    Scale an integer magnitude.

    Increases round up. Decreases round down and are clamped to ``minimum``
    when one is given.

    Examples:
        scale_value(12, 1.2) → 15
        scale_value(10, 1.1) → 12   (10 * 1.1 is 11.000000000000002)
        scale_value(1, 0.8, minimum=1) → 1
    """
    scaled = value * factor
    if factor >= 1:
        return math.ceil(scaled)
    result = math.floor(scaled)
    if minimum is not None:
        result = max(minimum, result)
    return result


def parse_descriptor(text: str) -> ExerciseDescriptor:
    """
    Parse catalog text into a descriptor.

    Examples:
        "Squats 3x12" → REPS(sets=3, reps=12)
        "Plank 3x20s" → TIMED_SETS(sets=3, seconds=20)
        "Running 25 min" → DURATION(minutes=25)
        "Cool down" → PLAIN
    """
    text = text.strip()
    if not text:
        raise ValueError("Exercise descriptor cannot be empty")

    match = TIMED_SETS_PATTERN.match(text)
    if match:
        return ExerciseDescriptor(
            name=match.group('name'),
            kind=DescriptorKind.TIMED_SETS,
            sets=int(match.group('sets')),
            seconds=int(match.group('seconds')),
        )

    match = REPS_PATTERN.match(text)
    if match:
        return ExerciseDescriptor(
            name=match.group('name'),
            kind=DescriptorKind.REPS,
            sets=int(match.group('sets')),
            reps=int(match.group('reps')),
        )

    match = DURATION_PATTERN.match(text)
    if match:
        return ExerciseDescriptor(
            name=match.group('name'),
            kind=DescriptorKind.DURATION,
            minutes=int(match.group('minutes')),
        )

    return ExerciseDescriptor(name=text, kind=DescriptorKind.PLAIN)


def format_descriptor(descriptor: ExerciseDescriptor) -> str:
    """Render a descriptor in catalog notation."""
    if descriptor.kind is DescriptorKind.REPS:
        return f"{descriptor.name} {descriptor.sets}x{descriptor.reps}"
    if descriptor.kind is DescriptorKind.TIMED_SETS:
        return f"{descriptor.name} {descriptor.sets}x{descriptor.seconds}s"
    if descriptor.kind is DescriptorKind.DURATION:
        return f"{descriptor.name} {descriptor.minutes} min"
    return descriptor.name
