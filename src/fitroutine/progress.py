"""Progress persistence: feedback, nutrition preferences and routine history."""

import json
import logging
from dataclasses import asdict, dataclass
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .errors import StorageError
from .generator import Difficulty, GenerationRequest, RoutinePlan, parse_difficulty


logger = logging.getLogger(__name__)

DEFAULT_HISTORY_LIMIT = 10


def _list_value(progress: Dict[str, Any], key: str) -> List[Any]:
    """A list-valued key; anything else (hand-edited file) reads as empty."""
    value = progress.get(key)
    if not isinstance(value, list):
        if value is not None:
            logger.warning("Ignoring progress key %r: expected a list", key)
        return []
    return list(value)


@dataclass
class FeedbackRecord:
    difficulty: str
    recorded_at: str


@dataclass
class NutritionPreferences:
    goal: Optional[str] = None
    calories: int = 2000
    preferences: str = ""
    allergies: str = ""


class ProgressStore:
    """
    JSON-file progress store.

    The document is a flat dict; save_progress() merges top-level keys into
    whatever is already on disk.
    """

    def __init__(self, path: Union[str, Path], history_limit: int = DEFAULT_HISTORY_LIMIT):
        self.path = Path(path)
        self.history_limit = history_limit

    def load_progress(self) -> Dict[str, Any]:
        """
        Load the stored document.

        Returns:
            Progress dict; empty if the file is missing or unreadable
        """
        if not self.path.exists():
            return {}

        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Could not read progress file %s: %s", self.path, e)
            return {}

        if not isinstance(data, dict):
            logger.warning("Ignoring progress file %s: expected an object", self.path)
            return {}
        return data

    def save_progress(self, partial: Dict[str, Any]) -> Dict[str, Any]:
        """
        Merge ``partial`` into the stored document and write it.

        Returns:
            The merged document

        Raises:
            StorageError: If the file cannot be written
        """
        merged = {**self.load_progress(), **partial}

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, 'w', encoding='utf-8') as f:
                json.dump(merged, f, indent=2, ensure_ascii=False)
        except OSError as e:
            raise StorageError(original_error=e) from e

        logger.debug("Saved progress keys %s to %s", sorted(partial), self.path)
        return merged

    # ------------------------------------------------------------------
    # Feedback
    # ------------------------------------------------------------------

    def record_feedback(
        self,
        difficulty: Union[Difficulty, str],
        routine: Optional[RoutinePlan] = None
    ) -> FeedbackRecord:
        """
        Record how a completed routine felt.

        The newest record goes first so the next plan picks it up.

        Raises:
            ValueError: If difficulty is not a known label
        """
        resolved = parse_difficulty(difficulty)
        if resolved is None:
            raise ValueError(f"Unknown difficulty: {difficulty!r}")

        now = datetime.now().isoformat()
        record = FeedbackRecord(difficulty=resolved.value, recorded_at=now)
        progress = self.load_progress()

        update = {
            'feedback': [asdict(record)] + _list_value(progress, 'feedback'),
            'lastCompleted': now,
        }
        if routine is not None:
            update['lastRoutine'] = routine.as_text()

        self.save_progress(update)
        return record

    def latest_feedback(self) -> Optional[Dict[str, Any]]:
        feedback = _list_value(self.load_progress(), 'feedback')
        return feedback[0] if feedback else None

    # ------------------------------------------------------------------
    # Nutrition
    # ------------------------------------------------------------------

    def save_nutrition(self, prefs: NutritionPreferences) -> NutritionPreferences:
        self.save_progress({'nutrition': asdict(prefs)})
        return prefs

    def nutrition(self) -> Optional[NutritionPreferences]:
        data = self.load_progress().get('nutrition')
        if not isinstance(data, dict):
            return None
        known = {k: v for k, v in data.items() if k in NutritionPreferences.__dataclass_fields__}
        return NutritionPreferences(**known)

    # ------------------------------------------------------------------
    # Routines
    # ------------------------------------------------------------------

    def record_routine(self, plan: RoutinePlan, request: GenerationRequest) -> Dict[str, Any]:
        """Store a freshly generated plan as lastRoutine and at the top of history."""
        entry = {
            'date': datetime.now().isoformat(),
            'request': request.to_dict(),
            'routine': plan.as_text(),
        }
        history = [entry] + _list_value(self.load_progress(), 'history')
        self.save_progress({
            'lastRoutine': entry['routine'],
            'history': history[:self.history_limit],
        })
        return entry

    def history(self) -> List[Dict[str, Any]]:
        return _list_value(self.load_progress(), 'history')

    def last_routine(self) -> Optional[List[List[str]]]:
        return self.load_progress().get('lastRoutine')
