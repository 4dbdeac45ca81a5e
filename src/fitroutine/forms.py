"""
Form validation and request assembly.

This is the first line of defence: the generator re-checks level, goal
and days, but bad input should be caught here with friendlier messages.
"""

from typing import Any, Dict, Iterable, List, Optional

from .errors import ValidationError
from .generator import Feedback, GenerationRequest, Nutrition


MIN_AGE = 10
MAX_AGE = 80
MIN_DAYS = 1
MAX_DAYS = 7

DEFAULT_REQUIRED_FIELDS = ('age', 'level', 'goal', 'days')


def _as_number(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _as_whole_number(value: Any) -> Optional[int]:
    """``30``, ``"30"`` and ``30.0`` give 30; fractions and non-numbers give None."""
    number = _as_number(value)
    if number is None or not number.is_integer():
        return None
    return int(number)


def _check_whole_in_range(value: Any, low: int, high: int, label: str, unit: str, errors: List[str]) -> None:
    number = _as_number(value)
    if number is None or not low <= number <= high:
        errors.append(f"{label} must be between {low} and {high}{unit}")
    elif not number.is_integer():
        errors.append(f"{label} must be a whole number")


def validate_form_data(data: Dict[str, Any], required_fields: Iterable[str] = DEFAULT_REQUIRED_FIELDS) -> None:
    """
    Check form values.

    Raises:
        ValidationError: Listing every missing field, out-of-range value
            and fractional age or day count
    """
    errors: List[str] = []

    for field in required_fields:
        value = data.get(field)
        if value is None or value == '':
            errors.append(f"The field {field} is required")

    age = data.get('age')
    if age not in (None, ''):
        _check_whole_in_range(age, MIN_AGE, MAX_AGE, "Age", " years", errors)

    days = data.get('days')
    if days not in (None, ''):
        _check_whole_in_range(days, MIN_DAYS, MAX_DAYS, "Days per week", "", errors)

    if errors:
        raise ValidationError(errors)


def _form_int(form: Dict[str, Any], field: str) -> Any:
    # Unvalidated values pass through so the generator reports them
    value = form.get(field)
    if value in (None, ''):
        return None
    whole = _as_whole_number(value)
    return whole if whole is not None else value


def build_request(form: Dict[str, Any], progress: Optional[Dict[str, Any]] = None) -> GenerationRequest:
    """
    Combine form values with stored progress.

    The most recent feedback record and the saved nutrition preferences
    are attached when present. Expects a form that passed
    validate_form_data().
    """
    progress = progress or {}
    feedback_records = progress.get('feedback')
    latest = feedback_records[0] if isinstance(feedback_records, list) and feedback_records else None
    nutrition = progress.get('nutrition')

    return GenerationRequest(
        age=_form_int(form, 'age'),
        level=form.get('level'),
        goal=form.get('goal'),
        days=_form_int(form, 'days'),
        feedback=Feedback.from_dict(latest) if isinstance(latest, dict) else None,
        nutrition=Nutrition.from_dict(nutrition) if isinstance(nutrition, dict) else None,
    )
