"""Tests for form validation and request assembly."""
import pytest

from fitroutine.errors import ErrorType, ValidationError
from fitroutine.forms import build_request, validate_form_data
from fitroutine.generator import Feedback, Nutrition


VALID_FORM = {'age': 30, 'level': 'beginner', 'goal': 'lose_weight', 'days': 3}


def test_valid_form_passes():
    validate_form_data(VALID_FORM)


def test_string_numbers_accepted():
    validate_form_data({**VALID_FORM, 'age': '45', 'days': '7'})


def test_missing_fields_all_reported():
    with pytest.raises(ValidationError) as exc_info:
        validate_form_data({'level': '', 'goal': None})
    errors = exc_info.value.errors
    assert errors == [
        "The field age is required",
        "The field level is required",
        "The field goal is required",
        "The field days is required",
    ]
    assert exc_info.value.type is ErrorType.VALIDATION
    assert str(exc_info.value) == ". ".join(errors)


@pytest.mark.parametrize("age", [9, 81, "old"])
def test_age_range(age):
    with pytest.raises(ValidationError) as exc_info:
        validate_form_data({**VALID_FORM, 'age': age})
    assert exc_info.value.errors == ["Age must be between 10 and 80 years"]


@pytest.mark.parametrize("days", [0, 8])
def test_days_range(days):
    with pytest.raises(ValidationError) as exc_info:
        validate_form_data({**VALID_FORM, 'days': days})
    assert exc_info.value.errors == ["Days per week must be between 1 and 7"]


@pytest.mark.parametrize("days", ["3.5", 2.5])
def test_fractional_days_rejected(days):
    with pytest.raises(ValidationError) as exc_info:
        validate_form_data({**VALID_FORM, 'days': days})
    assert exc_info.value.errors == ["Days per week must be a whole number"]


def test_fractional_age_rejected():
    with pytest.raises(ValidationError) as exc_info:
        validate_form_data({**VALID_FORM, 'age': 30.5})
    assert exc_info.value.errors == ["Age must be a whole number"]


def test_whole_floats_accepted():
    form = {**VALID_FORM, 'age': 30.0, 'days': '3.0'}
    validate_form_data(form)
    request = build_request(form)
    assert request.age == 30
    assert request.days == 3


def test_boundaries_accepted():
    validate_form_data({**VALID_FORM, 'age': 10, 'days': 1})
    validate_form_data({**VALID_FORM, 'age': 80, 'days': 7})


def test_custom_required_fields():
    validate_form_data({'level': 'advanced'}, required_fields=['level'])


class TestBuildRequest:

    def test_without_progress(self):
        request = build_request(VALID_FORM)
        assert request.age == 30
        assert request.days == 3
        assert request.feedback is None
        assert request.nutrition is None

    def test_uses_latest_feedback_and_nutrition(self):
        progress = {
            'feedback': [{'difficulty': 'hard'}, {'difficulty': 'easy'}],
            'nutrition': {'goal': 'lose_weight', 'calories': 1500, 'allergies': 'nuts'},
        }
        request = build_request({**VALID_FORM, 'age': '30', 'days': '2'}, progress)
        assert request.feedback == Feedback(difficulty='hard')
        assert request.nutrition == Nutrition(goal='lose_weight', calories=1500)
        assert request.days == 2

    def test_empty_feedback_list(self):
        request = build_request(VALID_FORM, {'feedback': []})
        assert request.feedback is None

    def test_non_list_feedback_ignored(self):
        request = build_request(VALID_FORM, {'feedback': {'difficulty': 'hard'}})
        assert request.feedback is None
