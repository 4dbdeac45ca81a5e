"""Tests for plain-text export."""
from fitroutine.export import export_text, format_days, format_plan_text, write_export
from fitroutine.generator import GenerationRequest, Feedback, generate_routine


def test_format_days_from_text_lists():
    text = format_days([["Squats 3x12", "Plank 3x20s"], ["Running 25 min"]])
    assert text == "Day 1:\n- Squats 3x12\n- Plank 3x20s\n\nDay 2:\n- Running 25 min"


def test_format_days_from_plan():
    plan = generate_routine(age=30, level="advanced", goal="stay_fit", days=1)
    assert format_days(plan) == "Day 1:\n- Running 30 min\n- Push-ups 4x15\n- Plank 4x40s\n- Stretching 15 min"


def test_export_text_header():
    text = export_text([["Squats 3x12"]])
    assert text == "My personalized routine:\n\nDay 1:\n- Squats 3x12"


def test_write_export(tmp_path):
    plan = generate_routine(age=30, level="beginner", goal="lose_weight", days=2)
    path = write_export(plan, tmp_path / "my_routine.txt")
    content = path.read_text(encoding="utf-8")
    assert content.startswith("My personalized routine:\n\nDay 1:\n- Brisk walk 20 min")
    assert "\n\nDay 2:\n- Knee push-ups 3x10" in content


def test_format_plan_text():
    request = GenerationRequest(
        level="beginner", goal="lose_weight", days=2, age=30, feedback=Feedback(difficulty="hard")
    )
    text = format_plan_text(generate_routine(request), request)
    assert "Level: Beginner" in text
    assert "Goal: Lose Weight" in text
    assert "Adjusted for last session: hard" in text
    assert "DAY 2" in text
    assert "  1. Brisk walk 18 min" in text
