import pytest

from services.interview_prompt import build_interviewer_instructions


def test_defaults_when_absent():
    text = build_interviewer_instructions()
    assert "- Role: Software Engineer" in text
    assert "- Tone: professional and friendly" in text
    assert "- Difficulty: medium" in text


@pytest.mark.parametrize("empty", ["", None])
def test_empty_values_fall_back_to_defaults(empty):
    text = build_interviewer_instructions(role=empty, tone=empty, difficulty=empty)
    assert "- Role: Software Engineer" in text
    assert "- Tone: professional and friendly" in text
    assert "- Difficulty: medium" in text


def test_values_are_embedded_verbatim():
    text = build_interviewer_instructions("Data {Scientist}", "blunt; no small talk", "HARD")
    assert "- Role: Data {Scientist}" in text
    assert "- Tone: blunt; no small talk" in text
    assert "- Difficulty: HARD" in text
    assert "Software Engineer" not in text


def test_instructions_are_trimmed():
    text = build_interviewer_instructions()
    assert text.startswith("You are an AI job interviewer speaking with a candidate.")
    assert text.endswith("- Speak clearly at a natural pace.")
    assert "- Ask one question at a time." in text
