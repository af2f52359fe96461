# services/interview_prompt.py
"""
Interviewer persona instructions for the Realtime session.
"""
from typing import Optional

from models.credentials import DEFAULT_DIFFICULTY, DEFAULT_ROLE, DEFAULT_TONE


INTERVIEWER_TEMPLATE = """
You are an AI job interviewer speaking with a candidate.
- Role: {role}
- Tone: {tone}
- Difficulty: {difficulty}

Rules:
- Ask one question at a time.
- Wait until the candidate seems finished before asking the next.
- Keep questions concise but thoughtful.
- If the candidate is silent for several seconds, gently prompt them.
- Speak clearly at a natural pace.
"""


def build_interviewer_instructions(
    role: Optional[str] = None,
    tone: Optional[str] = None,
    difficulty: Optional[str] = None,
) -> str:
    """Fill the interviewer template. Empty values fall back to the defaults."""
    return INTERVIEWER_TEMPLATE.format(
        role=role or DEFAULT_ROLE,
        tone=tone or DEFAULT_TONE,
        difficulty=difficulty or DEFAULT_DIFFICULTY,
    ).strip()
