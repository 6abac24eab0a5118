"""Session engines for the two exercise modes."""

from core.sessions.typing_session import TypingSession, sample_round
from core.sessions.conjugation_session import (
    ConjugationSession,
    field_name,
    grade_entry,
    normalize_answer,
)

__all__ = [
    "TypingSession",
    "sample_round",
    "ConjugationSession",
    "field_name",
    "grade_entry",
    "normalize_answer",
]
