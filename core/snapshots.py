"""
Read-only snapshots handed to the presentation layer.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from core.constants import Mode, SessionState, SubmitOutcome


@dataclass(frozen=True)
class TypingResult:
    """
    Final score of a typing round.
    """
    elapsed_seconds: float
    wpm: int
    accuracy: int
    correct_count: int
    round_size: int


@dataclass(frozen=True)
class TickSnapshot:
    elapsed_seconds: float
    wpm: int


@dataclass(frozen=True)
class TypingSnapshot:
    """
    Everything needed to draw the typing panel.
    """
    state: SessionState
    current_word: Optional[str]
    current_index: int
    round_size: int
    correct_count: int
    elapsed_seconds: float
    wpm: int
    result: Optional[TypingResult] = None

    @property
    def progress(self) -> tuple[int, int]:
        return self.current_index, self.round_size


@dataclass(frozen=True)
class SubmitResult:
    """Outcome of one typed-word submission plus the state after it."""
    outcome: SubmitOutcome
    snapshot: TypingSnapshot

    @property
    def matched(self) -> bool:
        return self.outcome in (SubmitOutcome.ADVANCED, SubmitOutcome.FINISHED)


@dataclass(frozen=True)
class Mistake:
    person: str
    form: str
    expected: str


@dataclass(frozen=True)
class GradeResult:
    correct: int
    total: int
    mistakes: tuple[Mistake, ...] = ()

    @property
    def perfect(self) -> bool:
        return self.correct == self.total

    @property
    def error_count(self) -> int:
        return self.total - self.correct


@dataclass(frozen=True)
class ConjugationSnapshot:
    """
    Prompt and grid layout for the conjugation panel.

    cells lists every (person, form) pair in row-major order so the caller
    can build an input grid without knowing the answer table.
    """
    state: SessionState
    verb: Optional[str] = None
    forms: tuple[str, ...] = ()
    persons: tuple[str, ...] = ()
    cells: tuple[tuple[str, str], ...] = ()
    result: Optional[GradeResult] = None


@dataclass(frozen=True)
class ControllerSnapshot:
    mode: Mode
    typing: TypingSnapshot
    conjugation: ConjugationSnapshot = field(
        default_factory=lambda: ConjugationSnapshot(state=SessionState.IDLE)
    )
