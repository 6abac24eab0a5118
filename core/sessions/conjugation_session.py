"""
Verb Conjugation Session

Picks one verb at random and grades a full form x person grid of answers.

Grading normalizes both sides with strip().lower() and walks the grid
row-major (person, then form). Blank or missing cells count as wrong.
"""

from __future__ import annotations

import logging
import random
from typing import Mapping, Optional, Sequence, Union

from core.constants import SessionState
from core.errors import EmptyDatasetError, SessionStateError
from core.schemas import ConjugationEntry
from core.snapshots import ConjugationSnapshot, GradeResult, Mistake

logger = logging.getLogger(__name__)

CellKey = Union[tuple[str, str], str]


def field_name(person: str, form: str) -> str:
    """
    Flat input name for a grid cell, e.g. "io_present".

    Ambiguous when a person or form contains "_": ("io", "a_b") and
    ("io_a", "b") share "io_a_b". Only (person, form) tuple keys are
    unambiguous; grading looks them up first.
    """
    return f"{person}_{form}"


def normalize_answer(text: Optional[str]) -> str:
    return (text or "").strip().lower()


def _lookup(submitted: Mapping[CellKey, str], person: str, form: str) -> str:
    if (person, form) in submitted:
        return submitted[(person, form)] or ""
    return submitted.get(field_name(person, form)) or ""


def grade_entry(entry: ConjugationEntry, submitted: Mapping[CellKey, str]) -> GradeResult:
    """
    Grade a submission against one verb's answer grid.

    Args:
        entry: Verb with a validated, rectangular grid
        submitted: Answers keyed by (person, form), or by field_name() for
            grids whose names contain no "_"

    Returns:
        GradeResult with mistakes in row-major (person, then form) order
    """
    correct = 0
    total = 0
    mistakes: list[Mistake] = []

    for person in entry.persons:
        for form in entry.forms:
            expected = entry.expected(person, form)
            total += 1
            if normalize_answer(_lookup(submitted, person, form)) == normalize_answer(expected):
                correct += 1
            else:
                mistakes.append(Mistake(person=person, form=form, expected=expected))

    return GradeResult(correct=correct, total=total, mistakes=tuple(mistakes))


class ConjugationSession:
    """
    Owns the selected verb, its answer grid and the graded result.

    State machine:
        idle -> active (start) -> graded (grade); reset() returns to idle
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng or random.Random()
        self._clear()

    def _clear(self) -> None:
        self.state = SessionState.IDLE
        self.entry: Optional[ConjugationEntry] = None
        self.result: Optional[GradeResult] = None

    @property
    def verb(self) -> Optional[str]:
        return self.entry.verb if self.entry else None

    def start(self, entries: Sequence[ConjugationEntry]) -> ConjugationSnapshot:
        """
        Pick a verb uniformly at random and expose its grid layout.

        Raises:
            EmptyDatasetError: if no conjugation entries are loaded
            MalformedEntryError: if the chosen entry's grid is not rectangular;
                the round is aborted and the session stays idle
        """
        if not entries:
            raise EmptyDatasetError("conjugations")

        self._clear()
        entry = self._rng.choice(list(entries))
        entry.validate_grid()

        self.entry = entry
        self.state = SessionState.ACTIVE
        logger.info(
            "Conjugation round started: %s (%d forms x %d persons)",
            entry.verb, len(entry.forms), len(entry.persons)
        )
        return self.snapshot()

    def grade(self, submitted: Mapping[CellKey, str]) -> GradeResult:
        """
        Grade the submitted grid.

        Grading again returns the same result for the same input; it is a
        re-check of the stored answers, not a new attempt.

        Raises:
            SessionStateError: if no verb has been drawn yet
        """
        if self.state not in (SessionState.ACTIVE, SessionState.GRADED) or self.entry is None:
            raise SessionStateError("No conjugation round is active")

        self.result = grade_entry(self.entry, submitted)
        self.state = SessionState.GRADED
        logger.info(
            "Graded %s: %d/%d correct", self.entry.verb, self.result.correct, self.result.total
        )
        return self.result

    def reset(self) -> ConjugationSnapshot:
        self._clear()
        return self.snapshot()

    def snapshot(self) -> ConjugationSnapshot:
        if self.entry is None:
            return ConjugationSnapshot(state=self.state)

        persons = tuple(self.entry.persons)
        forms = tuple(self.entry.forms)
        return ConjugationSnapshot(
            state=self.state,
            verb=self.entry.verb,
            forms=forms,
            persons=persons,
            cells=tuple((person, form) for person in persons for form in forms),
            result=self.result,
        )
