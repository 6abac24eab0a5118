"""
Mode controller: selects the active exercise and routes commands to it.

This is the only mutation path into the sessions. The presentation layer
holds one controller per user session and calls:

    select_mode(tag), start(), submit_typed_word(text),
    submit_conjugation_grid(answers), tick(now), reset()
"""

from __future__ import annotations

import logging
import random
import time
from typing import Callable, Mapping, Optional, Union

from core.constants import ROUND_SIZE, TICK_INTERVAL_SECONDS, Mode
from core.dataset import Dataset
from core.errors import SessionStateError
from core.sessions import ConjugationSession, TypingSession
from core.sessions.conjugation_session import CellKey
from core.snapshots import (
    ConjugationSnapshot,
    ControllerSnapshot,
    GradeResult,
    SubmitResult,
    TickSnapshot,
    TypingSnapshot,
)

logger = logging.getLogger(__name__)


class ModeController:
    """
    Owns one session per mode and the currently selected mode tag.

    Args:
        dataset: Loaded data, shared read-only with both sessions
        clock: Time source for the typing drill
        rng: Random source for both sessions
        round_size: Words per typing round
        tick_interval: Live timer period in seconds
    """

    def __init__(
        self,
        dataset: Dataset,
        clock: Callable[[], float] = time.monotonic,
        rng: Optional[random.Random] = None,
        round_size: int = ROUND_SIZE,
        tick_interval: float = TICK_INTERVAL_SECONDS
    ):
        rng = rng or random.Random()
        self.dataset = dataset
        self.mode = Mode.TYPING
        self.typing = TypingSession(
            clock=clock,
            rng=rng,
            round_size=round_size,
            tick_interval=tick_interval,
        )
        self.conjugation = ConjugationSession(rng=rng)

    def _session_for(self, mode: Mode) -> Union[TypingSession, ConjugationSession]:
        if mode == Mode.TYPING:
            return self.typing
        return self.conjugation

    def _require_mode(self, mode: Mode) -> None:
        if self.mode != mode:
            raise SessionStateError(
                f"Command for '{mode.value}' mode while '{self.mode.value}' is selected"
            )

    # ---- Commands ----

    def select_mode(self, tag: Union[Mode, str]) -> ControllerSnapshot:
        """
        Switch modes. Both sessions return to idle; nothing auto-starts.

        Raises:
            ValueError: if tag is not a known mode
        """
        mode = Mode(tag)
        other = Mode.CONJUGATION if mode == Mode.TYPING else Mode.TYPING

        self._session_for(other).reset()
        self._session_for(mode).reset()
        self.mode = mode

        logger.info("Mode selected: %s", mode.value)
        return self.snapshot()

    def start(self) -> Union[TypingSnapshot, ConjugationSnapshot]:
        """
        Start a round in the active mode.

        EmptyDatasetError and MalformedEntryError propagate unchanged.
        """
        if self.mode == Mode.TYPING:
            return self.typing.start(self.dataset.words)
        return self.conjugation.start(self.dataset.conjugations)

    def reset(self) -> ControllerSnapshot:
        self._session_for(self.mode).reset()
        return self.snapshot()

    def submit_typed_word(self, text: str) -> SubmitResult:
        self._require_mode(Mode.TYPING)
        return self.typing.submit(text)

    def submit_conjugation_grid(self, answers: Mapping[CellKey, str]) -> GradeResult:
        self._require_mode(Mode.CONJUGATION)
        return self.conjugation.grade(answers)

    def tick(self, now: Optional[float] = None) -> Optional[TickSnapshot]:
        """Live timer refresh; None unless a typing round is running."""
        if self.mode != Mode.TYPING:
            return None
        return self.typing.tick(now)

    # ---- Snapshot ----

    def snapshot(self) -> ControllerSnapshot:
        return ControllerSnapshot(
            mode=self.mode,
            typing=self.typing.snapshot(),
            conjugation=self.conjugation.snapshot(),
        )
