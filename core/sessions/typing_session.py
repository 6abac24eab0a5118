"""
Typing Drill Session

One round = a random sample of words typed one after another. Only an exact,
case-sensitive match (after trimming) advances to the next word, so a
finished round always has correct_count == round_size and 100% accuracy.
That is intentional: wrong submissions are not counted against the player.

State machine:
    idle -> running (start) -> running (each correct word) -> finished
    reset() returns to idle from any state.
"""

from __future__ import annotations

import logging
import random
import time
from typing import Callable, Optional, Sequence

from core.constants import ROUND_SIZE, TICK_INTERVAL_SECONDS, SessionState, SubmitOutcome
from core.errors import EmptyDatasetError, SessionStateError
from core.scoring import accuracy_percent, elapsed_seconds, words_per_minute
from core.snapshots import SubmitResult, TickSnapshot, TypingResult, TypingSnapshot
from core.ticker import Publisher, Subscription, Ticker

logger = logging.getLogger(__name__)


def sample_round(
    words: Sequence[str],
    round_size: int,
    rng: random.Random
) -> list[str]:
    """
    Shuffle a copy of the dataset and take the first round_size words.

    Returns:
        min(len(words), round_size) words, drawn without replacement
    """
    shuffled = list(words)
    rng.shuffle(shuffled)
    return shuffled[:round_size]


class TypingSession:
    """
    Owns timing, word sequence, progress and scoring for one typing drill.

    Args:
        clock: Monotonic time source in seconds
        rng: Random source used to sample rounds
        round_size: Words per round unless start() overrides it
        tick_interval: Live timer period in seconds
    """

    def __init__(
        self,
        clock: Callable[[], float] = time.monotonic,
        rng: Optional[random.Random] = None,
        round_size: int = ROUND_SIZE,
        tick_interval: float = TICK_INTERVAL_SECONDS
    ):
        if round_size < 1:
            raise ValueError(f"Round size must be at least 1, got {round_size}")
        self.default_round_size = round_size
        self._clock = clock
        self._rng = rng or random.Random()
        self._ticker = Ticker(tick_interval, self._publish_tick)
        self._listeners = Publisher()
        self._clear()

    def _clear(self) -> None:
        self.state = SessionState.IDLE
        self.word_list: list[str] = []
        self.current_index = 0
        self.start_time: Optional[float] = None
        self.correct_count = 0
        self.round_size = 0
        self.result: Optional[TypingResult] = None

    # ---- Lifecycle ----

    def start(
        self,
        words: Sequence[str],
        round_size: Optional[int] = None
    ) -> TypingSnapshot:
        """
        Begin a fresh round, discarding any previous one.

        Raises:
            EmptyDatasetError: if no words are loaded (state is left untouched)
            ValueError: if round_size is below 1
        """
        if not words:
            raise EmptyDatasetError("words")

        if round_size is None:
            round_size = self.default_round_size
        if round_size < 1:
            raise ValueError(f"Round size must be at least 1, got {round_size}")

        self._stop_running()
        self._clear()

        self.word_list = sample_round(words, round_size, self._rng)
        self.round_size = len(self.word_list)
        if self.round_size < round_size:
            logger.warning(
                "Only %d words available; round shortened from %d",
                self.round_size, round_size
            )

        self.start_time = self._clock()
        self.state = SessionState.RUNNING
        self._ticker.start(self.start_time)

        logger.info("Typing round started with %d words", self.round_size)
        return self.snapshot()

    def reset(self) -> TypingSnapshot:
        self._stop_running()
        self._clear()
        return self.snapshot()

    def _stop_running(self) -> None:
        self._ticker.cancel()
        self._listeners.revoke_all()

    # ---- Input ----

    @property
    def current_word(self) -> Optional[str]:
        if self.state != SessionState.RUNNING:
            return None
        return self.word_list[self.current_index]

    def is_mismatch(self, typed_text: str) -> bool:
        """
        True when Enter was pressed on text that does not match.

        Drives the transient error flash only; never changes state.
        """
        if self.state != SessionState.RUNNING:
            return False
        return typed_text.strip() != self.current_word

    def submit(self, typed_text: str) -> SubmitResult:
        """
        Check the typed text against the current word.

        A match advances the round (and finishes it after the last word).
        A mismatch leaves the state unchanged.
        """
        if self.state != SessionState.RUNNING:
            return SubmitResult(SubmitOutcome.IGNORED, self.snapshot())

        if typed_text.strip() != self.current_word:
            return SubmitResult(SubmitOutcome.NO_MATCH, self.snapshot())

        self.correct_count += 1
        self.current_index += 1

        if self.current_index == self.round_size:
            self.finish()
            return SubmitResult(SubmitOutcome.FINISHED, self.snapshot())
        return SubmitResult(SubmitOutcome.ADVANCED, self.snapshot())

    def finish(self) -> TypingResult:
        """
        Close the round and compute the final score.

        Raises:
            SessionStateError: if words remain or no round is running
        """
        if self.state == SessionState.FINISHED and self.result is not None:
            return self.result
        if self.state != SessionState.RUNNING or self.current_index != self.round_size:
            raise SessionStateError(
                f"Cannot finish typing round at {self.current_index}/{self.round_size}"
            )

        self._stop_running()
        elapsed = self.elapsed_seconds(self._clock())
        self.result = TypingResult(
            elapsed_seconds=elapsed,
            wpm=words_per_minute(self.correct_count, elapsed),
            accuracy=accuracy_percent(self.correct_count, self.round_size),
            correct_count=self.correct_count,
            round_size=self.round_size,
        )
        self.state = SessionState.FINISHED

        logger.info(
            "Typing round finished: %.2fs, %d WPM, %d%% accuracy",
            self.result.elapsed_seconds, self.result.wpm, self.result.accuracy
        )
        return self.result

    # ---- Timer ----

    def elapsed_seconds(self, now: float) -> float:
        return elapsed_seconds(self.start_time, now)

    def tick(self, now: Optional[float] = None) -> Optional[TickSnapshot]:
        """
        Recompute the live timer values.

        Listeners are notified at most once per tick interval. Returns None
        once the round is no longer running.
        """
        if self.state != SessionState.RUNNING:
            return None
        now = self._clock() if now is None else now
        self._ticker.poll(now)
        return self._tick_snapshot(now)

    def subscribe(self, listener: Callable[[TickSnapshot], None]) -> Subscription:
        """
        Register a live-timer listener for the running round.

        Raises:
            SessionStateError: if no round is running
        """
        if self.state != SessionState.RUNNING:
            raise SessionStateError("Timer listeners are only granted while a round is running")
        return self._listeners.subscribe(listener)

    def _tick_snapshot(self, now: float) -> TickSnapshot:
        elapsed = self.elapsed_seconds(now)
        return TickSnapshot(
            elapsed_seconds=elapsed,
            wpm=words_per_minute(self.correct_count, elapsed),
        )

    def _publish_tick(self, now: float) -> None:
        self._listeners.publish(self._tick_snapshot(now))

    # ---- Snapshot ----

    def snapshot(self, now: Optional[float] = None) -> TypingSnapshot:
        if self.result is not None:
            elapsed, wpm = self.result.elapsed_seconds, self.result.wpm
        elif self.state == SessionState.RUNNING:
            live = self._tick_snapshot(self._clock() if now is None else now)
            elapsed, wpm = live.elapsed_seconds, live.wpm
        else:
            elapsed, wpm = 0.0, 0

        return TypingSnapshot(
            state=self.state,
            current_word=self.current_word,
            current_index=self.current_index,
            round_size=self.round_size or self.default_round_size,
            correct_count=self.correct_count,
            elapsed_seconds=elapsed,
            wpm=wpm,
            result=self.result,
        )
