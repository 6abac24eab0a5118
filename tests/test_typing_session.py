import random

import pytest

from core.constants import SessionState, SubmitOutcome
from core.errors import EmptyDatasetError, SessionStateError
from core.sessions import TypingSession, sample_round


def _type_all(session):
    result = None
    while session.state == SessionState.RUNNING:
        result = session.submit(session.current_word)
    return result


def test_start_with_empty_dataset_creates_no_round(clock):
    session = TypingSession(clock=clock)

    with pytest.raises(EmptyDatasetError):
        session.start([])

    assert session.state == SessionState.IDLE
    assert session.word_list == []
    assert session.start_time is None


def test_start_returns_first_word_and_zero_progress(clock, rng, words):
    session = TypingSession(clock=clock, rng=rng)
    snapshot = session.start(words)

    assert snapshot.state == SessionState.RUNNING
    assert snapshot.current_word == session.word_list[0]
    assert snapshot.progress == (0, 10)
    assert session.start_time == clock.now


def test_sample_is_a_permutation_subset():
    dataset = [f"word{i}" for i in range(25)]
    for seed in range(20):
        sample = sample_round(dataset, 10, random.Random(seed))
        assert len(sample) == 10
        assert len(set(sample)) == 10
        assert set(sample) <= set(dataset)


def test_sample_is_shortened_for_small_datasets():
    sample = sample_round(["a", "b", "c"], 10, random.Random(0))
    assert sorted(sample) == ["a", "b", "c"]


def test_sample_does_not_mutate_dataset(words):
    original = list(words)
    sample_round(words, 10, random.Random(3))
    assert words == original


def test_mismatch_leaves_state_unchanged(clock, rng, words):
    session = TypingSession(clock=clock, rng=rng)
    session.start(words)
    expected = session.current_word

    result = session.submit(expected.upper() + "x")

    assert result.outcome == SubmitOutcome.NO_MATCH
    assert not result.matched
    assert session.current_index == 0
    assert session.correct_count == 0
    assert session.current_word == expected


def test_match_is_case_sensitive_and_trimmed(clock, rng):
    session = TypingSession(clock=clock, rng=rng)
    session.start(["Hello", "World"], round_size=2)
    first = session.current_word

    assert session.submit(first.lower()).outcome == SubmitOutcome.NO_MATCH
    assert session.submit(f"  {first}\n").outcome == SubmitOutcome.ADVANCED
    assert session.current_index == 1


def test_is_mismatch_never_changes_state(clock, rng, words):
    session = TypingSession(clock=clock, rng=rng)
    session.start(words)

    assert session.is_mismatch("nope") is True
    assert session.is_mismatch(session.current_word) is False
    assert session.current_index == 0
    assert session.correct_count == 0


def test_scenario_a_full_round(clock, rng, words):
    session = TypingSession(clock=clock, rng=rng)
    session.start(words)

    for _ in range(9):
        clock.advance(1.5)
        assert session.submit(session.current_word).outcome == SubmitOutcome.ADVANCED
    clock.advance(1.5)
    last = session.submit(session.current_word)

    assert last.outcome == SubmitOutcome.FINISHED
    assert session.state == SessionState.FINISHED
    result = session.finish()
    assert result.accuracy == 100
    assert result.correct_count == 10
    assert result.elapsed_seconds == pytest.approx(15.0)
    assert result.wpm == 40


def test_accuracy_is_always_100_by_construction(clock):
    # Only exact matches advance, so every finished round is fully correct.
    # This is an intended property of the drill, not real accuracy tracking.
    for seed in range(10):
        session = TypingSession(clock=clock, rng=random.Random(seed))
        session.start([f"w{i}" for i in range(15)])
        while session.state == SessionState.RUNNING:
            session.submit("wrong")
            clock.advance(0.3)
            session.submit(session.current_word)

        assert session.correct_count == session.round_size
        assert session.result.accuracy == 100


def test_short_dataset_finishes_after_available_words(clock, rng):
    session = TypingSession(clock=clock, rng=rng)
    session.start(["one", "two", "three"])
    assert session.round_size == 3

    clock.advance(3.0)
    _type_all(session)

    assert session.result.correct_count == 3
    assert session.result.accuracy == 100


def test_finish_before_last_word_is_rejected(clock, rng, words):
    session = TypingSession(clock=clock, rng=rng)
    session.start(words)

    with pytest.raises(SessionStateError):
        session.finish()


def test_finish_is_stable_once_finished(clock, rng, words):
    session = TypingSession(clock=clock, rng=rng)
    session.start(words)
    _type_all(session)
    first = session.finish()
    clock.advance(100)

    assert session.finish() == first


def test_submit_outside_running_is_ignored(clock, rng, words):
    session = TypingSession(clock=clock, rng=rng)
    assert session.submit("cat").outcome == SubmitOutcome.IGNORED

    session.start(words)
    _type_all(session)
    assert session.submit("cat").outcome == SubmitOutcome.IGNORED
    assert session.correct_count == 10


def test_elapsed_seconds_is_independent_of_polling(clock, rng, words):
    session = TypingSession(clock=clock, rng=rng)
    session.start(words)
    start = session.start_time

    assert session.elapsed_seconds(start + 4.25) == pytest.approx(4.25)
    assert session.elapsed_seconds(start + 4.25) == pytest.approx(4.25)


def test_tick_publishes_to_subscribers_while_running(clock, rng, words):
    session = TypingSession(clock=clock, rng=rng, tick_interval=0.125)
    session.start(words)
    received = []
    session.subscribe(received.append)

    session.submit(session.current_word)
    clock.advance(0.0625)
    session.tick()
    clock.advance(0.0625)
    live = session.tick()

    assert len(received) == 1
    assert received[0] == live
    assert live.elapsed_seconds == pytest.approx(0.125)
    assert live.wpm == 480


def test_no_ticks_after_finish(clock, rng, words):
    session = TypingSession(clock=clock, rng=rng, tick_interval=0.1)
    session.start(words)
    received = []
    subscription = session.subscribe(received.append)

    _type_all(session)
    clock.advance(5.0)

    assert session.tick() is None
    assert received == []
    assert subscription.active is False


def test_reset_discards_progress_and_cancels_ticks(clock, rng, words):
    session = TypingSession(clock=clock, rng=rng, tick_interval=0.1)
    session.start(words)
    session.submit(session.current_word)
    received = []
    subscription = session.subscribe(received.append)

    snapshot = session.reset()
    clock.advance(1.0)

    assert snapshot.state == SessionState.IDLE
    assert snapshot.progress == (0, 10)
    assert snapshot.elapsed_seconds == 0.0
    assert session.tick() is None
    assert received == []
    assert subscription.active is False


def test_subscribe_requires_running_round(clock):
    session = TypingSession(clock=clock)
    with pytest.raises(SessionStateError):
        session.subscribe(lambda tick: None)


def test_restart_discards_previous_round(clock, rng, words):
    session = TypingSession(clock=clock, rng=rng)
    session.start(words)
    session.submit(session.current_word)
    clock.advance(2.0)

    session.start(words)

    assert session.current_index == 0
    assert session.correct_count == 0
    assert session.start_time == clock.now


@pytest.mark.parametrize("round_size", [0, -3])
def test_round_size_below_one_is_rejected(clock, rng, words, round_size):
    session = TypingSession(clock=clock, rng=rng)
    session.start(words)
    session.submit(session.current_word)

    with pytest.raises(ValueError):
        session.start(words, round_size=round_size)

    # previous round is left untouched
    assert session.state == SessionState.RUNNING
    assert session.current_index == 1
    assert len(session.word_list) == 10


def test_default_round_size_below_one_is_rejected(clock):
    with pytest.raises(ValueError):
        TypingSession(clock=clock, round_size=0)
