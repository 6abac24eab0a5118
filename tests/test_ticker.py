import pytest

from core.ticker import Publisher, Ticker


def test_ticker_fires_once_per_period():
    fired = []
    ticker = Ticker(0.1, fired.append)
    ticker.start(0.0)

    assert ticker.poll(0.05) is False
    assert ticker.poll(0.1) is True
    assert ticker.poll(0.15) is False
    assert ticker.poll(0.2) is True
    assert fired == [0.1, 0.2]


def test_missed_periods_collapse_into_one_tick():
    fired = []
    ticker = Ticker(0.1, fired.append)
    ticker.start(0.0)

    ticker.poll(5.0)
    assert fired == [5.0]
    assert ticker.poll(5.05) is False


def test_no_ticks_after_cancel():
    fired = []
    ticker = Ticker(0.1, fired.append)
    ticker.start(0.0)
    ticker.cancel()

    assert ticker.active is False
    assert ticker.poll(10.0) is False
    assert fired == []


def test_interval_must_be_positive():
    with pytest.raises(ValueError):
        Ticker(0, lambda now: None)


def test_publisher_revokes_subscriptions():
    received = []
    publisher = Publisher()
    sub = publisher.subscribe(received.append)

    publisher.publish("a")
    publisher.revoke_all()
    publisher.publish("b")

    assert received == ["a"]
    assert sub.active is False
    assert len(publisher) == 0


def test_unsubscribe_removes_listener():
    received = []
    publisher = Publisher()
    sub = publisher.subscribe(received.append)
    sub.unsubscribe()
    publisher.publish("a")

    assert received == []
    assert sub.active is False
