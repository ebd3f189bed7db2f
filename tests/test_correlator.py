"""Tests for matching live trains with predicted arrivals."""

from septa_tracker.application.services import correlate, unmatched_arrivals
from tests.fakes import make_arrival, make_train


def test_pairs_follow_arrival_order() -> None:
    """Given trains and arrivals in different orders, when correlating, then arrival order wins."""
    trains = [make_train("300"), make_train("100"), make_train("200")]
    arrivals = [make_arrival("100"), make_arrival("200"), make_arrival("300")]

    result = correlate(trains, arrivals)

    assert [arrival.train_no for _, arrival in result] == ["100", "200", "300"]
    assert all(train.train_no == arrival.train_no for train, arrival in result)


def test_arrivals_without_live_train_are_omitted() -> None:
    """Given an arrival with no live train, when correlating, then it is left out."""
    trains = [make_train("100")]
    arrivals = [make_arrival("100"), make_arrival("999")]

    result = correlate(trains, arrivals)

    assert len(result) == 1
    assert unmatched_arrivals(trains, arrivals) == [arrivals[1]]


def test_each_origin_train_appears_once() -> None:
    """Given the same train predicted twice, when correlating, then only the first is paired."""
    trains = [make_train("100")]
    first = make_arrival("100", departure_time="3:00PM")
    second = make_arrival("100", departure_time="4:00PM")

    result = correlate(trains, [first, second])

    assert result == [(trains[0], first)]


def test_first_duplicate_train_wins() -> None:
    """Given duplicate train numbers in the feed, when correlating, then the first train is used."""
    first = make_train("100", current_stop="Ardmore")
    second = make_train("100", current_stop="Wayne")

    result = correlate([first, second], [make_arrival("100")])

    assert result[0][0] is first


def test_result_size_is_bounded() -> None:
    """Given any inputs, when correlating, then at most min(|V|, |A|) pairs are produced."""
    trains = [make_train(str(n)) for n in range(5)]
    arrivals = [make_arrival(str(n)) for n in range(3, 10)]

    result = correlate(trains, arrivals)

    assert len(result) <= min(len(trains), len(arrivals))
    assert len(result) == 2


def test_inputs_are_not_mutated() -> None:
    """Given input lists, when correlating, then they are left untouched."""
    trains = [make_train("1"), make_train("2")]
    arrivals = [make_arrival("2"), make_arrival("1")]
    trains_before, arrivals_before = list(trains), list(arrivals)

    correlate(trains, arrivals)

    assert trains == trains_before
    assert arrivals == arrivals_before


def test_empty_inputs() -> None:
    """Given no trains or no arrivals, when correlating, then nothing is paired."""
    assert correlate([], [make_arrival("1")]) == []
    assert correlate([make_train("1")], []) == []


def test_repeated_live_train_arrival_is_in_neither_list() -> None:
    """Given two arrivals of one live train, when splitting, then the second is neither tracked nor prediction only."""
    trains = [make_train("100")]
    first = make_arrival("100", departure_time="3:00PM")
    second = make_arrival("100", departure_time="4:00PM")
    untracked = make_arrival("200")

    tracked = [arrival for _, arrival in correlate(trains, [first, second, untracked])]

    assert tracked == [first]
    assert unmatched_arrivals(trains, [first, second, untracked]) == [untracked]
