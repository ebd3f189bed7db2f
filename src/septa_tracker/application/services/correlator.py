"""Matching of live trains with predicted arrivals."""

from septa_tracker.domain.models.next_arrival import NextArrival
from septa_tracker.domain.models.train import Train


def correlate(trains: list[Train], arrivals: list[NextArrival]) -> list[tuple[Train, NextArrival]]:
    """Pair each predicted arrival with the live train serving it.

    Output follows the order of ``arrivals``. Each train number is used at
    most once; if the feed reports the same train number twice, the first
    train wins. Arrivals without a live train are left out.
    """
    matched: list[tuple[Train, NextArrival]] = []
    consumed: set[str] = set()

    for arrival in arrivals:
        if arrival.train_no in consumed:
            continue
        for train in trains:
            if train.train_no == arrival.train_no:
                matched.append((train, arrival))
                consumed.add(arrival.train_no)
                break

    return matched


def unmatched_arrivals(trains: list[Train], arrivals: list[NextArrival]) -> list[NextArrival]:
    """Arrivals with no live train, shown as prediction only.

    An arrival whose train is live but was already paired with an earlier
    arrival of the same train number appears in neither list.
    """
    live = {train.train_no for train in trains}
    return [arrival for arrival in arrivals if arrival.train_no not in live]
