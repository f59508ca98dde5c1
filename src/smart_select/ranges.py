"""Interval helpers shared by the path resolver and the growth engine."""

from .models import Interval


def interval_is_valid(text: str, interval: Interval) -> bool:
    return 0 <= interval.start <= interval.end <= len(text)


def clamp_interval(text: str, interval: Interval) -> Interval:
    start = max(0, min(interval.start, len(text)))
    end = max(start, min(interval.end, len(text)))
    return Interval(start, end)


def collapse_whitespace(text: str, interval: Interval) -> Interval:
    """Trim whitespace from both ends of ``interval``.

    The start moves forward over whitespace and the end moves backward over
    whitespace; the start never passes the end, so an all-whitespace interval
    collapses to an empty one at its first non-skipped position.
    """
    start, end = interval.start, interval.end
    while start < end and text[start].isspace():
        start += 1
    while end > start and text[end - 1].isspace():
        end -= 1
    return Interval(start, end)


def contains(outer: Interval, inner: Interval) -> bool:
    return outer.start <= inner.start and inner.end <= outer.end


def strictly_extends(candidate: Interval, interval: Interval) -> bool:
    """True when ``candidate`` grows past ``interval`` on one side without retracting on the other"""
    return (
        (candidate.start < interval.start and candidate.end >= interval.end)
        or (candidate.end > interval.end and candidate.start <= interval.start)
    )
