"""Pollers for live feeds."""

from septa_tracker.adapters.pollers.live_feed_poller import LiveFeedPoller

__all__ = ["LiveFeedPoller"]
