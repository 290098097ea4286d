"""Caching helpers for parsed rate documents."""

from __future__ import annotations

from cnb_rates.cache.daily_cache import DailyCache

__all__ = ["DailyCache"]
