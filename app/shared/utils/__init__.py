"""Shared utilities: datetime and duration helpers."""

from app.shared.utils.datetime import epoch_millis, parse_duration, utc_now

__all__ = ["epoch_millis", "parse_duration", "utc_now"]
