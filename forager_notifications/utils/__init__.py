"""Utility helpers for reusable functionality."""

from .timestamps import notification_timestamp, notification_timezone

__all__ = ["notification_timestamp", "notification_timezone"]
