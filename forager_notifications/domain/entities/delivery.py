"""Outcome values returned by best-effort side effects."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DeliveryResult:
    """Result of a single store or push attempt.

    Failures are carried as values; callers decide whether to act on them.
    """

    ok: bool
    reference: str | None = None
    error: Exception | None = None

    @classmethod
    def success(cls, reference: str | None = None) -> "DeliveryResult":
        return cls(ok=True, reference=reference)

    @classmethod
    def failure(cls, error: Exception) -> "DeliveryResult":
        return cls(ok=False, error=error)


@dataclass(frozen=True)
class NotificationOutcome:
    """Which exit an event handler took."""

    stored: bool = False
    pushed: bool = False
    skipped_reason: str | None = None

    @classmethod
    def skipped(cls, reason: str, *, stored: bool = False) -> "NotificationOutcome":
        return cls(stored=stored, pushed=False, skipped_reason=reason)


__all__ = ["DeliveryResult", "NotificationOutcome"]
