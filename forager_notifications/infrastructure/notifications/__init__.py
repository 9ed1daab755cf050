"""Push delivery helpers for the infrastructure layer."""

from .push import (
    ANDROID_CHANNEL_ID,
    CLICK_ACTION,
    PushDispatcher,
    build_push_message,
)

__all__ = [
    "ANDROID_CHANNEL_ID",
    "CLICK_ACTION",
    "PushDispatcher",
    "build_push_message",
]
