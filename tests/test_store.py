"""Tests for the notification history writer."""

from datetime import datetime, timezone

from forager_notifications.application.use_cases.notifications import store_notification


def test_store_notification_appends_unread_record(services, firestore):
    result = store_notification(
        services,
        "owner@example.com",
        "Someone liked your post",
        'Cy liked "Morels"',
        "post_like",
        {
            "type": "post_like",
            "postId": "p1",
            "likerEmail": "cy@example.com",
            "fromEmail": "cy@example.com",
            "fromDisplayName": "Cy",
        },
    )

    assert result.ok is True
    assert result.reference == "auto1"
    [record] = firestore.notifications_for("owner@example.com")
    assert record["type"] == "post_like"
    assert record["title"] == "Someone liked your post"
    assert record["fromEmail"] == "cy@example.com"
    assert record["fromDisplayName"] == "Cy"
    assert record["postId"] == "p1"
    assert record["requestId"] is None
    assert record["commentId"] is None
    assert record["isRead"] is False
    assert isinstance(record["createdAt"], datetime)
    assert record["createdAt"].tzinfo is not None


def test_store_notification_falls_back_to_actor_specific_keys(services, firestore):
    store_notification(
        services,
        "owner@example.com",
        "New comment on your post",
        "dee: hi",
        "post_comment",
        {"fromEmail": "", "commenterEmail": "dee@example.com", "commentId": "c9"},
    )

    [record] = firestore.notifications_for("owner@example.com")
    assert record["fromEmail"] == "dee@example.com"
    assert record["commentId"] == "c9"
    assert record["fromDisplayName"] is None


def test_store_notification_swallows_write_errors(services, firestore, caplog):
    firestore.fail_writes = True

    with caplog.at_level("ERROR"):
        result = store_notification(
            services, "owner@example.com", "t", "b", "friend_request", {}
        )

    assert result.ok is False
    assert isinstance(result.error, RuntimeError)
    assert "Error storing notification for owner@example.com" in caplog.text
    assert firestore.notifications_for("owner@example.com") == []


def test_store_notification_rejects_unknown_type(services, firestore):
    result = store_notification(services, "owner@example.com", "t", "b", "post_share", {})

    assert result.ok is False
    assert isinstance(result.error, ValueError)
    assert firestore.notifications_for("owner@example.com") == []


def test_store_notification_stamps_creation_time(services, firestore, monkeypatch):
    stamp = datetime(2024, 6, 1, 8, 30, tzinfo=timezone.utc)
    monkeypatch.setattr(
        "forager_notifications.application.use_cases.notifications.store.notification_timestamp",
        lambda: stamp,
    )

    store_notification(services, "owner@example.com", "t", "b", "friend_accepted", {"fromEmail": "a@example.com"})

    [record] = firestore.notifications_for("owner@example.com")
    assert record["createdAt"] == stamp
