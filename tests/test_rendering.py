"""Tests for notification titles, bodies and payloads."""

import pytest

from forager_notifications.application.use_cases.notifications.rendering import (
    render_friend_accepted,
    render_friend_request,
    render_post_comment,
    render_post_like,
    truncate_preview,
)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("x" * 51, "x" * 50 + "..."),
        ("x" * 50, "x" * 50),
        ("", ""),
        ("short", "short"),
    ],
)
def test_truncate_preview(text, expected):
    assert truncate_preview(text) == expected


def test_friend_request_with_message_quotes_the_preview():
    rendered = render_friend_request(
        request_id="req-1",
        sender_email="ana@example.com",
        sender_name="Ana",
        message="m" * 60,
    )

    assert rendered.title == "New Friend Request"
    assert rendered.body == f'Ana: "{"m" * 50}..."'
    assert rendered.priority == "high"
    assert rendered.data == {
        "type": "friend_request",
        "requestId": "req-1",
        "fromEmail": "ana@example.com",
        "fromDisplayName": "Ana",
    }


@pytest.mark.parametrize("message", [None, "", "   \n"])
def test_friend_request_without_message(message):
    rendered = render_friend_request(
        request_id="req-1", sender_email=None, sender_name="Someone", message=message
    )

    assert rendered.body == "Someone wants to connect with you!"
    assert rendered.data["fromEmail"] == ""


def test_friend_accepted_duplicates_actor_keys():
    rendered = render_friend_accepted(acceptor_email="bo@example.com", acceptor_name="Bo")

    assert rendered.title == "Friend Request Accepted"
    assert rendered.body == "Bo accepted your friend request!"
    assert rendered.data["friendEmail"] == rendered.data["fromEmail"] == "bo@example.com"
    assert rendered.priority == "high"


def test_post_like_uses_normal_priority():
    rendered = render_post_like(
        post_id="p1", post_name="Chanterelles", liker_email="cy@example.com", liker_name="Cy"
    )

    assert rendered.title == "Someone liked your post"
    assert rendered.body == 'Cy liked "Chanterelles"'
    assert rendered.priority == "normal"
    assert rendered.data == {
        "type": "post_like",
        "postId": "p1",
        "likerEmail": "cy@example.com",
        "fromEmail": "cy@example.com",
        "fromDisplayName": "Cy",
    }


def test_post_comment_truncates_text():
    rendered = render_post_comment(
        post_id="p1",
        comment_id="c1",
        commenter_email="dee@example.com",
        commenter_name="dee",
        text="y" * 51,
    )

    assert rendered.title == "New comment on your post"
    assert rendered.body == "dee: " + "y" * 50 + "..."
    assert rendered.priority == "normal"
    assert rendered.data["commentId"] == "c1"
    assert rendered.data["commenterEmail"] == "dee@example.com"
    assert all(isinstance(value, str) for value in rendered.data.values())
