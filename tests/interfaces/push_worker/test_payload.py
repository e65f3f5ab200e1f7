"""Tests for reading push messages and resolving display options."""

from __future__ import annotations

import json

import pytest

from ajoconnect.domain.entities import PushPayloadError
from ajoconnect.interfaces.push_worker import (
    PushMessageData,
    WorkerConfig,
    build_notification_options,
    parse_push_payload,
)
from ajoconnect.interfaces.push_worker.payload import resolve_title

CONFIG = WorkerConfig(origin="https://ajo.example.com")


def _parse(document):
    return parse_push_payload(PushMessageData(json.dumps(document)))


def test_empty_object_gets_every_default():
    payload = _parse({})
    options = build_notification_options(payload, CONFIG)

    assert resolve_title(payload, CONFIG) == "AjoConnect"
    assert options.body == "You have a new notification"
    assert options.icon == "/favicon.ico"
    assert options.badge == "/favicon.ico"
    assert options.vibrate == (100, 50, 100)
    assert options.data == {"url": "/dashboard"}
    assert options.actions == []
    assert options.tag == "default"
    assert options.renotify is False


def test_message_is_preferred_over_body():
    options = build_notification_options(
        _parse({"message": "N500 received", "body": "ignored"}), CONFIG
    )
    assert options.body == "N500 received"


def test_body_is_used_when_message_is_missing():
    options = build_notification_options(_parse({"body": "From body"}), CONFIG)
    assert options.body == "From body"


def test_auxiliary_data_is_merged_after_url():
    options = build_notification_options(
        _parse({"url": "/wallet", "data": {"group_id": "g-1", "cycle": 3}}), CONFIG
    )
    assert options.data == {"url": "/wallet", "group_id": "g-1", "cycle": 3}

    overridden = build_notification_options(
        _parse({"url": "/wallet", "data": {"url": "/groups/g-1"}}), CONFIG
    )
    assert overridden.data["url"] == "/groups/g-1"


def test_fields_of_the_wrong_type_are_ignored():
    payload = _parse({"title": "", "data": ["x"], "actions": "nope", "tag": {"x": 1}})
    options = build_notification_options(payload, CONFIG)

    assert resolve_title(payload, CONFIG) == "AjoConnect"
    assert options.data == {"url": "/dashboard"}
    assert options.actions == []
    assert options.tag == "default"


def test_actions_tag_and_renotify_are_kept():
    actions = [{"action": "view", "title": "View"}]
    options = build_notification_options(
        _parse({"actions": actions, "tag": "payout", "renotify": True}), CONFIG
    )
    assert options.actions == actions
    assert options.tag == "payout"
    assert options.renotify is True


@pytest.mark.parametrize(
    "raw", [b"{not json", b"\xff\xfe\x00", b"", b"[1, 2]", b"null", b"42"]
)
def test_malformed_payloads_raise_payload_error(raw):
    with pytest.raises(PushPayloadError):
        parse_push_payload(PushMessageData(raw))


def test_deeply_nested_payload_raises_payload_error():
    raw = "[" * 100_000 + "]" * 100_000

    with pytest.raises(PushPayloadError):
        parse_push_payload(PushMessageData(raw))
