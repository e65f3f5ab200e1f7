"""Tests for event lifetime extension."""

from __future__ import annotations

import anyio
import pytest

from ajoconnect.interfaces.push_worker import ExtendableEvent

pytestmark = pytest.mark.anyio


async def test_settle_waits_for_extensions_added_while_waiting():
    event = ExtendableEvent()
    order: list[str] = []

    async def late():
        order.append("late")
        return "late"

    async def early():
        await anyio.sleep(0)
        event.wait_until(late())
        order.append("early")
        return "early"

    event.wait_until(early())

    assert await event.settle() == ["early", "late"]
    assert order == ["early", "late"]
    assert event.extension_count == 2


async def test_settle_reraises_first_failure_after_everything_settles():
    event = ExtendableEvent()
    finished: list[str] = []

    async def fail():
        raise LookupError("no window")

    async def slow():
        await anyio.sleep(0.01)
        finished.append("slow")

    event.wait_until(fail())
    event.wait_until(slow())

    with pytest.raises(LookupError):
        await event.settle()
    assert finished == ["slow"]
