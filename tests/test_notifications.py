import asyncio

import pytest

from gym_admin.models.schemas import LiveAccessEvent
from gym_admin.services.notification_service import NotificationService

from conftest import wait_until


def test_message_format():
    event = LiveAccessEvent(userName="Ana Torres", type="ENTRY")
    assert NotificationService.format_message(event) == "Ana Torres registered a ENTRY event."


def test_missing_name_falls_back_to_member():
    event = LiveAccessEvent(userName="  ", type="EXIT")
    assert NotificationService.format_message(event) == "Member registered a EXIT event."


@pytest.mark.anyio
async def test_newer_event_replaces_the_visible_one():
    notifier = NotificationService(duration=5)
    notifier.show(LiveAccessEvent(userName="Ana", type="ENTRY"))
    notifier.show(LiveAccessEvent(userName="Luis", type="EXIT"))

    assert notifier.current == "Luis registered a EXIT event."
    notifier.clear()
    assert notifier.current is None


@pytest.mark.anyio
async def test_dismiss_timer_restarts_on_each_event():
    notifier = NotificationService(duration=0.2)
    notifier.show(LiveAccessEvent(userName="Ana", type="ENTRY"))
    await asyncio.sleep(0.12)
    notifier.show(LiveAccessEvent(userName="Luis", type="ENTRY"))
    await asyncio.sleep(0.12)

    # 0.24s after the first event, only 0.12s after the second
    assert notifier.current == "Luis registered a ENTRY event."

    await wait_until(lambda: notifier.current is None, timeout=1)


@pytest.mark.anyio
async def test_drain_shows_each_queued_event():
    notifier = NotificationService(duration=5)
    queue = asyncio.Queue()
    task = asyncio.create_task(notifier.drain(queue))

    queue.put_nowait(LiveAccessEvent(userName="Ana", type="ENTRY"))
    queue.put_nowait(LiveAccessEvent(userName="Marta", type="ENTRY"))
    await wait_until(queue.empty)
    await queue.join()

    assert notifier.current == "Marta registered a ENTRY event."
    task.cancel()
    await asyncio.gather(task, return_exceptions=True)
    notifier.clear()
