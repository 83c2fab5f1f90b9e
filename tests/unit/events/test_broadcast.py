"""Unit tests for the change broadcast."""

import asyncio

import pytest

from notes_app.events.broadcast import ChangeNotifier


class TestChangeNotifier:
    def test_subscription_lifetime_follows_with_block(self):
        notifier = ChangeNotifier("notes")

        with notifier.subscribe():
            assert notifier.subscriber_count == 1
        assert notifier.subscriber_count == 0

    def test_notify_without_subscribers_is_harmless(self):
        ChangeNotifier("notes").notify()

    @pytest.mark.asyncio
    async def test_every_subscriber_is_woken(self):
        notifier = ChangeNotifier("notes")

        with notifier.subscribe() as first, notifier.subscribe() as second:
            notifier.notify()

            await asyncio.wait_for(first.wait(), timeout=1)
            await asyncio.wait_for(second.wait(), timeout=1)

    @pytest.mark.asyncio
    async def test_signals_are_conflated(self):
        notifier = ChangeNotifier("notes")

        with notifier.subscribe() as subscription:
            notifier.notify()
            notifier.notify()
            notifier.notify()

            await subscription.wait()
            assert not subscription.pending

    @pytest.mark.asyncio
    async def test_wait_blocks_until_notified(self):
        notifier = ChangeNotifier("notes")

        with notifier.subscribe() as subscription:
            waiter = asyncio.create_task(subscription.wait())
            await asyncio.sleep(0.01)
            assert not waiter.done()

            notifier.notify()
            await asyncio.wait_for(waiter, timeout=1)

    @pytest.mark.asyncio
    async def test_change_before_first_wait_is_kept(self):
        notifier = ChangeNotifier("notes")

        with notifier.subscribe() as subscription:
            notifier.notify()
            assert subscription.pending
            await asyncio.wait_for(subscription.wait(), timeout=1)
