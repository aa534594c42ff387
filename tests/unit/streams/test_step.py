"""
Tests for the Step model reported by AsyncStream.advance().
"""

from async_stream.streams import Step, StepStatus


class TestStep:
    def test_ready(self):
        step = Step.ready("item")

        assert step.status == StepStatus.ITEM
        assert step.item == "item"
        assert step.is_item is True
        assert step.is_terminal is False

    def test_pending(self):
        step = Step.pending()

        assert step.is_pending is True
        assert step.waiter is None

    def test_terminal_steps(self):
        error = LookupError("missing")

        assert Step.done().is_terminal is True
        assert Step.failed(error).is_terminal is True
        assert Step.failed(error).error is error
