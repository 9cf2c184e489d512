from unittest.mock import MagicMock

from qtcommandbind.core.events import ObserverEvent


def test_emit_calls_subscribers():
    event = ObserverEvent("Test")
    callback = MagicMock()
    event.connect(callback)

    event.emit(1, key="v")

    callback.assert_called_once_with(1, key="v")


def test_connect_is_idempotent():
    event = ObserverEvent("Test")
    callback = MagicMock()
    event.connect(callback)
    event.connect(callback)

    event.emit()

    assert callback.call_count == 1
    assert event.subscriber_count == 1


def test_disconnect_unknown_is_noop():
    event = ObserverEvent("Test")
    event.disconnect(MagicMock())
    assert event.subscriber_count == 0


def test_failing_subscriber_does_not_stop_delivery():
    event = ObserverEvent("Test")
    failing = MagicMock(side_effect=RuntimeError("boom"))
    after = MagicMock()
    event.connect(failing)
    event.connect(after)

    event.emit()

    after.assert_called_once()


def test_subscriber_may_disconnect_during_emit():
    event = ObserverEvent("Test")
    after = MagicMock()

    def once():
        event.disconnect(once)

    event.connect(once)
    event.connect(after)
    event.emit()

    after.assert_called_once()
    assert event.subscriber_count == 1
