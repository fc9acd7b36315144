"""Observers for tests that record what they receive, no mocking."""

from notifier.observer import IObserver


class RecordingObserver(IObserver):
    def __init__(self, name="obs", journal=None) -> None:
        self.name = name
        self.received = []
        self.journal = journal

    def update(self, weather) -> None:
        self.received.append(weather)
        if self.journal is not None:
            self.journal.append((self.name, weather))


class CallbackObserver(IObserver):
    """Runs an arbitrary callback on update, for mid-dispatch mutation."""

    def __init__(self, callback) -> None:
        self.callback = callback
        self.calls = 0

    def update(self, weather) -> None:
        self.calls += 1
        self.callback(weather)


class FailingObserver(IObserver):
    def update(self, weather) -> None:
        raise RuntimeError(f"cannot handle {weather.name}")
