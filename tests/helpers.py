from datetime import datetime, timedelta


class FakeClipboard:
    def __init__(self, error=None):
        self.error = error
        self.texts = []

    def write_text(self, text):
        if self.error is not None:
            raise self.error
        self.texts.append(text)


class StepClock:
    """Returns a new datetime one second later on every call."""

    def __init__(self, start=None):
        self.current = start or datetime(2024, 5, 1, 9, 30, 0)

    def __call__(self):
        value = self.current
        self.current = self.current + timedelta(seconds=1)
        return value
