"""Wall-clock stopwatch."""

import time


class Timer:
    """Measures the wall-clock time between ``start`` and ``stop``."""

    def __init__(self):
        self._start = 0.0
        self._end = 0.0

    def start(self):
        """Record the start time."""
        self._start = time.time()

    def stop(self):
        """Record the end time."""
        self._end = time.time()

    def elapsed(self):
        """Return the seconds between the last start and stop."""
        return self._end - self._start

    def show(self, label):
        """Print and return a report of when the timing finished and how long it took."""
        finished = time.ctime(self._end)
        text = f"{label} finished at: {finished}\n\telapsed time: {self.elapsed():g} seconds"
        print(text)
        return text

    def reset(self):
        """Make the last end time the new start time."""
        self._start = self._end