import time


class NotificationManager:
    """Short-lived messages shown to the player (lens failures, disabled features)."""

    def __init__(self, clock=time.monotonic):
        self.queue = []
        self.clock = clock
        self._reported = set()

    def add(self, message, level="info", duration=3.0):
        self.queue.append({
            "message": message,
            "level": level,
            "timestamp": self.clock(),
            "duration": duration
        })

    def add_once(self, key, message, level="warning", duration=5.0):
        """Add a message only the first time `key` is reported. Returns True if added."""
        if key in self._reported:
            return False
        self._reported.add(key)
        self.add(message, level=level, duration=duration)
        return True

    def get_visible(self):
        """Return active (non-expired) messages."""
        now = self.clock()
        self.queue = [n for n in self.queue if now - n["timestamp"] < n["duration"]]
        return self.queue
