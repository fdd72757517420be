class FixedIntervalTicker:
    """Counts how many fixed-length game ticks fit into elapsed wall time."""

    def __init__(self, fps, max_due=1):
        if fps <= 0:
            raise ValueError("fps must be positive.")
        if max_due < 1:
            raise ValueError("max_due must be at least 1.")
        self.interval_ms = 1000.0 / fps
        self.max_due = max_due
        self.accumulated_ms = 0.0

    def elapsed(self, dt_ms):
        """Add elapsed time and return the number of ticks now due, at most max_due."""
        self.accumulated_ms += max(0, dt_ms)
        due = int(self.accumulated_ms // self.interval_ms)
        if due > self.max_due:
            # Time lost to a stall is dropped rather than replayed unseen.
            due = self.max_due
            self.accumulated_ms %= self.interval_ms
        else:
            self.accumulated_ms -= due * self.interval_ms
        return due

    def reset(self):
        """Forget accumulated time so the next tick is a full interval away."""
        self.accumulated_ms = 0.0
