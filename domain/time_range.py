from dataclasses import dataclass


@dataclass(frozen=True)
class NormalizedRange:
    """Entity: A validated, clamped [start, end] interval in seconds"""
    start: float
    end: float

    def __post_init__(self):
        """Validates data"""
        if self.start < 0:
            raise ValueError("Start cannot be negative")
        if self.end < self.start:
            raise ValueError("End cannot precede start")

    def duration(self) -> float:
        """Returns the range length in seconds"""
        return self.end - self.start

    def is_empty(self) -> bool:
        return self.end == self.start
