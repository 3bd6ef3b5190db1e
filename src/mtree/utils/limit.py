from typing import Optional


class BoundedCounter:
    """
    Count with an optional ceiling

    The count can be incremented past the ceiling; callers check
    is_under_limit() before relying on an increment being allowed.
    A counter without a ceiling is never over its limit.

    Example:
        >>> counter = BoundedCounter(2)
        >>> counter.increment()
        >>> counter.is_at_limit()
        True
        >>> counter.increment()
        >>> counter.is_under_limit()
        False
    """

    def __init__(self, ceiling: Optional[int] = None):
        if ceiling is not None and ceiling < 0:
            raise ValueError(f"Ceiling must be non-negative, got {ceiling}")
        self._ceiling = ceiling
        self._count = 0

    @property
    def count(self) -> int:
        return self._count

    @property
    def ceiling(self) -> Optional[int]:
        return self._ceiling

    def increment(self):
        self._count += 1

    def decrement(self):
        if self._count == 0:
            raise ValueError("Cannot decrement a counter that is already at zero")
        self._count -= 1

    def reset(self):
        self._count = 0

    def is_under_limit(self) -> bool:
        """True if there is no ceiling or the count is below it"""
        if self._ceiling is None:
            return True
        return self._count < self._ceiling

    def is_at_limit(self) -> bool:
        """True if the next increment is the last one the ceiling allows"""
        if self._ceiling is None:
            return False
        return self._count + 1 == self._ceiling

    def __repr__(self):
        return f"BoundedCounter(count={self._count}, ceiling={self._ceiling})"
