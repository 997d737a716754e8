"""
Validation Statistics

Running counters over the lifetime of one validator instance: total calls,
successes, failures, and how often each error message was returned. Every
mutation holds a lock so concurrent validations lose no updates.
"""

import threading
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Tuple

from gatekeeper.validation.report import ValidationResult


DEFAULT_TOP_ERRORS = 5


@dataclass(frozen=True)
class StatsSnapshot:
    """Point-in-time copy of the validation statistics.

    Attributes:
        total: Number of validation calls
        successes: Calls that returned success
        failures: Calls that returned a failure
        success_rate: successes / total as a percentage (0 when total is 0)
        top_errors: Most frequent error messages as (message, count),
            count descending
        error_counts: Full error message -> count table
    """
    total: int
    successes: int
    failures: int
    success_rate: float
    top_errors: List[Tuple[str, int]] = field(default_factory=list)
    error_counts: Dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "total": self.total,
            "successes": self.successes,
            "failures": self.failures,
            "success_rate": self.success_rate,
            "top_errors": [
                {"message": message, "count": count}
                for message, count in self.top_errors
            ],
        }


class ValidationStats:
    """Thread-safe validation counters owned by one validator."""

    def __init__(self, top_errors_limit: int = DEFAULT_TOP_ERRORS):
        self.top_errors_limit = top_errors_limit
        self._lock = threading.Lock()
        self._total = 0
        self._successes = 0
        self._failures = 0
        self._error_counts: Counter = Counter()

    def record(self, result: ValidationResult) -> None:
        """Record the outcome of one validation call."""
        self.record_outcome(result.success, result.errors)

    def record_outcome(self, success: bool, errors: Iterable[str] = ()) -> None:
        """Record one call by its success flag and returned error messages."""
        with self._lock:
            self._total += 1
            if success:
                self._successes += 1
            else:
                self._failures += 1
                # Counter.update counts each occurrence in the iterable
                self._error_counts.update(errors)

    def snapshot(self) -> StatsSnapshot:
        """Return a consistent copy of the current counters."""
        with self._lock:
            total = self._total
            successes = self._successes
            return StatsSnapshot(
                total=total,
                successes=successes,
                failures=self._failures,
                success_rate=(successes / total) * 100 if total > 0 else 0,
                # ties keep first-seen order
                top_errors=self._error_counts.most_common(self.top_errors_limit),
                error_counts=dict(self._error_counts),
            )

    def reset(self) -> None:
        """Clear all counters."""
        with self._lock:
            self._total = 0
            self._successes = 0
            self._failures = 0
            self._error_counts.clear()
