"""
ids.py — Monotonic id generation

An IdProvider instance is the uniqueness scope: ids are unique among those
handed out by the same instance. Every owner that needs unique ids (an order
for its meals, a meal for its specials, a participant directory) holds its own
provider instead of sharing a process-wide counter.
"""

from __future__ import annotations


class IdProvider:
    """Hands out base, base + 1, base + 2, ... and never reuses a value."""

    def __init__(self, base: int = 0):
        if base < 0:
            raise ValueError(f"Id base must be non-negative, got {base}")
        self._next_id = base

    def next(self) -> int:
        current = self._next_id
        self._next_id = current + 1
        return current

    def peek(self) -> int:
        """The id the next call to next() will return."""
        return self._next_id

    def __repr__(self) -> str:
        return f"IdProvider(next={self._next_id})"
