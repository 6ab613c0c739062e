"""Span value type shared by every stage of the slicing pipeline."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Span:
    """A half-open ``[start, end)`` range over a text.

    Scanner and merger output leave ``matched`` as ``None``; the gap filler
    labels every span it emits with ``True`` or ``False``.
    """

    start: int
    """Index of the first character covered."""

    end: int
    """Index one past the last character covered."""

    matched: bool | None = None
    """Whether the range matched a search term (``None`` until gap-filled)."""

    def __len__(self) -> int:
        return self.end - self.start

    def slice(self, text: str) -> str:
        """Return the part of *text* covered by this span."""
        return text[self.start : self.end]

    def as_tuple(self) -> tuple[int, int]:
        return (self.start, self.end)
