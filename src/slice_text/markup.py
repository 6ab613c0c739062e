"""Rendering helpers for sliced text.

Three renderings of a gap-filled span list:

* **segments** — ``(substring, matched)`` pairs for UI frameworks that
  build their own nodes.
* **mark** — wraps matched regions in tags (``<mark>`` by default).
* **redact** — masks matched regions with a fill character.

All helpers take the text plus spans from
:func:`~slice_text.pipeline.slice_text`. Spans with ``matched`` unset count as
matched, so merged spans can be passed straight in; text the spans leave
uncovered is rendered as unmatched.
"""

from __future__ import annotations

import html
from collections.abc import Sequence

from .pipeline import fill_gaps, merge_overlap
from .spans import Span


def _tiles(text: str, spans: Sequence[Span]) -> bool:
    """Whether labeled *spans* cover ``[0, len(text))`` in order with no holes."""
    cursor = 0
    for span in spans:
        if span.matched is None or span.start != cursor or span.end <= span.start:
            return False
        cursor = span.end
    return cursor == len(text)


def _partition(text: str, spans: Sequence[Span]) -> list[Span]:
    """Return *spans* as a full partition of *text*.

    A complete partition is used as is. Anything else is rebuilt from the
    spans not explicitly labeled unmatched.
    """
    if _tiles(text, spans):
        return list(spans)
    hits = [span for span in spans if span.matched is not False]
    return fill_gaps(merge_overlap(hits), len(text))


def segments(text: str, spans: Sequence[Span]) -> list[tuple[str, bool]]:
    """Split *text* into ``(substring, matched)`` pairs in text order."""
    return [(span.slice(text), bool(span.matched)) for span in _partition(text, spans)]


def mark(
    text: str,
    spans: Sequence[Span],
    open_tag: str = "<mark>",
    close_tag: str = "</mark>",
    escape_html: bool = False,
) -> str:
    """Wrap every matched span of *text* in *open_tag* / *close_tag*.

    With *escape_html* the text pieces (not the tags) are HTML-escaped,
    which is what a web snippet generator wants.
    """
    parts: list[str] = []
    for piece, matched in segments(text, spans):
        if escape_html:
            piece = html.escape(piece)
        parts.append(f"{open_tag}{piece}{close_tag}" if matched else piece)
    return "".join(parts)


def redact(text: str, spans: Sequence[Span], char: str = "*") -> str:
    """Replace matched spans with *char* repeated to the same length.

    Raises:
        ValueError: If *char* is not exactly one character.
    """
    if len(char) != 1:
        raise ValueError(f"redaction char must be a single character, got {char!r}")
    return "".join(
        char * len(piece) if matched else piece for piece, matched in segments(text, spans)
    )
