"""The three-stage slicing pipeline.

1. :func:`slicing` scans the text for every term and yields raw spans
2. :func:`merge_overlap` coalesces overlapping and touching spans
3. :func:`fill_gaps` partitions the whole text into matched/unmatched spans

:func:`slice_text` runs all three.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from .matchers import OptionsOrMatch, bind, resolve_matcher
from .spans import Span

logger = logging.getLogger(__name__)


def slicing(text: str, words: Iterable[str], options: OptionsOrMatch = None) -> list[Span]:
    """Find every occurrence of every search term in *text*.

    Duplicate and empty terms are dropped. Each remaining term is matched on
    its own, so spans are ascending per term but not across terms, and two
    terms hitting the same region produce duplicate spans.

    Args:
        text: Text to search.
        words: Search terms.
        options: Slicing options, a preset name, or a custom matcher factory
            (see :func:`~slice_text.matchers.resolve_matcher`).

    Returns:
        Raw spans with ``matched`` unset. Zero-width occurrences are skipped.

    Example:
        >>> slicing("Hello world, hello there", ["hello", "world"])
        [Span(start=0, end=5, matched=None), Span(start=13, end=18, matched=None),
         Span(start=6, end=11, matched=None)]
    """
    factory = resolve_matcher(options)
    terms = [word for word in dict.fromkeys(words) if word]

    spans: list[Span] = []
    for word in terms:
        matcher = bind(factory(word), text)
        pos = 0
        while True:
            found = matcher.find_next(pos)
            if found is None:
                break
            start, end = found
            if end > start:
                spans.append(Span(start, end))
                pos = end
            else:
                # Empty match: step over it or the same position matches forever
                logger.debug("Zero-width match for %r at %d, advancing cursor", word, start)
                pos = start + 1

    logger.debug("Scanned %d terms over %d chars: %d raw spans", len(terms), len(text), len(spans))
    return spans


scan = slicing


def merge_overlap(spans: Iterable[Span]) -> list[Span]:
    """Merge overlapping or touching spans into maximal disjoint spans.

    Input order and duplicates do not matter. ``[0, 5)`` and ``[5, 10)``
    merge into ``[0, 10)``.

    Example:
        >>> merge_overlap([Span(0, 5), Span(3, 8), Span(10, 15)])
        [Span(start=0, end=8, matched=None), Span(start=10, end=15, matched=None)]
    """
    ordered = sorted(spans, key=Span.as_tuple)
    if not ordered:
        return []

    merged: list[Span] = []
    current_start, current_end = ordered[0].start, ordered[0].end
    for span in ordered[1:]:
        if span.start <= current_end:
            current_end = max(current_end, span.end)
        else:
            merged.append(Span(current_start, current_end))
            current_start, current_end = span.start, span.end
    merged.append(Span(current_start, current_end))

    logger.debug("Merged %d spans into %d", len(ordered), len(merged))
    return merged


def fill_gaps(spans: Sequence[Span], text_length: int = 0) -> list[Span]:
    """Label *spans* as matched and fill the gaps between them as unmatched.

    *spans* must be sorted and non-overlapping, which :func:`merge_overlap`
    guarantees. The result covers ``[0, text_length)`` with no holes and no
    zero-length spans.

    Example:
        >>> fill_gaps([Span(5, 10), Span(15, 20)], 25)
        [Span(start=0, end=5, matched=False), Span(start=5, end=10, matched=True),
         Span(start=10, end=15, matched=False), Span(start=15, end=20, matched=True),
         Span(start=20, end=25, matched=False)]
    """
    if text_length == 0:
        return []

    filled: list[Span] = []

    def push(start: int, end: int, matched: bool) -> None:
        if end > start:
            filled.append(Span(start, end, matched))

    if not spans:
        push(0, text_length, False)
        return filled

    cursor = 0
    for span in spans:
        push(cursor, span.start, False)
        push(span.start, span.end, True)
        cursor = span.end
    push(cursor, text_length, False)
    return filled


fill_slice_gaps = fill_gaps


def slice_text(text: str, words: Iterable[str], options: OptionsOrMatch = None) -> list[Span]:
    """Partition *text* into matched and unmatched spans.

    Joining ``span.slice(text)`` over the result reproduces *text* exactly.

    Example:
        >>> slice_text("Hello world, how are you?", ["hello", "you"])
        [Span(start=0, end=5, matched=True), Span(start=5, end=21, matched=False),
         Span(start=21, end=24, matched=True), Span(start=24, end=25, matched=False)]
    """
    return fill_gaps(merge_overlap(slicing(text, words, options)), len(text))
