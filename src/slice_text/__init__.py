"""slice-text: partition text into matched and unmatched spans for highlighting."""

from .config import PresetConfig, list_presets, load_preset
from .markup import mark, redact, segments
from .matchers import Matcher, MatcherFactory, RegexMatcher, SliceOptions, resolve_matcher
from .patterns import boundary_pattern, escape_literal
from .pipeline import fill_gaps, fill_slice_gaps, merge_overlap, scan, slice_text, slicing
from .slicer import TextSlicer
from .spans import Span

__all__ = [
    "slice_text",
    "slicing",
    "scan",
    "merge_overlap",
    "fill_gaps",
    "fill_slice_gaps",
    "Span",
    "SliceOptions",
    "Matcher",
    "MatcherFactory",
    "RegexMatcher",
    "resolve_matcher",
    "escape_literal",
    "boundary_pattern",
    "TextSlicer",
    "PresetConfig",
    "load_preset",
    "list_presets",
    "segments",
    "mark",
    "redact",
]
