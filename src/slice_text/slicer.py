"""Reusable slicer that resolves its options once."""

from collections.abc import Iterable, Mapping

from . import markup
from .config import load_preset
from .matchers import OptionsOrMatch, SliceOptions, resolve_matcher
from .pipeline import slice_text, slicing
from .spans import Span


class TextSlicer:
    """Slice many texts with the same options.

    Preset names are read from disk once, at construction, instead of on
    every call.

    Example:
        >>> slicer = TextSlicer("prefix")
        >>> slicer.mark("test testing tested", ["test"])
        'test <mark>testing</mark> <mark>tested</mark>'
    """

    def __init__(self, options: OptionsOrMatch = None):
        """Initialize the slicer.

        Args:
            options: Slicing options, a mapping of option names, a preset
                name, or a custom matcher factory. Defaults to literal,
                whole-word, case-insensitive matching.
        """
        if isinstance(options, str):
            options = load_preset(options)
        elif isinstance(options, Mapping):
            options = SliceOptions.from_mapping(options)

        self._options = options
        self._factory = resolve_matcher(options)

    @property
    def options(self) -> SliceOptions | None:
        """Options in effect, or ``None`` when a custom factory is used."""
        if callable(self._options):
            return None
        return self._options or SliceOptions()

    def scan(self, text: str, words: Iterable[str]) -> list[Span]:
        """Raw, unmerged occurrences of *words* in *text*."""
        return slicing(text, words, self._factory)

    def slice(self, text: str, words: Iterable[str]) -> list[Span]:
        """Full matched/unmatched partition of *text*."""
        return slice_text(text, words, self._factory)

    def segments(self, text: str, words: Iterable[str]) -> list[tuple[str, bool]]:
        return markup.segments(text, self.slice(text, words))

    def mark(
        self,
        text: str,
        words: Iterable[str],
        open_tag: str = "<mark>",
        close_tag: str = "</mark>",
        escape_html: bool = False,
    ) -> str:
        return markup.mark(text, self.slice(text, words), open_tag, close_tag, escape_html)

    def redact(self, text: str, words: Iterable[str], char: str = "*") -> str:
        return markup.redact(text, self.slice(text, words), char)
