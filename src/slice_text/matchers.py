"""Matcher abstraction and resolution of slicing options.

A *matcher factory* turns one search term into a compiled pattern. The
scanner binds that pattern to a text with :class:`RegexMatcher` and walks it
with :meth:`Matcher.find_next`.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass, fields
from typing import Any, Protocol, Union, runtime_checkable

from .patterns import BOUNDARY_MODES, boundary_pattern, escape_literal


@runtime_checkable
class SearchPattern(Protocol):
    """Anything shaped like a compiled :class:`re.Pattern`."""

    def search(self, string: str, pos: int = ...) -> Any: ...


@runtime_checkable
class Matcher(Protocol):
    """Cursor-driven occurrence finder bound to a single text."""

    def find_next(self, pos: int) -> tuple[int, int] | None:
        """Return ``(start, end)`` of the first occurrence at or after *pos*."""
        ...


MatcherFactory = Callable[[str], SearchPattern]
OptionsOrMatch = Union["SliceOptions", Mapping[str, Any], str, MatcherFactory, None]


class RegexMatcher:
    """:class:`Matcher` over a compiled pattern and the text it scans.

    Instances hold a reference to one text; build a new one per text rather
    than sharing it between threads.
    """

    __slots__ = ("pattern", "text")

    def __init__(self, pattern: SearchPattern, text: str) -> None:
        self.pattern = pattern
        self.text = text

    def find_next(self, pos: int) -> tuple[int, int] | None:
        if pos > len(self.text):
            return None
        match = self.pattern.search(self.text, pos)
        if match is None:
            return None
        return match.start(), match.end()


# camelCase spellings accepted from mappings
_KEY_ALIASES = {"caseSensitive": "case_sensitive"}


@dataclass(frozen=True)
class SliceOptions:
    """How search terms become regular expressions.

    The defaults give literal, whole-word, case-insensitive matching.
    """

    escape: bool = True
    """Escape regex metacharacters so terms match literally. With ``False``
    terms are raw regex source and the caller must keep them well-formed."""

    boundary: bool | str = True
    """Word-boundary mode: ``False``, ``True``, ``"start"`` or ``"end"``."""

    case_sensitive: bool = False
    """Match case exactly instead of using ``re.IGNORECASE``."""

    def __post_init__(self) -> None:
        if not isinstance(self.boundary, bool) and self.boundary not in BOUNDARY_MODES[2:]:
            modes = ", ".join(repr(m) for m in BOUNDARY_MODES)
            raise ValueError(f"Invalid boundary mode {self.boundary!r}. Expected one of: {modes}")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> SliceOptions:
        """Build options from a plain mapping such as a parsed YAML block.

        Raises:
            ValueError: If the mapping holds keys that are not option names.
        """
        known = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        for key, value in data.items():
            name = _KEY_ALIASES.get(key, key)
            if name not in known:
                available = ", ".join(sorted(known))
                raise ValueError(f"Unknown slicing option {key!r}. Available options: {available}")
            kwargs[name] = value
        return cls(**kwargs)

    def compile(self, word: str) -> re.Pattern:
        """Compile *word* into a pattern honouring these options."""
        source = escape_literal(word) if self.escape else word
        if self.boundary:
            source = boundary_pattern(source, self.boundary)
        flags = 0 if self.case_sensitive else re.IGNORECASE
        return re.compile(source, flags)


def resolve_matcher(options: OptionsOrMatch = None) -> MatcherFactory:
    """Turn the ``options`` argument of the slicing API into a matcher factory.

    Args:
        options: ``None`` for the default options, a :class:`SliceOptions`,
            a mapping of option names, the name of a preset, or a callable
            that maps a term to a compiled pattern (used as is).

    Raises:
        TypeError: If *options* is none of the above.
        ValueError: If a mapping or preset name is invalid.
    """
    if options is None:
        return SliceOptions().compile
    if isinstance(options, SliceOptions):
        return options.compile
    if isinstance(options, str):
        from .config import load_preset

        return load_preset(options).compile
    if isinstance(options, Mapping):
        return SliceOptions.from_mapping(options).compile
    if callable(options):
        return options
    raise TypeError(
        f"options must be SliceOptions, a mapping, a preset name or a callable, "
        f"got {type(options).__name__}"
    )


def bind(pattern: SearchPattern, text: str) -> Matcher:
    """Bind a factory's pattern to *text*.

    Raises:
        TypeError: If *pattern* has no ``search`` method.
    """
    if not isinstance(pattern, SearchPattern):
        raise TypeError(
            f"matcher factory must return a compiled pattern, got {type(pattern).__name__}"
        )
    return RegexMatcher(pattern, text)
