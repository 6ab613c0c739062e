"""Regex source builders for search terms.

Both helpers are pure string transforms: they never compile anything. The
matcher layer feeds their output to :func:`re.compile`.
"""

import re

# Characters with a special meaning inside a regular expression
_SPECIAL_CHARS = re.compile(r"[()\[\]{}/*+?.\\^$|\-]")

# Pattern templates keyed by boundary mode. ``{term}`` is the (possibly
# escaped) search term.
BOUNDARY_TEMPLATES: dict[bool | str, str] = {
    True: r"\b{term}\b",  # whole word only
    "start": r"\b{term}\w+",  # term begins a longer word, match runs to its end
    "end": r"\w+{term}\b",  # term ends a longer word, match runs from its start
}

BOUNDARY_MODES: tuple[bool | str, ...] = (False, True, "start", "end")


def escape_literal(term: str) -> str:
    """Backslash-escape regex metacharacters so *term* matches literally.

    Only ``( ) [ ] { } / * + ? . \\ ^ $ | -`` are escaped; everything else,
    whitespace included, passes through unchanged.

    >>> escape_literal("$price*2")
    '\\\\$price\\\\*2'
    """
    return _SPECIAL_CHARS.sub(r"\\\g<0>", term)


def boundary_pattern(term: str, boundary: bool | str) -> str:
    """Wrap *term* in word-boundary anchors according to *boundary*.

    Args:
        term: Regex source for the term (escape it first for literal search).
        boundary: ``False`` for no anchoring, ``True`` for whole words,
            ``"start"`` to require the term at the start of a longer word, or
            ``"end"`` to require it at the end of one.

    Returns:
        Pattern source. Blank terms and unrecognised modes come back
        unchanged.
    """
    if boundary is False or term.strip() == "":
        return term
    # bool is an int subclass; keep 1/0 from aliasing True/False lookups
    if not isinstance(boundary, (bool, str)):
        return term
    template = BOUNDARY_TEMPLATES.get(boundary)
    if template is None:
        return term
    return template.format(term=term)
