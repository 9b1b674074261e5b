"""Placeholder scanning and renumbering.

Clause templates use ``?`` for every bound value. At render time each marker is
rewritten into the positional syntax of the target database, with a single
counter shared across all clauses of one statement.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Final

from mypy_extensions import mypyc_attr

__all__ = (
    "ParameterInfo",
    "ParameterStyle",
    "PlaceholderRenumberer",
    "count_placeholders",
    "extract_placeholders",
    "render_placeholder",
)

# Literals and comments are matched first so a ``?`` inside them is never
# treated as a placeholder.
_PLACEHOLDER_REGEX: Final = re.compile(
    r"""
    (?P<dquote>"(?:[^"]|"")*") |                                # Double-quoted identifiers
    (?P<escaped_squote>\b[Ee]'(?:[^'\\]|\\.|'')*') |            # Escape strings E'...', backslash escapes
    (?P<squote>'(?:[^']|'')*') |                                # Standard strings, backslash is literal
    # Dollar-quoted strings ($tag$...$tag$ or $$...$$), tag back-referenced
    (?P<dollar_quoted_string>\$(?P<dollar_quote_tag>\w*)?\$[\s\S]*?\$(?P=dollar_quote_tag)\$) |
    (?P<line_comment>--[^\r\n]*) |                             # Line comments
    (?P<block_comment>/\*(?:[^*]|\*(?!/))*\*/) |               # Block comments
    (?P<pg_q_operator>\?\?|\?\||\?&) |                         # PostgreSQL JSON operators ??, ?|, ?&
    (?P<qmark>\?)                                              # Generic placeholder
    """,
    re.VERBOSE | re.MULTILINE | re.DOTALL,
)


class ParameterStyle(str, Enum):
    """Positional placeholder syntax emitted in rendered SQL."""

    NUMERIC = "numeric"
    POSITIONAL_COLON = "positional_colon"
    QMARK = "qmark"

    def __str__(self) -> str:
        """String representation for better error messages.

        Returns:
            The enum value as a string.
        """
        return self.value


_STYLE_FORMATS: Final[dict[ParameterStyle, str]] = {
    ParameterStyle.NUMERIC: "${index}",
    ParameterStyle.POSITIONAL_COLON: ":{index}",
    ParameterStyle.QMARK: "?",
}


@dataclass(frozen=True)
class ParameterInfo:
    """A placeholder found in a clause template."""

    position: int
    """Character offset of the marker in the template."""

    ordinal: int
    """Order of appearance in the template (0-based)."""

    placeholder_text: str
    """The original text of the marker."""


def render_placeholder(style: ParameterStyle, index: int) -> str:
    """Format the positional marker for ``index`` (1-based) in ``style``."""
    return _STYLE_FORMATS[style].format(index=index)


def extract_placeholders(template: str) -> "list[ParameterInfo]":
    """Find every ``?`` marker in a template, skipping literals and comments.

    Args:
        template: A clause template such as ``"age > ? AND name = 'x?'"``.

    Returns:
        Markers in order of appearance.
    """
    placeholders: list[ParameterInfo] = []
    for match in _PLACEHOLDER_REGEX.finditer(template):
        if match.lastgroup != "qmark":
            continue
        placeholders.append(ParameterInfo(match.start(), len(placeholders), match.group(0)))
    return placeholders


def count_placeholders(template: str) -> int:
    """Number of ``?`` markers that :func:`extract_placeholders` would return."""
    return len(extract_placeholders(template))


@mypyc_attr(allow_interpreted_subclasses=False)
class PlaceholderRenumberer:
    """Rewrites ``?`` markers into positional parameters for one statement.

    The counter starts at ``start`` and advances once per marker. It is shared
    by every template passed to :meth:`renumber`, so a renumberer must be used
    for exactly one render call.
    """

    __slots__ = ("_next_index", "_style")

    def __init__(self, style: ParameterStyle = ParameterStyle.NUMERIC, start: int = 1) -> None:
        self._style = style
        self._next_index = start

    @property
    def next_index(self) -> int:
        """The index the next marker will receive."""
        return self._next_index

    @property
    def style(self) -> ParameterStyle:
        return self._style

    def renumber(self, template: str) -> str:
        """Replace each marker in ``template`` and advance the counter.

        Args:
            template: The clause template.

        Returns:
            The template with markers rewritten in order of appearance.
        """
        placeholders = extract_placeholders(template)
        if not placeholders:
            return template

        parts: list[str] = []
        cursor = 0
        for info in placeholders:
            parts.append(template[cursor : info.position])
            parts.append(render_placeholder(self._style, self._next_index))
            self._next_index += 1
            cursor = info.position + len(info.placeholder_text)
        parts.append(template[cursor:])
        return "".join(parts)
