"""Width-aware word wrapping.

Words are runs of non-whitespace; any whitespace run (spaces, tabs, newlines)
collapses into a single separator and output lines join words with one ASCII
space. Original whitespace is never preserved.

Whether a word fits on the current line is decided from the widths of the
words alone; the joining space is not counted, so a packed line can be one
column wider than the limit ("This is a sample text" at limit 20).

A word wider than the limit is cut at the column boundary into fragments, each
emitted on its own line. A single code point wider than the limit (a wide
character with ``limit=1``) is emitted alone even though the line then exceeds
the limit; this is the only case where a line is wider than the limit.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from textwrapper import exceptions
from textwrapper.config import models
from textwrapper.width import WidthSource, get_rune_width

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = [
    "TextWrapper",
    "fill",
    "split_pos",
    "wrap",
]

logger = logging.getLogger(__name__)


def _validate_limit(limit: int) -> None:
    """Reject non-integer and non-positive limits before any processing."""
    if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
        raise exceptions.InvalidLimitError(limit)


def _decode_text(text: str | bytes) -> str:
    """Return text as a str of Unicode scalar values, decoding bytes as UTF-8."""
    if isinstance(text, bytes):
        try:
            return text.decode("utf-8")
        except UnicodeDecodeError as e:
            raise exceptions.InvalidEncodingError(f"Input is not valid UTF-8: {e}") from e
    if not isinstance(text, str):
        raise exceptions.InvalidArgumentError(
            f"Expected str or bytes, got {type(text).__name__}"
        )
    try:
        text.encode("utf-8")
    except UnicodeEncodeError as e:
        # Lone surrogates are not Unicode scalar values
        raise exceptions.InvalidEncodingError(f"Input contains invalid code points: {e}") from e
    return text


def _find_cut(word: str, limit: int, measure: Callable[[str], int]) -> tuple[int, int]:
    """Return (offset, prefix width) of the widest prefix of word that fits in limit."""
    width = 0
    for i, ch in enumerate(word):
        ch_width = measure(ch)
        if width + ch_width > limit:
            if i == 0:
                # Oversized single code point: take it anyway to make progress
                return 1, ch_width
            return i, width
        width += ch_width
    return len(word), width


def split_pos(word: str, limit: int, source: WidthSource = WidthSource.EAST_ASIAN) -> int:
    """Find the code-point offset at which to cut a word to fit within limit.

    The prefix ``word[:offset]`` is the longest one whose display width is at
    most ``limit``. If the whole word fits, ``len(word)`` is returned. If the
    first code point alone is wider than ``limit``, 1 is returned so that
    callers always consume at least one code point.

    Raises:
        InvalidLimitError: If limit is not a positive integer.
    """
    _validate_limit(limit)
    offset, _width = _find_cut(word, limit, get_rune_width(source))
    return offset


def wrap(
    text: str | bytes,
    limit: int,
    *,
    width_source: WidthSource = WidthSource.EAST_ASIAN,
) -> list[str]:
    """Wrap text into lines no wider than limit display columns.

    Args:
        text: Text to wrap. Bytes are decoded as UTF-8.
        limit: Maximum display width of a line, in terminal columns.
        width_source: Classification table used to measure code points.

    Returns:
        Lines in input order. Empty when text is empty or only whitespace.

    Raises:
        InvalidLimitError: If limit is not a positive integer.
        InvalidEncodingError: If text is not valid Unicode.
    """
    _validate_limit(limit)
    text = _decode_text(text)
    measure = get_rune_width(width_source)

    words = text.split()
    if not words:
        return []

    lines: list[str] = []
    line_parts: list[str] = []
    line_width = 0

    for word in words:
        word_width = sum(measure(ch) for ch in word)
        if line_width + word_width > limit:
            if line_parts:
                lines.append("".join(line_parts))
                line_parts.clear()
                line_width = 0
            while word_width > limit:
                offset, prefix_width = _find_cut(word, limit, measure)
                logger.debug("Splitting word of width %d at offset %d", word_width, offset)
                lines.append(word[:offset])
                word = word[offset:]
                word_width -= prefix_width
            if not word:
                continue
        if line_parts:
            line_parts.append(" ")
            line_width += 1
        line_parts.append(word)
        line_width += word_width

    if line_parts:
        lines.append("".join(line_parts))

    logger.debug("Wrapped %d words at limit %d into %d lines", len(words), limit, len(lines))
    return lines


def fill(
    text: str | bytes,
    limit: int,
    *,
    width_source: WidthSource = WidthSource.EAST_ASIAN,
) -> str:
    """Wrap text and join the lines with newlines."""
    return "\n".join(wrap(text, limit, width_source=width_source))


class TextWrapper:
    """Reusable wrapper bound to a WrapConfig.

    Keyword arguments override the matching fields of ``config``:

        wrapper = TextWrapper(width=40)
        wrapper.fill("some long text ...")
    """

    config: models.WrapConfig

    def __init__(
        self,
        config: models.WrapConfig | None = None,
        *,
        width: int | None = None,
        width_source: WidthSource | None = None,
    ) -> None:
        base = config if config is not None else models.WrapConfig.get_default()
        self.config = base.with_overrides(width=width, width_source=width_source)

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def width_source(self) -> WidthSource:
        return self.config.width_source

    def wrap(self, text: str | bytes) -> list[str]:
        """Wrap text into lines using this wrapper's settings."""
        return wrap(text, self.config.width, width_source=self.config.width_source)

    def fill(self, text: str | bytes) -> str:
        """Wrap text into a single newline-separated string."""
        return fill(text, self.config.width, width_source=self.config.width_source)
