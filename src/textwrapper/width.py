"""Display-column widths of code points and words.

Every code point costs 1 or 2 columns. Zero-width and non-printable code points
still cost 1 so that any non-empty string has a positive width.
"""

from __future__ import annotations

import enum
import functools
import unicodedata
from typing import TYPE_CHECKING

import wcwidth

from textwrapper import exceptions

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = [
    "WidthSource",
    "get_rune_width",
    "rune_width",
    "word_width",
]

# East-Asian-Width categories rendered in two terminal cells
_WIDE_CATEGORIES = frozenset(("F", "W"))


class WidthSource(enum.StrEnum):
    """Classification table used to measure a code point."""

    EAST_ASIAN = "east_asian"
    WCWIDTH = "wcwidth"


def _check_code_point(ch: str) -> None:
    if len(ch) != 1:
        raise exceptions.InvalidArgumentError(f"Expected a single code point, got {ch!r}")


@functools.cache
def _east_asian_width(ch: str) -> int:
    _check_code_point(ch)
    return 2 if unicodedata.east_asian_width(ch) in _WIDE_CATEGORIES else 1


@functools.cache
def _wcwidth_width(ch: str) -> int:
    _check_code_point(ch)
    # wcwidth reports 0 for combining marks and -1 for control characters
    return 2 if wcwidth.wcwidth(ch) == 2 else 1


_ORACLES: dict[WidthSource, Callable[[str], int]] = {
    WidthSource.EAST_ASIAN: _east_asian_width,
    WidthSource.WCWIDTH: _wcwidth_width,
}


def get_rune_width(source: WidthSource = WidthSource.EAST_ASIAN) -> Callable[[str], int]:
    """Return the width function for a classification table."""
    try:
        return _ORACLES[WidthSource(source)]
    except ValueError:
        choices = ", ".join(WidthSource)
        raise exceptions.InvalidArgumentError(
            f"Unknown width source {source!r} (expected one of: {choices})"
        ) from None


def rune_width(ch: str, source: WidthSource = WidthSource.EAST_ASIAN) -> int:
    """Get display width of a single code point.

    Fullwidth and Wide characters take 2 columns; Narrow, Halfwidth,
    Ambiguous and Neutral characters take 1.

    Args:
        ch: A string holding exactly one code point.
        source: Classification table to consult.

    Returns:
        1 or 2.

    Raises:
        InvalidArgumentError: If ``ch`` is not exactly one code point.
    """
    return get_rune_width(source)(ch)


def word_width(word: str, source: WidthSource = WidthSource.EAST_ASIAN) -> int:
    """Get display width of a word as the sum of its code point widths."""
    measure = get_rune_width(source)
    return sum(measure(ch) for ch in word)
