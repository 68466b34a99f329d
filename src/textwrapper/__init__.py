"""Wrap text into lines bounded by terminal display width."""

from textwrapper.exceptions import (
    InvalidArgumentError,
    InvalidEncodingError,
    InvalidLimitError,
    TextWrapperError,
)
from textwrapper.width import WidthSource, rune_width, word_width
from textwrapper.wrapping import TextWrapper, fill, split_pos, wrap

__version__ = "0.1.0"

__all__ = [
    "InvalidArgumentError",
    "InvalidEncodingError",
    "InvalidLimitError",
    "TextWrapper",
    "TextWrapperError",
    "WidthSource",
    "fill",
    "rune_width",
    "split_pos",
    "word_width",
    "wrap",
]
