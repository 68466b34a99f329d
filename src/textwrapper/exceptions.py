from typing import override


class TextWrapperError(Exception):
    """Base exception for textwrapper errors."""

    def format_user_message(self) -> str:
        """Format a user-friendly error message."""
        return str(self)

    def get_suggestion(self) -> str | None:
        """Return actionable suggestion for resolving the error."""
        return None


class InvalidArgumentError(TextWrapperError, ValueError):
    """Raised when a caller passes an unusable argument (e.g., a non-positive limit)."""

    pass


class InvalidLimitError(InvalidArgumentError):
    """Raised when the line width limit is not a positive integer."""

    _limit: object

    def __init__(self, limit: object) -> None:
        self._limit = limit
        super().__init__(f"Line width limit must be a positive integer, got {limit!r}")

    @override
    def get_suggestion(self) -> str:
        return "Pass a width of at least 1 display column"

    @override
    def __reduce__(self) -> tuple[type, tuple[object]]:
        return (self.__class__, (self._limit,))


class InvalidEncodingError(TextWrapperError, ValueError):
    """Raised when input text is not a valid sequence of Unicode scalar values."""

    @override
    def get_suggestion(self) -> str:
        return "Ensure the input is UTF-8 encoded text"


class ConfigError(TextWrapperError):
    """Base class for configuration errors."""

    pass


class ConfigValidationError(ConfigError):
    """Raised when a config value fails validation."""

    @override
    def get_suggestion(self) -> str:
        return "Check the config file: 'width' must be a positive integer, 'width_source' one of east_asian, wcwidth"
