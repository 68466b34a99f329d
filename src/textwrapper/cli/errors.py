from __future__ import annotations

import functools
from typing import TYPE_CHECKING

import click

from textwrapper import exceptions

if TYPE_CHECKING:
    from collections.abc import Callable


def handle_textwrapper_error(e: exceptions.TextWrapperError) -> click.ClickException:
    """Convert TextWrapperError to user-friendly ClickException."""
    message = e.format_user_message()
    if suggestion := e.get_suggestion():
        message = f"{message}\n\nTip: {suggestion}"
    return click.ClickException(message)


def with_error_handling[**P, R](func: Callable[P, R]) -> Callable[P, R]:
    """Wrap a command so library errors surface as click errors.

    Place it below the click decorators:

        @click.command()
        @with_error_handling
        def main(...):
            ...
    """

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        try:
            return func(*args, **kwargs)
        except click.ClickException:
            raise
        except exceptions.TextWrapperError as e:
            raise handle_textwrapper_error(e) from e

    return wrapper
