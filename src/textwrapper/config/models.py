from typing import Annotated, Any, Self

import pydantic

from textwrapper import exceptions
from textwrapper.width import WidthSource

DEFAULT_WIDTH = 80


class WrapConfig(pydantic.BaseModel):
    """Wrapping options shared by the library wrapper and the CLI."""

    model_config = pydantic.ConfigDict(extra="forbid", frozen=True)

    width: Annotated[int, pydantic.Field(gt=0, strict=True)] = DEFAULT_WIDTH
    width_source: WidthSource = WidthSource.EAST_ASIAN

    @classmethod
    def get_default(cls) -> Self:
        """Get default configuration."""
        return cls()

    def with_overrides(self, **overrides: Any) -> Self:
        """Return a copy with non-None overrides applied and re-validated."""
        changes = {key: val for key, val in overrides.items() if val is not None}
        if not changes:
            return self
        try:
            return self.model_validate({**self.model_dump(), **changes})
        except pydantic.ValidationError as e:
            raise exceptions.ConfigValidationError(format_validation_error(e)) from e


# Config keys with descriptions (used in CLI help)
CONFIG_KEY_DESCRIPTIONS: dict[str, str] = {
    "width": "Display columns per line",
    "width_source": "Width table: east_asian (Unicode East Asian Width) or wcwidth",
}


def format_validation_error(error: pydantic.ValidationError) -> str:
    """Flatten a pydantic error into 'key: message' lines."""
    messages = list[str]()
    for err in error.errors():
        key = ".".join(str(part) for part in err["loc"]) or "config"
        messages.append(f"{key}: {err['msg']}")
    return "Invalid configuration:\n  " + "\n  ".join(messages)
