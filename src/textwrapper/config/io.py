import logging
import pathlib
from typing import Any

import pydantic
import ruamel.yaml

from textwrapper import exceptions
from textwrapper.config import models

logger = logging.getLogger(__name__)


def get_global_config_path() -> pathlib.Path:
    """Get user-level config path (~/.config/textwrapper/config.yaml)."""
    return pathlib.Path.home() / ".config" / "textwrapper" / "config.yaml"


def _load_yaml(path: pathlib.Path) -> dict[str, Any]:
    """Load a YAML mapping with error handling; an empty document is an empty dict."""
    try:
        yaml = ruamel.yaml.YAML(typ="safe")
        with path.open(encoding="utf-8") as f:
            data = yaml.load(f)
    except ruamel.yaml.YAMLError as e:
        raise exceptions.ConfigError(f"Invalid YAML in {path}: {e}") from e
    except PermissionError:
        raise exceptions.ConfigError(f"Permission denied reading {path}") from None
    except UnicodeDecodeError as e:
        raise exceptions.ConfigError(f"Config file {path} is not valid UTF-8") from e
    except OSError as e:
        raise exceptions.ConfigError(f"Error reading {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise exceptions.ConfigError(
            f"Config file {path} must contain a mapping, got {type(data).__name__}"
        )
    return dict(data)


def load_config(path: pathlib.Path | None = None) -> models.WrapConfig:
    """Load wrapping config.

    An explicit path must exist. Without one, the global config file is used
    when present, otherwise defaults are returned.
    """
    if path is None:
        path = get_global_config_path()
        if not path.exists():
            logger.debug("No config file at %s, using defaults", path)
            return models.WrapConfig.get_default()
    elif not path.exists():
        raise exceptions.ConfigError(f"Config file not found: {path}")

    data = _load_yaml(path)
    logger.debug("Loaded config from %s", path)
    try:
        return models.WrapConfig.model_validate(data)
    except pydantic.ValidationError as e:
        raise exceptions.ConfigValidationError(
            f"{path}: {models.format_validation_error(e)}"
        ) from e


def merge_overrides(
    config: models.WrapConfig,
    width: int | None = None,
    width_source: str | None = None,
) -> models.WrapConfig:
    """Apply command-line overrides on top of a loaded config."""
    return config.with_overrides(width=width, width_source=width_source)
