from textwrapper.config.io import get_global_config_path, load_config
from textwrapper.config.models import DEFAULT_WIDTH, WrapConfig

__all__ = [
    "DEFAULT_WIDTH",
    "WrapConfig",
    "get_global_config_path",
    "load_config",
]
