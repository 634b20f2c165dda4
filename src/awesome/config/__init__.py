from .loader import ConfigError, load_awesome_config
from .models import AwesomeConfig

__all__ = ["AwesomeConfig", "ConfigError", "load_awesome_config"]
