"""
Collection of global constants
"""

from typing import Final

# Name under which the package's loguru records are enabled/disabled
PACKAGE_NAME: Final[str] = "maybe_monad"

# Default location of the configuration file, relative to the working directory
CONFIG_PATH: Final[str] = "configuration.yaml"
