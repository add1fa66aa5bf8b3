"""Dynamic version read from boosterodds.properties."""

import configparser
import pathlib

_config = configparser.ConfigParser()
_config.read(pathlib.Path(__file__).parent / "resources" / "boosterodds.properties")
__version__ = _config.get("Boosterodds", "version", fallback="1.0.0+fallback")
