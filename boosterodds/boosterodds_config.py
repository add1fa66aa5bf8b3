"""
Booster Odds Configuration Service
"""

import configparser
import logging
import pathlib

from singleton_decorator import singleton

from . import constants


@singleton
class BoosteroddsConfig:
    """
    Configuration Class that loads in the appropriate configuration file
    and provides the contents for the running program
    """

    logger: logging.Logger
    config_parser: configparser.ConfigParser
    boosterodds_version: str
    language: str
    progress_interval: int
    pretty: bool
    output_path: pathlib.Path

    def __init__(self, config_path: pathlib.Path = constants.CONFIG_PATH):
        self.logger = logging.getLogger(__name__)
        self.config_parser = configparser.ConfigParser()
        self.logger.info("Loading configuration from local file")
        self.__load_config_from_local_file(config_path)

        self.boosterodds_version = self.get(
            "Boosterodds", "version", f"1.X.X+{constants.BUILD_DATE.replace('-', '')}"
        )
        self.language = self.get(
            "Boosterodds", "language", constants.DEFAULT_LANGUAGE
        )
        self.progress_interval = self.get_int(
            "Boosterodds", "progress_interval", constants.DEFAULT_PROGRESS_INTERVAL
        )
        self.pretty = self.get_boolean("Boosterodds", "pretty", True)
        self.output_path = constants.OUTPUT_PATH

    def __load_config_from_local_file(self, file_path: pathlib.Path) -> None:
        """
        Load local file from resources as Booster Odds configuration file
        :param file_path: Path to Configuration file
        """
        if not file_path.is_file():
            self.logger.warning(f"{file_path} not found, using default settings")
        self.config_parser.read(str(file_path))

    def get(self, section: str, option: str, fallback: str = "") -> str:
        """
        Get a specific value from configuration
        :param section: Section header
        :param option: Key in section
        :param fallback: Default value to use if key not found in section
        :returns Configuration value to use
        """
        if self.has_option(section, option):
            return self.config_parser.get(section, option, fallback=fallback)
        return fallback

    def get_boolean(self, section: str, option: str, fallback: bool = False) -> bool:
        """
        Get a specific value from configuration
        :param section: Section header
        :param option: Key in section
        :param fallback: Default value to use if key not found in section
        :returns Configuration value to use (as a Boolean)
        """
        if self.has_option(section, option):
            return self.config_parser.getboolean(section, option, fallback=fallback)
        return fallback

    def get_int(self, section: str, option: str, fallback: int = 0) -> int:
        """
        Get a specific value from configuration
        :param section: Section header
        :param option: Key in section
        :param fallback: Default value to use if key not found in section
        :returns Configuration value to use (as an Integer)
        """
        if self.has_option(section, option):
            return self.config_parser.getint(section, option, fallback=fallback)
        return fallback

    def has_option(self, section: str, option: str) -> bool:
        """
        Check if Configuration has a specific option in a specific section
        and has a defined value (ala not VAR=)
        :param section: Section header to find
        :param option: Option to find in section
        :return Does option exist in section
        """
        return (
            self.config_parser.has_option(section, option)
            and len(str(self.config_parser.get(section, option))) > 0
        )
