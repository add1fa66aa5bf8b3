"""
Booster Odds Constants that cannot be changed and are hardcoded intentionally
"""

import datetime
import os
import pathlib
from typing import Set

TOP_LEVEL_DIR: pathlib.Path = pathlib.Path(__file__).resolve().parent.parent
RESOURCE_PATH: pathlib.Path = TOP_LEVEL_DIR.joinpath("boosterodds").joinpath(
    "resources"
)
CONFIG_PATH: pathlib.Path = RESOURCE_PATH.joinpath("boosterodds.properties")
ENV_OUT_PATH: pathlib.Path = (
    pathlib.Path(os.environ.get("BOOSTERODDS_OUTPUT_PATH", TOP_LEVEL_DIR))
    .expanduser()
    .resolve()
)
OUTPUT_PATH: pathlib.Path = ENV_OUT_PATH.joinpath("output")

LOG_PATH: pathlib.Path = ENV_OUT_PATH.joinpath("boosterodds_logs")

BUILD_DATE: str = datetime.datetime.today().strftime("%Y-%m-%d")

COMPACT_CARDS_FILE_NAME: str = "processed-cards.ndjson"
SET_STATS_FILE_NAME: str = "sets.json"
SET_TABLES_DIR_NAME: str = "sets"

DEFAULT_LANGUAGE: str = "en"
DEFAULT_PROGRESS_INTERVAL: int = 10_000
SET_FILES_PROGRESS_INTERVAL: int = 100

# Play booster structure
PACKS_PER_BOX: int = 30

BAD_FILE_NAMES: Set[str] = {
    # File names that can't exist on Windows
    "AUX",
    "COM0",
    "COM1",
    "COM2",
    "COM3",
    "COM4",
    "COM5",
    "COM6",
    "COM7",
    "COM8",
    "COM9",
    "CON",
    "LPT0",
    "LPT1",
    "LPT2",
    "LPT3",
    "LPT4",
    "LPT5",
    "LPT6",
    "LPT7",
    "LPT8",
    "LPT9",
    "NUL",
    "PRN",
}
