"""
Booster Odds Main Executor
"""

import logging
import sys
import traceback
from typing import List, Optional

from boosterodds.utils import init_logger

init_logger()
LOGGER: logging.Logger = logging.getLogger(__name__)


def main(argv: Optional[List[str]] = None) -> None:
    """
    Booster Odds safe main call
    """
    from boosterodds import constants
    from boosterodds.arg_parser import parse_args
    from boosterodds.boosterodds_config import BoosteroddsConfig
    from boosterodds.card_pipeline import run_pipeline

    args = parse_args(argv)

    LOGGER.info(
        f"Starting {BoosteroddsConfig().boosterodds_version} on {constants.BUILD_DATE}"
    )

    try:
        run_pipeline(
            input_path=args.input,
            output_dir=args.output_dir,
            language=args.language,
            pretty_print=args.pretty,
            progress_interval=args.progress_interval,
        )
    except Exception as error:
        LOGGER.fatal(f"Exception caught: {error} {traceback.format_exc()}")
        sys.exit(1)


if __name__ == "__main__":
    main()
