import logging
import sys
from typing import Optional

logger: logging.Logger = logging.getLogger("gsearch")


def setup_logging(should_debug: Optional[bool] = None) -> None:
    logging.basicConfig(
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="[%X]",
        handlers=[logging.StreamHandler(sys.stderr)],
    )

    if should_debug:
        logger.setLevel(logging.DEBUG)
    else:
        logger.setLevel(logging.INFO)
