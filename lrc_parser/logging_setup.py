from __future__ import annotations

import logging
import os

PACKAGE_LOGGER = "lrc_parser"


def setup_logging(debug: bool) -> None:
    """
    Configure root output and set the lrc_parser logger tree to the same level.

    The package level sticks even if the host already configured the root
    logger, in which case basicConfig is a no-op.
    """
    level = logging.DEBUG if debug else logging.INFO
    # Allow env override, e.g. to trace tokenizing inside a host application
    level_name = os.getenv("LRC_PARSER_LOG_LEVEL")
    if level_name:
        level = getattr(logging, level_name.upper(), level)

    logging.getLogger(PACKAGE_LOGGER).setLevel(level)
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
