# product_scraper/utils/logging_config.py

import logging
import sys
from pathlib import Path
from typing import Callable, Optional

Logger = Callable[[str], None]


def _log(logger: Optional[Logger], msg: str) -> None:
    """Send msg to the given logger, or print() when none was passed."""
    if logger is not None:
        logger(msg)
    else:
        print(msg)


def setup_logging(settings: dict, name: str = "product_scraper") -> Logger:
    """
    Configure stdlib logging from the LOGGING config section and return
    a plain ``Logger`` callable for the scraper functions.

    Messages go to stdout and to LOG_FILE.
    """
    log = logging.getLogger(name)
    log.setLevel(settings.get("LEVEL", "INFO"))
    log.propagate = False

    if not log.handlers:
        fmt = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

        console = logging.StreamHandler(sys.stdout)
        console.setFormatter(fmt)
        log.addHandler(console)

        log_file = settings.get("LOG_FILE")
        if log_file:
            Path(log_file).parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_file, encoding="utf-8")
            file_handler.setFormatter(fmt)
            log.addHandler(file_handler)

    return log.info
