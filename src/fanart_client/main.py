"""
fanart-fetch Command

Performs one plain artwork fetch (all categories, default order, all
results) and prints the raw response body to stdout:

    fanart-fetch API_KEY MOVIE_ID [json|php]
    python -m fanart_client.main API_KEY MOVIE_ID [json|php]

The format defaults to json. Exit codes: 0 on success, 1 when the
request fails, 2 on bad arguments.
"""

import logging
import sys
from typing import List, Optional

from .config import config
from .api import FanartClient, ResponseFormat, TransportError


USAGE = "usage: fanart-fetch API_KEY MOVIE_ID [json|php]"


# Configure logging
def setup_logging(log_level: str = "INFO") -> logging.Logger:
    """Set up logging for the application."""
    # Ensure log directory exists
    config.log.log_directory.mkdir(parents=True, exist_ok=True)

    # Create logger
    logger = logging.getLogger("fanart_client")
    logger.setLevel(getattr(logging, log_level.upper()))

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    # Console handler
    console_handler = logging.StreamHandler(sys.stdout)
    level = getattr(logging, log_level.upper())
    console_handler.setLevel(level)
    console_format = logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(message)s",
        datefmt="%H:%M:%S"
    )
    console_handler.setFormatter(console_format)

    # File handler
    file_handler = logging.FileHandler(
        config.log.log_file_path,
        mode='w',
        encoding='utf-8'
    )
    file_handler.setLevel(logging.DEBUG)
    file_format = logging.Formatter(config.log.log_format)
    file_handler.setFormatter(file_format)

    logger.addHandler(console_handler)
    logger.addHandler(file_handler)

    return logger


def main(argv: Optional[List[str]] = None):
    """Main entry point for the demo fetch."""
    args = sys.argv[1:] if argv is None else argv

    if len(args) not in (2, 3):
        print(USAGE, file=sys.stderr)
        sys.exit(2)

    api_key, movie_id = args[0], args[1]
    formats = {"json": ResponseFormat.JSON, "php": ResponseFormat.PHP}
    format_name = args[2].lower() if len(args) == 3 else "json"

    if format_name not in formats:
        print(USAGE, file=sys.stderr)
        sys.exit(2)

    logger = setup_logging(config.log.log_level)

    client = FanartClient(api_key, formats[format_name])

    try:
        body = client.fetch_by_movie_id(movie_id)
    except TransportError as e:
        logger.error(f"Fetch failed: {e}")
        sys.exit(1)

    print(body)
    sys.exit(0)


if __name__ == "__main__":
    main()
