# __main__.py
import os
import sys
import logging
from logging.handlers import RotatingFileHandler
import argparse
from typing import Optional

from .config import ConfigError, load_env_file, load_settings
from .server import create_app

logger = logging.getLogger("linkdirectory")


def parse_args(argv: Optional[list] = None):
    p = argparse.ArgumentParser(prog="linkdirectory")
    p.add_argument("--env", choices=["dev", "prod"], default="prod")
    p.add_argument("--port", type=int, help="Override the PORT environment variable")
    p.add_argument("--verbose", action="store_true")
    return p.parse_args(argv)


def main(argv: Optional[list] = None):
    configure_logging()
    args = parse_args(argv)

    # ── Load the env file they asked for ───────────────────────────────
    env_file = load_env_file(args.env)
    if args.verbose:
        logger.info("Loaded env: %s", env_file)

    # ── Fail fast on bad configuration ─────────────────────────────────
    try:
        settings = load_settings()
        app = create_app(settings)
    except ConfigError as e:
        logger.error("%s", e)
        sys.exit(f"Configuration error: {e}")

    port = args.port or settings.port
    logger.info("Server running on port %s", port)
    app.run(host="0.0.0.0", port=port)


class MaxLevelFilter(logging.Filter):
    """
    Filter that allows only log records up to a certain level.
    """
    def __init__(self, max_level: int):
        super().__init__()
        self.max_level = max_level

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno <= self.max_level


def configure_logging(log_dir: str = "logs") -> None:
    """
    Configures logging:
    - INFO+ to info log
    - ERROR+ to error log
    - DEBUG/INFO only to console (no WARNING+)
    - Silences HTTP + Google client noise
    """
    os.makedirs(log_dir, exist_ok=True)

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    # ── File handler: INFO and above ───────────────────────────
    info_handler = RotatingFileHandler(
        filename=os.path.join(log_dir, "linkdirectory-info.log"),
        maxBytes=1_000_000,
        backupCount=3,
        encoding="utf-8"
    )
    info_handler.setLevel(logging.INFO)
    info_handler.setFormatter(formatter)
    root.addHandler(info_handler)

    # ── File handler: ERROR only ───────────────────────────────
    error_handler = RotatingFileHandler(
        filename=os.path.join(log_dir, "linkdirectory-errors.log"),
        maxBytes=1_000_000,
        backupCount=3,
        encoding="utf-8"
    )
    error_handler.setLevel(logging.ERROR)
    error_handler.setFormatter(formatter)
    root.addHandler(error_handler)

    # ── Console handler: only DEBUG and INFO ───────────────────
    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.DEBUG)
    console_handler.addFilter(MaxLevelFilter(logging.INFO))
    console_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    root.addHandler(console_handler)

    # ── Suppress external noise ────────────────────────────────
    noisy_modules = [
        "urllib3",
        "requests",
        "google",
        "gspread",
        "werkzeug",
    ]
    for module in noisy_modules:
        logging.getLogger(module).setLevel(logging.WARNING)


if __name__ == "__main__":
    main()
