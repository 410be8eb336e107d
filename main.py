# main.py
import sys
import logging

from linkdirectory.__main__ import configure_logging
from linkdirectory.config import ConfigError, load_env_file, load_settings
from linkdirectory.server import create_app

# ── Production entry: load .env.production and expose `app` ───────
configure_logging()
load_env_file("prod")

try:
    settings = load_settings()
    app = create_app(settings)
except ConfigError as e:
    logging.getLogger("linkdirectory").error("%s", e)
    sys.exit(f"Configuration error: {e}")

if __name__ == "__main__":
    app.run(host="0.0.0.0", port=settings.port)
