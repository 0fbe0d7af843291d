"""Entry point: python -m lcdemo"""

import sys
from pathlib import Path

from pydantic import ValidationError

from lcdemo.config.config import (
    DEFAULT_CONFIG_FILE,
    create_default_config_file,
    format_pydantic_error_message,
    load_settings,
)
from lcdemo.menu import run_menu
from lcdemo.utils import logger


def _default_config() -> None:
    # Create a default config.toml file, if there is none.
    if not Path(DEFAULT_CONFIG_FILE).exists():
        create_default_config_file()
        logger.info(f"Default configuration written to {DEFAULT_CONFIG_FILE}")


def main() -> int:
    try:
        _default_config()
        settings = load_settings()
    except ValidationError as e:
        logger.error(
            "Invalid configuration:\n"
            + format_pydantic_error_message(str(e))
        )
        return 1
    except (ValueError, OSError) as e:
        logger.error(f"Could not read configuration: {e}")
        return 1

    run_menu(settings, logger)
    return 0


if __name__ == "__main__":
    sys.exit(main())
