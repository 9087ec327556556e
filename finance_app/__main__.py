"""
Finance App Entry Point

Runs the fixed demo: one savings account, three transactions.
"""

import sys

from pydantic import ValidationError

from .app import FinanceApp
from .config import get_config
from .logging_config import setup_logging


def main() -> int:
    try:
        config = get_config()
        setup_logging(config.log_level, log_format=config.log_format)
        app = FinanceApp(config=config)
    except (ValidationError, ValueError) as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    app.run()

    if config.pause_on_exit:
        print("\nPress Enter to exit...")
        input()
    return 0


if __name__ == "__main__":
    sys.exit(main())
