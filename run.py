#!/usr/bin/env python3
"""
Finance App Entry Point

Runs the console demo of a savings account and its transaction processors.
"""

import sys
from pathlib import Path

# Add the project root to Python path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from finance_app.__main__ import main


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\nExiting...")
