"""Centralized path definitions for helperkit.

helperkit never writes to these locations on import. They are only used
when a config file is saved explicitly or file logging is enabled.
"""

import os
from pathlib import Path

# Base directory
HELPERKIT_DIR = Path(os.environ.get("HELPERKIT_HOME", Path.home() / ".helperkit"))

# Subdirectories
LOGS_DIR = HELPERKIT_DIR / "logs"

# Specific files
CONFIG_PATH = Path(os.environ.get("HELPERKIT_CONFIG", HELPERKIT_DIR / "config.json"))
