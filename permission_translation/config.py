"""
Central configuration file for Permission Translation.

This module contains the library-wide constants. Logging settings are read
from environment variables or a .env file when logging is set up, never at
import time.
"""

import os
from typing import Optional, Tuple

from dotenv import find_dotenv, load_dotenv

# Application metadata
APP_NAME = "permission_translation"
APP_VERSION = "1.0.0"

# Logging
LOG_LEVEL_ENV = "PERMISSION_TRANSLATION_LOG_LEVEL"
LOG_FOLDER_ENV = "PERMISSION_TRANSLATION_LOG_FOLDER"
DEFAULT_LOG_LEVEL = "WARNING"

# Integer width of permission values (signed, two's complement)
CAPABILITY_BITS = 32

# One bit is the sign bit, so this many single-bit capabilities fit
MAX_CAPABILITIES = CAPABILITY_BITS - 1


def get_log_settings() -> Tuple[str, Optional[str]]:
    """
    Load the .env file from the working directory and read the logging settings.

    Returns:
        tuple: (log_level, log_folder). log_folder is None for console-only logging.
    """
    load_dotenv(find_dotenv(usecwd=True))

    log_level = os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)
    log_folder = os.environ.get(LOG_FOLDER_ENV) or None
    return log_level, log_folder
