"""
Configuration for the airac command line tool.

Values can be overridden through environment variables.
"""

import os

# Logging configuration
LOG_LEVEL = os.getenv("AIRAC_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = os.getenv("AIRAC_LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")

# Format of dates printed and accepted by the date helpers
DATE_FORMAT = '%Y-%m-%d'
