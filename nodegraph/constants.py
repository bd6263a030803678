"""
Global constants used throughout the project
"""

import os

DEFAULT_MIN_CLIQUE_SIZE = 3
DEFAULT_PARTITIONS = 2

LOG_FORMAT = "%(levelname)s | %(message)s"
DEBUG = os.getenv("NODEGRAPH_DEBUG", "").lower() in ("1", "true", "yes")
