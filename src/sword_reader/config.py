# src/sword_reader/config.py

"""
================================================================================
Configuration for the SWORD reader
================================================================================

Settings for talking to the scripture search API. Each value can be
overridden with an environment variable, which is handy for pointing the
CLI at a local API proxy:

    SWORD_READER_API_BASE=http://localhost:8000/api sword-reader search "living water"
"""

import os

# ------------------------------------------------------------------------------
# API ENDPOINT
# ------------------------------------------------------------------------------
API_BASE = os.environ.get("SWORD_READER_API_BASE", "https://api.keyofkingdavid.org/api")

# Bible module used when none is given (also the module cross-reference
# verses are shown in)
DEFAULT_MODULE = os.environ.get("SWORD_READER_MODULE", "KJV")

# Module holding the Treasury of Scripture Knowledge cross references
CROSS_REFERENCE_MODULE = "TSK"

# ------------------------------------------------------------------------------
# SEARCH OUTPUT OPTIONS
# ------------------------------------------------------------------------------
# These go straight into the /search query string.
OUTPUT_ENCODING = "UTF8"
LOCALE = "en"
VARIANT = 0

# Filters that keep Strong's numbers, divine names and headings in the LaTeX output
LATEX_OPTION_FILTERS = "nfmhcvaplsrbwgeixtM"

# ------------------------------------------------------------------------------
# HTTP
# ------------------------------------------------------------------------------
REQUEST_TIMEOUT = float(os.environ.get("SWORD_READER_TIMEOUT", "10"))
MAX_RETRIES = 2
RETRY_BACKOFF = 0.1
RETRY_STATUS = [429, 500, 502, 503, 504]
USER_AGENT = "sword-reader/0.1"
