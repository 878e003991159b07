"""Constants for the Snipe-IT API client."""

from __future__ import annotations

from typing import Final

import aiohttp

# HTTP paths, relative to the configured API endpoint (``.../api/v1/``)
HARDWARE_PATH: Final = "hardware"
HARDWARE_PATH_FMT: Final = "hardware/{id}"
HARDWARE_BYTAG_PATH_FMT: Final = "hardware/bytag/{tag}"
LOCATIONS_PATH: Final = "locations"
LOCATION_PATH_FMT: Final = "locations/{id}"
CATEGORIES_PATH: Final = "categories"
CATEGORY_PATH_FMT: Final = "categories/{id}"

# Headers sent with every request
CONTENT_TYPE_JSON: Final = "application/json"
AUTH_SCHEME: Final = "Bearer"

# Layout of the ``datetime`` member of Snipe-IT timestamp objects
TIMESTAMP_FORMAT: Final = "%Y-%m-%d %H:%M:%S"

# Transport
DEFAULT_TIMEOUT_SECONDS: Final = 25
DEFAULT_TIMEOUT: Final = aiohttp.ClientTimeout(total=DEFAULT_TIMEOUT_SECONDS)
