"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

SYSTEM_ACTOR = "system"

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 100

DEFAULT_PAGE_SIZE = 10
MAX_BULK_SIZE = 1000
SIMULATED_FAILURE_RATE = 0.10

DATE_FORMAT = "%Y-%m-%d"
