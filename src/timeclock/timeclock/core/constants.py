"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_NOTIFICATION_LIMIT = 10
DEFAULT_MEMORY_LOG_CAPACITY = 10_000
DEFAULT_PAGE_SIZE = 500
DEFAULT_REPORT_DAYS = 7
SECONDS_PER_HOUR = 3600.0
