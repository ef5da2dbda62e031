"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_TOKEN_EXPIRE_SECONDS = 60 * 60
DEFAULT_PORT = 8080
DEFAULT_CURRENCY = "usd"

UNAUTHORIZED_MESSAGE = "unauthorized access"
FORBIDDEN_MESSAGE = "forbidden access"

STAFFS_COLLECTION = "staffs"
TASKS_COLLECTION = "tasks"
SALARIES_COLLECTION = "salaries"
COUNTERS_COLLECTION = "counters"
