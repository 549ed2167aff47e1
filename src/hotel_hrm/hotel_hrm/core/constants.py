"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_SESSION_DAYS = 7
MIN_PASSWORD_LENGTH = 6

# Key of the claims entry inside the per-browser session storage.
SESSION_KEY = "UserSession"

# Employee id reported for principals without a linked employee.
NO_EMPLOYEE_ID = 0

MONTHS_PER_YEAR = 12
# Fixed month length used by the pro-rata salary rule (not calendar accurate).
DAYS_PER_MONTH = 30

# Largest accepted money amount is below 10**(MAX_AMOUNT_EXPONENT + 1).
MAX_AMOUNT_EXPONENT = 15
