"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

SALARY_DAY_DIVISOR = 30
FREE_LEAVE_DAYS_PER_MONTH = 1
PERFECT_ATTENDANCE_BONUS_DAYS = 1

DEFAULT_SESSION_DAYS = 7
DEFAULT_RATE_DECIMALS = 2
