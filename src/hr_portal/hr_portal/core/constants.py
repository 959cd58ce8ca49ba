"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_MANAGER_NAME = "John Doe"
DEFAULT_DEPARTMENT = "IT"
DEFAULT_LEAVE_BALANCE = 8
DEFAULT_ATTENDANCE_WINDOW = 10

DEFAULT_RATING = "3.5/5"
DEFAULT_ATTENDANCE_PERCENT = 100

PAYROLL_FLAT_BONUS = 5000
PAYROLL_DEDUCTION_RATE = 0.10

LOAD_POOL_SIZE = 5

# Live portal views idle longer than this are closed on the next registry access.
SESSION_IDLE_SECONDS = 30 * 60

REALTIME_CHANNEL = "hr-portal-changes"
REALTIME_SCHEMA = "public"
REALTIME_START_TIMEOUT = 10.0
