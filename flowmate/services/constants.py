"""
Constants for cycle phase calculation and status messages.
"""

# Defaults used until the user configures their own averages
DEFAULT_AVERAGE_CYCLE_LENGTH = 28
DEFAULT_AVERAGE_PERIOD_LENGTH = 5

# Luteal phase is modelled as a fixed 14 days, so ovulation falls on
# cycle_length - 14 days after the period starts.
LUTEAL_PHASE_DAYS = 14

# Fertile window: 5 days before ovulation through 2 days after (8 days)
FERTILE_DAYS_BEFORE_OVULATION = 5
FERTILE_DAYS_AFTER_OVULATION = 2

# Switch from "Day N of your cycle" to a countdown this close to the next period
PERIOD_EXPECTED_SOON_DAYS = 3

# Status messages
PERIOD_DAY_MESSAGE = "Day {day} of your period"
NO_DATA_MESSAGE = "Waiting for your first period data"
FUTURE_PERIOD_MESSAGE = "{days} days until expected period"
OVULATION_MESSAGE = "Ovulation day"
FERTILE_MESSAGE = "Fertile window"
PERIOD_EXPECTED_MESSAGE = "Period expected in {days} {unit}"
CYCLE_DAY_MESSAGE = "Day {day} of your cycle"

# Key the app state is persisted under
STORAGE_KEY = "flowmate-storage"

VIEWS = ("dashboard", "calendar", "log", "insights", "settings")

# Environment variables overriding the default averages
CYCLE_LENGTH_ENV = "FLOWMATE_AVERAGE_CYCLE_LENGTH"
PERIOD_LENGTH_ENV = "FLOWMATE_AVERAGE_PERIOD_LENGTH"
