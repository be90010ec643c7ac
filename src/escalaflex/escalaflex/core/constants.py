"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

PATTERN_STORAGE_KEY = "shiftPattern"
OVERRIDES_STORAGE_KEY = "shiftOverrides"

VACATION_NOTE = "Férias"

DATE_KEY_FORMAT = "%Y-%m-%d"
DISPLAY_DATE_FORMAT = "%d/%m/%Y"

MAX_RESOLUTION_OPTIONS = 3
DEFAULT_FIRST_WEEKDAY = 6  # Sunday
